# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers, entry point
# - config.py: Environment variable loading and settings
# - exceptions.py: API exceptions and their HTTP mappings
# - dependencies.py: Store and service injection
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# persistence to core/ and lib/.
# =============================================================================

__version__ = "1.0.0"
