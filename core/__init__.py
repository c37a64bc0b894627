# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the user domain:
# - models/: Pydantic schemas for request and response bodies
# - services/: User operations on top of the store in lib/
#
# Routes in app/ stay thin and delegate here.
# =============================================================================
