# =============================================================================
# lib/user_store.py - Relational Store Adapter
# =============================================================================
# This module wraps a single SQLAlchemy engine and the `users` table.
# Each public method issues one statement (delete issues a check and a
# delete inside one transaction) and returns plain dicts, so callers never
# see SQLAlchemy types.
#
# The engine is the only shared handle; its connection pool makes it safe
# to use from concurrent request threads.
#
# Usage:
#   from lib.user_store import UserStore
#   store = UserStore.from_url("postgresql://user:pw@localhost/users")
#   store.connect()
#   user_id = store.insert_user("Ada", "ada@example.com", "London")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    delete,
    select,
    text,
    update,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


metadata = MetaData()

# id renders as SERIAL PRIMARY KEY on PostgreSQL
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text),
    Column("email", Text),
    Column("city", Text),
)

# Bound parameters the driver can't convert (e.g. ids beyond the INTEGER
# range on SQLite) raise OverflowError before SQLAlchemy sees them
QUERY_ERRORS = (SQLAlchemyError, OverflowError)


class StoreError(ApplicationError):
    """
    Error during a store operation.

    Wraps driver errors so the API layer can map them to HTTP 500
    without knowing about SQLAlchemy.
    """

    def __init__(
        self,
        message: str,
        code: str = "STORE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class UserStore:
    """
    Store adapter for the `users` table.

    Holds one engine for the lifetime of the application. Instances are
    created by the app factory and passed to handlers explicitly.

    Example:
        store = UserStore.from_url(settings.DATABASE_URL)
        store.connect()
        users = store.list_users()
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> UserStore:
        """
        Create a store from a connection string.

        The engine connects lazily; call connect() to verify the database
        is reachable.

        Args:
            database_url: SQLAlchemy connection string
            echo: Log every SQL statement

        Returns:
            UserStore: Store bound to a new engine

        Raises:
            StoreError: If the URL is malformed or the driver is missing
        """
        try:
            engine = create_engine(database_url, pool_pre_ping=True, echo=echo)
        except (SQLAlchemyError, ImportError, ValueError) as e:
            raise StoreError(
                message=f"Failed to create database engine: {e}",
                code="ENGINE_INIT_FAILED",
                suggestion="Check DATABASE_URL and that the database driver is installed",
            ) from e

        logger.info(f"Database engine created for dialect: {engine.dialect.name}")
        return cls(engine)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def connect(self) -> None:
        """
        Verify the database is reachable and ensure the users table exists.

        Table creation is idempotent: an existing table is left untouched.

        Raises:
            StoreError: If the database cannot be reached or the table
                cannot be created
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            metadata.create_all(self.engine, checkfirst=True)
        except SQLAlchemyError as e:
            raise StoreError(
                message=f"Database unavailable: {e}",
                code="STORE_UNAVAILABLE",
                suggestion="Check that the database is running and DATABASE_URL is correct",
            ) from e

        logger.info("Database connected, users table ready")

    def ping(self) -> None:
        """Run a trivial query to check connectivity."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StoreError(
                message=f"Database ping failed: {e}",
                code="PING_FAILED",
            ) from e

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        self.engine.dispose()
        logger.info("Database engine disposed")

    # -------------------------------------------------------------------------
    # User Operations
    # -------------------------------------------------------------------------

    def list_users(self) -> list[dict[str, Any]]:
        """
        Fetch every user.

        Returns:
            List of user dicts ordered by id (empty list if none)

        Raises:
            StoreError: If the query fails
        """
        query = select(users_table).order_by(users_table.c.id)

        try:
            with self.engine.connect() as connection:
                rows = connection.execute(query).mappings().all()
        except QUERY_ERRORS as e:
            raise StoreError(
                message=f"Failed to list users: {e}",
                code="LIST_USERS_FAILED",
            ) from e

        logger.debug(f"Fetched {len(rows)} users")
        return [dict(row) for row in rows]

    def fetch_user(self, user_id: int) -> dict[str, Any] | None:
        """
        Fetch a user by ID.

        Args:
            user_id: The user's primary key

        Returns:
            User dict, or None if no row matches

        Raises:
            StoreError: If the query fails
        """
        query = select(users_table).where(users_table.c.id == user_id)

        try:
            with self.engine.connect() as connection:
                row = connection.execute(query).mappings().first()
        except QUERY_ERRORS as e:
            raise StoreError(
                message=f"Failed to fetch user: {e}",
                code="FETCH_USER_FAILED",
                details={"user_id": user_id},
            ) from e

        return dict(row) if row is not None else None

    def insert_user(self, name: str, email: str, city: str) -> int:
        """
        Insert a new user.

        Args:
            name: User name
            email: User email
            city: User city

        Returns:
            The id assigned by the database

        Raises:
            StoreError: If the insert fails
        """
        statement = users_table.insert().values(name=name, email=email, city=city)

        try:
            with self.engine.begin() as connection:
                result = connection.execute(statement)
                user_id = result.inserted_primary_key[0]
        except QUERY_ERRORS as e:
            raise StoreError(
                message=f"Failed to insert user: {e}",
                code="INSERT_USER_FAILED",
            ) from e

        return user_id

    def update_user(self, user_id: int, name: str, email: str, city: str) -> int:
        """
        Overwrite a user's fields.

        Does not check that the user exists.

        Args:
            user_id: The user's primary key
            name: New name
            email: New email
            city: New city

        Returns:
            Number of rows matched (0 or 1)

        Raises:
            StoreError: If the update fails
        """
        statement = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(name=name, email=email, city=city)
        )

        try:
            with self.engine.begin() as connection:
                result = connection.execute(statement)
        except QUERY_ERRORS as e:
            raise StoreError(
                message=f"Failed to update user: {e}",
                code="UPDATE_USER_FAILED",
                details={"user_id": user_id},
            ) from e

        return result.rowcount

    def delete_user(self, user_id: int) -> bool:
        """
        Delete a user if it exists.

        Args:
            user_id: The user's primary key

        Returns:
            True if the user was deleted, False if it did not exist

        Raises:
            StoreError: If the lookup or delete fails
        """
        exists_query = select(users_table.c.id).where(users_table.c.id == user_id)

        try:
            with self.engine.begin() as connection:
                if connection.execute(exists_query).first() is None:
                    return False
                connection.execute(delete(users_table).where(users_table.c.id == user_id))
        except QUERY_ERRORS as e:
            raise StoreError(
                message=f"Failed to delete user: {e}",
                code="DELETE_USER_FAILED",
                details={"user_id": user_id},
            ) from e

        return True
