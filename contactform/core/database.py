"""Database connectivity layer for the contact form service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.sql import Executable

from contactform.core.config import settings
from contactform.core.exceptions import DatabaseConnectionError, PersistenceError

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """Outcome of a single statement: either rows or a write summary."""

    rows: List[Dict[str, Any]] = field(default_factory=list)
    affected_rows: int = 0
    insert_id: Optional[int] = None


class DatabaseClient(Protocol):
    async def query(self, statement: Executable) -> QueryResult: ...


class DatabaseManager:
    """Owns the shared async engine and executes parameterized statements."""

    def __init__(self, engine: Optional[AsyncEngine] = None) -> None:
        self.engine: Optional[AsyncEngine] = engine

    async def initialize(self) -> None:
        """Create the engine and verify the database is reachable."""

        if self.engine is None:
            self.engine = create_async_engine(settings.database_url, echo=settings.DB_ECHO)

        try:
            async with self.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            logger.critical("Database connection failed: %s", exc)
            await self.close()
            raise DatabaseConnectionError(str(exc)) from exc

        logger.info("Connected to database %s", self.engine.url.database)

    async def close(self) -> None:
        if self.engine is not None:
            logger.info("Closing database connections")
            await self.engine.dispose()
            self.engine = None

    async def query(self, statement: Executable) -> QueryResult:
        """Run one statement in its own transaction.

        Any driver failure surfaces as `PersistenceError` carrying the
        original exception as its cause.
        """

        if self.engine is None:
            raise PersistenceError("Database engine is not initialized")

        try:
            async with self.engine.begin() as connection:
                result = await connection.execute(statement)
                if result.returns_rows:
                    return QueryResult(rows=[dict(row) for row in result.mappings().all()])

                insert_id = None
                if result.is_insert:
                    primary_key = result.inserted_primary_key
                    insert_id = primary_key[0] if primary_key else None
                return QueryResult(affected_rows=result.rowcount, insert_id=insert_id)
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc)) from exc


# Singleton instance shared by every request handler
database_manager = DatabaseManager()
