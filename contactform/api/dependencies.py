"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from contactform.core.database import DatabaseClient, database_manager


async def get_db() -> DatabaseClient:
    return database_manager
