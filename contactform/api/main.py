"""FastAPI application entrypoint for the contact form service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from contactform.api.middleware.logging import LoggingMiddleware
from contactform.api.routes import admin, contacts
from contactform.core.config import settings
from contactform.core.database import database_manager
from contactform.core.exceptions import ApplicationError
from contactform.core.observability import configure_logging


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Connect to the database on startup and release it on shutdown.

    A failed connection raises out of startup, which stops the server.
    """

    configure_logging()
    await database_manager.initialize()

    try:
        yield
    finally:
        await database_manager.close()


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

# Routers
app.include_router(contacts.router, prefix="/api")
app.include_router(admin.router, prefix="/api")


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus scrape endpoint."""

    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.exception_handler(ApplicationError)
async def handle_application_error(_: Request, exc: ApplicationError):
    """Return the public message as plain text with the error's status."""

    return PlainTextResponse(exc.message, status_code=exc.status_code)
