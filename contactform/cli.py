"""Command line entry for the contact form service."""

from __future__ import annotations

import logging

import uvicorn

from contactform.api.main import app
from contactform.core.config import settings
from contactform.core.observability import configure_logging

logger = logging.getLogger(__name__)


def run_server() -> None:
    configure_logging()
    logger.info("Server running on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
