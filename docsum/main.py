from __future__ import annotations

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from docsum.api.app import create_app
from docsum.core.config import get_settings
from docsum.core.errors import ConfigurationError

logger = logging.getLogger("docsum.main")


def run() -> None:
    """Console entry point: validate configuration, then serve on HOST:PORT."""
    load_dotenv()

    try:
        settings = get_settings()
        app = create_app(settings)
    except ConfigurationError as exc:
        logger.critical("Refusing to start: %s", exc.detail, extra={"error_code": exc.code})
        sys.exit(1)

    logger.info("Server is running and listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
