"""Process entry point — `python -m changelogger`.

Builds settings and the application explicitly and hands them to uvicorn, which
owns signal handling (SIGINT/SIGTERM) and graceful shutdown.
"""

import logging

import uvicorn

from changelogger.config import get_settings
from changelogger.main import create_app
from changelogger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("ChangeLogger starting on %s:%s", settings.host, settings.port)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    logger.info("ChangeLogger stopped")


if __name__ == "__main__":
    main()
