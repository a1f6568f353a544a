import logging
import sys
from typing import Optional

import structlog

from paypal_rest.core.config import Settings, settings


def get_log_level(config: Settings) -> str:
    if config.paypal_debug:
        return "DEBUG"
    return config.log_level.upper()


def get_log_renderer(config: Settings):
    # JSON for tests and production, pretty printing for local development
    if config.environment in ("test", "production"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty(), sort_keys=False)


def configure_logging(config: Optional[Settings] = None) -> None:
    """Set up structlog on top of stdlib logging.

    Called by the webhook service entry point; the library itself only
    emits events and leaves configuration to the application.
    """
    config = config or settings
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            get_log_renderer(config),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(get_log_level(config))

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
