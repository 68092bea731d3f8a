# hovenier/core/logging_config.py
import logging
import sys
from typing import Optional

import structlog


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog + standaard logging.
    Logs gaan als JSON naar stdout; engine-modules loggen via logging.getLogger(__name__).
    """
    if level is None:
        from hovenier.config import get_settings

        level = get_settings().log_level

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, str(level).upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Globale logger voor de API-laag
logger = structlog.get_logger("hovenier")
