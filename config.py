"""
Service Configuration
Environment settings, algorithm constants and logging setup
"""

import os
import logging
import structlog
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# SM-2 constants
INITIAL_EASINESS_FACTOR = 2.5
MIN_EASINESS_FACTOR = 1.3
PASSING_GRADE = 3
FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6
LAPSE_INTERVAL_DAYS = 1

# Service settings
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_JSON = os.getenv("LOG_JSON", "false").lower() in ("1", "true", "yes")
DEFAULT_LAST_N = int(os.getenv("DEFAULT_LAST_N", 3))
ONE_REP_MAX_FORMULA = os.getenv("ONE_REP_MAX_FORMULA", "epley").lower()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:8080,http://127.0.0.1:5500,null",
    ).split(",")
    if origin.strip()
]


def configure_logging(level: str = LOG_LEVEL, json_logs: bool = LOG_JSON) -> None:
    """
    Configure structlog for the service.

    Args:
        level: Minimum level name to emit (DEBUG, INFO, ...)
        json_logs: Render JSON lines instead of the console renderer
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        cache_logger_on_first_use=True,
    )
