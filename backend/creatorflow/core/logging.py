"""
Logging setup for the API process.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def init_logging(level: str = "INFO") -> None:
    """Route all application loggers to a single stdout handler."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # SQLAlchemy echoes through its own logger when DB_ECHO is set
    logging.getLogger("sqlalchemy.engine").propagate = True
