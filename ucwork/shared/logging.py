"""
Process-wide logging for the members and orders service.

Everything goes to stdout, where App Engine picks it up. The one
record every failed request produces is the dispatch adapter's
"Handler error: status code: ..., message: ..., underlying err: ..."
line at ERROR; the envelope cause only ever appears there. The
Datastore client (google, urllib3) and uvicorn are held at WARNING so
that line is not buried. Request bodies and credentials are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers kept at WARNING whatever the configured level.
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "google", "urllib3")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger, replacing any existing handlers.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR). Unknown
            names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
