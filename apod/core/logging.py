from __future__ import annotations

import logging
from typing import Optional

from apod.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

#: Root of every logger in this package (``logging.getLogger(__name__)``).
PACKAGE_LOGGER = "apod"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Send ``apod.*`` records to stderr at *level* (``settings.log_level`` by default).

    Library users who configure logging themselves never need this; the
    service calls it once at import time.  Safe to call repeatedly: the
    handler is only attached once.
    """
    name = (level or settings.log_level).upper()
    package_log = logging.getLogger(PACKAGE_LOGGER)
    level_no = logging.getLevelName(name)
    package_log.setLevel(level_no if isinstance(level_no, int) else logging.INFO)
    if not any(getattr(h, "_apod_handler", False) for h in package_log.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._apod_handler = True  # type: ignore[attr-defined]
        package_log.addHandler(handler)
    # Keep records out of uvicorn's root handlers.
    package_log.propagate = False
    return package_log
