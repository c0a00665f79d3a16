from __future__ import annotations

import logging
import sys
from pythonjsonlogger import jsonlogger

from oidc_resolver.core.config import settings


def configure_logging(level: str | None = None, *, quiet_transport: bool = True) -> None:
    """
    Route all log records to stdout as JSON lines.

    `level` defaults to ``settings.log_level``. With `quiet_transport`
    the per-request INFO lines emitted by httpx/httpcore are suppressed.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "ts"},
        )
    )

    # Replace rather than append so repeated calls stay idempotent
    root.handlers = [handler]

    if quiet_transport:
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)
