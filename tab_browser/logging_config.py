from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "TAB_BROWSER_LOG_FORMAT"
LOG_FORMATS = ("json", "plain")


def resolve_format(force_format: Optional[str] = None) -> str:
    """
    Pick the log format: explicit argument, then TAB_BROWSER_LOG_FORMAT,
    then "json".

    Raises:
        ValueError: if the chosen format is not "json" or "plain"
    """
    raw = force_format if force_format is not None else os.getenv(LOG_FORMAT_ENV, "json")
    mode = raw.strip().lower()
    if mode not in LOG_FORMATS:
        raise ValueError(f"Unknown log format {raw!r}; expected one of {list(LOG_FORMATS)}")
    return mode


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
        stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the root logger for the app

    - JSON lines by default, so 'extra' fields (n_rows, column, ...) stay queryable
    - plain text for local debugging
    """
    mode = resolve_format(force_format)

    if mode == "plain":
        formatter: logging.Formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Replace existing handlers so repeated calls don't duplicate output
    root.handlers.clear()
    root.addHandler(handler)
