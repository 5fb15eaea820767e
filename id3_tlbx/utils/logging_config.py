"""Root logger setup for scripts and the id3-tlbx command line."""

from __future__ import annotations

import logging
import os

from pythonjsonlogger.json import JsonFormatter


LOG_FORMAT_ENV = "ID3_TLBX_LOG_FORMAT"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int | str = logging.INFO,
    force_format: str | None = None,
) -> None:
    """Configure the root logger for scripts and the command line.

    Modes:
    - plain text (default)
    - JSON, one object per record

    Selection order:
        1) ``force_format`` argument ("json" or "plain") if provided
        2) env var ``ID3_TLBX_LOG_FORMAT``
        3) default = "plain"
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "plain")).lower()
    if format_mode not in ("plain", "json"):
        raise ValueError(f"Invalid log format '{format_mode}'. Use 'plain' or 'json'.")

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(_FORMAT) if format_mode == "json" else logging.Formatter(_FORMAT))

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)


__all__ = ["LOG_FORMAT_ENV", "configure_logging"]
