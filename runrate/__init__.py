"""Projected versus measured ROI (run rate) for AI-agent deployments."""

from __future__ import annotations

import logging

__version__ = "0.1.0"


def configure_logging(level: str | int | None = None) -> None:
    """Basic logging setup for hosts that do not configure their own."""
    if level is None:
        from runrate.config.settings import get_settings

        level = get_settings().log_level
    logging.basicConfig(level=level)
