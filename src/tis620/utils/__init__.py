"""Utility helpers."""

from tis620.utils.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
