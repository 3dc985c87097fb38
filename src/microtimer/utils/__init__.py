"""Utility helpers for the :mod:`microtimer` package."""

from .logging import log_mark, setup_logging

__all__ = ["log_mark", "setup_logging"]
