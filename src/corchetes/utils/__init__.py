"""Utility modules for Corchetes.

Provides:
- logger: get_logger and the package's root logger setup
"""

from corchetes.utils.logger import ROOT_LOGGER_NAME, get_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
]
