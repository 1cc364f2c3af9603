"""Shared helpers: JSON extraction from agent text and logging setup."""

from .json_utils import extract_json_object
from .logging_utils import setup_logging

__all__ = ["extract_json_object", "setup_logging"]
