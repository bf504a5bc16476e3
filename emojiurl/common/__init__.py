"""Common utilities for the emoji URL shortener."""

from .validators import is_valid_url, is_valid_slug
from .url_builder import build_emoji_url, build_encoded_emoji_url
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "is_valid_slug",
    "build_emoji_url",
    "build_encoded_emoji_url",
    "setup_logging",
    "get_logger",
]
