"""Core business logic for the emoji URL shortener."""

from .encoder import canonicalize, is_already_canonical, decode_key
from .generator import SlugGenerator
from .service import EmojiURLService, UniquenessOracle

__all__ = [
    "canonicalize",
    "is_already_canonical",
    "decode_key",
    "SlugGenerator",
    "EmojiURLService",
    "UniquenessOracle",
]
