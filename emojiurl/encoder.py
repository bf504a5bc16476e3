"""Canonical encoding of emoji slugs into ASCII storage keys.

Keys are the Punycode (RFC 3492) form of the NFC-normalized slug, without
the ``xn--`` prefix IDNA adds. Punycode is a bijection between Unicode
strings and ASCII strings, so distinct slugs never share a key.
"""

import unicodedata

from .catalog import EMOJI_CATALOG
from .common.validators import is_valid_slug
from .errors import ValidationError

# Unicode categories emoji sequences are made of: symbols, modifiers,
# combining marks (variation selectors, keycaps) and format chars (ZWJ, tags)
EMOJI_CATEGORIES = frozenset({"So", "Sk", "Mn", "Me", "Cf"})

# Codepoint blocks holding pictographic emoji (symbols, dingbats, SMP emoji)
EMOJI_RANGES = ((0x2600, 0x27BF), (0x1F000, 0x1FAFF))


def canonicalize(raw: str) -> str:
    """Encode a raw slug into its canonical ASCII key.
    
    Args:
        raw: Slug as typed or generated (e.g. "🐱🐶🐸")
        
    Returns:
        ASCII key; empty string if the slug is blank
    """
    text = unicodedata.normalize("NFC", raw.strip())
    if not text:
        return ""
    return text.encode("punycode").decode("ascii")


def decode_key(key: str) -> str:
    """Decode a canonical key back into the slug it was derived from.
    
    Args:
        key: Canonical key
        
    Returns:
        The decoded slug
        
    Raises:
        ValidationError: If the key is not valid Punycode
    """
    if not key:
        return ""
    if not key.isascii():
        raise ValidationError(f"Key '{key}' is not ASCII")
    try:
        return key.encode("ascii").decode("punycode")
    except (UnicodeError, ValueError) as e:
        raise ValidationError(f"Key '{key}' is not a valid encoded slug") from e


def is_already_canonical(raw: str) -> bool:
    """Check whether a supplied slug is actually an encoded key.
    
    A caller who pastes a key instead of the emoji it encodes would
    otherwise have it encoded a second time. Such input is plain ASCII
    that decodes to a valid slug containing at least one pictographic
    emoji. Ordinary words can also decode as Punycode (``job`` decodes to
    a Syriac combining mark), so decoding alone is not enough.
    
    Args:
        raw: Slug as supplied by the caller
        
    Returns:
        True if the slug looks like an already encoded emoji key
    """
    text = raw.strip()
    if not text or not text.isascii():
        return False
    
    try:
        decoded = decode_key(text)
    except ValidationError:
        return False
    
    non_ascii = [c for c in decoded if not c.isascii()]
    if not non_ascii:
        return False
    
    if not all(unicodedata.category(c) in EMOJI_CATEGORIES for c in non_ascii):
        return False
    if not any(_is_pictographic(c) for c in non_ascii):
        return False
    
    is_valid, _ = is_valid_slug(decoded)
    return is_valid


def _is_pictographic(char: str) -> bool:
    if char in EMOJI_CATALOG:
        return True
    codepoint = ord(char)
    return any(low <= codepoint <= high for low, high in EMOJI_RANGES)
