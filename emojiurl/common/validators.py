"""Validation utilities for the emoji URL shortener."""

import unicodedata
from urllib.parse import urlparse
from typing import Tuple

MAX_URL_LENGTH = 2048
MAX_SLUG_LENGTH = 64

# Characters that would break the slug when used as a URL path segment
FORBIDDEN_SLUG_CHARS = frozenset("/?#%\\")

RESERVED_SLUGS = frozenset({"api", "health"})


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a target URL.
    
    Args:
        url: The URL to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"
    
    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"
    
    if any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"
    
    try:
        result = urlparse(url)
        
        if result.scheme not in ["http", "https"]:
            return False, "URL must use http or https protocol"
        
        if not result.netloc or not result.hostname:
            return False, "URL must have a valid domain"
        
        # Accessing port validates it
        result.port
        
        return True, ""
        
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def is_valid_slug(raw: str, max_length: int = MAX_SLUG_LENGTH) -> Tuple[bool, str]:
    """Validate a caller-requested slug.
    
    Emptiness is checked by the caller, which reports it separately.
    
    Args:
        raw: The slug to validate (already stripped)
        max_length: Maximum length in codepoints
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(raw, str):
        return False, "Slug must be a string"
    
    if len(raw) > max_length:
        return False, f"Slug must be at most {max_length} characters"
    
    for c in raw:
        if c.isspace():
            return False, "Slug must not contain whitespace"
        if c in FORBIDDEN_SLUG_CHARS:
            return False, f"Slug must not contain '{c}'"
        if unicodedata.category(c) == "Cc":
            return False, "Slug must not contain control characters"
    
    if raw.lower() in RESERVED_SLUGS:
        return False, f"'{raw}' is a reserved word and cannot be used"
    
    return True, ""
