"""URL building utilities."""

from urllib.parse import quote


def build_emoji_url(raw: str, domain: str, scheme: str = "http") -> str:
    """Build the shareable URL for a slug.
    
    Args:
        raw: The emoji slug
        domain: Public domain (optionally with port)
        scheme: URL scheme
        
    Returns:
        Shareable URL (e.g., http://example.com/🐱🐶🐸)
    """
    return f"{scheme}://{domain.strip('/')}/{raw}"


def build_encoded_emoji_url(raw: str, domain: str, scheme: str = "http") -> str:
    """Build the shareable URL with the slug percent-encoded.
    
    For clients that only accept ASCII URLs.
    """
    return build_emoji_url(quote(raw, safe=""), domain, scheme)
