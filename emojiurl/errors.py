"""
Error classes for the emoji URL shortener.

Every failure the engine surfaces to its callers is an ``EmojiURLError``
subclass carrying the HTTP status the web layer should answer with.
"""

from typing import Optional, Dict, Any


class EmojiURLError(Exception):
    """
    Base error class.
    
    Attributes:
        status_code: HTTP status code (default: 500)
        message: Error message (default: "Internal server error")
        details: Optional additional error details
    """
    status_code: int = 500
    message: str = "Internal server error"
    
    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize error.
        
        Args:
            message: Error message (overrides default)
            details: Optional additional error details
        """
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(EmojiURLError):
    """400 Malformed target URL or requested slug."""
    status_code = 400
    message = "Validation error"


class NotFoundError(EmojiURLError):
    """404 No record for the key."""
    status_code = 404
    message = "Not found"


class AlreadyExistsError(EmojiURLError):
    """409 Requested key collides with an existing record."""
    status_code = 409
    message = "Already exists"


class EmptySlugError(EmojiURLError):
    """422 Requested slug is empty after canonicalization."""
    status_code = 422
    message = "Slug is empty"


class StoreError(EmojiURLError):
    """500 Storage operation failed."""
    status_code = 500
    message = "Store error"


class DuplicateKeyError(StoreError):
    """Insert rejected by the store's unique key constraint."""
    status_code = 409
    message = "Duplicate key"


class AllocationExhaustedError(EmojiURLError):
    """503 No unused key found within the attempt budget."""
    status_code = 503
    message = "Unable to allocate a unique slug"
