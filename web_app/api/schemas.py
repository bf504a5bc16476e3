"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class NewURLRequest(BaseModel):
    """Request to create a slug for a URL."""
    
    url: str = Field(..., description="The URL the slug redirects to")
    emojis: Optional[str] = Field(None, description="Optional slug; one is generated if omitted")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                },
                {
                    "url": "https://github.com/user/repo",
                    "emojis": "🐱🐶🐸",
                }
            ]
        }
    }


class RecordResponse(BaseModel):
    """A stored slug mapping."""
    
    key: str = Field(..., description="Canonical ASCII key")
    raw: str = Field(..., description="The emoji slug")
    target: str = Field(..., description="Destination URL")
    created_at: datetime = Field(..., description="Creation timestamp")


class NewURLResponse(RecordResponse):
    """Response after creating a slug."""
    
    port: int = Field(..., description="Port the service listens on")
    domain: str = Field(..., description="Public domain of the service")


class ResolveResponse(BaseModel):
    """Resolution of a key."""
    
    emojiURL: str = Field(..., description="Shareable URL with the emoji slug")
    redirectURL: str = Field(..., description="Destination URL")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""
    
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
