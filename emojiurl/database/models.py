"""Data models for the emoji URL shortener."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Record:
    """A slug mapping as stored in the database."""
    
    key: str
    raw: str
    target: str
    created_at: datetime = field(default_factory=_utcnow)
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "key": self.key,
            "raw": self.raw,
            "target": self.target,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "Record":
        """Create from dictionary (or database row)."""
        created_at: Optional[datetime] = data.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        if created_at is None:
            created_at = _utcnow()
        elif created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        
        return cls(
            key=data["key"],
            raw=data["raw"],
            target=data["target"],
            created_at=created_at,
        )
