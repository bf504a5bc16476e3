"""Abstract base class for emoji URL store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List

from .models import Record


class EmojiURLDBBase(ABC):
    """Abstract base class for record storage.
    
    Implementations must enforce uniqueness of ``Record.key`` themselves;
    callers never lock around ``insert_record``.
    """
    
    def __init__(self, db_config: str):
        """Initialize store.
        
        Args:
            db_config: Store connection string
        """
        self.db_config = db_config
    
    @abstractmethod
    async def insert_record(self, record: Record) -> None:
        """Insert a new record.
        
        Args:
            record: The record to persist
            
        Raises:
            DuplicateKeyError: If a record with the same key exists
            StoreError: If the store operation fails
        """
        pass
    
    @abstractmethod
    async def record_exists(self, key: str) -> bool:
        """Check if a record exists for a key.
        
        Args:
            key: The canonical key to check
            
        Returns:
            True if exists, False otherwise
        """
        pass
    
    @abstractmethod
    async def get_record(self, key: str) -> Optional[Record]:
        """Get the record for a key.
        
        Args:
            key: The canonical key to lookup
            
        Returns:
            The record if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def list_records(self, limit: Optional[int] = None) -> List[Record]:
        """List records, most recently created first.
        
        Args:
            limit: Maximum number of records to return (all if None)
            
        Returns:
            List of records
        """
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
