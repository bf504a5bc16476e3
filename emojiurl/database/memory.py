"""In-memory store, used by tests and local development."""

import asyncio
import logging
from typing import Dict, List, Optional

from .base import EmojiURLDBBase
from .models import Record
from ..errors import DuplicateKeyError


class InMemoryStore(EmojiURLDBBase):
    """Process-local store with the same uniqueness contract as the database.
    
    Each operation yields to the event loop once, like a network round-trip
    would, so concurrent callers interleave realistically.
    """
    
    def __init__(
        self,
        db_config: str = "memory://",
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._records: Dict[str, Record] = {}
        self._order: List[str] = []
        self._lock = asyncio.Lock()
    
    async def insert_record(self, record: Record) -> None:
        await asyncio.sleep(0)
        async with self._lock:
            if record.key in self._records:
                raise DuplicateKeyError(f"Key '{record.key}' already exists")
            self._records[record.key] = record
            self._order.append(record.key)
        self.logger.debug(f"Stored record {record.key}")
    
    async def record_exists(self, key: str) -> bool:
        await asyncio.sleep(0)
        return key in self._records
    
    async def get_record(self, key: str) -> Optional[Record]:
        await asyncio.sleep(0)
        return self._records.get(key)
    
    async def list_records(self, limit: Optional[int] = None) -> List[Record]:
        await asyncio.sleep(0)
        keys = list(reversed(self._order))
        if limit is not None:
            keys = keys[:limit]
        return [self._records[key] for key in keys]
    
    async def health_check(self) -> bool:
        return True
    
    async def close(self) -> None:
        pass
    
    def __len__(self) -> int:
        return len(self._records)
