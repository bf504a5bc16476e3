"""Business logic service for the emoji URL shortener."""

import logging
from typing import Optional, Dict, List
from datetime import datetime, timezone

from .encoder import canonicalize, is_already_canonical
from .generator import SlugGenerator
from .database.base import EmojiURLDBBase
from .database.cache import RedisCache
from .database.models import Record
from .common.validators import is_valid_url, is_valid_slug
from .errors import (
    AllocationExhaustedError,
    AlreadyExistsError,
    DuplicateKeyError,
    EmptySlugError,
    NotFoundError,
    ValidationError,
)


class UniquenessOracle:
    """Answers whether a key is already taken.

    The answer is only a snapshot: another allocation may take the key
    before our insert lands. The store's unique constraint decides.
    """

    def __init__(self, db: EmojiURLDBBase):
        self.db = db

    async def exists(self, key: str) -> bool:
        return await self.db.record_exists(key)


class EmojiURLService:
    """Allocates and resolves emoji slugs."""

    def __init__(
        self,
        db: EmojiURLDBBase,
        cache: Optional[RedisCache] = None,
        slug_generator: Optional[SlugGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_allocation_attempts: int = 32,
    ):
        """Initialize service.

        Args:
            db: Store instance
            cache: Optional read cache
            slug_generator: Optional slug generator
            logger: Optional logger
            max_allocation_attempts: Candidates to try before giving up on
                generating a slug
        """
        if max_allocation_attempts < 1:
            raise ValueError("max_allocation_attempts must be at least 1")

        self.db = db
        self.cache = cache
        self.generator = slug_generator or SlugGenerator()
        self.oracle = UniquenessOracle(db)
        self.logger = logger or logging.getLogger(__name__)
        self.max_allocation_attempts = max_allocation_attempts

    async def allocate(self, requested_raw: Optional[str], target: str) -> Record:
        """Create a new record for a target URL.

        Args:
            requested_raw: Slug chosen by the caller, or None to generate one
            target: Destination URL

        Returns:
            The persisted record

        Raises:
            ValidationError: If the target or requested slug is malformed
            EmptySlugError: If the requested slug is blank
            AlreadyExistsError: If the requested slug is taken or is an encoded key
            AllocationExhaustedError: If no free generated slug was found
            StoreError: If the store fails
        """
        target = target.strip() if isinstance(target, str) else target
        is_valid, error = is_valid_url(target)
        if not is_valid:
            raise ValidationError(f"Invalid URL: {error}")

        if requested_raw is None:
            record = await self._allocate_generated(target)
        else:
            record = await self._allocate_requested(requested_raw, target)

        if self.cache:
            await self.cache.set_record(record)

        self.logger.info(f"Allocated {record.raw} ({record.key}) -> {record.target}")
        return record

    async def _allocate_requested(self, requested_raw: str, target: str) -> Record:
        raw = requested_raw.strip()
        if not raw:
            raise EmptySlugError("Requested slug is empty")

        is_valid, error = is_valid_slug(raw)
        if not is_valid:
            raise ValidationError(f"Invalid slug: {error}")

        key = canonicalize(raw)
        if not key:
            raise EmptySlugError("Requested slug is empty")

        if is_already_canonical(raw):
            raise AlreadyExistsError(
                f"'{raw}' looks like an encoded key; send the emoji instead"
            )

        if await self.oracle.exists(key):
            raise AlreadyExistsError(f"Slug '{raw}' already exists")

        record = Record(key=key, raw=raw, target=target, created_at=self._now())
        try:
            await self.db.insert_record(record)
        except DuplicateKeyError as e:
            # Lost a race against a concurrent allocation of the same slug
            raise AlreadyExistsError(f"Slug '{raw}' already exists") from e

        return record

    async def _allocate_generated(self, target: str) -> Record:
        for attempt in range(1, self.max_allocation_attempts + 1):
            raw = self.generator.generate_candidate()
            key = canonicalize(raw)

            if await self.oracle.exists(key):
                self.logger.debug(f"Candidate {raw} ({key}) taken, attempt {attempt}")
                continue

            record = Record(key=key, raw=raw, target=target, created_at=self._now())
            try:
                await self.db.insert_record(record)
            except DuplicateKeyError:
                self.logger.debug(f"Candidate {raw} ({key}) lost insert race, attempt {attempt}")
                continue

            if attempt > 1:
                self.logger.debug(f"Generated slug after {attempt} attempts: {raw}")
            return record

        self.logger.error(
            f"No free slug after {self.max_allocation_attempts} attempts "
            f"(keyspace {self.generator.keyspace_size})"
        )
        raise AllocationExhaustedError(
            f"Unable to allocate a unique slug after {self.max_allocation_attempts} attempts"
        )

    async def resolve(self, key: str) -> Record:
        """Look up the record for an exact canonical key.

        Args:
            key: Canonical key

        Returns:
            The stored record

        Raises:
            NotFoundError: If no record has this key
            StoreError: If the store fails
        """
        if self.cache:
            cached = await self.cache.get_record(key)
            if cached:
                self.logger.debug(f"Cache hit for {key}")
                return cached

        record = await self.db.get_record(key)
        if record is None:
            self.logger.warning(f"Key not found: {key}")
            raise NotFoundError(f"Key '{key}' not found")

        if self.cache:
            await self.cache.set_record(record)

        self.logger.debug(f"Resolved {key} -> {record.target}")
        return record

    async def list_records(self, limit: Optional[int] = None) -> List[Record]:
        """List records, most recently created first.

        Args:
            limit: Maximum number to return (all if None)

        Returns:
            List of records
        """
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
            raise ValidationError("Limit must be a positive integer")
        return await self.db.list_records(limit)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.db.health_check()

        cache_healthy = True
        if self.cache and self.cache.enabled:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.db.close()
        if self.cache:
            await self.cache.close()

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)
