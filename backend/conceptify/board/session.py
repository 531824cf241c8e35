"""
Session Store

Saves the board to Redis for a limited time. Expiry is enforced twice:
an APScheduler one-shot job wipes the snapshot when its TTL runs out,
and ``load()`` discards any snapshot older than the TTL on read.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any

from apscheduler.triggers.date import DateTrigger
from pydantic import ValidationError
from redis.exceptions import RedisError

from conceptify.models.board import Snapshot
from conceptify.models.item import Item
from conceptify.models.vlan import Vlan

logger = logging.getLogger(__name__)

EXPIRY_JOB_ID = "session_expiry"
DEFAULT_TTL_MS = 10 * 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


class SessionStore:
    """
    Snapshot persistence with a time-to-live.

    Args:
        cache: RedisCache (or anything with async get/set/delete)
        scheduler: APScheduler scheduler that runs the expiry job
        storage_key: Redis key holding the snapshot
        ttl_ms: Snapshot lifetime in milliseconds
        grid_size: When set, snapshots with off-grid positions are malformed
        clock: Returns the current time in epoch milliseconds
    """

    def __init__(
        self,
        cache: Any,
        scheduler: Any,
        storage_key: str = "conceptify:state",
        ttl_ms: int = DEFAULT_TTL_MS,
        clock: Callable[[], int] = now_ms,
        grid_size: int | None = None,
    ):
        self._cache = cache
        self._scheduler = scheduler
        self._key = storage_key
        self._ttl_ms = ttl_ms
        self._clock = clock
        self._grid_size = grid_size

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    async def save(self, items: Iterable[Item], vlans: Iterable[Vlan]) -> Snapshot | None:
        """
        Write a snapshot stamped now and re-arm the expiry job.

        Returns None if Redis rejects the write. The previous expiry job, if
        any, is left as it was.
        """
        snapshot = Snapshot(
            timestamp=self._clock(),
            whiteboard_items=list(items),
            vlans=list(vlans),
        )
        try:
            await self._cache.set(
                self._key,
                snapshot.model_dump_json(by_alias=True),
                ttl=math.ceil(self._ttl_ms / 1000),
            )
        except RedisError as e:
            logger.error("Failed to save board session: %s", e)
            return None
        self._arm_expiry(snapshot.timestamp)

        logger.info(
            "Saved board session: %d items, %d VLANs",
            len(snapshot.whiteboard_items),
            len(snapshot.vlans),
        )
        return snapshot

    async def load(self) -> Snapshot | None:
        """
        Read the saved snapshot.

        Returns None when nothing is saved, the snapshot is malformed, or it
        is older than the TTL. Malformed and stale snapshots are wiped.
        """
        try:
            raw = await self._cache.get(self._key)
        except RedisError as e:
            logger.error("Failed to read saved session: %s", e)
            return None

        if raw is None:
            return None

        try:
            snapshot = Snapshot.model_validate_json(raw, context={"grid_size": self._grid_size})
        except ValidationError as e:
            logger.warning("Discarding malformed session snapshot: %s", e.errors()[0]["msg"])
            await self._wipe()
            return None

        if self._is_stale(snapshot):
            logger.info("Saved session expired %d ms ago", self._age(snapshot) - self._ttl_ms)
            await self._wipe()
            return None

        return snapshot

    async def clear(self) -> None:
        """Forget the saved session and cancel its expiry job."""
        await self._wipe()
        logger.info("Cleared saved board session")

    # ─────────────────────────────────────────────────────────────────────
    # Expiry
    # ─────────────────────────────────────────────────────────────────────

    def _arm_expiry(self, timestamp: int) -> None:
        self._cancel_expiry()
        run_date = datetime.fromtimestamp((timestamp + self._ttl_ms) / 1000, tz=timezone.utc)
        self._scheduler.add_job(
            self._expire,
            DateTrigger(run_date=run_date),
            id=EXPIRY_JOB_ID,
            name="Expire saved board session",
            replace_existing=True,
            kwargs={"armed_timestamp": timestamp},
        )

    def _cancel_expiry(self) -> None:
        if self._scheduler.get_job(EXPIRY_JOB_ID) is not None:
            self._scheduler.remove_job(EXPIRY_JOB_ID)

    async def _expire(self, armed_timestamp: int) -> None:
        """Expiry job body. Leaves a newer, still-valid snapshot alone."""
        try:
            raw = await self._cache.get(self._key)
            if raw is not None:
                try:
                    snapshot = Snapshot.model_validate_json(raw)
                except ValidationError:
                    snapshot = None
                if (
                    snapshot is not None
                    and snapshot.timestamp != armed_timestamp
                    and not self._is_stale(snapshot)
                ):
                    return
                await self._cache.delete(self._key)
            logger.info("Saved board session expired")
        except RedisError as e:
            logger.error("Failed to expire saved session: %s", e)

    async def _wipe(self) -> None:
        self._cancel_expiry()
        try:
            await self._cache.delete(self._key)
        except RedisError as e:
            logger.error("Failed to delete saved session: %s", e)

    def _age(self, snapshot: Snapshot) -> int:
        return self._clock() - snapshot.timestamp

    def _is_stale(self, snapshot: Snapshot) -> bool:
        return self._age(snapshot) > self._ttl_ms
