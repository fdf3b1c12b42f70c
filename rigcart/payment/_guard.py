"""
Submission guard — in-memory idempotency for checkout submissions.

    PENDING    a submission with this key is in flight; duplicates fail fast
    COMPLETED  the outcome is replayed instead of calling the backend again

Failed attempts are forgotten so the customer can retry.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from kungfu import Error, Ok, Result

from rigcart.config import Settings, get_settings

ALREADY_PROCESSING = "Your order is already being processed"


class SubmissionState(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class SubmissionConflict:
    key: str
    message: str = ALREADY_PROCESSING


@dataclass(slots=True)
class _Record:
    state: SubmissionState
    value: Any
    expires_at: datetime | None

    def expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now > self.expires_at


class SubmissionGuard:
    """
    Note: single-process only. Keys carry the session id, so sharing one
    guard only deduplicates sessions built with the same explicit
    ``session_id`` (tabs restoring one checkout, retries after a timeout).

    Completed outcomes live for ``ttl``, or ``Settings.submission_ttl``
    when no ttl is given. Expired records are swept on every acquire.
    """

    def __init__(self, ttl: timedelta | None = None, *, settings: Settings | None = None) -> None:
        if ttl is None:
            ttl = (settings or get_settings()).submission_ttl
        self._ttl = ttl
        self._records: dict[str, _Record] = {}
        self._lock = asyncio.Lock()

    async def run[T, E](
        self,
        key: str,
        operation: Callable[[], Awaitable[Result[T, E]]],
    ) -> Result[T, E | SubmissionConflict]:
        match await self._acquire(key):
            case Ok(None):
                pass
            case Ok(cached):
                return Ok(cached)
            case Error(conflict):
                return Error(conflict)

        try:
            result = await operation()
        except BaseException:
            await self._forget(key)
            raise

        match result:
            case Ok(value):
                await self._complete(key, value)
            case Error(_):
                await self._forget(key)
        return result

    def __len__(self) -> int:
        return len(self._records)

    async def state(self, key: str) -> SubmissionState | None:
        async with self._lock:
            record = self._records.get(key)
            if record is None or record.expired(datetime.now()):
                return None
            return record.state

    async def _acquire(self, key: str) -> Result[Any, SubmissionConflict]:
        """Compare-and-swap into PENDING. Ok(value) replays a completed record."""
        async with self._lock:
            self._sweep(datetime.now())
            record = self._records.get(key)
            if record is None:
                self._records[key] = _Record(SubmissionState.PENDING, None, None)
                return Ok(None)
            if record.state is SubmissionState.COMPLETED:
                return Ok(record.value)
            return Error(SubmissionConflict(key))

    def _sweep(self, now: datetime) -> None:
        for key in [k for k, record in self._records.items() if record.expired(now)]:
            del self._records[key]

    async def _complete(self, key: str, value: Any) -> None:
        async with self._lock:
            expires_at = datetime.now() + self._ttl if self._ttl is not None else None
            self._records[key] = _Record(SubmissionState.COMPLETED, value, expires_at)

    async def _forget(self, key: str) -> None:
        async with self._lock:
            self._records.pop(key, None)


__all__ = (
    "ALREADY_PROCESSING",
    "SubmissionState",
    "SubmissionConflict",
    "SubmissionGuard",
)
