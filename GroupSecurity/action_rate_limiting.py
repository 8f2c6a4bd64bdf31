"""
ACTION RATE LIMITING
====================
Simple in-memory cooldowns for group creation and join requests.
"""

# FLOW:
# - check() reports whether a key is still cooling down.
# - record() starts a cooldown window for the key.
# WHY:
# - Slows down group spam and repeated join requests.
# HOW:
# - Cooldown expiry per key, guarded by a lock. Expired keys are pruned
#   whenever a new window is recorded.

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from GroupSecurity.security_config import SECURITY_SETTINGS


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    wait_time: int | None = None


class ActionRateLimiter:
    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._expires_at: dict[str, float] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._expires_at)

    def _prune(self, now: float) -> None:
        expired = [key for key, until in self._expires_at.items() if until <= now]
        for key in expired:
            del self._expires_at[key]

    def _check(self, key: str, now: float) -> RateLimitResult:
        until = self._expires_at.get(key)
        if until is None or until <= now:
            return RateLimitResult(allowed=True)
        return RateLimitResult(allowed=False, wait_time=math.ceil(until - now))

    def _record(self, key: str, seconds: float, now: float) -> None:
        self._prune(now)
        self._expires_at[key] = now + seconds

    def check(self, key: str) -> RateLimitResult:
        with self._lock:
            return self._check(key, self._clock())

    def record(self, key: str, seconds: float) -> None:
        with self._lock:
            self._record(key, seconds, self._clock())

    def clear(self, key: str) -> None:
        with self._lock:
            self._expires_at.pop(key, None)

    def check_and_record(self, key: str, seconds: float) -> RateLimitResult:
        with self._lock:
            now = self._clock()
            result = self._check(key, now)
            if result.allowed:
                self._record(key, seconds, now)
            return result


_default_limiter = ActionRateLimiter()


def _limiter(limiter: ActionRateLimiter | None) -> ActionRateLimiter:
    return _default_limiter if limiter is None else limiter


def group_create_key(user_id: str) -> str:
    return f"group_create_{user_id}"


def join_request_key(user_id: str, group_id: str) -> str:
    return f"join_request_{user_id}_{group_id}"


def check_group_create_rate_limit(user_id: str, limiter: ActionRateLimiter | None = None) -> RateLimitResult:
    return _limiter(limiter).check_and_record(group_create_key(user_id), SECURITY_SETTINGS["GROUP_CREATE_COOLDOWN"])


def peek_group_create_rate_limit(user_id: str, limiter: ActionRateLimiter | None = None) -> RateLimitResult:
    """Report the group-create cooldown without starting a new one."""
    return _limiter(limiter).check(group_create_key(user_id))


def record_group_create(user_id: str, limiter: ActionRateLimiter | None = None) -> None:
    _limiter(limiter).record(group_create_key(user_id), SECURITY_SETTINGS["GROUP_CREATE_COOLDOWN"])


def check_join_request_rate_limit(
    user_id: str,
    group_id: str,
    limiter: ActionRateLimiter | None = None,
) -> RateLimitResult:
    return _limiter(limiter).check_and_record(
        join_request_key(user_id, group_id), SECURITY_SETTINGS["JOIN_REQUEST_COOLDOWN"]
    )
