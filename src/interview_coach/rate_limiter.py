"""Sliding-window request limiting over persisted timestamps."""
import json
import logging
import sqlite3
import time
from typing import Callable

from interview_coach.models import RateLimitConfig, RateLimitInfo
from interview_coach.storage import KeyValueStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "rate_limit_"
STORAGE_ERRORS = (sqlite3.Error, OSError, ValueError)

RATE_LIMIT_PRESETS = {
    "AI_ASSISTANT": RateLimitConfig(max_requests=10, window_ms=60_000),
    "API_CALLS": RateLimitConfig(max_requests=20, window_ms=60_000),
    "LOGIN_ATTEMPTS": RateLimitConfig(max_requests=5, window_ms=300_000),
    "RESUME_GENERATION": RateLimitConfig(max_requests=3, window_ms=60_000),
}


class RateLimiter:
    def __init__(self, store: KeyValueStore, clock: Callable[[], float] = time.time):
        self.store = store
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def _get_request_log(self, key: str) -> list[int]:
        try:
            stored = self.store.get(KEY_PREFIX + key)
            return [int(ts) for ts in json.loads(stored)] if stored else []
        except (*STORAGE_ERRORS, TypeError):
            logger.exception("Failed to get rate limit log for %r", key)
            return []

    def _set_request_log(self, key: str, timestamps: list[int]) -> None:
        try:
            self.store.set(KEY_PREFIX + key, json.dumps(timestamps))
        except STORAGE_ERRORS:
            logger.exception("Failed to set rate limit log for %r", key)

    def _recent_requests(self, key: str, config: RateLimitConfig, now: int) -> list[int]:
        return [ts for ts in self._get_request_log(key) if now - ts < config.window_ms]

    def check_rate_limit(self, key: str, config: RateLimitConfig) -> bool:
        """Record a request for ``key`` if the window has room.

        Returns False, without recording anything, once ``max_requests``
        requests already fall inside the window.
        """
        now = self._now_ms()
        recent = self._recent_requests(key, config, now)
        if len(recent) >= config.max_requests:
            logger.warning("Rate limit exceeded for %s", key)
            return False
        recent.append(now)
        self._set_request_log(key, recent)
        return True

    def get_remaining_requests(self, key: str, config: RateLimitConfig) -> int:
        recent = self._recent_requests(key, config, self._now_ms())
        return max(0, config.max_requests - len(recent))

    def get_rate_limit_info(self, key: str, config: RateLimitConfig) -> RateLimitInfo:
        now = self._now_ms()
        recent = self._recent_requests(key, config, now)
        remaining = max(0, config.max_requests - len(recent))
        oldest = min(recent) if recent else now
        return RateLimitInfo(remaining=remaining, reset_time=oldest + config.window_ms)

    def get_time_until_reset(self, key: str, config: RateLimitConfig) -> int:
        """Milliseconds until the oldest request in the window expires."""
        info = self.get_rate_limit_info(key, config)
        return max(0, info.reset_time - self._now_ms())

    def reset_limit(self, key: str) -> None:
        try:
            self.store.delete(KEY_PREFIX + key)
            logger.info("Rate limit reset for %s", key)
        except STORAGE_ERRORS:
            logger.exception("Failed to reset rate limit for %r", key)

    def clear_all_limits(self) -> None:
        try:
            for key in self.store.keys(KEY_PREFIX):
                self.store.delete(key)
            logger.info("All rate limits cleared")
        except STORAGE_ERRORS:
            logger.exception("Failed to clear all rate limits")
