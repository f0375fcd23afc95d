# core/cache.py

"""
In-memory TTL cache, used to memoize allowed-action vectors.

Memo keys include the user's id AND role, so a role change never hits a
stale entry; invalidate_user() drops everything for a user on
login/logout.
"""

from typing import Optional, Any
from datetime import datetime, timedelta
from threading import Lock

from core.access_policy import get_allowed_actions
from core.config import settings
from core.logging_config import logger
from models.access import AllowedActions
from models.enums import ResourceType
from models.user import User


class CacheEntry:
    """Represents a cached value with expiration time."""

    def __init__(self, value: Any, ttl_seconds: int):
        self.value = value
        self.expires_at = datetime.now() + timedelta(seconds=ttl_seconds)

    def is_expired(self) -> bool:
        return datetime.now() >= self.expires_at


class SimpleCache:
    """
    Simple in-memory cache with TTL support.

    Thread-safe for concurrent access.
    """

    def __init__(self):
        self._cache: dict[str, CacheEntry] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[Any]:
        """
        Get a value from the cache.

        Returns:
            Cached value or None if not found or expired
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            if entry.is_expired():
                del self._cache[key]
                return None

            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int = 300):
        with self._lock:
            self._cache[key] = CacheEntry(value, ttl_seconds)

    def delete(self, key: str):
        with self._lock:
            self._cache.pop(key, None)

    def delete_prefix(self, prefix: str) -> int:
        """Delete every key starting with `prefix`. Returns the count removed."""
        with self._lock:
            keys = [key for key in self._cache if key.startswith(prefix)]
            for key in keys:
                del self._cache[key]
            return len(keys)

    def clear(self):
        with self._lock:
            self._cache.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._cache)


# Global cache instance
_cache = SimpleCache()


def get_cache() -> SimpleCache:
    return _cache


def cache_clear():
    """Clear all cache entries."""
    _cache.clear()


# ============================================================
# ALLOWED-ACTIONS MEMO
# ============================================================

def allowed_actions_key(user: User, resource_type: Any) -> str:
    return f"allowed_actions:{user.id}:{str(user.role)}:{str(resource_type)}"


def get_cached_allowed_actions(user: Optional[User], resource_type: Any) -> AllowedActions:
    """
    get_allowed_actions() memoized on (user.id, user.role, resource_type).
    Anonymous callers and unknown resource types are not cached.
    """
    if user is None or str(resource_type) not in ResourceType.list():
        return get_allowed_actions(user, resource_type)

    key = allowed_actions_key(user, resource_type)
    cached_value = _cache.get(key)
    if cached_value is not None:
        logger.debug(f"Cache hit: {key}")
        return cached_value.model_copy()

    actions = get_allowed_actions(user, resource_type)
    _cache.set(key, actions, settings.ALLOWED_ACTIONS_CACHE_TTL)
    logger.debug(f"Cache miss, stored: {key}")

    return actions.model_copy()


def invalidate_user(user_id: str) -> int:
    """Drop every memoized entry for a user (login, logout, role change)."""
    removed = _cache.delete_prefix(f"allowed_actions:{user_id}:")
    if removed:
        logger.debug(f"Invalidated {removed} cached action sets for {user_id}")
    return removed
