"""Read-through / write-invalidate response cache over Redis.

One key per query shape (see ``CACHE_KEYS_BY_ENTITY``), TTL fixed at one
hour.  The cache never owns data and never fails a request:

* ``cache_get`` treats an absent key, an expired key, an undecodable value
  and an unreachable Redis identically, as a miss.
* ``cache_set`` and ``cache_delete`` swallow Redis failures after logging.

Invalidation runs only after the store write has committed, so a reader
can at worst see one stale value until the delete lands or the TTL ends.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from redis.exceptions import RedisError

from app.core.constants import CACHE_KEYS_BY_ENTITY, CACHE_TTL_SECONDS
from app.db.redis import get_redis

logger = logging.getLogger(__name__)

T = TypeVar("T")


def cache_get(key: str, adapter: TypeAdapter[T]) -> T | None:
    """Return the cached value for *key* decoded by *adapter*, or None."""
    try:
        raw = get_redis().get(key)
    except RedisError as exc:
        logger.warning("cache_get_failed", extra={"key": key, "error_message": str(exc)})
        return None

    if raw is None:
        return None

    try:
        return adapter.validate_json(raw)
    except PydanticValidationError:
        logger.warning("cache_value_undecodable", extra={"key": key})
        return None


def cache_set(key: str, value: T, adapter: TypeAdapter[T]) -> None:
    """Store *value* under *key* for ``CACHE_TTL_SECONDS``.  Best effort."""
    try:
        get_redis().set(key, adapter.dump_json(value), ex=CACHE_TTL_SECONDS)
    except RedisError as exc:
        logger.warning("cache_set_failed", extra={"key": key, "error_message": str(exc)})


def cache_delete(*keys: str) -> None:
    """Delete *keys*.  Best effort: a failure here never fails the write."""
    if not keys:
        return
    try:
        get_redis().delete(*keys)
    except RedisError as exc:
        logger.warning(
            "cache_delete_failed",
            extra={"keys": list(keys), "error_message": str(exc)},
        )


def invalidate(entity: str) -> None:
    """Delete every cache key derived from *entity*."""
    cache_delete(*CACHE_KEYS_BY_ENTITY[entity])


def read_through(key: str, adapter: TypeAdapter[T], loader: Callable[[], T]) -> T:
    """Serve *key* from cache, or call *loader* and populate the cache.

    Errors raised by *loader* propagate unchanged; nothing is cached and no
    cached value is served in their place.
    """
    cached = cache_get(key, adapter)
    if cached is not None:
        logger.debug("cache_hit", extra={"key": key})
        return cached

    logger.debug("cache_miss", extra={"key": key})
    value = loader()
    cache_set(key, value, adapter)
    return value
