"""Redis client singleton (response cache).

``get_redis()`` lazily builds one process-wide client.  Connecting is
deferred to the first command, so an unreachable Redis only shows up as a
``RedisError`` at call time, which the cache layer absorbs.
"""

import redis

from app.core.config import settings

_client: redis.Redis | None = None


def get_redis() -> redis.Redis:
    """Return the singleton Redis client, creating it on first call."""
    global _client
    if _client is None:
        _client = redis.Redis.from_url(
            settings.REDIS_URL,
            socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
            health_check_interval=30,
        )
    return _client


def close_redis() -> None:
    """Close the client's connection pool, if one was created."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
