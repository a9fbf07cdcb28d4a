# nextmove/core/redis_client.py
"""
Async Redis connection and cache helpers.

Every helper fails open: when Redis is not configured or unreachable the
caller simply sees a cache miss.
"""
import logging
from typing import Optional

import redis.asyncio as redis

from nextmove.core.config import settings

log = logging.getLogger(__name__)

# Global Redis connection pool
_redis_pool: Optional[redis.Redis] = None


async def get_redis() -> Optional[redis.Redis]:
    """Get or create async Redis connection. None when caching is disabled."""
    global _redis_pool
    if _redis_pool is None and settings.REDIS_URL:
        try:
            _redis_pool = redis.from_url(
                settings.REDIS_URL,
                encoding="utf-8",
                decode_responses=True
            )
            await _redis_pool.ping()
            log.info("[Redis] Connected successfully")
        except Exception as e:
            log.warning(f"[Redis] Connection failed: {e}. Caching disabled.")
            _redis_pool = None
    return _redis_pool


async def close_redis():
    """Close Redis connection on shutdown."""
    global _redis_pool
    if _redis_pool:
        await _redis_pool.aclose()
        _redis_pool = None
        log.info("[Redis] Connection closed")


async def cache_get(key: str) -> Optional[str]:
    """Get value from cache."""
    r = await get_redis()
    if r:
        try:
            return await r.get(key)
        except Exception as e:
            log.warning(f"[Redis] Cache get failed: {e}")
    return None


async def cache_set(key: str, value: str, ttl_seconds: int = 300) -> bool:
    """Set value in cache with TTL."""
    r = await get_redis()
    if r:
        try:
            await r.setex(key, ttl_seconds, value)
            return True
        except Exception as e:
            log.warning(f"[Redis] Cache set failed: {e}")
    return False


async def cache_delete(key: str) -> int:
    """Delete a single key."""
    r = await get_redis()
    if r:
        try:
            return await r.delete(key)
        except Exception as e:
            log.warning(f"[Redis] Cache delete failed: {e}")
    return 0


async def redis_health() -> dict:
    """Check Redis health status."""
    r = await get_redis()
    if r:
        try:
            await r.ping()
            info = await r.info("memory")
            return {
                "status": "ok",
                "message": "Redis connected",
                "used_memory": info.get("used_memory_human", "unknown")
            }
        except Exception as e:
            return {"status": "error", "message": str(e)}
    return {"status": "disabled", "message": "Redis not configured"}
