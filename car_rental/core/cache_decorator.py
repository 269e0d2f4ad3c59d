import functools
import logging
from typing import Any, Callable, Optional
from fastapi.encoders import jsonable_encoder
from .redis_client import redis_client
from .config import settings

logger = logging.getLogger(__name__)

KEY_NAMESPACE = "car_rental"

def cache_key(key_prefix: str, resource_id: Any) -> str:
    return f"{KEY_NAMESPACE}:{key_prefix}:{resource_id}"

def cache_enabled() -> bool:
    return settings.CACHE_ENABLED and redis_client.is_ready()

def cache(
    key_prefix: str,
    ttl: Optional[int] = None,
    resource_id_param: str = "id"
) -> Callable:
    """
    Read-through cache decorator for GET endpoints.

    Args:
        key_prefix: Prefix for cache key (e.g., "vehicle")
        ttl: Time to live in seconds (uses default from settings if None)
        resource_id_param: Name of the parameter to use as resource ID

    Usage:
        @cache(key_prefix="vehicle", ttl=300, resource_id_param="vehicle_id")
        async def get_vehicle(vehicle_id: int):
            # This will be cached as "car_rental:vehicle:{vehicle_id}"
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            # Skip caching if disabled or redis is unavailable
            if not cache_enabled():
                return await func(*args, **kwargs)

            resource_id = kwargs.get(resource_id_param)
            if resource_id is None:
                logger.warning(f"Cache key parameter '{resource_id_param}' not found in {func.__name__}")
                return await func(*args, **kwargs)

            key = cache_key(key_prefix, resource_id)

            cached_result = await redis_client.get(key)
            if cached_result is not None:
                logger.debug(f"Cache HIT for key: {key}")
                return cached_result

            result = await func(*args, **kwargs)

            if result is not None:
                cache_ttl = ttl or settings.DEFAULT_CACHE_TTL
                await redis_client.set(key, jsonable_encoder(result), cache_ttl)
                logger.debug(f"Cache SET for key: {key} (TTL: {cache_ttl}s)")

            return result

        return wrapper
    return decorator

def cache_vehicle(ttl: Optional[int] = None):
    """Specialized cache decorator for single-vehicle reads."""
    cache_ttl = ttl or settings.VEHICLE_TTL
    return cache("vehicle", cache_ttl, "vehicle_id")

async def invalidate_vehicle_cache(vehicle_id: Any) -> None:
    """
    Drop the cached copy of a vehicle.
    Use this when vehicle data is updated or deleted.
    """
    if not cache_enabled():
        return
    await redis_client.delete(cache_key("vehicle", vehicle_id))
    logger.info(f"Invalidated cache for vehicle: {vehicle_id}")
