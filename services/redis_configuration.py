from typing import Optional

from utils.config import get_config


def get_redis_url() -> Optional[str]:
    return get_config("services", "redis_url")


def get_cache_settings() -> dict:
    """
    The ignored upload ids have to be shared between every process serving
    the dashboard, so they live in redis when there is one. Without redis
    they are kept in memory, which is only good enough for a single process.
    """
    url = get_redis_url()
    if url is not None:
        return {
            "default": {
                "BACKEND": "django.core.cache.backends.redis.RedisCache",
                "LOCATION": url,
            }
        }
    return {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "dashboard",
        }
    }
