# storefront/data/kv.py
import redis
from redis.exceptions import RedisError

from storefront.utils.settings import REDIS_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_redis_client(url: str | None = None) -> redis.Redis:
    return redis.Redis.from_url(
        url or REDIS_URL,
        decode_responses=True,
    )


def redis_healthy(client: redis.Redis) -> bool:
    try:
        client.ping()
    except RedisError as e:
        logger.warning(f"Redis health check failed: {e}")
        return False
    return True
