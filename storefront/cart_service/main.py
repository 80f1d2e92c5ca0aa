# storefront/cart_service/main.py
import uvicorn
from redis.exceptions import RedisError

from storefront.api import create_cart_app
from storefront.data.kv import create_redis_client
from storefront.utils.settings import HOST, CART_SERVICE_PORT, REDIS_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def main():
    client = create_redis_client(REDIS_URL)

    # jedna proba przy starcie, bez ponawiania
    try:
        client.ping()
    except RedisError as e:
        logger.critical(f"Failed to connect to Redis: {e}")
        raise SystemExit(1)
    logger.info("Connected to Redis successfully")

    app = create_cart_app(client)
    logger.info(f"Cart Service starting on port {CART_SERVICE_PORT}...")
    uvicorn.run(app, host=HOST, port=CART_SERVICE_PORT)


if __name__ == "__main__":
    main()
