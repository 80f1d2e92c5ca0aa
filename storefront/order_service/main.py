# storefront/order_service/main.py
import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from storefront.api import create_order_app
from storefront.data.database import connect_with_retry, create_db_engine, create_tables
from storefront.utils.settings import (
    DATABASE_URL,
    DB_CONNECT_ATTEMPTS,
    HOST,
    ORDER_SERVICE_PORT,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def bootstrap_database(url: str = DATABASE_URL):
    """Connect (with startup retries) and provision tables; exits the process on failure."""
    engine = create_db_engine(url)

    try:
        connect_with_retry(engine)
    except SQLAlchemyError as e:
        logger.critical(f"Could not connect to database after {DB_CONNECT_ATTEMPTS} attempts: {e}")
        raise SystemExit(1)

    try:
        create_tables(engine)
    except SQLAlchemyError as e:
        logger.critical(f"Failed to create tables: {e}")
        raise SystemExit(1)

    return engine


def main():
    engine = bootstrap_database()
    app = create_order_app(engine)
    logger.info(f"Order Service starting on port {ORDER_SERVICE_PORT}...")
    uvicorn.run(app, host=HOST, port=ORDER_SERVICE_PORT)


if __name__ == "__main__":
    main()
