# storefront/product_service/main.py
import uvicorn

from storefront.api import create_product_app
from storefront.utils.settings import HOST, PRODUCT_SERVICE_PORT
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def main():
    app = create_product_app()
    logger.info(f"Product Service starting on port {PRODUCT_SERVICE_PORT}...")
    uvicorn.run(app, host=HOST, port=PRODUCT_SERVICE_PORT)


if __name__ == "__main__":
    main()
