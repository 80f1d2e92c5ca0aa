# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PRODUCT_SERVICE_PORT = int(os.getenv("PRODUCT_SERVICE_PORT", 8001))
CART_SERVICE_PORT = int(os.getenv("CART_SERVICE_PORT", 8002))
ORDER_SERVICE_PORT = int(os.getenv("ORDER_SERVICE_PORT", 8003))

REDIS_ADDR = os.getenv("REDIS_ADDR", "localhost:6379")
REDIS_DB = int(os.getenv("REDIS_DB", 0))
REDIS_URL = os.getenv("REDIS_URL", f"redis://{REDIS_ADDR}/{REDIS_DB}")

DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", 5432))
DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "postgres")
DB_NAME = os.getenv("DB_NAME", "orders")
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg2://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
DB_CONNECT_ATTEMPTS = int(os.getenv("DB_CONNECT_ATTEMPTS", 10))
DB_CONNECT_INTERVAL_SECONDS = float(os.getenv("DB_CONNECT_INTERVAL_SECONDS", 3))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
