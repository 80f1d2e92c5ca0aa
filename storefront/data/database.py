# storefront/data/database.py
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from storefront.utils.retry import db_connect_retry
from storefront.utils.settings import DB_CONNECT_ATTEMPTS, DB_CONNECT_INTERVAL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def create_db_engine(url: str, **kwargs) -> Engine:
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    # expire_on_commit=False: handlers read ids/timestamps after commit without another round trip
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def ping(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def database_healthy(engine: Engine) -> bool:
    try:
        ping(engine)
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        return False
    return True


def connect_with_retry(
    engine: Engine,
    attempts: int = DB_CONNECT_ATTEMPTS,
    interval: float = DB_CONNECT_INTERVAL_SECONDS,
) -> None:
    """Ping the database until it answers; re-raises the last error once attempts run out."""

    @db_connect_retry(attempts=attempts, interval=interval)
    def _ping():
        ping(engine)

    _ping()
    logger.info("Connected to PostgreSQL successfully")


def create_tables(engine: Engine) -> None:
    # modele musza byc zaimportowane zanim create_all zobaczy tabele
    import storefront.data.models  # noqa: F401

    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")
