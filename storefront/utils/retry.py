# storefront/utils/retry.py
from sqlalchemy.exc import SQLAlchemyError
from tenacity import retry, stop_after_attempt, wait_fixed, retry_if_exception_type

from storefront.utils.settings import DB_CONNECT_ATTEMPTS, DB_CONNECT_INTERVAL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def db_connect_retry(
    attempts: int = DB_CONNECT_ATTEMPTS,
    interval: float = DB_CONNECT_INTERVAL_SECONDS,
):
    """Fixed backoff, no jitter: the startup loop waits the same interval every time."""

    def _log_attempt(retry_state):
        logger.warning(
            f"Failed to connect to database (attempt {retry_state.attempt_number}/{attempts}): "
            f"{retry_state.outcome.exception()}"
        )

    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_fixed(interval),
        retry=retry_if_exception_type(SQLAlchemyError),
        before_sleep=_log_attempt,
    )
