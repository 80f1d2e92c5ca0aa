import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from storefront.api import create_cart_app, create_order_app, create_product_app
from storefront.data.database import create_session_factory, create_tables


class FakeRedis:
    """In-memory stand-in for the handful of redis.Redis calls the cart uses."""

    def __init__(self):
        self.data = {}
        self.set_calls = []
        self.fail = False

    def _check(self):
        if self.fail:
            raise RedisConnectionError("connection refused")

    def ping(self):
        self._check()
        return True

    def get(self, name):
        self._check()
        return self.data.get(name)

    def set(self, name, value, **kwargs):
        self._check()
        self.set_calls.append((name, kwargs))
        self.data[name] = value
        return True

    def delete(self, *names):
        self._check()
        return sum(1 for n in names if self.data.pop(n, None) is not None)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def product_client():
    return TestClient(create_product_app())


@pytest.fixture
def cart_client(fake_redis):
    return TestClient(create_cart_app(fake_redis))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def order_client(engine, session_factory):
    return TestClient(create_order_app(engine, session_factory))
