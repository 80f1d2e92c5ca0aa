# storefront/api/__init__.py
from typing import Sequence

import redis
from fastapi import FastAPI
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from storefront.api.errors import install_error_handlers
from storefront.api.routers import carts, health, orders
from storefront.api.routers import products as product_routes
from storefront.data.catalog import PRODUCTS
from storefront.data.database import create_session_factory, database_healthy
from storefront.data.kv import redis_healthy
from storefront.domain.schemas import Product
from storefront.repos.product_repo import ProductRepo


def _base_app(title: str, service_name: str) -> FastAPI:
    app = FastAPI(title=title, version="1.0.0")
    app.state.service_name = service_name
    install_error_handlers(app)
    app.include_router(health.router)
    return app


def create_product_app(products: Sequence[Product] = PRODUCTS) -> FastAPI:
    app = _base_app("Product Service", "product-service")
    app.state.product_repo = ProductRepo(products)
    app.state.health_check = lambda: True
    app.include_router(product_routes.router)
    return app


def create_cart_app(client: redis.Redis) -> FastAPI:
    app = _base_app("Cart Service", "cart-service")
    app.state.redis = client
    app.state.health_check = lambda: redis_healthy(client)
    app.include_router(carts.router)
    return app


def create_order_app(engine: Engine, session_factory: sessionmaker | None = None) -> FastAPI:
    app = _base_app("Order Service", "order-service")
    app.state.engine = engine
    app.state.session_factory = session_factory or create_session_factory(engine)
    app.state.health_check = lambda: database_healthy(engine)
    app.include_router(orders.router)
    return app
