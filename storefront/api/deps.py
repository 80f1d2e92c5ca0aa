# storefront/api/deps.py
from typing import Iterator

import redis
from fastapi import Request
from sqlalchemy.orm import Session

from storefront.repos.product_repo import ProductRepo


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_redis(request: Request) -> redis.Redis:
    return request.app.state.redis


def get_product_repo(request: Request) -> ProductRepo:
    return request.app.state.product_repo
