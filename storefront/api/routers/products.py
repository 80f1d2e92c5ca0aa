# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_product_repo
from storefront.api.errors import status_for
from storefront.domain.errors import ServiceError
from storefront.domain.schemas import Product
from storefront.repos.product_repo import ProductRepo
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(repo: ProductRepo = Depends(get_product_repo)):
    return ProductService(repo)


@router.get("", response_model=List[Product])
def list_products(svc: ProductService = Depends(get_service)):
    return svc.list_products()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: str, svc: ProductService = Depends(get_service)):
    # id jako str: nienumeryczne id -> 400 z naszym komunikatem, nie walidacja FastAPI
    try:
        return svc.get_product(product_id)
    except ServiceError as e:
        raise HTTPException(status_code=status_for(e), detail=e.message)
