# storefront/api/routers/carts.py
import redis
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_redis
from storefront.api.errors import status_for
from storefront.domain.errors import ServiceError
from storefront.domain.schemas import Cart, CartItem, MessageOut, RemoveItemIn
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(client: redis.Redis = Depends(get_redis)):
    return CartService(client)


@router.get("/{user_id}", response_model=Cart)
def get_cart(user_id: str, svc: CartService = Depends(get_service)):
    try:
        return svc.get_cart(user_id)
    except ServiceError as e:
        raise HTTPException(status_code=status_for(e), detail=e.message)


@router.post("/{user_id}/add", response_model=Cart, status_code=201)
def add_item(user_id: str, payload: CartItem, svc: CartService = Depends(get_service)):
    try:
        return svc.add_item(user_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=status_for(e), detail=e.message)


@router.post("/{user_id}/remove", response_model=Cart)
def remove_item(user_id: str, payload: RemoveItemIn, svc: CartService = Depends(get_service)):
    try:
        return svc.remove_item(user_id, payload.product_id)
    except ServiceError as e:
        raise HTTPException(status_code=status_for(e), detail=e.message)


@router.delete("/{user_id}/clear", response_model=MessageOut)
def clear_cart(user_id: str, svc: CartService = Depends(get_service)):
    try:
        svc.clear_cart(user_id)
    except ServiceError as e:
        raise HTTPException(status_code=status_for(e), detail=e.message)
    return MessageOut(message="Cart cleared successfully")
