# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_db
from storefront.api.errors import status_for
from storefront.domain.errors import ServiceError
from storefront.domain.schemas import OrderCreate, OrderOut
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session = Depends(get_db)):
    return OrderService(db)


@router.post("", response_model=OrderOut, status_code=201)
def create_order(payload: OrderCreate, svc: OrderService = Depends(get_service)):
    """
    Tworzy zamowienie z pozycjami w jednej transakcji.
    """
    try:
        return svc.create_order(payload)
    except ServiceError as e:
        raise HTTPException(status_code=status_for(e), detail=e.message)


@router.get("/detail/{order_id}", response_model=OrderOut)
def get_order_detail(order_id: str, svc: OrderService = Depends(get_service)):
    try:
        return svc.get_order_detail(order_id)
    except ServiceError as e:
        raise HTTPException(status_code=status_for(e), detail=e.message)


@router.get("/{user_id}", response_model=List[OrderOut])
def list_user_orders(user_id: str, svc: OrderService = Depends(get_service)):
    """
    Zamowienia uzytkownika, od najnowszego.
    """
    try:
        return svc.list_orders_by_user(user_id)
    except ServiceError as e:
        raise HTTPException(status_code=status_for(e), detail=e.message)
