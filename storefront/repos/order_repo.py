# storefront/repos/order_repo.py
from decimal import Decimal
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, user_id: str, total: Decimal, status: str) -> OrderModel:
        order = OrderModel(user_id=user_id, total=total, status=status)
        self.db.add(order)
        self.db.flush()
        return order

    def add_order_item(self, order_id: int, product_id: int, quantity: int) -> OrderItemModel:
        # flush per item: one INSERT each, the first failure stops the rest
        item = OrderItemModel(order_id=order_id, product_id=product_id, quantity=quantity)
        self.db.add(item)
        self.db.flush()
        return item

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def list_orders_by_user(self, user_id: str) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.user_id == user_id)
                .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            ).scalars().all()
        )

    def get_order_items(self, order_id: int) -> List[OrderItemModel]:
        return list(
            self.db.execute(
                select(OrderItemModel)
                .where(OrderItemModel.order_id == order_id)
                .order_by(OrderItemModel.id)
            ).scalars().all()
        )

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
