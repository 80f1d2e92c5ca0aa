# storefront/services/order_service.py
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.order import ORDER_STATUS_PENDING, OrderModel
from storefront.domain.errors import InternalError, InvalidArgument, NotFound
from storefront.domain.schemas import OrderCreate, OrderItem, OrderOut
from storefront.repos.order_repo import OrderRepo
from storefront.utils.ids import parse_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _to_out(order: OrderModel, items: List[OrderItem]) -> OrderOut:
    return OrderOut(
        id=order.id,
        user_id=order.user_id,
        items=items,
        total=order.total,
        status=order.status,
        created_at=order.created_at,
    )


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Zapis zamowienia i pozycji w jednej transakcji, odczyty bez transakcji jawnej.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)

    def create_order(self, payload: OrderCreate) -> OrderOut:
        """
        Use Case: utworzenie zamowienia.

        1. Walidacja user_id i items
        2. INSERT naglowka (status pending), baza nadaje id i created_at
        3. INSERT kazdej pozycji w kolejnosci wejscia
        4. Pierwszy blad -> rollback calosci, kolejne pozycje nie sa probowane
        5. Commit (bez ponawiania)
        """
        if not payload.user_id or not payload.items:
            raise InvalidArgument("User ID and items are required")

        try:
            order = self.repo.add_order(
                user_id=payload.user_id,
                total=payload.total,
                status=ORDER_STATUS_PENDING,
            )
            for item in payload.items:
                self.repo.add_order_item(order.id, item.product_id, item.quantity)
            self.repo.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to create order for user {payload.user_id}: {e}")
            self.repo.rollback()
            raise InternalError("Failed to create order") from e

        logger.info(
            f"Order {order.id} created for user {payload.user_id} "
            f"with {len(payload.items)} item(s)"
        )

        return _to_out(order, list(payload.items))

    def _items_best_effort(self, order_id: int) -> List[OrderItem]:
        """Listing policy: a failed item query degrades to an empty item list."""
        try:
            rows = self.repo.get_order_items(order_id)
        except SQLAlchemyError as e:
            logger.warning(f"Failed to load items for order {order_id}, returning it without items: {e}")
            # przerwana transakcja blokowalaby kolejne zapytania
            self.repo.rollback()
            return []
        return [OrderItem.model_validate(r) for r in rows]

    def _items_required(self, order_id: int) -> List[OrderItem]:
        """Detail policy: a failed item query fails the whole request."""
        try:
            rows = self.repo.get_order_items(order_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load items for order {order_id}: {e}")
            raise InternalError("Failed to retrieve order items") from e
        return [OrderItem.model_validate(r) for r in rows]

    def list_orders_by_user(self, user_id: str) -> List[OrderOut]:
        try:
            orders = self.repo.list_orders_by_user(user_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list orders for user {user_id}: {e}")
            raise InternalError("Failed to retrieve orders") from e

        # naglowki kopiowane przed zapytaniami o pozycje, rollback wygasza obiekty ORM
        result = [_to_out(order, []) for order in orders]
        for out in result:
            out.items = self._items_best_effort(out.id)
        return result

    def get_order_detail(self, raw_order_id: str) -> OrderOut:
        order_id = parse_id(raw_order_id, "Invalid order ID")

        try:
            order = self.repo.get_order(order_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to retrieve order {order_id}: {e}")
            raise InternalError("Failed to retrieve order") from e

        if order is None:
            raise NotFound("Order not found")

        return _to_out(order, self._items_required(order_id))
