from sqlalchemy import Column, Integer, String, DateTime, Numeric
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from storefront.data.database import Base

ORDER_STATUS_PENDING = "pending"


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(255), nullable=False)

    total = Column(Numeric(10, 2), nullable=False)
    status = Column(String(50), nullable=False)  # only "pending" is ever written
    created_at = Column(DateTime, server_default=func.now())

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        passive_deletes=True,
    )

    # created_at comes back from the INSERT itself (RETURNING where supported)
    __mapper_args__ = {"eager_defaults": True}
