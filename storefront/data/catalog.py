# storefront/data/catalog.py
from decimal import Decimal

from storefront.domain.schemas import Product

PRODUCTS = (
    Product(id=1, name="Laptop", description="High-performance laptop", price=Decimal("999.99"), stock=10),
    Product(id=2, name="Mouse", description="Wireless mouse", price=Decimal("29.99"), stock=50),
    Product(id=3, name="Keyboard", description="Mechanical keyboard", price=Decimal("79.99"), stock=30),
    Product(id=4, name="Monitor", description="4K Monitor", price=Decimal("399.99"), stock=15),
    Product(id=5, name="Headphones", description="Noise-cancelling headphones", price=Decimal("199.99"), stock=25),
)
