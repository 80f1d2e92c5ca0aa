# storefront/repos/product_repo.py
from typing import List, Sequence

from storefront.domain.schemas import Product


class ProductRepo:
    """Katalog w pamieci, ustalony przy starcie procesu."""

    def __init__(self, products: Sequence[Product]):
        self._products = tuple(products)

    def list_products(self) -> List[Product]:
        return list(self._products)

    def get_product(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None
