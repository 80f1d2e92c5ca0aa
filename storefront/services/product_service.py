# storefront/services/product_service.py
from typing import List

from storefront.domain.errors import NotFound
from storefront.domain.schemas import Product
from storefront.repos.product_repo import ProductRepo
from storefront.utils.ids import parse_id


class ProductService:
    def __init__(self, repo: ProductRepo):
        self.repo = repo

    def list_products(self) -> List[Product]:
        return self.repo.list_products()

    def get_product(self, raw_id: str) -> Product:
        product_id = parse_id(raw_id, "Invalid product ID")

        product = self.repo.get_product(product_id)
        if product is None:
            raise NotFound("Product not found")
        return product
