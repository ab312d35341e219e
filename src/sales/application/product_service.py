"""Application service: product catalog."""

from __future__ import annotations

from sales.domain.exceptions import NotFoundError, ValidationError
from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money
from sales.domain.repository.product_repository import ProductRepository


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def create_product(self, product: Product) -> Product:
        """Add *product* to the catalog. A price of zero is allowed."""
        if product.unit_price.is_negative:
            raise ValidationError(
                f"Product price cannot be negative, got {product.unit_price}"
            )
        return self._product_repo.save(product)

    def update_price(self, sku: str, new_price: Money) -> Product:
        """Change a product's price.

        Orders that already contain the product pick up the new price,
        since their totals are computed from the live product.
        """
        product = self._product_repo.find_by_id(sku)
        if product is None:
            raise NotFoundError(f"Product not found: '{sku}'")

        product.update_price(new_price)
        return self._product_repo.save(product)

    def find_by_sku(self, sku: str) -> Product | None:
        return self._product_repo.find_by_id(sku)

    def list_all(self) -> list[Product]:
        return self._product_repo.list_all()
