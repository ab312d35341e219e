"""Product entity.

Products live independently of orders. Order lines hold a reference to
the product rather than a copy of its price, so a price change here is
visible in every order that contains the product.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from sales.domain.exceptions import ValidationError
from sales.domain.model.entity import Entity
from sales.domain.model.value_objects import Money


@dataclass(eq=False)
class Product(Entity):
    """A catalog item keyed by its SKU."""

    identity_field: ClassVar[str] = "sku"

    sku: str
    name: str
    unit_price: Money

    def update_price(self, new_price: Money) -> None:
        """Change the unit price.

        Existing orders are NOT insulated from this: their totals are
        recomputed from the current price. The currency cannot change,
        since orders already holding the product are priced in it.
        """
        if new_price.is_negative:
            raise ValidationError(f"Product price cannot be negative, got {new_price}")
        if new_price.currency != self.unit_price.currency:
            raise ValidationError(
                f"Cannot reprice {self.sku} from {self.unit_price.currency} "
                f"to {new_price.currency}"
            )
        self.unit_price = new_price
