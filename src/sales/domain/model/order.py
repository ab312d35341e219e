"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines. Lines are appended
one at a time and never removed or edited; the total is always derived
from the lines and the current product prices.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar

from sales.domain.exceptions import ValidationError
from sales.domain.model.customer import Customer
from sales.domain.model.entity import Entity
from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderLine:
    """A product and how many units of it were ordered.

    ``product`` is a shared reference, not a snapshot: ``subtotal`` follows
    the product's current price.
    """

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise ValidationError(
                f"Quantity must be positive, got {self.quantity}"
            )

    @property
    def subtotal(self) -> Money:
        return self.product.unit_price * self.quantity


@dataclass(eq=False)
class Order(Entity):
    """Aggregate root for sales orders.

    Use ``Order.create()`` for new orders; it generates the id and stamps
    the creation time. ``id``, ``customer``, ``created_at`` and ``currency``
    are fixed once the order exists; every line must be priced in
    ``currency`` so the total can always be summed.
    """

    identity_field: ClassVar[str] = "id"
    immutable_fields: ClassVar[tuple[str, ...]] = ("customer", "created_at", "currency")

    id: str
    customer: Customer
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    currency: str = "USD"
    _lines: list[OrderLine] = field(default_factory=list, init=False, repr=False)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(customer: Customer, currency: str = "USD") -> Order:
        """Start a new, empty order for *customer*, priced in *currency*."""
        return Order(id=str(uuid.uuid4()), customer=customer, currency=currency)

    # --- Mutation -------------------------------------------------------------

    def add_line(self, line: OrderLine) -> None:
        line_currency = line.product.unit_price.currency
        if line_currency != self.currency:
            raise ValidationError(
                f"Cannot add {line.product.sku} priced in {line_currency} "
                f"to an order in {self.currency}"
            )
        self._lines.append(line)

    # --- Computed properties --------------------------------------------------

    @property
    def lines(self) -> tuple[OrderLine, ...]:
        """Read-only snapshot of the lines, in the order they were added."""
        return tuple(self._lines)

    @property
    def total(self) -> Money:
        result = Money.zero(self.currency)
        for line in self._lines:
            result = result + line.subtotal
        return result
