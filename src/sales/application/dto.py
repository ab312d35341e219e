"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry a frozen, display-ready view of an order to the CLI without
exposing the aggregate itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from sales.domain.model.order import Order


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    sku: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$9.90"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    customer_name: str
    lines: list[OrderLineDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_id=order.customer.id,
            customer_name=order.customer.name or "",
            lines=[
                OrderLineDTO(
                    sku=line.product.sku,
                    product_name=line.product.name,
                    quantity=line.quantity,
                    unit_price=str(line.product.unit_price),
                    subtotal=str(line.subtotal),
                )
                for line in order.lines
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
