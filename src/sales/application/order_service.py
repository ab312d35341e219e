"""Application service: order creation and line entry.

This is the only place that coordinates several repositories: a customer
lookup to open an order, then order and product lookups to add lines.
Every lookup happens before anything is mutated, so a failed call leaves
the order exactly as it was.
"""

from __future__ import annotations

from sales.domain.exceptions import NotFoundError
from sales.domain.model.order import Order, OrderLine
from sales.domain.repository.customer_repository import CustomerRepository
from sales.domain.repository.order_repository import OrderRepository
from sales.domain.repository.product_repository import ProductRepository


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        currency: str = "USD",
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._currency = currency

    def create_order(self, customer_id: str) -> Order:
        """Open a new, empty order for an existing customer."""
        customer = self._customer_repo.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer not found: '{customer_id}'")

        order = Order.create(customer, self._currency)
        return self._order_repo.save(order)

    def add_line_to_order(self, order_id: str, sku: str, quantity: int) -> Order:
        """Append ``quantity`` units of product ``sku`` to an order.

        Steps:
        1. Resolve the order, then the product (fail if either is missing).
        2. Build the OrderLine, which validates the quantity.
        3. Append (rejected if the product is priced in another currency)
           and save the order again (overwrite by id).
        """
        order = self._order_repo.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order not found: '{order_id}'")

        product = self._product_repo.find_by_id(sku)
        if product is None:
            raise NotFoundError(f"Product not found: '{sku}'")

        line = OrderLine(product=product, quantity=quantity)
        order.add_line(line)
        return self._order_repo.save(order)

    def find_by_id(self, order_id: str) -> Order | None:
        return self._order_repo.find_by_id(order_id)

    def list_all(self) -> list[Order]:
        return self._order_repo.list_all()
