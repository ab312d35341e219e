"""Composition root — wires concrete repositories into the services.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sales.application.customer_service import CustomerService
from sales.application.order_service import OrderService
from sales.application.product_service import ProductService
from sales.infrastructure.persistence.memory_repository import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Services:
    customers: CustomerService
    products: ProductService
    orders: OrderService


def build_services(currency: str = "USD") -> Services:
    """Create one set of in-memory repositories shared by all services.

    New orders are priced in *currency*.
    """
    customer_repo = InMemoryCustomerRepository()
    product_repo = InMemoryProductRepository()
    order_repo = InMemoryOrderRepository()

    logger.debug("Wiring services over in-memory repositories (currency=%s)", currency)
    return Services(
        customers=CustomerService(customer_repo),
        products=ProductService(product_repo),
        orders=OrderService(order_repo, customer_repo, product_repo, currency),
    )
