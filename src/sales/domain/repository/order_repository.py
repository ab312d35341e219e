"""Abstract repository for the Order aggregate, keyed by order id."""

from __future__ import annotations

from abc import ABC

from sales.domain.model.order import Order
from sales.domain.repository.repository import Repository


class OrderRepository(Repository[Order, str], ABC):
    pass
