"""In-memory implementations of the repository contracts.

Everything lives in an insertion-ordered dict keyed by the entity's
natural identifier. No file I/O and no locking: one caller at a time.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from sales.domain.model.customer import Customer
from sales.domain.model.entity import Entity
from sales.domain.model.order import Order
from sales.domain.model.product import Product
from sales.domain.repository.customer_repository import CustomerRepository
from sales.domain.repository.order_repository import OrderRepository
from sales.domain.repository.product_repository import ProductRepository
from sales.domain.repository.repository import Repository

E = TypeVar("E", bound=Entity)
ID = TypeVar("ID")


class InMemoryRepository(Repository[E, ID]):

    def __init__(self, entities: Iterable[E] | None = None) -> None:
        self._store: dict[ID, E] = {}
        for entity in entities or []:
            self.save(entity)

    def save(self, entity: E) -> E:
        # Re-saving an existing key keeps its original position.
        self._store[entity.identity] = entity
        return entity

    def find_by_id(self, entity_id: ID) -> E | None:
        return self._store.get(entity_id)

    def list_all(self) -> list[E]:
        return list(self._store.values())

    def delete_by_id(self, entity_id: ID) -> None:
        self._store.pop(entity_id, None)

    def __len__(self) -> int:
        return len(self._store)


class InMemoryCustomerRepository(InMemoryRepository[Customer, str], CustomerRepository):
    pass


class InMemoryProductRepository(InMemoryRepository[Product, str], ProductRepository):
    pass


class InMemoryOrderRepository(InMemoryRepository[Order, str], OrderRepository):
    pass
