"""Abstract repository for the Customer entity, keyed by customer id."""

from __future__ import annotations

from abc import ABC

from sales.domain.model.customer import Customer
from sales.domain.repository.repository import Repository


class CustomerRepository(Repository[Customer, str], ABC):
    pass
