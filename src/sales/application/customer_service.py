"""Application service: customer registration and lookup."""

from __future__ import annotations

from sales.domain.exceptions import ValidationError
from sales.domain.model.customer import Customer
from sales.domain.repository.customer_repository import CustomerRepository


class CustomerService:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def create_customer(self, customer: Customer) -> Customer:
        """Register *customer*; the name must not be blank."""
        if not customer.name or not customer.name.strip():
            raise ValidationError("Customer name is required")
        return self._customer_repo.save(customer)

    def find_by_id(self, customer_id: str) -> Customer | None:
        return self._customer_repo.find_by_id(customer_id)

    def list_all(self) -> list[Customer]:
        return self._customer_repo.list_all()
