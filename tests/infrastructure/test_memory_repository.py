"""Contract tests for the in-memory repositories."""

import pytest

from sales.domain.model.customer import Customer
from sales.domain.model.order import Order
from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money
from sales.domain.repository.customer_repository import CustomerRepository
from sales.domain.repository.order_repository import OrderRepository
from sales.domain.repository.product_repository import ProductRepository
from sales.domain.repository.repository import Repository
from sales.infrastructure.persistence.memory_repository import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)


class TestRepositoryContract:

    def test_save_returns_entity(self):
        repo = InMemoryCustomerRepository()
        customer = Customer("cli-001", "Ana")
        assert repo.save(customer) is customer

    def test_find_by_id(self):
        repo = InMemoryCustomerRepository()
        repo.save(Customer("cli-001", "Ana"))
        found = repo.find_by_id("cli-001")
        assert found is not None
        assert found.name == "Ana"

    def test_find_missing_returns_none(self):
        assert InMemoryCustomerRepository().find_by_id("nope") is None

    def test_list_all_empty(self):
        assert InMemoryProductRepository().list_all() == []

    def test_list_all_in_insertion_order(self):
        repo = InMemoryCustomerRepository()
        for cid in ["c", "a", "b"]:
            repo.save(Customer(cid, cid.upper()))
        assert [c.id for c in repo.list_all()] == ["c", "a", "b"]

    def test_saving_same_key_twice_keeps_one_entry_with_latest_values(self):
        repo = InMemoryCustomerRepository()
        repo.save(Customer("cli-001", "Ana"))
        repo.save(Customer("cli-002", "Bia"))
        repo.save(Customer("cli-001", "Ana Maria"))

        everyone = repo.list_all()
        assert [c.id for c in everyone] == ["cli-001", "cli-002"]
        assert everyone[0].name == "Ana Maria"

    def test_list_all_returns_a_copy(self):
        repo = InMemoryCustomerRepository([Customer("cli-001", "Ana")])
        repo.list_all().clear()
        assert len(repo.list_all()) == 1

    def test_delete_by_id(self):
        repo = InMemoryProductRepository([Product("sku-001", "Cafeteira", Money.of("1"))])
        repo.delete_by_id("sku-001")
        assert repo.find_by_id("sku-001") is None
        assert repo.list_all() == []

    def test_delete_absent_key_is_noop(self):
        repo = InMemoryProductRepository([Product("sku-001", "Cafeteira", Money.of("1"))])
        repo.delete_by_id("sku-404")
        repo.delete_by_id("sku-404")
        assert len(repo) == 1

    def test_products_keyed_by_sku(self):
        repo = InMemoryProductRepository()
        repo.save(Product("sku-001", "Cafeteira", Money.of("199.90")))
        assert repo.find_by_id("sku-001") is not None

    def test_orders_keyed_by_id(self):
        repo = InMemoryOrderRepository()
        order = repo.save(Order.create(Customer("cli-001", "Ana")))
        assert repo.find_by_id(order.id) is order


@pytest.mark.parametrize(
    ("repo_cls", "contract"),
    [
        (InMemoryCustomerRepository, CustomerRepository),
        (InMemoryProductRepository, ProductRepository),
        (InMemoryOrderRepository, OrderRepository),
    ],
)
def test_implements_typed_contract(repo_cls, contract):
    repo = repo_cls()
    assert isinstance(repo, contract)
    assert isinstance(repo, Repository)


def test_contract_cannot_be_instantiated():
    with pytest.raises(TypeError):
        CustomerRepository()  # type: ignore[abstract]
