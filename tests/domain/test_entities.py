"""Unit tests for identity-based equality of Customer and Product."""

import pytest

from sales.domain.exceptions import ValidationError
from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money


class TestCustomerIdentity:

    def test_equal_when_ids_match(self):
        a = Customer(id="cli-001", name="Ana", email="ana@example.com")
        b = Customer(id="cli-001", name="Someone else", email=None)
        assert a == b
        assert hash(a) == hash(b)

    def test_different_ids_not_equal(self):
        assert Customer("cli-001", "Ana") != Customer("cli-002", "Ana")

    def test_usable_in_sets(self):
        customers = {Customer("cli-001", "Ana"), Customer("cli-001", "Bia")}
        assert len(customers) == 1

    def test_name_and_email_are_mutable(self):
        c = Customer("cli-001", "Ana")
        c.name = "Ana Maria"
        c.email = "ana@example.com"
        assert c.name == "Ana Maria"
        assert c.email == "ana@example.com"

    def test_id_cannot_be_rebound(self):
        c = Customer("cli-001", "Ana")
        with pytest.raises(AttributeError, match="cannot be changed"):
            c.id = "cli-002"


class TestProductIdentity:

    def test_equal_when_skus_match(self):
        a = Product(sku="sku-001", name="Cafeteira", unit_price=Money.of("199.90"))
        b = Product(sku="sku-001", name="Renamed", unit_price=Money.of("1"))
        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal_to_customer_with_same_key(self):
        assert Product("x", "X", Money.of("1")) != Customer("x", "X")

    def test_sku_cannot_be_rebound(self):
        p = Product("sku-001", "Cafeteira", Money.of("199.90"))
        with pytest.raises(AttributeError):
            p.sku = "sku-999"


class TestProductUpdatePrice:

    def test_update_price(self):
        p = Product("sku-001", "Cafeteira", Money.of("199.90"))
        p.update_price(Money.of("150.00"))
        assert p.unit_price == Money.of("150.00")

    def test_zero_price_allowed(self):
        p = Product("sku-001", "Cafeteira", Money.of("199.90"))
        p.update_price(Money.zero())
        assert p.unit_price == Money.zero()

    def test_negative_price_rejected(self):
        p = Product("sku-001", "Cafeteira", Money.of("199.90"))
        with pytest.raises(ValidationError, match="cannot be negative"):
            p.update_price(Money.of("-0.01"))
        assert p.unit_price == Money.of("199.90")

    def test_currency_change_rejected(self):
        p = Product("sku-001", "Cafeteira", Money.of("199.90"))
        with pytest.raises(ValidationError, match="from USD to EUR"):
            p.update_price(Money.of("180.00", "EUR"))
        assert p.unit_price == Money.of("199.90")
