"""Abstract repository for the Product entity, keyed by SKU."""

from __future__ import annotations

from abc import ABC

from sales.domain.model.product import Product
from sales.domain.repository.repository import Repository


class ProductRepository(Repository[Product, str], ABC):
    pass
