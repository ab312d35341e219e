"""Generic repository contract.

Defined in the domain layer so services never depend on a storage
backend. Any store (in-memory, file, SQL, remote) that honours these four
operations can be injected into the services unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert or overwrite *entity* under its natural key and return it."""

    @abstractmethod
    def find_by_id(self, entity_id: ID) -> T | None:
        """Return the entity stored under *entity_id*, or None."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return every stored entity in insertion order."""

    @abstractmethod
    def delete_by_id(self, entity_id: ID) -> None:
        """Remove the entity under *entity_id*; do nothing if it is absent."""
