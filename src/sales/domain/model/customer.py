"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from sales.domain.model.entity import Entity


@dataclass(eq=False)
class Customer(Entity):
    """A buyer, identified by a caller-supplied opaque ``id``.

    ``name`` and ``email`` may change over time; the id may not.  A blank
    name is rejected by ``CustomerService.create_customer``, not here, so
    the repository can hold whatever it is given.
    """

    identity_field: ClassVar[str] = "id"

    id: str
    name: str | None
    email: str | None = None
