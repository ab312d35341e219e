"""Identity semantics shared by every entity.

Entities are equal when they are of the same type and carry the same
natural identifier; every other attribute is irrelevant to equality.
The identifier (plus any ``immutable_fields``) can be set once, in
``__init__``, and never rebound.
"""

from __future__ import annotations

from typing import Any, ClassVar


class Entity:

    identity_field: ClassVar[str] = "id"
    immutable_fields: ClassVar[tuple[str, ...]] = ()

    @property
    def identity(self) -> Any:
        return getattr(self, self.identity_field)

    def __setattr__(self, name: str, value: Any) -> None:
        locked = name == self.identity_field or name in self.immutable_fields
        if locked and name in self.__dict__:
            raise AttributeError(
                f"{type(self).__name__}.{name} cannot be changed after creation"
            )
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.identity == other.identity  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.identity))
