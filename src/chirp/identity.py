"""Models that carry an ``id`` and compare by it."""

from __future__ import annotations

from typing import Any, Dict, Optional

from chirp.attributes import Attribute
from chirp.base import Base
from chirp.exceptions import MissingIdentifierError


class Identity(Base, register=True):
    """Model identified by its ``id`` field.

    Two identities of the same type are equal when their ids match, or, failing
    that, when their raw attributes match.

    Raises:
        MissingIdentifierError: If ``attrs`` has no ``id``.
    """

    id = Attribute()

    def __init__(self, attrs: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(attrs)
        if self._attrs.get("id") is None:
            raise MissingIdentifierError(f"{type(self).__name__} attributes must have an 'id' key")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base):
            return NotImplemented
        return self._attr_equal("id", other) or self._attrs_equal(other)

    def __hash__(self) -> int:
        return hash(self.id)


__all__ = ["Identity"]
