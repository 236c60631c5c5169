"""Declarative field schema for chirp models.

Fields are declared in the class body with descriptors::

    class Tweet(Base):
        id = Attribute()
        text = Attribute()
        user = ObjectAttribute("User")
        retweeted_status = ObjectAttribute("Tweet")

Each descriptor records a :class:`FieldSpec` in the owning class's schema
(``__fields__``) and installs a ``has_<name>`` predicate next to it. Values are
computed from the instance's raw attributes on first access and memoized for the
lifetime of the instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from chirp.null_object import NULL
from chirp.registry import resolve_type

if TYPE_CHECKING:
    from chirp.base import Base

logger = logging.getLogger(__name__)

PREDICATE_PREFIX = "has_"


class FieldKind(str, Enum):
    """How a field's value is derived from the raw attributes."""

    PLAIN = "plain"
    OBJECT = "object"


@dataclass(frozen=True)
class FieldSpec:
    """Schema entry for one declared field."""

    name: str
    kind: FieldKind = FieldKind.PLAIN
    target: Union[str, type, None] = None
    merge_key: Optional[str] = None

    @property
    def predicate_name(self) -> str:
        return f"{PREDICATE_PREFIX}{self.name}"


def own_schema(owner: type) -> Dict[str, FieldSpec]:
    """Return the schema dict defined on ``owner`` itself.

    Each class holds only the fields declared on it; ``Base.schema()`` merges
    them along the MRO.
    """
    schema = owner.__dict__.get("__fields__")
    if schema is None:
        schema = {}
        setattr(owner, "__fields__", schema)
    return schema


class Predicate:
    """``has_<name>`` accessor: truthiness of the named field."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    def __get__(self, instance: Optional["Base"], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return bool(getattr(instance, self.field_name))

    def __set__(self, instance: "Base", value: Any) -> None:
        raise AttributeError(
            f"{type(instance).__name__}.{PREDICATE_PREFIX}{self.field_name} is read-only"
        )


class Attribute:
    """Read-only accessor for one key of the raw attributes.

    Missing keys read as ``None``.
    """

    def __init__(self) -> None:
        self.name: Optional[str] = None

    def spec(self, name: str) -> FieldSpec:
        return FieldSpec(name=name)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        own_schema(owner)[name] = self.spec(name)
        predicate = f"{PREDICATE_PREFIX}{name}"
        if predicate not in owner.__dict__:
            setattr(owner, predicate, Predicate(name))

    def __get__(self, instance: Optional["Base"], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.memoize(self.name, lambda: self.compute(instance))

    def __set__(self, instance: "Base", value: Any) -> None:
        raise AttributeError(f"{type(instance).__name__}.{self.name} is read-only")

    def __delete__(self, instance: "Base") -> None:
        raise AttributeError(f"{type(instance).__name__}.{self.name} is read-only")

    def compute(self, instance: "Base") -> Any:
        return instance.attrs.get(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class ObjectAttribute(Attribute):
    """Accessor that wraps a nested payload in another model type.

    Args:
        target: Registered type name, or the model class itself.
        merge_key: When given, the parent's other attributes are embedded into
            the nested payload under this key before the child is built.

    An absent nested payload (missing, ``None`` or ``False``) reads as the null
    object.
    """

    def __init__(self, target: Union[str, type], merge_key: Optional[str] = None) -> None:
        super().__init__()
        self.target = target
        self.merge_key = merge_key

    def spec(self, name: str) -> FieldSpec:
        return FieldSpec(name=name, kind=FieldKind.OBJECT, target=self.target, merge_key=self.merge_key)

    def compute(self, instance: "Base") -> Any:
        attrs = instance.attrs
        value = attrs.get(self.name)
        if value is None or value is False:
            logger.debug(
                "%s.%s is absent; substituting the null object", type(instance).__name__, self.name
            )
            return NULL

        cls = resolve_type(self.target)
        if self.merge_key is None:
            return cls(value)

        context = dict(attrs)
        del context[self.name]
        return cls({**value, self.merge_key: context})

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, target={self.target!r}, "
            f"merge_key={self.merge_key!r})"
        )


__all__ = [
    "Attribute",
    "ObjectAttribute",
    "Predicate",
    "FieldKind",
    "FieldSpec",
    "own_schema",
]
