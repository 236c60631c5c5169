"""Base class for read-only models backed by a decoded API payload.

A model keeps the raw ``dict`` it was built from and exposes declared fields as
lazily computed, memoized attributes::

    class User(Base):
        screen_name = Attribute()
        status = ObjectAttribute("Tweet", merge_key="user")

    user = User({"screen_name": "sferik", "status": {"text": "hi"}})
    user.screen_name          # "sferik"
    user.has_status           # True
    user.status.user          # {"screen_name": "sferik"}
    user["no_such_field"]     # None
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, TypeVar

from chirp.attributes import (
    PREDICATE_PREFIX,
    Attribute,
    FieldSpec,
    ObjectAttribute,
    own_schema,
)
from chirp.config import RegistryConfig, get_config
from chirp.exceptions import ConfigError
from chirp.null_object import is_null
from chirp.registry import register_type

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="Base")


def _registry_config() -> RegistryConfig:
    try:
        return get_config().registry
    except ConfigError as exc:
        logger.warning("Could not load configuration (%s); using default registry settings", exc)
        return RegistryConfig()


class Base:
    """Read-only wrapper around a mapping of raw attributes.

    Args:
        attrs: Raw attributes. ``None`` becomes an empty dict; any other mapping
            is stored as is, without copying.

    Subclasses are registered in :mod:`chirp.registry` under their class name
    unless ``registry.auto_register`` is disabled in the configuration. The
    class keywords ``register`` and ``name`` override this per class::

        class Place(Base, name="Geo"): ...
        class Scratch(Base, register=False): ...
    """

    __fields__: ClassVar[Dict[str, FieldSpec]] = {}

    is_null: ClassVar[bool] = False

    # Item access does not make a model a sequence.
    __iter__ = None

    def __init_subclass__(
        cls, register: Optional[bool] = None, name: Optional[str] = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        own_schema(cls)
        if register is None:
            register = _registry_config().auto_register
        if register:
            register_type(cls, name)

    def __init__(self, attrs: Optional[Dict[str, Any]] = None) -> None:
        self._attrs: Dict[str, Any] = {} if attrs is None else attrs
        self._memo: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Field declaration
    # ------------------------------------------------------------------
    @classmethod
    def attr_reader(cls, *names: str) -> None:
        """Declare plain fields after the class body.

        Equivalent to writing ``name = Attribute()`` in the class body for each
        name.
        """
        for name in names:
            cls._declare(name, Attribute())

    @classmethod
    def object_attr_reader(
        cls, target: Any, key: str, merge_key: Optional[str] = None
    ) -> None:
        """Declare a field that wraps ``attrs[key]`` in the ``target`` type.

        Args:
            target: Registered type name or model class.
            key: Field name, also the key of the nested payload.
            merge_key: Key under which the remaining attributes are embedded
                into the nested payload.
        """
        cls._declare(key, ObjectAttribute(target, merge_key))

    @classmethod
    def _declare(cls, name: str, descriptor: Attribute) -> None:
        setattr(cls, name, descriptor)
        descriptor.__set_name__(cls, name)

    @classmethod
    def schema(cls) -> Mapping[str, FieldSpec]:
        """Return a read-only view of the declared fields, inherited ones included."""
        return MappingProxyType(cls._declared_fields())

    @classmethod
    def _declared_fields(cls) -> Dict[str, FieldSpec]:
        # Includes fields declared on a parent after this class was created.
        fields: Dict[str, FieldSpec] = {}
        for klass in reversed(cls.__mro__):
            fields.update(klass.__dict__.get("__fields__", {}))
        return fields

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_response(cls: type[B], response: Any = None) -> B:
        """Construct a model from a response's ``body``.

        Args:
            response: Object with a ``body`` attribute, or a mapping with a
                ``"body"`` key. A missing response or body gives an empty model.
        """
        if response is None:
            body = None
        elif isinstance(response, Mapping):
            body = response.get("body")
        else:
            body = getattr(response, "body", None)
        return cls(body)

    # ------------------------------------------------------------------
    # Raw attributes
    # ------------------------------------------------------------------
    @property
    def attrs(self) -> Dict[str, Any]:
        """The raw attributes this model was built from."""
        return self._attrs

    def to_dict(self) -> Dict[str, Any]:
        return self._attrs

    def delete(self, key: str) -> Any:
        """Remove ``key`` from the raw attributes and return its value (or None)."""
        return self._attrs.pop(key, None)

    def update(self, *args: Any, **kwargs: Any) -> None:
        """Update the raw attributes in place, like ``dict.update``.

        Fields that were already read keep their memoized value.
        """
        self._attrs.update(*args, **kwargs)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def memoize(self, key: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, computing and caching it on first use.

        The cache is keyed on presence, so ``None``, ``False`` and other falsy
        results are cached like any other value.
        """
        if key in self._memo:
            return self._memo[key]
        result = compute()
        self._memo[key] = result
        return result

    @classmethod
    def _has_accessor(cls, name: str) -> bool:
        fields = cls._declared_fields()
        if name in fields:
            return True
        return name.startswith(PREDICATE_PREFIX) and name[len(PREDICATE_PREFIX):] in fields

    def __getitem__(self, name: str) -> Any:
        """Read a declared field (or its ``has_`` predicate) by name.

        Names that are not declared fields return ``None``.
        """
        if not isinstance(name, str) or not self._has_accessor(name):
            logger.debug("%s has no field %r", type(self).__name__, name)
            return None
        return getattr(self, name)

    def get(self, name: str, default: Any = None) -> Any:
        """Like ``self[name]``, returning ``default`` for undeclared names."""
        if not isinstance(name, str) or not self._has_accessor(name):
            return default
        return getattr(self, name)

    # ------------------------------------------------------------------
    # Equality helpers for subclasses
    # ------------------------------------------------------------------
    def _attr_equal(self, name: str, other: Any) -> bool:
        """True if ``other`` is the same type and has an equal, present ``name``."""
        if type(self) is not type(other):
            return False
        theirs = getattr(other, name)
        return not is_null(theirs) and getattr(self, name) == theirs

    def _attrs_equal(self, other: Any) -> bool:
        """True if ``other`` is the same type with equal, non-empty raw attributes."""
        return type(self) is type(other) and bool(other.attrs) and self.attrs == other.attrs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attrs!r})"


__all__ = ["Base"]
