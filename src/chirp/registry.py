"""Registry of model types addressable by name.

Object attributes may name their target type as a string (``ObjectAttribute("User")``)
so that models can reference each other regardless of definition order. The name
is resolved here the first time the attribute is read.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from chirp.exceptions import UnknownTypeError

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, type] = {}


def register_type(cls: type, name: Optional[str] = None) -> type:
    """Register ``cls`` under ``name`` (defaults to the class name).

    Registering a different class under a name already in use replaces the
    previous entry.

    Returns:
        The registered class, so the function also works as a decorator.
    """
    key = name or cls.__name__
    previous = _REGISTRY.get(key)
    if previous is not None and previous is not cls:
        logger.warning(
            "Replacing registered type '%s' (%s.%s -> %s.%s)",
            key,
            previous.__module__,
            previous.__qualname__,
            cls.__module__,
            cls.__qualname__,
        )
    _REGISTRY[key] = cls
    logger.debug("Registered type '%s' -> %s.%s", key, cls.__module__, cls.__qualname__)
    return cls


def unregister_type(name: str) -> None:
    """Remove ``name`` from the registry if present."""

    _REGISTRY.pop(name, None)


def resolve_type(target: Union[str, type]) -> type:
    """Return the class for ``target``.

    Args:
        target: A registered type name, or a class which is returned unchanged.

    Raises:
        UnknownTypeError: If ``target`` is a name that has not been registered.
    """
    if isinstance(target, type):
        return target
    try:
        return _REGISTRY[target]
    except KeyError:
        raise UnknownTypeError(target, list_types()) from None


def list_types() -> list[str]:
    """Return the sorted list of registered type names."""

    return sorted(_REGISTRY)


def clear_registry() -> None:
    _REGISTRY.clear()


__all__ = [
    "register_type",
    "unregister_type",
    "resolve_type",
    "list_types",
    "clear_registry",
]
