"""Inert stand-in for nested objects that are absent from a payload."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class NullObject:
    """Falsy, empty value that absorbs attribute access, indexing and calls.

    Every ``NullObject()`` call returns the same shared instance, so callers can
    compare with ``is`` as well as ``==``. The null object compares equal to
    ``None`` and to itself.

    Examples:
        >>> null = NullObject()
        >>> bool(null), len(null), str(null)
        (False, 0, '')
        >>> null.user.screen_name is null
        True
    """

    __slots__ = ()

    _instance: Optional["NullObject"] = None

    is_null = True

    def __new__(cls) -> "NullObject":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __getattr__(self, name: str) -> Any:
        # Protocol probes (copy, pickle, pytest, numpy) must see a plain object.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return self

    def __call__(self, *args: Any, **kwargs: Any) -> "NullObject":
        return self

    def __getitem__(self, key: Any) -> "NullObject":
        return self

    def __contains__(self, item: Any) -> bool:
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""

    def __int__(self) -> int:
        return 0

    def __float__(self) -> float:
        return 0.0

    def __eq__(self, other: object) -> bool:
        return other is None or isinstance(other, NullObject)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(None)

    def __repr__(self) -> str:
        return "NullObject()"

    def __copy__(self) -> "NullObject":
        return self

    def __deepcopy__(self, memo: dict) -> "NullObject":
        return self

    def __reduce__(self) -> tuple:
        return (NullObject, ())


NULL = NullObject()


def is_null(value: Any) -> bool:
    """Return True when ``value`` represents absence (``None`` or the null object)."""
    return value is None or isinstance(value, NullObject)


__all__ = ["NullObject", "NULL", "is_null"]
