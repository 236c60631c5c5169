"""chirp - read-only models over decoded JSON API payloads.

Examples:
    >>> from chirp import Attribute, Base, ObjectAttribute
    >>> class User(Base):
    ...     screen_name = Attribute()
    >>> class Tweet(Base):
    ...     text = Attribute()
    ...     user = ObjectAttribute("User")
    >>> tweet = Tweet({"text": "hello", "user": {"screen_name": "sferik"}})
    >>> tweet.user.screen_name
    'sferik'
    >>> tweet.has_user
    True
    >>> tweet["favorited"] is None
    True
"""

from chirp.attributes import Attribute, FieldKind, FieldSpec, ObjectAttribute
from chirp.base import Base
from chirp.exceptions import (
    ChirpError,
    ConfigError,
    MissingIdentifierError,
    UnknownTypeError,
)
from chirp.identity import Identity
from chirp.null_object import NULL, NullObject, is_null
from chirp.registry import list_types, register_type, resolve_type
from chirp.response import Response

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "ObjectAttribute",
    "FieldKind",
    "FieldSpec",
    "Base",
    "Identity",
    "NullObject",
    "NULL",
    "is_null",
    "Response",
    "register_type",
    "resolve_type",
    "list_types",
    "ChirpError",
    "ConfigError",
    "MissingIdentifierError",
    "UnknownTypeError",
    "__version__",
]
