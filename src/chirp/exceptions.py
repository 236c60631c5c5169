"""Exception types raised by chirp.

Missing data is never an error in chirp: absent fields read as ``None`` and
absent nested objects read as the null object. The classes below cover the few
structural problems the layer does report.
"""


class ChirpError(Exception):
    """Base class for all custom exceptions in the chirp library."""

    pass


class UnknownTypeError(ChirpError, LookupError):
    """Raised when an object attribute names a type that is not registered."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        available = ", ".join(known) or "<none>"
        super().__init__(f"Type '{name}' is not registered. Known: {available}")


class MissingIdentifierError(ChirpError, ValueError):
    """Raised when an identity object is built from attributes without an ``id``."""

    pass


class ConfigError(ChirpError):
    """Exception raised for configuration errors.

    This includes errors such as:
    - Invalid YAML in the configuration file
    - Configuration validation failures
    - File access errors
    """

    pass


__all__ = [
    "ChirpError",
    "UnknownTypeError",
    "MissingIdentifierError",
    "ConfigError",
]
