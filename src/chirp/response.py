"""Minimal response container consumed by ``Base.from_response``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Response:
    """Decoded HTTP response as handed over by an API client.

    Only ``body`` is read by chirp; ``status`` and ``headers`` travel along for
    callers that need them.
    """

    body: Optional[Dict[str, Any]] = None
    status: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


__all__ = ["Response"]
