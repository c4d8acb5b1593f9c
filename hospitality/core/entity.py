"""Identity primitives shared by every domain entity.

Entities do not inherit from a common base. Each one owns a
:class:`UniqueEntityID` plus its own props dataclass and delegates equality to
:func:`entity_equals`, so two instances are the same entity when their ids
match, whatever their props hold.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Protocol


class UniqueEntityID:
    """Opaque, globally unique entity identifier."""

    __slots__ = ("_value",)

    def __init__(self, value: Optional[str] = None) -> None:
        self._value = value if value is not None else str(uuid.uuid4())

    @classmethod
    def generate(cls) -> UniqueEntityID:
        return cls()

    @classmethod
    def from_existing(cls, raw: str) -> UniqueEntityID:
        """Wrap a previously issued value, e.g. one loaded from storage."""
        return cls(raw)

    @property
    def value(self) -> str:
        return self._value

    def to_string(self) -> str:
        return self._value

    def equals(self, other: Any) -> bool:
        if not isinstance(other, UniqueEntityID):
            return False
        return self._value == other._value

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"<UniqueEntityID {self._value}>"


class Identified(Protocol):
    @property
    def id(self) -> UniqueEntityID:
        ...


def entity_equals(entity: Identified, other: Any) -> bool:
    """Compare two entities by identity only, never by props content."""
    if other is entity:
        return True
    if type(other) is not type(entity):
        return False
    return entity.id.equals(other.id)


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)
