from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base for business errors carried in ``Left`` rather than raised.

    Instances compare equal when they share type and message, so two
    independently built errors describing the same outcome are
    indistinguishable to callers.
    """

    default_message = "Domain rule violated."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __eq__(self, other: Any) -> bool:
        return type(other) is type(self) and other.message == self.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"
