from __future__ import annotations

from typing import Mapping, Protocol


class HashGenerator(Protocol):
    """One-way password hashing."""

    async def hash(self, plain: str) -> str:
        ...


class HashComparer(Protocol):
    async def compare(self, plain: str, hashed: str) -> bool:
        ...


class Encrypter(Protocol):
    """Issues signed access tokens for a set of claims."""

    async def encrypt(self, claims: Mapping[str, str]) -> str:
        ...
