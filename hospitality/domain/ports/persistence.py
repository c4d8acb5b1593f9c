from __future__ import annotations

from typing import Optional, Protocol

from ..models import User


class UserRepository(Protocol):
    """Persistence functions related to user accounts.

    Implementations must read their own writes: a user passed to ``save`` is
    visible to the next ``find_by_*`` call.
    """

    async def find_by_email(self, email: str) -> Optional[User]:
        ...

    async def find_by_tax_id(self, tax_id: str) -> Optional[User]:
        ...

    async def save(self, user: User) -> None:
        ...
