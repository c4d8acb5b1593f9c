"""User domain model for account registration and authentication."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ...core.entity import UniqueEntityID, entity_equals, utcnow


@dataclass(slots=True)
class UserProps:
    tax_id: str
    name: str
    email: str
    password: str
    birth_date: datetime
    created_at: datetime
    updated_at: datetime


class User:
    """
    User entity representing a registered guest account.

    Attributes:
        id: Unique identifier
        tax_id: Taxpayer identifier (unique)
        name: Full name
        email: User email address (unique)
        password: Hashed password, never the plaintext
        birth_date: Date of birth
        created_at: Account creation timestamp
        updated_at: Last update timestamp, refreshed by every ``change_*`` call
    """

    __slots__ = ("_id", "_props")

    def __init__(self, props: UserProps, id: Optional[UniqueEntityID] = None) -> None:
        self._id = id or UniqueEntityID.generate()
        self._props = props

    @classmethod
    def create(
        cls,
        *,
        tax_id: str,
        name: str,
        email: str,
        password: str,
        birth_date: datetime,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id: Optional[UniqueEntityID] = None,
    ) -> User:
        now = utcnow()
        props = UserProps(
            tax_id=tax_id,
            name=name,
            email=email,
            password=password,
            birth_date=birth_date,
            created_at=created_at or now,
            updated_at=updated_at or now,
        )
        return cls(props, id)

    @property
    def id(self) -> UniqueEntityID:
        return self._id

    @property
    def tax_id(self) -> str:
        return self._props.tax_id

    @property
    def name(self) -> str:
        return self._props.name

    @property
    def email(self) -> str:
        return self._props.email

    @property
    def password(self) -> str:
        return self._props.password

    @property
    def birth_date(self) -> datetime:
        return self._props.birth_date

    @property
    def created_at(self) -> datetime:
        return self._props.created_at

    @property
    def updated_at(self) -> datetime:
        return self._props.updated_at

    def change_tax_id(self, tax_id: str) -> None:
        self._props.tax_id = tax_id
        self._touch()

    def change_name(self, name: str) -> None:
        self._props.name = name
        self._touch()

    def change_email(self, email: str) -> None:
        self._props.email = email
        self._touch()

    def change_password(self, password_hash: str) -> None:
        """Replace the stored hash. Callers hash the new password first."""
        self._props.password = password_hash
        self._touch()

    def change_birth_date(self, birth_date: datetime) -> None:
        self._props.birth_date = birth_date
        self._touch()

    def _touch(self) -> None:
        self._props.updated_at = utcnow()

    def __eq__(self, other: Any) -> bool:
        return entity_equals(self, other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"<User id={self._id} email={self.email}>"
