"""Hotel domain model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ...core.entity import UniqueEntityID, entity_equals, utcnow
from .address import Address


@dataclass(slots=True)
class HotelProps:
    name: str
    rating: float
    address: Address
    created_at: datetime
    updated_at: datetime


class Hotel:
    """
    Hotel entity.

    Attributes:
        id: Unique identifier
        name: Display name
        rating: Guest rating
        address: Postal address, replaced wholesale since it is immutable
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    __slots__ = ("_id", "_props")

    def __init__(self, props: HotelProps, id: Optional[UniqueEntityID] = None) -> None:
        self._id = id or UniqueEntityID.generate()
        self._props = props

    @classmethod
    def create(
        cls,
        *,
        name: str,
        rating: float,
        address: Address,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id: Optional[UniqueEntityID] = None,
    ) -> Hotel:
        now = utcnow()
        props = HotelProps(
            name=name,
            rating=rating,
            address=address,
            created_at=created_at or now,
            updated_at=updated_at or now,
        )
        return cls(props, id)

    @property
    def id(self) -> UniqueEntityID:
        return self._id

    @property
    def name(self) -> str:
        return self._props.name

    @property
    def rating(self) -> float:
        return self._props.rating

    @property
    def address(self) -> Address:
        return self._props.address

    @property
    def created_at(self) -> datetime:
        return self._props.created_at

    @property
    def updated_at(self) -> datetime:
        return self._props.updated_at

    def change_name(self, name: str) -> None:
        self._props.name = name
        self._touch()

    def change_rating(self, rating: float) -> None:
        self._props.rating = rating
        self._touch()

    def change_address(self, address: Address) -> None:
        self._props.address = address
        self._touch()

    def _touch(self) -> None:
        self._props.updated_at = utcnow()

    def __eq__(self, other: Any) -> bool:
        return entity_equals(self, other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"<Hotel id={self._id} name={self.name}>"
