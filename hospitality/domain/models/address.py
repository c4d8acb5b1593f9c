"""Postal address value object."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from ..errors import InvalidAddressError

_NON_DIGITS = re.compile(r"\D")

ZIP_CODE_DIGITS = 8

_REQUIRED_FIELDS = (
    ("street", "Street is required"),
    ("number", "Number is required"),
    ("neighborhood", "Neighborhood is required"),
    ("city", "City is required"),
    ("state", "State is required"),
    ("zip_code", "Zip code is required"),
    ("country", "Country is required"),
)


@dataclass(frozen=True, slots=True)
class Address:
    """
    Immutable, self-validating postal address.

    Every live instance is both valid and canonical: required fields are
    trimmed and non-empty, ``zip_code`` holds exactly eight digits and a blank
    ``complement`` is stored as ``None``. Equality is structural.

    Raises:
        InvalidAddressError: On the first field that fails validation.
    """

    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    zip_code: str
    country: str
    complement: Optional[str] = None

    def __post_init__(self) -> None:
        self._validate()
        set_field = object.__setattr__
        for name, _ in _REQUIRED_FIELDS:
            set_field(self, name, getattr(self, name).strip())
        set_field(self, "zip_code", _NON_DIGITS.sub("", self.zip_code))
        set_field(self, "complement", (self.complement or "").strip() or None)

    def _validate(self) -> None:
        for name, reason in _REQUIRED_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidAddressError(reason)

        # Brazilian CEP
        if len(_NON_DIGITS.sub("", self.zip_code)) != ZIP_CODE_DIGITS:
            raise InvalidAddressError("Zip code must have 8 digits")

    @classmethod
    def create(
        cls,
        *,
        street: str,
        number: str,
        neighborhood: str,
        city: str,
        state: str,
        zip_code: str,
        country: str,
        complement: Optional[str] = None,
    ) -> Address:
        return cls(
            street=street,
            number=number,
            neighborhood=neighborhood,
            city=city,
            state=state,
            zip_code=zip_code,
            country=country,
            complement=complement,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Address:
        return cls.create(
            street=data.get("street"),
            number=data.get("number"),
            neighborhood=data.get("neighborhood"),
            city=data.get("city"),
            state=data.get("state"),
            zip_code=data.get("zip_code"),
            country=data.get("country"),
            complement=data.get("complement"),
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)

    @property
    def formatted_zip_code(self) -> str:
        return f"{self.zip_code[:5]}-{self.zip_code[5:]}"

    @property
    def full_address(self) -> str:
        complement = f", {self.complement}" if self.complement else ""
        return (
            f"{self.street}, {self.number}{complement}, {self.neighborhood}, "
            f"{self.city} - {self.state}, {self.formatted_zip_code}, {self.country}"
        )

    def equals(self, other: Any) -> bool:
        if not isinstance(other, Address):
            return False
        return self == other

    def __str__(self) -> str:
        return self.full_address
