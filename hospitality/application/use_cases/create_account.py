from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Union

from ...core.either import Either, left, right
from ...core.entity import utcnow
from ...domain.models import User
from ...domain.ports.cryptography import HashGenerator
from ...domain.ports.persistence import UserRepository
from .errors import (
    BirthDateInFutureError,
    NameTooShortError,
    TaxIdAlreadyExistsError,
    UserAlreadyExistsError,
)

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 3


@dataclass(frozen=True, slots=True)
class CreateAccountRequest:
    email: str
    password: str
    tax_id: str
    name: str
    birth_date: Union[date, datetime]


@dataclass(frozen=True, slots=True)
class CreateAccountResponse:
    user_id: str


CreateAccountError = Union[
    UserAlreadyExistsError,
    TaxIdAlreadyExistsError,
    NameTooShortError,
    BirthDateInFutureError,
]


class CreateAccountUseCase:
    """Registers a new user account."""

    def __init__(self, user_repository: UserRepository, hash_generator: HashGenerator) -> None:
        self._users = user_repository
        self._hasher = hash_generator

    async def execute(
        self, request: CreateAccountRequest
    ) -> Either[CreateAccountError, CreateAccountResponse]:
        """
        Validate the request and persist a new user.

        Args:
            request: Registration payload with the plaintext password

        Returns:
            ``Right(CreateAccountResponse)`` with the new user id, or ``Left``
            holding the first business rule the request broke. Repository and
            hasher failures are not caught.
        """
        email = request.email.strip().lower()
        tax_id = request.tax_id.strip()
        name = request.name.strip()

        if await self._users.find_by_email(email):
            logger.info("Registration rejected: email %s already in use", email)
            return left(UserAlreadyExistsError())

        if await self._users.find_by_tax_id(tax_id):
            logger.info("Registration rejected: tax id already in use")
            return left(TaxIdAlreadyExistsError())

        if len(name) < NAME_MIN_LENGTH:
            return left(NameTooShortError())

        birth_date = _as_utc_datetime(request.birth_date)
        if birth_date >= utcnow():
            return left(BirthDateInFutureError())

        hashed = await self._hasher.hash(request.password)

        user = User.create(
            tax_id=tax_id,
            name=name,
            email=email,
            password=hashed,
            birth_date=birth_date,
        )
        await self._users.save(user)
        logger.info("Created account %s for %s", user.id, email)

        return right(CreateAccountResponse(user_id=str(user.id)))


def _as_utc_datetime(value: Union[date, datetime]) -> datetime:
    # Naive values are taken as UTC; a bare date means midnight of that day.
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
