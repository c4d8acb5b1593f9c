from __future__ import annotations

import logging
from dataclasses import dataclass

from ...core.either import Either, left, right
from ...domain.ports.cryptography import Encrypter, HashComparer
from ...domain.ports.persistence import UserRepository
from .errors import WrongCredentialsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuthenticateUserRequest:
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class AuthenticateUserResponse:
    access_token: str


class AuthenticateUserUseCase:
    """Exchanges an email/password pair for a signed access token.

    An unknown email and a wrong password produce the same
    ``WrongCredentialsError`` so callers cannot probe which accounts exist.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        hash_comparer: HashComparer,
        encrypter: Encrypter,
    ) -> None:
        self._users = user_repository
        self._comparer = hash_comparer
        self._encrypter = encrypter

    async def execute(
        self, request: AuthenticateUserRequest
    ) -> Either[WrongCredentialsError, AuthenticateUserResponse]:
        email = request.email.strip().lower()
        user = await self._users.find_by_email(email)
        if not user:
            return self._reject()

        if not await self._comparer.compare(request.password, user.password):
            return self._reject()

        access_token = await self._encrypter.encrypt({"sub": str(user.id)})
        logger.info("Authenticated user %s", user.id)
        return right(AuthenticateUserResponse(access_token=access_token))

    @staticmethod
    def _reject() -> Either[WrongCredentialsError, AuthenticateUserResponse]:
        logger.warning("Authentication failed: invalid credentials")
        return left(WrongCredentialsError())
