from __future__ import annotations

from dataclasses import dataclass

from ..application.use_cases import AuthenticateUserUseCase, CreateAccountUseCase
from ..domain.ports.persistence import UserRepository
from ..infrastructure.cryptography import BcryptHasher, JwtEncrypter
from .config import Settings
from .logging import configure_logging


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared by whatever surface drives the use cases."""

    settings: Settings
    user_repository: UserRepository
    hasher: BcryptHasher
    encrypter: JwtEncrypter
    create_account: CreateAccountUseCase
    authenticate_user: AuthenticateUserUseCase


def build_container(settings: Settings, user_repository: UserRepository) -> ApplicationContainer:
    """Wire the use cases to the configured capabilities.

    Storage is supplied by the caller; the core ships no repository.
    """
    configure_logging(settings.log_level)
    hasher = BcryptHasher(rounds=settings.bcrypt_rounds)
    encrypter = JwtEncrypter(
        secret_key=settings.token_secret,
        token_exp_minutes=settings.token_exp_minutes,
        algorithm=settings.token_algorithm,
    )
    return ApplicationContainer(
        settings=settings,
        user_repository=user_repository,
        hasher=hasher,
        encrypter=encrypter,
        create_account=CreateAccountUseCase(user_repository, hasher),
        authenticate_user=AuthenticateUserUseCase(user_repository, hasher, encrypter),
    )
