from .authenticate_user import (
    AuthenticateUserRequest,
    AuthenticateUserResponse,
    AuthenticateUserUseCase,
)
from .create_account import CreateAccountRequest, CreateAccountResponse, CreateAccountUseCase
from .errors import (
    BirthDateInFutureError,
    NameTooShortError,
    TaxIdAlreadyExistsError,
    UserAlreadyExistsError,
    WrongCredentialsError,
)

__all__ = [
    "AuthenticateUserRequest",
    "AuthenticateUserResponse",
    "AuthenticateUserUseCase",
    "BirthDateInFutureError",
    "CreateAccountRequest",
    "CreateAccountResponse",
    "CreateAccountUseCase",
    "NameTooShortError",
    "TaxIdAlreadyExistsError",
    "UserAlreadyExistsError",
    "WrongCredentialsError",
]
