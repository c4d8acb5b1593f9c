"""Expected business outcomes returned as ``Left`` by the use cases."""

from ...core.errors import DomainError


class UserAlreadyExistsError(DomainError):
    default_message = "User already exists with this email."


class TaxIdAlreadyExistsError(DomainError):
    default_message = "Tax ID already exists."


class NameTooShortError(DomainError):
    default_message = "Name should be at least 3 characters long."


class BirthDateInFutureError(DomainError):
    default_message = "Birth date cannot be in the future."


class WrongCredentialsError(DomainError):
    """Returned for an unknown email and for a wrong password alike."""

    default_message = "Credentials are not valid."
