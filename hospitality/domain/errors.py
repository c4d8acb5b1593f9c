"""Errors raised while constructing domain values."""

from ..core.errors import DomainError


class InvalidAddressError(DomainError):
    """An address field failed validation; the message names which one."""

    default_message = "Invalid address."
