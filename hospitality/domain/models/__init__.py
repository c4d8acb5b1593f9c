"""Domain models for the hospitality application."""

from .address import Address
from .hotel import Hotel, HotelProps
from .user import User, UserProps

__all__ = [
    "Address",
    "Hotel",
    "HotelProps",
    "User",
    "UserProps",
]
