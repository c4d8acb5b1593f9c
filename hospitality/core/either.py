"""Two-variant result container used by use cases instead of raising.

A use case returns ``Left`` for an expected business failure and ``Right`` for
success. Callers check the variant before interpreting ``value``::

    result = await use_case.execute(request)
    match result:
        case Left(error):
            ...
        case Right(response):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Left(Generic[L, R]):
    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Right(Generic[L, R]):
    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True


Either = Union[Left[L, R], Right[L, R]]


def left(value: L) -> Left[L, R]:
    return Left(value)


def right(value: R) -> Right[L, R]:
    return Right(value)
