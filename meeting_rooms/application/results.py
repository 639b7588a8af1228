"""
Результаты операций прикладного слоя.

Ожидаемые отказы возвращаются значением Failure, а не исключением.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ..domain import BookingDomainError, BookingErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Успешный результат операции."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Отказ с видом ошибки и описанием причины."""

    kind: BookingErrorKind
    reason: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, error: BookingDomainError) -> "Failure":
        return cls(kind=error.kind, reason=error.message)


Result = Union[Success[T], Failure]
