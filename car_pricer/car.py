"""Car value record and the input error raised when it is invalid."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

_COUNT_FIELDS = (
    "age_in_months",
    "number_of_miles",
    "number_of_previous_owners",
    "number_of_collisions",
)


class InvalidInputError(ValueError):
    """Raised when a pricing input is negative or not a usable number."""

    def __init__(self, field: str, value: Any, reason: str = "must be non-negative") -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {reason} (got {value!r})")


def to_decimal(field: str, value: Any) -> Decimal:
    """Coerce *value* to a finite ``Decimal`` or raise ``InvalidInputError``."""
    if isinstance(value, bool):
        raise InvalidInputError(field, value, "must be a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            raise InvalidInputError(field, value, "must be a number") from None
    elif isinstance(value, float):
        # repr keeps 0.1 as Decimal("0.1") instead of its binary expansion
        result = Decimal(repr(value))
    else:
        raise InvalidInputError(field, value, "must be a number")

    if not result.is_finite():
        raise InvalidInputError(field, value, "must be finite")
    if result < 0:
        raise InvalidInputError(field, value)
    return result


def check_count(field: str, value: Any) -> int:
    """Return *value* if it is a non-negative ``int``, else raise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(field, value, "must be an integer")
    if value < 0:
        raise InvalidInputError(field, value)
    return value


@dataclass(frozen=True)
class Car:
    """Attributes of a used car that drive its resale price.

    Validated on construction, so any ``Car`` instance is safe to price.
    """

    purchase_value: Decimal
    age_in_months: int = 0
    number_of_miles: int = 0
    number_of_previous_owners: int = 0
    number_of_collisions: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "purchase_value", to_decimal("purchase_value", self.purchase_value)
        )
        for name in _COUNT_FIELDS:
            check_count(name, getattr(self, name))
