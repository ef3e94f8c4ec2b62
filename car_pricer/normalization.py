"""Best-effort parsing of loose car records into :class:`~car_pricer.car.Car`.

Listings and spreadsheets rarely agree on field names or number formats;
this module maps the common aliases onto the canonical fields.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from car_pricer.car import Car, InvalidInputError

logger = logging.getLogger(__name__)

FIELD_ALIASES: dict[str, str] = {
    "purchase_value": "purchase_value",
    "purchase_price": "purchase_value",
    "price": "purchase_value",
    "msrp": "purchase_value",
    "age_in_months": "age_in_months",
    "age_months": "age_in_months",
    "months": "age_in_months",
    "number_of_miles": "number_of_miles",
    "mileage": "number_of_miles",
    "miles": "number_of_miles",
    "odometer": "number_of_miles",
    "number_of_previous_owners": "number_of_previous_owners",
    "previous_owners": "number_of_previous_owners",
    "owners": "number_of_previous_owners",
    "number_of_collisions": "number_of_collisions",
    "collisions": "number_of_collisions",
    "accidents": "number_of_collisions",
}

_COUNT_FIELDS = (
    "age_in_months",
    "number_of_miles",
    "number_of_previous_owners",
    "number_of_collisions",
)


def clean_numeric_string(raw: str) -> str:
    """Keep only digits, ``'.'``, and ``'-'``."""
    return "".join(c for c in raw if c.isdigit() or c in {".", "-"})


def parse_decimal(value: Any) -> Decimal | None:
    """Best-effort money parsing.  Returns ``None`` for unparseable input.

    Plain numerals, including exponent notation, are read as-is; anything
    else has currency symbols and separators stripped first.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            parsed = Decimal(stripped)
        except InvalidOperation:
            parsed = None
        if parsed is not None and parsed.is_finite():
            return parsed
        cleaned = clean_numeric_string(stripped)
        if not cleaned:
            return None
        try:
            return Decimal(cleaned)
        except InvalidOperation:
            return None
    return None


def parse_int(value: Any) -> int | None:
    """Best-effort integer parsing.  Returns ``None`` for unparseable input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    parsed = parse_decimal(value)
    if parsed is None or not parsed.is_finite():
        return None
    return int(parsed)


def canonicalize_keys(record: Mapping[str, Any]) -> dict[str, Any]:
    """Map aliased keys onto canonical ``Car`` field names.

    Keys are matched case-insensitively; unknown keys are dropped. When both
    a canonical name and an alias are present the first one seen wins.
    """
    canonical: dict[str, Any] = {}
    for key, value in record.items():
        target = FIELD_ALIASES.get(str(key).strip().lower())
        if target is not None and target not in canonical:
            canonical[target] = value
    return canonical


def car_from_record(record: Mapping[str, Any]) -> Car:
    """Build a ``Car`` from a loose mapping of listing fields.

    Count fields default to 0 when absent.  A missing or unparseable purchase
    value, or a present but unparseable or negative count, raises
    ``InvalidInputError``. Negative fractions are rejected before truncation.
    """
    fields = canonicalize_keys(record)

    raw_value = fields.get("purchase_value")
    purchase_value = parse_decimal(raw_value)
    if purchase_value is None:
        logger.debug("Rejecting record without a usable purchase value: %r", raw_value)
        raise InvalidInputError("purchase_value", raw_value, "is missing or not a number")

    counts: dict[str, int] = {}
    for name in _COUNT_FIELDS:
        raw = fields.get(name)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            counts[name] = 0
            continue
        number = parse_decimal(raw)
        if number is not None and number.is_finite() and number < 0:
            logger.debug("Rejecting record with negative %s: %r", name, raw)
            raise InvalidInputError(name, raw)
        parsed = parse_int(raw)
        if parsed is None:
            logger.debug("Rejecting record with unparseable %s: %r", name, raw)
            raise InvalidInputError(name, raw, "must be an integer")
        counts[name] = parsed

    return Car(purchase_value=purchase_value, **counts)
