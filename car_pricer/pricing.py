"""Resale price calculation: pure logic, no I/O.

The value of a car is walked through a fixed sequence of capped
percentage reductions (age, mileage, collisions, previous owners) and,
for a car that has never changed hands, a final first-owner bonus.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Callable

from car_pricer.car import Car, check_count, to_decimal
from car_pricer.constants import (
    AGE_REDUCTION_RATE,
    COLLISION_REDUCTION_RATE,
    FACTOR_AGE,
    FACTOR_COLLISIONS,
    FACTOR_MILEAGE,
    FACTOR_NO_PREVIOUS_OWNERS,
    FACTOR_PREVIOUS_OWNERS,
    MAX_AGE_REDUCTIONS,
    MAX_COLLISION_REDUCTIONS,
    MAX_MILEAGE_REDUCTIONS,
    MAX_PREVIOUS_OWNER_REDUCTIONS,
    MILEAGE_REDUCTION_RATE,
    MILES_PER_REDUCTION,
    NO_PREVIOUS_OWNER_BONUS_RATE,
    PREVIOUS_OWNER_REDUCTION_RATE,
    PREVIOUS_OWNER_THRESHOLD,
    PRICING_PRECISION,
)

logger = logging.getLogger(__name__)

PRICING_CONTEXT = Context(
    prec=PRICING_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

Reducer = Callable[[Decimal, int, int, Decimal], Decimal]


@dataclass(frozen=True)
class Adjustment:
    """One applied pricing step."""

    factor: str
    units: int  # counted after capping
    before: Decimal
    after: Decimal

    @property
    def amount(self) -> Decimal:
        """Signed change in value; negative for reductions."""
        return PRICING_CONTEXT.subtract(self.after, self.before)


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemized result of pricing a car."""

    purchase_value: Decimal
    final_value: Decimal
    adjustments: tuple[Adjustment, ...] = ()

    def factors(self) -> tuple[str, ...]:
        return tuple(adj.factor for adj in self.adjustments)


def _validated(
    current_price: Decimal | int | str,
    num_reductions: int,
    max_reductions: int,
    reduction_rate: Decimal | int | str,
) -> tuple[Decimal, int, Decimal]:
    price = to_decimal("current_price", current_price)
    check_count("num_reductions", num_reductions)
    check_count("max_reductions", max_reductions)
    rate = to_decimal("reduction_rate", reduction_rate)
    return price, min(num_reductions, max_reductions), rate


def reduce_price(
    current_price: Decimal | int | str,
    num_reductions: int,
    max_reductions: int,
    reduction_rate: Decimal | int | str,
) -> Decimal:
    """Reduce *current_price* by a flat ``rate * units``, capped at *max_reductions*.

    Every counted unit is taken off the same base, so two units at 2% remove
    4% of the original price rather than compounding.
    """
    price, units, rate = _validated(
        current_price, num_reductions, max_reductions, reduction_rate
    )
    if units == 0:
        return price
    with localcontext(PRICING_CONTEXT):
        return price - (price * rate * units)


def cumulatively_reduce_price(
    current_price: Decimal | int | str,
    num_reductions: int,
    max_reductions: int,
    reduction_rate: Decimal | int | str,
) -> Decimal:
    """Compounding variant of :func:`reduce_price`.

    Each counted unit is taken off the value left by the previous one:
    two units at 2% leave ``price * 0.98 * 0.98``. Not used by
    :func:`determine_price`.
    """
    price, units, rate = _validated(
        current_price, num_reductions, max_reductions, reduction_rate
    )
    with localcontext(PRICING_CONTEXT):
        for _ in range(units):
            price -= price * rate
    return price


def price_breakdown(car: Car, *, reducer: Reducer = reduce_price) -> PriceBreakdown:
    """Price *car* and return every applied step in the order it was applied.

    Order is age, mileage, collisions, the previous-owner reduction, then
    the first-owner bonus. Steps that count zero units are omitted. Arithmetic
    runs under ``PRICING_CONTEXT`` whatever the caller's decimal context is.
    """
    owners = car.number_of_previous_owners
    reductions = (
        (FACTOR_AGE, car.age_in_months, MAX_AGE_REDUCTIONS, AGE_REDUCTION_RATE),
        (
            FACTOR_MILEAGE,
            car.number_of_miles // MILES_PER_REDUCTION,
            MAX_MILEAGE_REDUCTIONS,
            MILEAGE_REDUCTION_RATE,
        ),
        (
            FACTOR_COLLISIONS,
            car.number_of_collisions,
            MAX_COLLISION_REDUCTIONS,
            COLLISION_REDUCTION_RATE,
        ),
        (
            FACTOR_PREVIOUS_OWNERS,
            1 if owners > PREVIOUS_OWNER_THRESHOLD else 0,
            MAX_PREVIOUS_OWNER_REDUCTIONS,
            PREVIOUS_OWNER_REDUCTION_RATE,
        ),
    )

    value = car.purchase_value
    adjustments: list[Adjustment] = []

    with localcontext(PRICING_CONTEXT):
        for factor, units, max_units, rate in reductions:
            counted = min(units, max_units)
            if counted == 0:
                continue
            reduced = reducer(value, units, max_units, rate)
            adjustments.append(Adjustment(factor, counted, value, reduced))
            logger.debug("%s: %d unit(s), %s -> %s", factor, counted, value, reduced)
            value = reduced

        if owners == 0:
            bonus = value + (value * NO_PREVIOUS_OWNER_BONUS_RATE)
            adjustments.append(Adjustment(FACTOR_NO_PREVIOUS_OWNERS, 1, value, bonus))
            logger.debug("%s: bonus, %s -> %s", FACTOR_NO_PREVIOUS_OWNERS, value, bonus)
            value = bonus

    logger.debug("Priced car at %s (purchase value %s)", value, car.purchase_value)
    return PriceBreakdown(
        purchase_value=car.purchase_value,
        final_value=value,
        adjustments=tuple(adjustments),
    )


def determine_price(car: Car) -> Decimal:
    """Return the resale value of *car* using flat reductions."""
    return price_breakdown(car).final_value


def determine_cumulative_price(car: Car) -> Decimal:
    """Return the resale value of *car* using compounding reductions."""
    return price_breakdown(car, reducer=cumulatively_reduce_price).final_value
