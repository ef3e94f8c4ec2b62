"""Fixed pricing constants shared by the calculator and its helpers.

Single source of truth: rates are ``Decimal`` so every step stays exact.
"""

from __future__ import annotations

from decimal import Decimal

# Age: 0.5% per month, counted for the first 10 years only.
AGE_REDUCTION_RATE = Decimal("0.005")
MAX_AGE_REDUCTIONS = 120

# Mileage: 0.2% per full 1,000 miles, up to 150,000 miles.
MILES_PER_REDUCTION = 1_000
MILEAGE_REDUCTION_RATE = Decimal("0.002")
MAX_MILEAGE_REDUCTIONS = 150

# Collisions: 2% per reported collision, first 5 only.
COLLISION_REDUCTION_RATE = Decimal("0.02")
MAX_COLLISION_REDUCTIONS = 5

# Previous owners: a single 25% cut once the count passes the threshold.
PREVIOUS_OWNER_THRESHOLD = 2
PREVIOUS_OWNER_REDUCTION_RATE = Decimal("0.25")
MAX_PREVIOUS_OWNER_REDUCTIONS = 1

# First-owner bonus, applied to the final value.
NO_PREVIOUS_OWNER_BONUS_RATE = Decimal("0.10")

FACTOR_AGE = "age"
FACTOR_MILEAGE = "mileage"
FACTOR_COLLISIONS = "collisions"
FACTOR_PREVIOUS_OWNERS = "previous_owners"
FACTOR_NO_PREVIOUS_OWNERS = "no_previous_owners"

FACTOR_ORDER: tuple[str, ...] = (
    FACTOR_AGE,
    FACTOR_MILEAGE,
    FACTOR_COLLISIONS,
    FACTOR_PREVIOUS_OWNERS,
    FACTOR_NO_PREVIOUS_OWNERS,
)

# Significant digits for all pricing arithmetic, independent of the caller's context.
PRICING_PRECISION = 28
