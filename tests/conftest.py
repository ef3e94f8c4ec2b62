"""Shared test fixtures: reference cars used across the pricing tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from car_pricer.car import Car


@pytest.fixture()
def three_year_old_car() -> Car:
    """The 36-month, 50k-mile, one-owner, one-collision reference car."""
    return Car(
        purchase_value=Decimal("35000"),
        age_in_months=36,
        number_of_miles=50_000,
        number_of_previous_owners=1,
        number_of_collisions=1,
    )


@pytest.fixture()
def first_owner_car() -> Car:
    """High-mileage car that has never changed hands."""
    return Car(
        purchase_value=Decimal("35000"),
        age_in_months=36,
        number_of_miles=250_000,
        number_of_previous_owners=0,
        number_of_collisions=1,
    )


@pytest.fixture()
def pristine_car() -> Car:
    """New car: no age, miles, collisions or previous owners."""
    return Car(purchase_value=Decimal("20000"))
