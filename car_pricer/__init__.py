"""Used-car resale pricing."""

from car_pricer.car import Car, InvalidInputError
from car_pricer.normalization import car_from_record
from car_pricer.pricing import (
    Adjustment,
    PriceBreakdown,
    cumulatively_reduce_price,
    determine_cumulative_price,
    determine_price,
    price_breakdown,
    reduce_price,
)

__all__ = [
    "Adjustment",
    "Car",
    "InvalidInputError",
    "PriceBreakdown",
    "car_from_record",
    "cumulatively_reduce_price",
    "determine_cumulative_price",
    "determine_price",
    "price_breakdown",
    "reduce_price",
]
