#!/usr/bin/env python3
"""Performance benchmark for the resale pricing hot paths."""

from __future__ import annotations

import argparse
import time
from decimal import Decimal

from car_pricer.car import Car
from car_pricer.normalization import car_from_record
from car_pricer.pricing import (
    determine_cumulative_price,
    determine_price,
    price_breakdown,
)


def make_car(i: int) -> Car:
    return Car(
        purchase_value=Decimal(18_000 + (i % 200) * 300),
        age_in_months=i % 180,
        number_of_miles=(i * 1_337) % 220_000,
        number_of_previous_owners=i % 5,
        number_of_collisions=i % 8,
    )


def make_record(i: int) -> dict:
    return {
        "price": f"${18_000 + (i % 200) * 300:,}.00",
        "months": str(i % 180),
        "odometer": f"{(i * 1_337) % 220_000:,} mi",
        "owners": i % 5,
        "accidents": i % 8,
    }


# ── Benchmarks ────────────────────────────────────────────────────────


def bench_determine_price(cars: list[Car], repeats: int) -> tuple[float, float]:
    start = time.perf_counter()
    for _ in range(repeats):
        for car in cars:
            determine_price(car)
    elapsed = time.perf_counter() - start
    calls = len(cars) * repeats
    return elapsed, calls / max(elapsed, 1e-9)


def bench_cumulative_price(cars: list[Car], repeats: int) -> tuple[float, float]:
    start = time.perf_counter()
    for _ in range(repeats):
        for car in cars:
            determine_cumulative_price(car)
    elapsed = time.perf_counter() - start
    calls = len(cars) * repeats
    return elapsed, calls / max(elapsed, 1e-9)


def bench_breakdown(cars: list[Car]) -> tuple[float, int]:
    start = time.perf_counter()
    steps = sum(len(price_breakdown(car).adjustments) for car in cars)
    elapsed = time.perf_counter() - start
    return elapsed, steps


def bench_record_parsing(records: int) -> tuple[float, float]:
    raw = [make_record(i) for i in range(records)]
    start = time.perf_counter()
    for record in raw:
        car_from_record(record)
    elapsed = time.perf_counter() - start
    return elapsed, records / max(elapsed, 1e-9)


# ── Main ──────────────────────────────────────────────────────────────


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark resale pricing hot paths.")
    parser.add_argument("--cars", type=int, default=20_000)
    parser.add_argument("--repeats", type=int, default=5)
    args = parser.parse_args()

    print("car_pricer_hot_path_benchmark")
    print(f"cars={args.cars}")
    print(f"repeats={args.repeats}")
    print()

    cars = [make_car(i) for i in range(args.cars)]

    # 1. Flat pricing (public entry point)
    flat_elapsed, flat_cps = bench_determine_price(cars, args.repeats)
    print(f"determine_price_seconds={flat_elapsed:.6f}")
    print(f"determine_price_calls_per_sec={flat_cps:.0f}")
    print()

    # 2. Compounding pricing (loops once per counted unit)
    cum_elapsed, cum_cps = bench_cumulative_price(cars, args.repeats)
    print(f"cumulative_price_seconds={cum_elapsed:.6f}")
    print(f"cumulative_price_calls_per_sec={cum_cps:.0f}")
    print(f"cumulative_slowdown={cum_elapsed / max(flat_elapsed, 1e-9):.2f}x")
    print()

    # 3. Itemized breakdown
    breakdown_elapsed, steps = bench_breakdown(cars)
    print(f"breakdown_seconds={breakdown_elapsed:.6f}")
    print(f"breakdown_adjustments={steps}")
    print()

    # 4. Loose record parsing
    parse_elapsed, parse_rps = bench_record_parsing(args.cars)
    print(f"record_parsing_seconds={parse_elapsed:.6f}")
    print(f"record_parsing_rows_per_sec={parse_rps:.0f}")


if __name__ == "__main__":
    main()
