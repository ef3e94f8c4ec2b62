#!/usr/bin/env python3
"""CI enforcement: flag pricing rates and caps hardcoded in pricing.py.

Detects literals like ``120`` or ``Decimal("0.02")`` whose value matches a
constant in ``car_pricer.constants`` and should be imported from there.

Exits 1 when any are found, or when the target cannot be read or parsed.
"""

from __future__ import annotations

import ast
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from car_pricer import constants

TARGET_FILE = Path(__file__).resolve().parent.parent / "car_pricer" / "pricing.py"

# Too common to attribute to a specific business constant
TRIVIAL_VALUES = {0, 1}


def known_values() -> set[Decimal]:
    values: set[Decimal] = set()
    for name in dir(constants):
        if not name.isupper():
            continue
        value = getattr(constants, name)
        if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
            continue
        if value in TRIVIAL_VALUES:
            continue
        values.add(Decimal(value))
    return values


def _literal_value(node: ast.AST) -> Decimal | None:
    if isinstance(node, ast.Constant) and not isinstance(node.value, bool):
        if isinstance(node.value, (int, float)):
            return Decimal(repr(node.value))
    if (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "Decimal"
        and len(node.args) == 1
        and isinstance(node.args[0], ast.Constant)
        and isinstance(node.args[0].value, str)
    ):
        try:
            return Decimal(node.args[0].value)
        except InvalidOperation:
            return None
    return None


def check(target: Path = TARGET_FILE) -> list[str]:
    violations: list[str] = []
    try:
        tree = ast.parse(target.read_text())
    except (SyntaxError, FileNotFoundError) as exc:
        print(f"ERROR: cannot parse {target}: {exc}", file=sys.stderr)
        return [f"{target.name}: cannot parse: {exc}"]

    known = known_values()
    for node in ast.walk(tree):
        value = _literal_value(node)
        if value is not None and value in known:
            violations.append(
                f"{target.name}:{node.lineno}: hardcoded pricing value {value}"
            )
    return violations


def main() -> None:
    violations = check(TARGET_FILE)
    if violations:
        print("ERROR: pricing.py failed the constants check:")
        for v in violations:
            print(f"  {v}")
        print("\nImport these from car_pricer.constants instead.")
        sys.exit(1)
    else:
        print("OK: no hardcoded pricing values in pricing.py")


if __name__ == "__main__":
    main()
