"""Operaciones aritméticas básicas expuestas en `/api/calculator`."""

from __future__ import annotations

import math
from typing import Callable, Dict

from app.core.errors import DivisionByZeroError, ValidationError

Number = int | float


def add(a: Number, b: Number) -> Number:
    return a + b


def subtract(a: Number, b: Number) -> Number:
    return a - b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def divide(a: Number, b: Number) -> float:
    if b == 0:
        raise DivisionByZeroError("Cannot divide by zero")
    return a / b


OPERATIONS: Dict[str, Callable[[Number, Number], Number]] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}


def calculate(operation: str, a: Number, b: Number) -> Number:
    """Aplica `operation` a `a` y `b`; sólo admite operandos y resultados finitos."""
    func = OPERATIONS.get(operation)
    if func is None:
        raise ValidationError(
            f"Unknown operation: {operation}. Use one of: {', '.join(OPERATIONS)}"
        )
    # nan/inf no se pueden serializar a JSON como número
    if not (math.isfinite(a) and math.isfinite(b)):
        raise ValidationError("Operands must be finite numbers")

    result = func(a, b)
    if not math.isfinite(result):
        raise ValidationError("Result is out of range")
    return result
