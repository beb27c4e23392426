from __future__ import annotations

import logging
from typing import Any

from .errors import ErrorKind, InvalidInputError
from .models import Err, Ok, Result, invalid

logger = logging.getLogger(__name__)


def factorial(n: Any) -> Result[int]:
    """Product of 1..n, except that factorial(0) is 0 rather than 1."""
    if isinstance(n, bool) or not isinstance(n, int):
        return invalid("Invalid number")

    if n < 0:
        logger.debug("factorial(%d) is undefined", n)
        return Err(kind=ErrorKind.UNDEFINED, message=f"factorial is undefined for {n}")

    if n == 0:
        return Ok(value=0)

    product = 1
    for i in range(2, n + 1):
        product *= i
    return Ok(value=product)


def fizz_buzz(n: int) -> str:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError(f"Invalid number: {n!r}")

    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def max_value(a: Any, b: Any) -> Any:
    # ties go to the first argument
    return b if b > a else a
