from __future__ import annotations

import logging
import math
from numbers import Integral, Real
from typing import Any, List, Optional

from .models import Coupon, Ok, Result, Rules, invalid
from .storage import DEFAULT_RULES

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Validation successful"


def _rules(rules: Optional[Rules]) -> Rules:
    return DEFAULT_RULES if rules is None else rules


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful quantity here
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, Integral):
        return True
    try:
        return math.isfinite(value)
    except OverflowError:
        # e.g. a Fraction too large for a float is still finite
        return True


def get_coupons(rules: Optional[Rules] = None) -> List[Coupon]:
    return list(_rules(rules).coupons)


def calculate_discount(price: Any, code: Any, rules: Optional[Rules] = None) -> Result[float]:
    if not is_number(price) or price < 0:
        logger.debug("Rejected price %r", price)
        return invalid("Invalid price")

    if not isinstance(code, str):
        logger.debug("Rejected discount code %r", code)
        return invalid("Invalid discount code")

    coupon = _rules(rules).find_coupon(code)
    if coupon is None:
        # unknown codes leave the price untouched
        return Ok(value=price)

    try:
        return Ok(value=price * (1 - coupon.discount))
    except OverflowError:
        logger.debug("Discounted price overflows a float: %r", price)
        return invalid("Invalid price: too large")


def is_valid_username(value: Any, rules: Optional[Rules] = None) -> bool:
    if not isinstance(value, str):
        return False
    rules = _rules(rules)
    return rules.usernameMinLength <= len(value) <= rules.usernameMaxLength


def is_valid_age(value: Any, rules: Optional[Rules] = None) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    rules = _rules(rules)
    return rules.minAge <= value <= rules.maxAge


def validate_user_input(username: Any, age: Any, rules: Optional[Rules] = None) -> Result[str]:
    problems: List[str] = []

    if not is_valid_username(username, rules):
        problems.append("Invalid username")

    if not is_valid_age(age, rules):
        problems.append("Invalid age")

    if problems:
        logger.debug("User input rejected: %s", problems)
        return invalid(*problems)

    return Ok(value=SUCCESS_MESSAGE)


def is_price_in_range(price: Any, minimum: Any, maximum: Any) -> bool:
    if not all(is_number(v) for v in (price, minimum, maximum)):
        return False
    return minimum <= price <= maximum


def can_drive(age: Any, country_code: Any, rules: Optional[Rules] = None) -> Result[bool]:
    legal_age = None
    if isinstance(country_code, str):
        legal_age = _rules(rules).min_driving_age(country_code)

    if legal_age is None:
        logger.debug("Unknown country code %r", country_code)
        return invalid("Invalid country code")

    if not is_number(age) or age < 0:
        logger.debug("Rejected driving age %r", age)
        return invalid("Invalid age")

    return Ok(value=age >= legal_age)
