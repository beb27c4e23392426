"""utilkit

Small validation helpers (coupon discounts, usernames, ages, price ranges,
driving-age checks) plus a few toy utilities. Operations that can fail
return ``Ok`` / ``Err`` results instead of raising.
"""

from .arithmetic import factorial, fizz_buzz, max_value
from .errors import (
    EmptyStackError,
    ErrorKind,
    FetchFailedError,
    InvalidInputError,
    UndefinedResultError,
    UtilkitError,
)
from .fetch import fetch_data
from .logging import configure_logging
from .logic import (
    calculate_discount,
    can_drive,
    get_coupons,
    is_price_in_range,
    is_valid_age,
    is_valid_username,
    validate_user_input,
)
from .models import Coupon, DrivingAge, Err, Ok, Result, Rules
from .stack import Stack
from .storage import DEFAULT_RULES

__all__ = [
    "__version__",
    "Coupon",
    "DEFAULT_RULES",
    "DrivingAge",
    "EmptyStackError",
    "Err",
    "ErrorKind",
    "FetchFailedError",
    "InvalidInputError",
    "Ok",
    "Result",
    "Rules",
    "Stack",
    "UndefinedResultError",
    "UtilkitError",
    "calculate_discount",
    "can_drive",
    "configure_logging",
    "factorial",
    "fetch_data",
    "fizz_buzz",
    "get_coupons",
    "is_price_in_range",
    "is_valid_age",
    "is_valid_username",
    "max_value",
    "validate_user_input",
]
__version__ = "0.1.0"
