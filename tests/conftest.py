"""Shared fixtures for the utilkit test-suite."""

import logging

import pytest

from utilkit.models import Coupon, DrivingAge, Rules
from utilkit.stack import Stack


@pytest.fixture
def rules() -> Rules:
    """Non-default rules so tests can tell injected config from the defaults."""
    return Rules(
        coupons=(Coupon(code="HALF", discount=0.5),),
        usernameMinLength=3,
        usernameMaxLength=8,
        minAge=21,
        maxAge=65,
        drivingAges=(DrivingAge(countryCode="DE", minAge=18),),
    )


@pytest.fixture
def stack() -> Stack:
    return Stack()


@pytest.fixture
def utilkit_logger():
    """Yield the package logger and strip any handlers a test attached."""
    logger = logging.getLogger("utilkit")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
