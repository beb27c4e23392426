"""Unit tests for utilkit.models."""

import pytest
from pydantic import ValidationError

from utilkit.errors import EmptyStackError, ErrorKind, FetchFailedError
from utilkit.logic import calculate_discount
from utilkit.models import Coupon, DrivingAge, Err, Ok, Rules, invalid
from utilkit.storage import DEFAULT_RULES


class TestCoupon:
    """Tests for the Coupon model."""

    @staticmethod
    @pytest.mark.parametrize("discount", [0, 1, -0.1, 1.5])
    def test_discount_must_be_a_fraction(discount) -> None:
        with pytest.raises(ValidationError):
            Coupon(code="SAVE", discount=discount)

    @staticmethod
    def test_code_must_not_be_empty() -> None:
        with pytest.raises(ValidationError):
            Coupon(code="", discount=0.1)

    @staticmethod
    def test_is_frozen() -> None:
        coupon = Coupon(code="SAVE", discount=0.1)
        with pytest.raises(ValidationError):
            coupon.discount = 0.9


class TestRules:
    """Tests for the Rules model."""

    @staticmethod
    def test_defaults() -> None:
        assert DEFAULT_RULES.usernameMinLength == 5
        assert DEFAULT_RULES.usernameMaxLength == 15
        assert DEFAULT_RULES.minAge == 18
        assert DEFAULT_RULES.maxAge == 99
        assert DEFAULT_RULES.min_driving_age("UK") == 17
        assert DEFAULT_RULES.min_driving_age("US") == 16

    @staticmethod
    def test_find_coupon() -> None:
        assert DEFAULT_RULES.find_coupon("SAVE20") == Coupon(code="SAVE20", discount=0.2)
        assert DEFAULT_RULES.find_coupon("SAVE30") is None

    @staticmethod
    def test_unknown_country_has_no_driving_age() -> None:
        assert DEFAULT_RULES.min_driving_age("FR") is None

    @staticmethod
    @pytest.mark.parametrize(
        "overrides",
        [
            {"usernameMinLength": 10, "usernameMaxLength": 5},
            {"minAge": 50, "maxAge": 20},
            {"coupons": (Coupon(code="A", discount=0.1), Coupon(code="A", discount=0.2))},
            {
                "drivingAges": (
                    DrivingAge(countryCode="UK", minAge=17),
                    DrivingAge(countryCode="UK", minAge=18),
                )
            },
        ],
    )
    def test_rejects_inconsistent_rules(overrides) -> None:
        with pytest.raises(ValidationError):
            Rules(**overrides)

    @staticmethod
    def test_is_frozen() -> None:
        with pytest.raises(ValidationError):
            DEFAULT_RULES.minAge = 0

    @staticmethod
    def test_with_overrides_derives_variant() -> None:
        relaxed = DEFAULT_RULES.with_overrides(usernameMinLength=3)
        assert relaxed.usernameMinLength == 3
        assert relaxed.coupons == DEFAULT_RULES.coupons
        assert DEFAULT_RULES.usernameMinLength == 5

    @staticmethod
    def test_with_overrides_validates_bounds() -> None:
        """Test that derived rules are checked like freshly built ones."""
        with pytest.raises(ValidationError):
            DEFAULT_RULES.with_overrides(usernameMinLength=20)

    @staticmethod
    def test_with_overrides_builds_coupon_models() -> None:
        """Test that plain mappings in overrides become Coupon models."""
        derived = DEFAULT_RULES.with_overrides(coupons=({"code": "X", "discount": 0.5},))
        assert derived.find_coupon("X") == Coupon(code="X", discount=0.5)
        assert calculate_discount(10, "X", derived).unwrap() == pytest.approx(5)

    @staticmethod
    def test_with_overrides_rejects_bad_coupon() -> None:
        with pytest.raises(ValidationError):
            DEFAULT_RULES.with_overrides(coupons=({"code": "X", "discount": 2},))


class TestOk:
    """Tests for the Ok result."""

    @staticmethod
    def test_accessors() -> None:
        result = Ok(value=42)
        assert result.is_ok
        assert not result.is_err
        assert result.unwrap() == 42
        assert result.unwrap_or(0) == 42

    @staticmethod
    def test_equality() -> None:
        assert Ok(value=[1, 2]) == Ok(value=[1, 2])
        assert Ok(value=1) != Ok(value=2)


class TestErr:
    """Tests for the Err result."""

    @staticmethod
    def test_accessors() -> None:
        result = Err(kind=ErrorKind.FETCH_FAILED, message="Fetch failed")
        assert result.is_err
        assert not result.is_ok
        assert result.unwrap_or("fallback") == "fallback"
        assert result.reason == "Fetch failed"
        assert str(result) == "Fetch failed"

    @staticmethod
    @pytest.mark.parametrize(
        "kind, exc_type",
        [(ErrorKind.EMPTY_STACK, EmptyStackError), (ErrorKind.FETCH_FAILED, FetchFailedError)],
    )
    def test_unwrap_raises_error_for_kind(kind, exc_type) -> None:
        with pytest.raises(exc_type, match="boom"):
            Err(kind=kind, message="boom").unwrap()

    @staticmethod
    def test_invalid_joins_problems() -> None:
        result = invalid("Invalid username", "Invalid age")
        assert result.kind is ErrorKind.INVALID_INPUT
        assert result.message == "Invalid username, Invalid age"
