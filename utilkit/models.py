from typing import Any, Generic, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ErrorKind, error_for

T = TypeVar("T")


# ---------------------------
# Configuration Models
# ---------------------------

class Coupon(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    discount: float = Field(gt=0, lt=1)  # fraction taken off the price


class DrivingAge(BaseModel):
    model_config = ConfigDict(frozen=True)

    countryCode: str = Field(min_length=1)
    minAge: int = Field(ge=0)


class Rules(BaseModel):
    """Read-only bundle of every constant the validators depend on."""

    model_config = ConfigDict(frozen=True)

    coupons: Tuple[Coupon, ...] = ()

    usernameMinLength: int = Field(default=5, ge=0)
    usernameMaxLength: int = Field(default=15, ge=0)

    minAge: int = Field(default=18, ge=0)
    maxAge: int = Field(default=99, ge=0)

    drivingAges: Tuple[DrivingAge, ...] = ()

    @model_validator(mode="after")
    def check_bounds(self) -> "Rules":
        if self.usernameMinLength > self.usernameMaxLength:
            raise ValueError("usernameMinLength cannot exceed usernameMaxLength")
        if self.minAge > self.maxAge:
            raise ValueError("minAge cannot exceed maxAge")

        codes = [coupon.code for coupon in self.coupons]
        if len(codes) != len(set(codes)):
            raise ValueError("coupon codes must be unique")

        countries = [entry.countryCode for entry in self.drivingAges]
        if len(countries) != len(set(countries)):
            raise ValueError("driving age country codes must be unique")
        return self

    def with_overrides(self, **overrides: Any) -> "Rules":
        """Derive a new Rules, validating the merged values like a fresh construction."""
        return Rules.model_validate({**self.model_dump(), **overrides})

    def find_coupon(self, code: str) -> Optional[Coupon]:
        # case-sensitive match
        for coupon in self.coupons:
            if coupon.code == code:
                return coupon
        return None

    def min_driving_age(self, country_code: str) -> Optional[int]:
        for entry in self.drivingAges:
            if entry.countryCode == country_code:
                return entry.minAge
        return None


# ---------------------------
# Result Models
# ---------------------------

class Ok(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


class Err(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def reason(self) -> str:
        return self.message

    def unwrap(self) -> Any:
        raise error_for(self.kind, self.message)

    def unwrap_or(self, default: Any) -> Any:
        return default

    def __str__(self) -> str:
        return self.message


Result = Union[Ok[T], Err]


def invalid(*problems: str) -> Err:
    """Build an INVALID_INPUT error whose message lists every problem found."""
    return Err(kind=ErrorKind.INVALID_INPUT, message=", ".join(problems))
