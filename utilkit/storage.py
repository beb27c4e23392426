from typing import Tuple

from .models import Coupon, DrivingAge, Rules

# code -> discount fraction
DEFAULT_COUPONS: Tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)

# country code -> minimum driving age
DEFAULT_DRIVING_AGES: Tuple[DrivingAge, ...] = (
    DrivingAge(countryCode="UK", minAge=17),
    DrivingAge(countryCode="US", minAge=16),
)

DEFAULT_RULES = Rules(coupons=DEFAULT_COUPONS, drivingAges=DEFAULT_DRIVING_AGES)
