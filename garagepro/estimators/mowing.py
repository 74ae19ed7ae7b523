"""
Mowing estimator.

Priced by lawn area: $25 trip charge + $0.03/sq ft, kept between $35 and $125.
No area given means a flat minimum visit.
"""

from .base import BaseEstimator


class MowingEstimator(BaseEstimator):

    mode = "mowing"

    TRIP_CHARGE = 25.0
    RATE_PER_SQ_FT = 0.03
    MIN_PRICE = 35.0
    MAX_PRICE = 125.0
    NO_AREA_PRICE = 45.0

    def base_price(self, inputs) -> float:
        area = inputs.area_sq_ft
        if area > 0:
            return self.clamp(self.TRIP_CHARGE + area * self.RATE_PER_SQ_FT,
                              self.MIN_PRICE, self.MAX_PRICE)
        return self.NO_AREA_PRICE
