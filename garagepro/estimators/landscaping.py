"""
Landscaping estimator.

Base visit + bed-size surcharge + per-shrub charge.
Premium or stone material bumps the whole job 25%.
"""

from .base import BaseEstimator


BED_SURCHARGES = {
    "small": 60.0,
    "medium": 140.0,
    "large": 260.0,
}

PREMIUM_MATERIAL_KEYWORDS = ("premium", "stone")


class LandscapingEstimator(BaseEstimator):

    mode = "landscaping"

    BASE_VISIT = 120.0
    PER_SHRUB = 6.0
    PREMIUM_MULTIPLIER = 1.25

    def base_price(self, inputs) -> float:
        base = self.BASE_VISIT
        base += BED_SURCHARGES.get(inputs.bed_size.lower(), 0.0)
        base += inputs.shrub_count * self.PER_SHRUB
        if self.contains_any(inputs.material, PREMIUM_MATERIAL_KEYWORDS):
            base *= self.PREMIUM_MULTIPLIER
        return base
