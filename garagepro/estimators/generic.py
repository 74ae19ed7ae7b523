"""
Generic estimator: any mode that is not mowing or landscaping.
"""

from .base import BaseEstimator


class GenericEstimator(BaseEstimator):

    mode = "generic"
    FLAT_RATE = 75.0

    def base_price(self, inputs) -> float:
        return self.FLAT_RATE
