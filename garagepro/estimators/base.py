"""
Abstract base class for all service-mode estimators.

Input: EstimateInputs (the coerced `inputs` mapping of an EstimateRequest)
Output: base price as a float, before the $45 floor and rounding
"""

import math
from abc import ABC, abstractmethod

from ..schemas import EstimateInputs


class BaseEstimator(ABC):
    """All service-mode estimators inherit from this."""

    mode = "generic"

    @abstractmethod
    def base_price(self, inputs: EstimateInputs) -> float:
        """
        Takes the coerced request inputs.
        Returns the pre-adjustment base price for this service mode.
        """
        pass

    # --- Helper methods for all estimators ---

    def clamp(self, value: float, low: float, high: float) -> float:
        """Clamp a value into [low, high]."""
        return max(low, min(high, value))

    def contains_any(self, text: str, keywords) -> bool:
        """Case-insensitive substring check against a keyword list."""
        lowered = (text or "").lower()
        return any(k in lowered for k in keywords)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (62.5 -> 63)."""
    return int(math.floor(value + 0.5))
