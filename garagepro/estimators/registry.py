"""
Estimator registry: maps service mode strings to estimator classes.
"""

from .base import BaseEstimator
from .generic import GenericEstimator
from .landscaping import LandscapingEstimator
from .mowing import MowingEstimator

ESTIMATOR_REGISTRY: dict[str, type] = {
    "mowing": MowingEstimator,
    "landscaping": LandscapingEstimator,
    "generic": GenericEstimator,
}

# Checked in this order; the first match on mode or service wins.
_SPECIFIC_MODES = ("mowing", "landscaping")


def resolve_mode(mode: str, service: str = "") -> str:
    """
    Pick the registered mode for a request.

    Exact, case-sensitive match of either `mode` or `service`.
    Anything else (including empty) is "generic".
    """
    for name in _SPECIFIC_MODES:
        if mode == name or service == name:
            return name
    return "generic"


def get_estimator(mode: str) -> BaseEstimator:
    """Returns an instance of the estimator for a mode, or raises ValueError."""
    if mode not in ESTIMATOR_REGISTRY:
        raise ValueError(
            f"No estimator registered for mode: {mode}. "
            f"Available: {list(ESTIMATOR_REGISTRY.keys())}"
        )
    return ESTIMATOR_REGISTRY[mode]()
