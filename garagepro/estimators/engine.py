"""
Estimate Engine.

Turns an EstimateRequest into an EstimateResponse.
Pure math. No I/O, no randomness. Same input, same output.

Input: EstimateRequest (already coerced by the schema layer)
Output: EstimateResponse: price, upsell, summary, close/upsell/risk scores
"""

from ..schemas import EstimateRequest, EstimateResponse
from .base import round_half_up
from .registry import get_estimator, resolve_mode

PRICE_FLOOR = 45

# Starting scores before keyword signals
DEFAULT_CLOSE_PCT = 72
DEFAULT_UPSELL_PCT = 40
DEFAULT_RISK_PCT = 18

CLOSE_RANGE = (5, 98)
UPSELL_RANGE = (5, 98)
RISK_RANGE = (3, 95)

NEGLECT_KEYWORDS = ("overgrown", "patchy", "neglected")
TIDY_KEYWORDS = ("clean", "fresh", "sharp")
UPGRADE_MATERIAL_KEYWORDS = ("premium", "rock")

UPSELL_THRESHOLD = 40
RISK_THRESHOLD = 35


def _clamp(value: int, bounds: tuple) -> int:
    low, high = bounds
    return max(low, min(high, value))


class EstimateEngine:
    """Maps a service-estimate request to a price quote and sales narrative."""

    def estimate(self, request) -> EstimateResponse:
        """
        Args:
            request: EstimateRequest, or a raw dict payload that will be
                     coerced into one (missing fields take their defaults).
                     Anything that is not a mapping is priced as {}.

        Returns:
            EstimateResponse
        """
        if not isinstance(request, EstimateRequest):
            if not isinstance(request, dict):
                request = {}
            request = EstimateRequest.model_validate(request)

        inputs = request.inputs
        mode = resolve_mode(request.mode, request.service)
        base = get_estimator(mode).base_price(inputs)
        price = round_half_up(max(PRICE_FLOOR, base))

        close_pct, upsell_pct, risk_pct = self.score_signals(
            request.notes, request.photo_summary, inputs.material)

        return EstimateResponse(
            price=price,
            upsell="+%d" % round_half_up((upsell_pct / 100) * price),
            summary=self.build_summary(price, upsell_pct, risk_pct),
            close_pct=close_pct,
            upsell_pct=upsell_pct,
            risk_pct=risk_pct,
        )

    def score_signals(self, notes: str, photo_summary: str,
                      material: str) -> tuple[int, int, int]:
        """
        Keyword adjustments on the default scores, then clamping.
        Every matching rule fires; they are not a priority chain.
        """
        close_pct = DEFAULT_CLOSE_PCT
        upsell_pct = DEFAULT_UPSELL_PCT
        risk_pct = DEFAULT_RISK_PCT

        text = (notes + " " + photo_summary).lower()
        material = material.lower()

        if any(k in text for k in NEGLECT_KEYWORDS):
            risk_pct += 18
            upsell_pct += 16
        if any(k in text for k in TIDY_KEYWORDS):
            close_pct += 10
        if any(k in material for k in UPGRADE_MATERIAL_KEYWORDS):
            upsell_pct += 20

        return (
            _clamp(close_pct, CLOSE_RANGE),
            _clamp(upsell_pct, UPSELL_RANGE),
            _clamp(risk_pct, RISK_RANGE),
        )

    def build_summary(self, price: int, upsell_pct: int, risk_pct: int) -> str:
        """Three sentences: the price, the sales angle, the job-site read."""
        if upsell_pct > UPSELL_THRESHOLD:
            pitch = "Solid upsell signal — highlight quality and longevity."
        else:
            pitch = "Keep it simple; lead with reliability."
        if risk_pct > RISK_THRESHOLD:
            site = "Flag risk items before starting to avoid rework."
        else:
            site = "Looks clean for one-visit or recurring setup."
        return " ".join([f"Estimate: ~${price}.", pitch, site])


def estimate(request) -> EstimateResponse:
    """Module-level shortcut for EstimateEngine().estimate()."""
    return EstimateEngine().estimate(request)
