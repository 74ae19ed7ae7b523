import math
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


def coerce_number(value: Any) -> float:
    """Numbers and numeric strings pass through; anything else becomes 0."""
    if value is None or isinstance(value, (dict, list)):
        return 0.0
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (ValueError, TypeError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def coerce_text(value: Any, default: str = "") -> str:
    """Strings pass through, scalars are stringified, the rest takes the default."""
    if value is None or isinstance(value, (dict, list)):
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EstimateInputs(BaseModel):
    area_sq_ft: float = Field(0.0, alias="areaSqFt")
    shrub_count: float = Field(0.0, alias="shrubCount")
    bed_size: str = Field("", alias="bedSize")
    material: str = ""

    class Config:
        populate_by_name = True

    @field_validator("area_sq_ft", "shrub_count", mode="before")
    @classmethod
    def _numeric(cls, value):
        return coerce_number(value)

    @field_validator("bed_size", "material", mode="before")
    @classmethod
    def _text(cls, value):
        return coerce_text(value)


class EstimateRequest(BaseModel):
    """
    A service-estimate request with every optional field filled in.

    Defaults: mode "generic", service "", inputs empty, notes and
    photoSummary "". Malformed values fall back to these, never raise.
    """
    mode: str = "generic"
    service: str = ""
    inputs: EstimateInputs = Field(default_factory=EstimateInputs)
    notes: str = ""
    photo_summary: str = Field("", alias="photoSummary")

    class Config:
        populate_by_name = True

    @field_validator("mode", mode="before")
    @classmethod
    def _mode(cls, value):
        return coerce_text(value, default="generic")

    @field_validator("service", "notes", "photo_summary", mode="before")
    @classmethod
    def _text(cls, value):
        return coerce_text(value)

    @field_validator("inputs", mode="before")
    @classmethod
    def _inputs(cls, value):
        if isinstance(value, EstimateInputs):
            return value
        return value if isinstance(value, dict) else {}


class EstimateResponse(BaseModel):
    price: int
    upsell: str
    summary: str
    close_pct: int = Field(alias="closePct")
    upsell_pct: int = Field(alias="upsellPct")
    risk_pct: int = Field(alias="riskPct")

    class Config:
        populate_by_name = True


class SpeakRequest(BaseModel):
    text: str
    voice: Optional[str] = None


class OkResponse(BaseModel):
    ok: bool = True
