"""Forecast quality bands for presenting trend fits."""

from __future__ import annotations

from runrate.models.enums import ForecastQuality

# Below this many historical points a forecast is still produced but flagged.
MIN_RELIABLE_POINTS = 7

_ADVISORIES = {
    ForecastQuality.STRONG: (
        "Strong trend fit. The forecast is reliable for planning."
    ),
    ForecastQuality.MODERATE: (
        "Moderate trend fit. Use the forecast as a directional estimate."
    ),
    ForecastQuality.WEAK: (
        "Weak trend fit. More data is needed before relying on this forecast."
    ),
}


def forecast_quality(r_squared: float) -> ForecastQuality:
    """Map a regression R² to a quality band.

    >  0.8 -> STRONG
    >  0.5 -> MODERATE
    <= 0.5 -> WEAK
    """
    if r_squared > 0.8:
        return ForecastQuality.STRONG
    if r_squared > 0.5:
        return ForecastQuality.MODERATE
    return ForecastQuality.WEAK


def quality_advisory(quality: ForecastQuality) -> str:
    return _ADVISORIES[quality]


def is_low_confidence(point_count: int) -> bool:
    return point_count < MIN_RELIABLE_POINTS
