"""Status and health-score classification.

Two independent readings of a city's condition: the status label sent by the
service (severity tier / badge color) and the numeric health score (health
color band). They are never reconciled; when they disagree both are shown.
"""

from dataclasses import dataclass

from guardian_dashboard.constants import (
    BAND_COLORS, BAND_GOOD, BAND_POOR, BAND_WARNING, GOOD_SCORE_THRESHOLD,
    SEVERITY_SECONDARY, STATUS_SEVERITY, TIER_CRITICAL, TIER_HEALTHY, TIER_MODERATE,
    TIER_UNKNOWN, WARNING_SCORE_THRESHOLD,
)

_UNKNOWN = (TIER_UNKNOWN, SEVERITY_SECONDARY)

_TIER_TO_BAND = {
    TIER_HEALTHY: BAND_GOOD,
    TIER_MODERATE: BAND_WARNING,
    TIER_CRITICAL: BAND_POOR,
}


def _severity(status) -> tuple[str, str]:
    if not isinstance(status, str):
        return _UNKNOWN
    return STATUS_SEVERITY.get(status, _UNKNOWN)


def status_to_severity_tier(status) -> str:
    """SALUDABLE → healthy, MODERADO → moderate, CRÍTICO → critical, else unknown."""
    return _severity(status)[0]


def status_to_severity_color(status) -> str:
    """Badge color for a status label; unknown labels get the neutral tier."""
    return _severity(status)[1]


def score_to_health_band(score: float) -> str:
    """≥70 good, 40-69 warning, <40 poor. Band lower bounds are inclusive."""
    if score >= GOOD_SCORE_THRESHOLD:
        return BAND_GOOD
    if score >= WARNING_SCORE_THRESHOLD:
        return BAND_WARNING
    return BAND_POOR


def score_to_health_color(score: float) -> str:
    return BAND_COLORS[score_to_health_band(score)]


@dataclass(frozen=True)
class Classification:
    severity_tier: str
    severity_color: str
    health_band: str
    health_color: str

    @property
    def consistent(self) -> bool:
        """True when status label and score point at the same level."""
        return _TIER_TO_BAND.get(self.severity_tier) == self.health_band


def classify(item) -> Classification:
    """Classify a City or Analysis by status and by score, side by side."""
    return Classification(
        severity_tier=status_to_severity_tier(item.status),
        severity_color=status_to_severity_color(item.status),
        health_band=score_to_health_band(item.health_score),
        health_color=score_to_health_color(item.health_score),
    )
