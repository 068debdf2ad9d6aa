"""Constants: status labels, classification colors, city defaults."""

# Status labels sent by the analysis service
STATUS_HEALTHY = "SALUDABLE"
STATUS_MODERATE = "MODERADO"
STATUS_CRITICAL = "CRÍTICO"

# Severity tiers (badge colors) per status label
SEVERITY_SUCCESS = "success"
SEVERITY_WARNING = "warning"
SEVERITY_DANGER = "danger"
SEVERITY_SECONDARY = "secondary"

TIER_HEALTHY = "healthy"
TIER_MODERATE = "moderate"
TIER_CRITICAL = "critical"
TIER_UNKNOWN = "unknown"

STATUS_SEVERITY = {
    STATUS_HEALTHY: (TIER_HEALTHY, SEVERITY_SUCCESS),
    STATUS_MODERATE: (TIER_MODERATE, SEVERITY_WARNING),
    STATUS_CRITICAL: (TIER_CRITICAL, SEVERITY_DANGER),
}

# Health color bands (lower bound inclusive)
GOOD_SCORE_THRESHOLD = 70
WARNING_SCORE_THRESHOLD = 40

BAND_GOOD = "good"
BAND_WARNING = "warning"
BAND_POOR = "poor"

GREEN = "#28a745"
AMBER = "#ffc107"
RED = "#dc3545"

BAND_COLORS = {
    BAND_GOOD: GREEN,
    BAND_WARNING: AMBER,
    BAND_POOR: RED,
}

API_BASE = "http://localhost:5000"

# Analysis service endpoints
PATH_ROOT = "/"
PATH_CITIES = "/api/cities"
PATH_ANALYZE = "/api/analyze/{city_id}"
PATH_NASA_STATUS = "/api/nasa-status"

DEFAULT_CITY = "lima"

# blue_ratio + orange_ratio should stay close to 1.0
RATIO_SUM_TOLERANCE = 0.05
