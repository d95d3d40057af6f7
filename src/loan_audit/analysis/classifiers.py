"""Qualitative bands derived from clause and readiness scores.

Both score classifiers are total. Any integer that does not reach an
upper tier, including out-of-range values, falls through to the lowest
band so an anomalous score is always surfaced as the most severe case.
"""

from ..common.models import ConfidenceBand, MarketDeviation, ReadinessStatus, Severity

HIGH_CONFIDENCE_THRESHOLD = 85
MODERATE_CONFIDENCE_THRESHOLD = 70
REVIEW_THRESHOLD = 75

EXECUTION_READY_THRESHOLD = 85
READY_WITH_REVIEW_THRESHOLD = 70

HIGH_CONFIDENCE = ConfidenceBand("High Confidence", Severity.HIGH)
MODERATE_REVIEW = ConfidenceBand("Moderate Review", Severity.MODERATE)
LOW_CONFIDENCE = ConfidenceBand("Critical / Low Confidence", Severity.CRITICAL)


def classify_confidence(score: int) -> ConfidenceBand:
    """Map a clause confidence score to its band."""
    if score >= HIGH_CONFIDENCE_THRESHOLD:
        return HIGH_CONFIDENCE
    if score >= MODERATE_CONFIDENCE_THRESHOLD:
        return MODERATE_REVIEW
    return LOW_CONFIDENCE


def classify_readiness(score: int) -> ReadinessStatus:
    """Map a deal readiness score to its status."""
    if score >= EXECUTION_READY_THRESHOLD:
        return ReadinessStatus.EXECUTION_READY
    if score >= READY_WITH_REVIEW_THRESHOLD:
        return ReadinessStatus.READY_WITH_REVIEW
    return ReadinessStatus.NOT_EXECUTION_READY


def parse_market_deviation(text: str) -> MarketDeviation:
    """Map the model's free-text deviation label to a MarketDeviation."""
    label = " ".join(text.lower().replace("-", " ").split())
    if not label:
        return MarketDeviation.UNKNOWN
    if "slightly" in label:
        return MarketDeviation.SLIGHTLY_AGGRESSIVE
    if "aggressive" in label or "non standard" in label or "nonstandard" in label:
        return MarketDeviation.AGGRESSIVE
    if "standard" in label:
        return MarketDeviation.STANDARD
    return MarketDeviation.UNKNOWN


def requires_review(score: int, deviation: MarketDeviation) -> bool:
    """A clause needs review when confidence is low or terms are off-market."""
    return score < REVIEW_THRESHOLD or deviation is MarketDeviation.AGGRESSIVE
