"""Normalization and derived metrics for loan agreement analysis results."""

from .classifiers import (
    classify_confidence,
    classify_readiness,
    parse_market_deviation,
    requires_review,
)
from .covenants import (
    compute_covenant_slack,
    compute_slack,
    covenant_polarity,
    extract_covenants,
    is_covenant,
)
from .normalizer import decode_payload, normalize, normalize_json

__all__ = [
    # Classifiers
    "classify_confidence",
    "classify_readiness",
    "parse_market_deviation",
    "requires_review",
    # Covenants
    "compute_covenant_slack",
    "compute_slack",
    "covenant_polarity",
    "extract_covenants",
    "is_covenant",
    # Normalizer
    "decode_payload",
    "normalize",
    "normalize_json",
]
