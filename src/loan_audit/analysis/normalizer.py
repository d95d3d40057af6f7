"""Result Normalizer - maps a raw analysis payload into an AnalysisResult.

The payload is validated against the schema contract first, so a
SchemaViolation aborts before anything is constructed. After validation
every field is read through the same lenient parsers the validator
accepted, optional clause fields are filled from CLAUSE_FIELD_DEFAULTS,
and the derived fields (review flags, readiness status) are recomputed
rather than trusted.
"""

import json
from typing import Any

from ..common.exceptions import SchemaViolation
from ..common.models import (
    AnalysisResult,
    ClauseAnalysis,
    CommercialSummary,
    DealReadiness,
    DocumentOverview,
    LmaComparison,
    RiskAssessment,
    RiskRating,
)
from ..common.safe_log import safe_log
from ..schemas.analysis_schema import CLAUSE_FIELD_DEFAULTS, validate_payload
from ..utils.parsing import clamp, parse_boolean, parse_integer
from .classifiers import classify_readiness, parse_market_deviation, requires_review

SCORE_MIN = 0
SCORE_MAX = 100


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _strings(values: Any) -> tuple[str, ...]:
    return tuple(_text(v) for v in (values or ()))


def _with_default(raw_clause: dict[str, Any], key: str) -> str:
    value = raw_clause.get(key)
    if value is None or not str(value).strip():
        return CLAUSE_FIELD_DEFAULTS[key]
    return str(value)


def _score(value: Any, path: str) -> int:
    score = parse_integer(value)
    bounded = clamp(score, SCORE_MIN, SCORE_MAX)
    if bounded != score:
        safe_log("WARNING: score out of range, clamped", path=path, score=score, clamped=bounded)
    return bounded


def normalize_overview(raw: dict[str, Any]) -> DocumentOverview:
    return DocumentOverview(
        facility_type=_text(raw.get("facilityType")),
        borrower_lender=_text(raw.get("borrowerLender")),
        currency=_text(raw.get("currency")),
        amount=_text(raw.get("amount")),
        maturity=_text(raw.get("maturity")),
        law=_text(raw.get("law")),
    )


def normalize_clause(raw: dict[str, Any], index: int = 0) -> ClauseAnalysis:
    """Map one raw clause entry into a ClauseAnalysis."""
    score = _score(raw.get("confidence_score"), f"clauses[{index}].confidence_score")
    deviation_text = _with_default(raw, "market_deviation")
    deviation = parse_market_deviation(deviation_text)

    return ClauseAnalysis(
        name=_text(raw.get("clause_name")),
        summary=_text(raw.get("extracted_text")),
        confidence_score=score,
        market_deviation=deviation,
        review_required=requires_review(score, deviation),
        reason=_text(raw.get("explanation")),
        lma_comparison=LmaComparison(
            standard_benchmark=_with_default(raw, "lma_benchmark_context"),
            deviations=deviation_text,
            impact=_with_default(raw, "potential_impact"),
        ),
        reported_review_required=parse_boolean(raw.get("review_required")),
    )


def normalize_deal_readiness(raw: dict[str, Any]) -> DealReadiness:
    """Map the readiness section, recomputing status from the score."""
    score = _score(raw.get("score"), "dealReadiness.score")
    status = classify_readiness(score)
    reported = raw.get("status")
    if reported is not None and str(reported).strip().lower() != status.value.lower():
        safe_log(
            "Readiness status overridden by score",
            reported=reported,
            derived=status.value,
            score=score,
        )

    return DealReadiness(
        score=score,
        status=status,
        drivers_positive=_strings(raw.get("driversPositive")),
        drivers_negative=_strings(raw.get("driversNegative")),
        key_issues=_strings(raw.get("keyIssues")),
        recommended_actions=_strings(raw.get("recommendedActions")),
        reported_status=None if reported is None else str(reported),
    )


def normalize_risk_rating(value: Any) -> RiskRating:
    """Coerce an overall rating into Low/Medium/High, defaulting to Medium."""
    label = _text(value).strip().lower()
    for rating in RiskRating:
        if rating.value.lower() == label:
            return rating
    safe_log("WARNING: unrecognized risk rating, defaulting to Medium", rating=value)
    return RiskRating.MEDIUM


def normalize_risk_assessment(raw: dict[str, Any]) -> RiskAssessment:
    return RiskAssessment(
        overall_rating=normalize_risk_rating(raw.get("overallRating")),
        summary=_text(raw.get("summary")),
    )


def normalize_commercial_summary(raw: dict[str, Any]) -> CommercialSummary:
    return CommercialSummary(
        snapshot=_text(raw.get("snapshot")),
        highlights=_strings(raw.get("highlights")),
        risks=_strings(raw.get("risks")),
        next_actions=_strings(raw.get("nextActions")),
    )


def normalize(raw: Any, original_text: str) -> AnalysisResult:
    """Validate and map a raw analysis payload into an AnalysisResult.

    Args:
        raw: Decoded payload from the document intelligence collaborator
        original_text: Document text the payload was produced from,
            attached verbatim

    Returns:
        Canonical, immutable AnalysisResult

    Raises:
        SchemaViolation: If a required section or field is missing or mistyped
    """
    validate_payload(raw)

    return AnalysisResult(
        overview=normalize_overview(raw["overview"]),
        clauses=tuple(
            normalize_clause(clause, index) for index, clause in enumerate(raw["clauses"])
        ),
        deal_readiness=normalize_deal_readiness(raw["dealReadiness"]),
        risk_assessment=normalize_risk_assessment(raw["riskAssessment"]),
        commercial_summary=normalize_commercial_summary(raw["commercialSummary"]),
        raw_text=original_text,
    )


def decode_payload(content: str) -> Any:
    """Decode a JSON payload, unwrapping a markdown code fence if it does not parse as is."""
    try:
        return json.loads(content.strip())
    except json.JSONDecodeError as e:
        if "```" not in content:
            raise SchemaViolation(f"Payload is not valid JSON: {e.msg}", cause=e)

    if "```json" in content:
        content = content.split("```json", 1)[1].split("```", 1)[0]
    else:
        content = content.split("```", 1)[1].split("```", 1)[0]

    try:
        return json.loads(content.strip())
    except json.JSONDecodeError as e:
        raise SchemaViolation(f"Payload is not valid JSON: {e.msg}", cause=e)


def normalize_json(content: str, original_text: str) -> AnalysisResult:
    """Decode a JSON payload string and normalize it."""
    return normalize(decode_payload(content), original_text)
