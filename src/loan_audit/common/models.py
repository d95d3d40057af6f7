"""Data models for loan agreement analysis results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class MarketDeviation(str, Enum):
    """Clause terms relative to LMA-style market norms."""
    STANDARD = "Standard"
    SLIGHTLY_AGGRESSIVE = "Slightly Aggressive"
    AGGRESSIVE = "Aggressive/Non-Standard"
    UNKNOWN = "Unknown"


class RiskRating(str, Enum):
    """Overall risk rating of the agreement."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ReadinessStatus(str, Enum):
    """Deal readiness tiers derived from the readiness score."""
    EXECUTION_READY = "Execution Ready"
    READY_WITH_REVIEW = "Ready with Review"
    NOT_EXECUTION_READY = "Not Execution Ready"


class Severity(str, Enum):
    """Severity band for a clause confidence score."""
    HIGH = "high"
    MODERATE = "moderate"
    CRITICAL = "critical"


class CovenantType(str, Enum):
    """Covenant polarity: a ceiling (max) or a floor (min)."""
    MAX = "max"
    MIN = "min"


@dataclass(frozen=True)
class ConfidenceBand:
    """Qualitative band for a clause confidence score."""
    label: str
    severity: Severity

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "severity": self.severity.value}


@dataclass(frozen=True)
class DocumentOverview:
    """Headline terms of the facility."""
    facility_type: str = ""
    borrower_lender: str = ""
    currency: str = ""
    amount: str = ""
    maturity: str = ""
    law: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "facilityType": self.facility_type,
            "borrowerLender": self.borrower_lender,
            "currency": self.currency,
            "amount": self.amount,
            "maturity": self.maturity,
            "law": self.law,
        }


@dataclass(frozen=True)
class LmaComparison:
    """Clause benchmark against LMA-style market standard."""
    standard_benchmark: str
    deviations: str
    impact: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "standardBenchmark": self.standard_benchmark,
            "deviations": self.deviations,
            "impact": self.impact,
        }


@dataclass(frozen=True)
class ClauseAnalysis:
    """Audit of a single clause type (e.g. Facility Amount, Events of Default).

    ``review_required`` is always derived from the score and market
    deviation; the collaborator's own flag is kept in
    ``reported_review_required`` for traceability only.
    """
    name: str
    summary: str
    confidence_score: int
    market_deviation: MarketDeviation
    review_required: bool
    reason: str
    lma_comparison: LmaComparison
    reported_review_required: Optional[bool] = None

    @property
    def detected(self) -> bool:
        """Whether the provision text was found in the document."""
        return bool(self.summary.strip())

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "summary": self.summary,
            "confidenceScore": self.confidence_score,
            "marketDeviation": self.market_deviation.value,
            "reviewRequired": self.review_required,
            "reportedReviewRequired": self.reported_review_required,
            "reason": self.reason,
            "lmaComparison": self.lma_comparison.to_dict(),
        }


@dataclass(frozen=True)
class DealReadiness:
    """Aggregate execution readiness of the deal."""
    score: int
    status: ReadinessStatus
    drivers_positive: tuple[str, ...] = ()
    drivers_negative: tuple[str, ...] = ()
    key_issues: tuple[str, ...] = ()
    recommended_actions: tuple[str, ...] = ()
    reported_status: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "status": self.status.value,
            "reportedStatus": self.reported_status,
            "driversPositive": list(self.drivers_positive),
            "driversNegative": list(self.drivers_negative),
            "keyIssues": list(self.key_issues),
            "recommendedActions": list(self.recommended_actions),
        }


@dataclass(frozen=True)
class RiskAssessment:
    """Overall risk rating and narrative."""
    overall_rating: RiskRating = RiskRating.MEDIUM
    summary: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"overallRating": self.overall_rating.value, "summary": self.summary}


@dataclass(frozen=True)
class CommercialSummary:
    """Banker-facing commercial snapshot."""
    snapshot: str = ""
    highlights: tuple[str, ...] = ()
    risks: tuple[str, ...] = ()
    next_actions: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "snapshot": self.snapshot,
            "highlights": list(self.highlights),
            "risks": list(self.risks),
            "nextActions": list(self.next_actions),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Complete, normalized audit of one loan agreement."""

    overview: DocumentOverview
    clauses: tuple[ClauseAnalysis, ...]
    deal_readiness: DealReadiness
    risk_assessment: RiskAssessment
    commercial_summary: CommercialSummary
    raw_text: str = field(default="", repr=False)

    def clauses_requiring_review(self) -> list[ClauseAnalysis]:
        """Clauses flagged for manual review, in display order."""
        return [clause for clause in self.clauses if clause.review_required]

    def clause_by_name(self, name: str) -> Optional[ClauseAnalysis]:
        """Find the first clause with the given name (case-insensitive)."""
        wanted = name.strip().lower()
        for clause in self.clauses:
            if clause.name.strip().lower() == wanted:
                return clause
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "overview": self.overview.to_dict(),
            "confidenceAnalysis": [clause.to_dict() for clause in self.clauses],
            "dealReadiness": self.deal_readiness.to_dict(),
            "riskAssessment": self.risk_assessment.to_dict(),
            "commercialSummary": self.commercial_summary.to_dict(),
            "rawText": self.raw_text,
        }


@dataclass(frozen=True)
class SlackCalculation:
    """Headroom (or breach) between a covenant limit and the actual value.

    ``percentage`` is None when the denominator is zero.
    """
    clause_name: str
    limit: float
    actual: float
    covenant_type: CovenantType
    slack: float
    percentage: Optional[float]
    is_safe: bool

    def headroom_message(self) -> str:
        """Human-readable headroom or breach sentence."""
        if self.is_safe:
            return (
                f"Deal has {self.slack:.2f} units of headroom before hitting "
                f"the {self.covenant_type.value} limit."
            )
        return (
            f"Projected breach detected. Currently {abs(self.slack):.2f} "
            f"units beyond the threshold."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "clauseName": self.clause_name,
            "limit": self.limit,
            "actual": self.actual,
            "type": self.covenant_type.value,
            "slack": self.slack,
            "percentage": self.percentage,
            "isSafe": self.is_safe,
        }
