"""Tests for data models."""

from loan_audit.analysis.normalizer import normalize
from loan_audit.common.models import (
    ClauseAnalysis,
    CovenantType,
    DealReadiness,
    LmaComparison,
    MarketDeviation,
    ReadinessStatus,
    SlackCalculation,
)


class TestClauseAnalysis:
    """Tests for ClauseAnalysis model."""

    def test_to_dict(self):
        """Test conversion to dictionary."""
        clause = ClauseAnalysis(
            name="Events of Default",
            summary="Customary events of default apply.",
            confidence_score=82,
            market_deviation=MarketDeviation.SLIGHTLY_AGGRESSIVE,
            review_required=False,
            reason="Cross-default threshold is low.",
            lma_comparison=LmaComparison("LMA standard", "Slightly Aggressive", "Limited"),
            reported_review_required=True,
        )

        result = clause.to_dict()

        assert result["name"] == "Events of Default"
        assert result["confidenceScore"] == 82
        assert result["marketDeviation"] == "Slightly Aggressive"
        assert result["reviewRequired"] is False
        assert result["reportedReviewRequired"] is True
        assert result["lmaComparison"] == {
            "standardBenchmark": "LMA standard",
            "deviations": "Slightly Aggressive",
            "impact": "Limited",
        }

    def test_detected(self):
        """Test an empty summary signals the clause was not detected."""
        clause = ClauseAnalysis(
            name="Governing Law",
            summary="  ",
            confidence_score=40,
            market_deviation=MarketDeviation.UNKNOWN,
            review_required=True,
            reason="Not found",
            lma_comparison=LmaComparison("", "", ""),
        )

        assert clause.detected is False


class TestDealReadiness:
    """Tests for DealReadiness model."""

    def test_to_dict_lists(self):
        readiness = DealReadiness(
            score=88,
            status=ReadinessStatus.EXECUTION_READY,
            key_issues=("a", "b"),
        )

        data = readiness.to_dict()

        assert data["status"] == "Execution Ready"
        assert data["keyIssues"] == ["a", "b"]
        assert data["driversPositive"] == []
        assert data["reportedStatus"] is None


class TestAnalysisResult:
    """Tests for AnalysisResult helpers."""

    def test_clauses_requiring_review(self, payload, agreement_text):
        result = normalize(payload, agreement_text)

        names = [clause.name for clause in result.clauses_requiring_review()]

        assert names == ["Leverage Ratio", "Interest Cover Ratio", "Governing Law"]

    def test_clause_by_name(self, payload, agreement_text):
        result = normalize(payload, agreement_text)

        assert result.clause_by_name("leverage ratio").confidence_score == 88
        assert result.clause_by_name("Prepayment") is None

    def test_to_dict_sections(self, payload, agreement_text):
        data = normalize(payload, agreement_text).to_dict()

        assert set(data) == {
            "overview",
            "confidenceAnalysis",
            "dealReadiness",
            "riskAssessment",
            "commercialSummary",
            "rawText",
        }
        assert data["overview"]["facilityType"] == "Term Loan Facility"

    def test_repr_omits_raw_text(self, payload, agreement_text):
        result = normalize(payload, agreement_text)

        assert agreement_text not in repr(result)


class TestSlackCalculation:
    """Tests for SlackCalculation model."""

    def test_to_dict(self):
        calc = SlackCalculation(
            clause_name="Leverage Ratio",
            limit=3.5,
            actual=2.1,
            covenant_type=CovenantType.MAX,
            slack=1.4,
            percentage=40.0,
            is_safe=True,
        )

        data = calc.to_dict()

        assert data["type"] == "max"
        assert data["isSafe"] is True
        assert data["percentage"] == 40.0
