"""Common building blocks for the loan agreement audit core."""

from .aws_clients import get_bedrock_client
from .config import Settings
from .models import (
    AnalysisResult,
    ClauseAnalysis,
    CommercialSummary,
    ConfidenceBand,
    CovenantType,
    DealReadiness,
    DocumentOverview,
    LmaComparison,
    MarketDeviation,
    ReadinessStatus,
    RiskAssessment,
    RiskRating,
    Severity,
    SlackCalculation,
)
from .exceptions import AuditError, SchemaViolation, IntelligenceError

__all__ = [
    "get_bedrock_client",
    "Settings",
    "AnalysisResult",
    "ClauseAnalysis",
    "CommercialSummary",
    "ConfidenceBand",
    "CovenantType",
    "DealReadiness",
    "DocumentOverview",
    "LmaComparison",
    "MarketDeviation",
    "ReadinessStatus",
    "RiskAssessment",
    "RiskRating",
    "Severity",
    "SlackCalculation",
    "AuditError",
    "SchemaViolation",
    "IntelligenceError",
]
