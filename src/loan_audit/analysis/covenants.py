"""Financial covenant selection and slack (headroom) calculation."""

from typing import Iterable, Mapping, Optional

from ..common.models import AnalysisResult, ClauseAnalysis, CovenantType, SlackCalculation
from ..schemas.clause_types import COVENANT_NAME_KEYWORDS, CovenantKind, infer_covenant_kind
from ..utils.parsing import parse_number


def is_covenant(name: str) -> bool:
    """Whether a clause name looks like a financial covenant."""
    lowered = name.lower()
    return any(keyword in lowered for keyword in COVENANT_NAME_KEYWORDS)


def extract_covenants(clauses: Iterable[ClauseAnalysis]) -> list[ClauseAnalysis]:
    """Select covenant-like clauses by name, preserving order.

    This is a substring heuristic and may include non-financial clauses
    such as "Ratio of Voting Rights"; slack is only computed once the
    analyst supplies numeric inputs.
    """
    return [clause for clause in clauses if is_covenant(clause.name)]


def covenant_polarity(clause_name: str) -> CovenantType:
    """Ceiling covenants (leverage) are MAX; everything else is a MIN floor."""
    if infer_covenant_kind(clause_name) is CovenantKind.LEVERAGE_MAX:
        return CovenantType.MAX
    return CovenantType.MIN


def compute_slack(limit_text: str, actual_text: str, clause_name: str) -> Optional[SlackCalculation]:
    """Compute covenant headroom from free-form limit and actual inputs.

    Args:
        limit_text: Contractual limit as typed by the analyst (e.g. "3.5x")
        actual_text: Current actual value
        clause_name: Covenant clause name, used to infer polarity

    Returns:
        SlackCalculation, or None when either input is not a number.
        ``percentage`` is None when its denominator is zero.
    """
    limit = parse_number(limit_text)
    actual = parse_number(actual_text)
    if limit is None or actual is None:
        return None

    covenant_type = covenant_polarity(clause_name)
    if covenant_type is CovenantType.MAX:
        slack = limit - actual
        denominator = limit
    else:
        slack = actual - limit
        denominator = actual

    percentage = (slack / denominator) * 100 if denominator != 0 else None

    return SlackCalculation(
        clause_name=clause_name,
        limit=limit,
        actual=actual,
        covenant_type=covenant_type,
        slack=slack,
        percentage=percentage,
        is_safe=slack >= 0,
    )


def compute_covenant_slack(
    result: AnalysisResult,
    inputs: Mapping[str, tuple[str, str]],
) -> dict[str, Optional[SlackCalculation]]:
    """Slack for every covenant in a result, keyed by clause name.

    Covenants without an entry in ``inputs`` map to None.
    """
    calculations: dict[str, Optional[SlackCalculation]] = {}
    for covenant in extract_covenants(result.clauses):
        limit_text, actual_text = inputs.get(covenant.name, ("", ""))
        calculations[covenant.name] = compute_slack(limit_text, actual_text, covenant.name)
    return calculations
