"""Serialization of analysis results for download.

The clause audit CSV quotes every free-text cell and doubles embedded
quotes, so provision text containing commas, quotes or line breaks
survives a round trip through any standard CSV reader.
"""

import json
from datetime import date
from typing import Optional

from ..common.models import AnalysisResult, ClauseAnalysis

CSV_HEADERS: tuple[str, ...] = (
    "Clause Name",
    "Confidence Score (%)",
    "Review Required",
    "Provision Summary",
    "Audit Logic",
    "Market Standard Context",
    "Deviation Analysis",
    "Counterparty Impact",
)


def quote_cell(value: str) -> str:
    """Wrap a text cell in quotes, doubling any embedded quote."""
    return '"' + value.replace('"', '""') + '"'


def clause_row(clause: ClauseAnalysis) -> list[str]:
    """One CSV row for a clause, in header order."""
    return [
        quote_cell(clause.name),
        str(clause.confidence_score),
        "YES" if clause.review_required else "NO",
        quote_cell(clause.summary),
        quote_cell(clause.reason),
        quote_cell(clause.lma_comparison.standard_benchmark),
        quote_cell(clause.lma_comparison.deviations),
        quote_cell(clause.lma_comparison.impact),
    ]


def export_clauses_csv(result: AnalysisResult) -> str:
    """Render the clause audit table as CSV text."""
    lines = [",".join(CSV_HEADERS)]
    lines.extend(",".join(clause_row(clause)) for clause in result.clauses)
    return "\n".join(lines)


def csv_export_filename(day: Optional[date] = None) -> str:
    """Download filename for the clause audit CSV."""
    day = day or date.today()
    return f"CLAUSE_AUDIT_DATA_{day.isoformat()}.csv"


def export_result_json(result: AnalysisResult, indent: Optional[int] = 2) -> str:
    """Render the full analysis result as JSON."""
    return json.dumps(result.to_dict(), indent=indent)
