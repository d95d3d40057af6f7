"""Canonical clause types and the financial covenant lookup table.

Covenant polarity is resolved by exact name first (``KNOWN_COVENANTS``).
Unmapped names fall back to keyword matching where coverage keywords take
precedence over ceiling keywords, so "Debt Service Coverage Ratio" is a
floor even though it mentions debt.
"""

import re
from enum import Enum
from typing import Optional

# Clause types the intelligence model is asked to audit, in display order
CANONICAL_CLAUSES: tuple[str, ...] = (
    "Facility Amount",
    "Interest Rate & Margin",
    "Repayment",
    "Prepayment",
    "Financial Covenants",
    "Events of Default",
    "Governing Law",
    "Amendment & Waiver",
)

# Name fragments that mark a clause as a financial covenant candidate
COVENANT_NAME_KEYWORDS: tuple[str, ...] = ("covenant", "leverage", "ratio")


class CovenantKind(str, Enum):
    """Financial covenant families."""
    LEVERAGE_MAX = "leverage-max"
    COVERAGE_MIN = "coverage-min"
    OTHER = "other"


KNOWN_COVENANTS: dict[str, CovenantKind] = {
    "leverage ratio": CovenantKind.LEVERAGE_MAX,
    "total leverage ratio": CovenantKind.LEVERAGE_MAX,
    "total net leverage ratio": CovenantKind.LEVERAGE_MAX,
    "senior secured leverage ratio": CovenantKind.LEVERAGE_MAX,
    "debt to ebitda": CovenantKind.LEVERAGE_MAX,
    "net debt to ebitda": CovenantKind.LEVERAGE_MAX,
    "gearing ratio": CovenantKind.LEVERAGE_MAX,
    "loan to value": CovenantKind.LEVERAGE_MAX,
    "interest cover": CovenantKind.COVERAGE_MIN,
    "interest cover ratio": CovenantKind.COVERAGE_MIN,
    "interest coverage ratio": CovenantKind.COVERAGE_MIN,
    "fixed charge coverage ratio": CovenantKind.COVERAGE_MIN,
    "debt service coverage ratio": CovenantKind.COVERAGE_MIN,
    "debt service cover ratio": CovenantKind.COVERAGE_MIN,
    "cashflow cover": CovenantKind.COVERAGE_MIN,
    "current ratio": CovenantKind.COVERAGE_MIN,
    "asset coverage ratio": CovenantKind.COVERAGE_MIN,
    "minimum liquidity": CovenantKind.COVERAGE_MIN,
    "minimum net worth": CovenantKind.COVERAGE_MIN,
}

# Checked in this order: coverage first. Matched on whole words only.
COVERAGE_WORDS: tuple[str, ...] = ("cover", "coverage", "dscr", "icr", "fccr")
COVERAGE_PHRASES: tuple[str, ...] = ("current ratio", "fixed charge")
CEILING_KEYWORDS: tuple[str, ...] = ("leverage", "debt", "gearing", "loan to value", "ltv")


def normalize_clause_name(name: str) -> str:
    """Lower-case a clause name and collapse punctuation and whitespace."""
    cleaned = name.lower().replace("/", " to ").replace("-", " ")
    return " ".join(cleaned.split())


def lookup_covenant_kind(name: str) -> Optional[CovenantKind]:
    """Exact table lookup, None for unmapped names."""
    return KNOWN_COVENANTS.get(normalize_clause_name(name))


def infer_covenant_kind(name: str) -> CovenantKind:
    """Resolve a clause name to a covenant family."""
    known = lookup_covenant_kind(name)
    if known is not None:
        return known

    tokens = re.findall(r"[a-z0-9]+", normalize_clause_name(name))
    padded = " " + " ".join(tokens) + " "
    if set(tokens).intersection(COVERAGE_WORDS):
        return CovenantKind.COVERAGE_MIN
    if any(f" {phrase} " in padded for phrase in COVERAGE_PHRASES):
        return CovenantKind.COVERAGE_MIN
    for keyword in CEILING_KEYWORDS:
        if keyword in padded:
            return CovenantKind.LEVERAGE_MAX
    return CovenantKind.OTHER
