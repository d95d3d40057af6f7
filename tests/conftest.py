"""Shared fixtures for loan audit tests."""

import pytest

AGREEMENT_TEXT = (
    "THIS FACILITY AGREEMENT is dated 1 March 2025 between Borrower PLC and Lender Bank.\n"
    "Clause 22.2: The Leverage Ratio shall not exceed 3.50:1.\n"
    "Clause 22.3: Interest Cover shall not be less than 4.00:1.\n"
)


def build_payload() -> dict:
    return {
        "overview": {
            "facilityType": "Term Loan Facility",
            "borrowerLender": "Borrower PLC / Lender Bank",
            "currency": "GBP",
            "amount": "50,000,000",
            "maturity": "5 years",
            "law": "English law",
        },
        "clauses": [
            {
                "clause_name": "Facility Amount",
                "extracted_text": "A term loan facility of GBP 50,000,000.",
                "confidence_score": 95,
                "market_deviation": "Standard",
                "review_required": False,
                "explanation": "Amount is clearly stated.",
                "lma_benchmark_context": "LMA term loan precedent.",
                "potential_impact": "None.",
            },
            {
                "clause_name": "Leverage Ratio",
                "extracted_text": "Leverage shall not exceed 3.50:1.",
                "confidence_score": 88,
                "market_deviation": "Aggressive/Non-Standard",
                "review_required": False,
                "explanation": "Tight headroom versus peers.",
            },
            {
                "clause_name": "Interest Cover Ratio",
                "extracted_text": "Interest Cover shall not be less than 4.00:1.",
                "confidence_score": 72,
                "market_deviation": "Slightly Aggressive",
                "review_required": True,
                "explanation": "Testing date mechanics unclear.",
            },
            {
                "clause_name": "Governing Law",
                "extracted_text": "",
                "confidence_score": 60,
                "market_deviation": "Standard",
                "review_required": False,
                "explanation": "No governing law clause detected.",
            },
        ],
        "dealReadiness": {
            "score": 78,
            "status": "Ready with Review",
            "driversPositive": ["Clear facility amount"],
            "driversNegative": ["Aggressive leverage covenant", "Missing governing law"],
            "keyIssues": ["Governing law not found"],
            "recommendedActions": ["Insert governing law clause"],
        },
        "riskAssessment": {
            "overallRating": "Medium",
            "summary": "Moderate documentation risk.",
        },
        "commercialSummary": {
            "snapshot": "Five year GBP term loan.",
            "highlights": ["Standard amortisation"],
            "risks": ["Covenant headroom"],
            "nextActions": ["Negotiate leverage step-downs"],
        },
    }


@pytest.fixture
def payload():
    """A fresh, valid analysis payload."""
    return build_payload()


@pytest.fixture
def agreement_text():
    return AGREEMENT_TEXT
