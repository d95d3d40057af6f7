"""Schema contract for the structured analysis payload.

``RESPONSE_SCHEMA`` is the shape the document intelligence model is asked
to return and the shape ``validate_payload`` enforces before a payload is
normalized. Validation is all-or-nothing: the first missing or mistyped
required field raises ``SchemaViolation`` naming its dotted path.
"""

from typing import Any

from ..common.exceptions import SchemaViolation
from ..utils.parsing import parse_boolean, parse_integer

_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": _STRING}

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "overview": {
            "type": "object",
            "properties": {
                "facilityType": _STRING,
                "borrowerLender": _STRING,
                "currency": _STRING,
                "amount": _STRING,
                "maturity": _STRING,
                "law": _STRING,
            },
            "required": ["facilityType", "borrowerLender", "currency", "amount", "maturity", "law"],
        },
        "clauses": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "clause_name": _STRING,
                    "extracted_text": _STRING,
                    "confidence_score": {"type": "integer"},
                    "market_deviation": _STRING,
                    "review_required": {"type": "boolean"},
                    "explanation": _STRING,
                    "lma_benchmark_context": _STRING,
                    "potential_impact": _STRING,
                },
                "required": [
                    "clause_name",
                    "extracted_text",
                    "confidence_score",
                    "market_deviation",
                    "review_required",
                    "explanation",
                ],
            },
        },
        "dealReadiness": {
            "type": "object",
            "properties": {
                "score": {"type": "integer"},
                "status": _STRING,
                "driversPositive": _STRING_LIST,
                "driversNegative": _STRING_LIST,
                "keyIssues": _STRING_LIST,
                "recommendedActions": _STRING_LIST,
            },
            "required": [
                "score",
                "status",
                "driversPositive",
                "driversNegative",
                "keyIssues",
                "recommendedActions",
            ],
        },
        "riskAssessment": {
            "type": "object",
            "properties": {
                "overallRating": _STRING,
                "summary": _STRING,
            },
            "required": ["overallRating", "summary"],
        },
        "commercialSummary": {
            "type": "object",
            "properties": {
                "snapshot": _STRING,
                "highlights": _STRING_LIST,
                "risks": _STRING_LIST,
                "nextActions": _STRING_LIST,
            },
            "required": ["snapshot", "highlights", "risks", "nextActions"],
        },
    },
    "required": ["overview", "clauses", "dealReadiness", "riskAssessment", "commercialSummary"],
}

REQUIRED_SECTIONS: tuple[str, ...] = tuple(RESPONSE_SCHEMA["required"])

# Coerced by the normalizer rather than enforced here
COERCED_FIELDS = frozenset({"riskAssessment.overallRating"})

# Every optional clause field and the value used when it is absent or blank
CLAUSE_FIELD_DEFAULTS: dict[str, str] = {
    "lma_benchmark_context": "Market standard position.",
    "potential_impact": "Review required for specific commercial impact.",
    "market_deviation": "Unspecified",
}


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _schema_path(path: str) -> str:
    """Strip list indices so a concrete path can be matched against COERCED_FIELDS."""
    parts = []
    for part in path.split("."):
        parts.append(part.split("[", 1)[0])
    return ".".join(parts)


def _check(value: Any, schema: dict[str, Any], path: str) -> None:
    expected = schema["type"]

    if expected == "object":
        if not isinstance(value, dict):
            raise SchemaViolation(
                f"'{path or '<root>'}' must be an object", path=path or None, expected_type=expected
            )
        properties = schema.get("properties", {})
        for key in schema.get("required", []):
            key_path = _join(path, key)
            if _schema_path(key_path) in COERCED_FIELDS:
                continue
            if value.get(key) is None:
                raise SchemaViolation(
                    f"Required field '{key_path}' is missing",
                    path=key_path,
                    expected_type=properties.get(key, {}).get("type"),
                )
        for key, sub_schema in properties.items():
            key_path = _join(path, key)
            if value.get(key) is None or _schema_path(key_path) in COERCED_FIELDS:
                continue
            _check(value[key], sub_schema, key_path)

    elif expected == "array":
        if not isinstance(value, (list, tuple)):
            raise SchemaViolation(f"'{path}' must be an array", path=path, expected_type=expected)
        for index, item in enumerate(value):
            _check(item, schema["items"], f"{path}[{index}]")

    elif expected == "string":
        if not isinstance(value, str):
            raise SchemaViolation(f"'{path}' must be a string", path=path, expected_type=expected)

    elif expected == "integer":
        if parse_integer(value) is None:
            raise SchemaViolation(
                f"'{path}' must be an integer, got {value!r}", path=path, expected_type=expected
            )

    elif expected == "boolean":
        if parse_boolean(value) is None:
            raise SchemaViolation(
                f"'{path}' must be a boolean, got {value!r}", path=path, expected_type=expected
            )


def validate_payload(raw: Any) -> None:
    """Validate a raw analysis payload against ``RESPONSE_SCHEMA``.

    Args:
        raw: Decoded payload returned by the document intelligence model

    Raises:
        SchemaViolation: If a required section or field is missing or mistyped
    """
    _check(raw, RESPONSE_SCHEMA, "")
