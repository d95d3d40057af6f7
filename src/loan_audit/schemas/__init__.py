"""Payload schema contract and clause type tables."""

from .analysis_schema import (
    CLAUSE_FIELD_DEFAULTS,
    COERCED_FIELDS,
    REQUIRED_SECTIONS,
    RESPONSE_SCHEMA,
    validate_payload,
)
from .clause_types import (
    CANONICAL_CLAUSES,
    COVENANT_NAME_KEYWORDS,
    KNOWN_COVENANTS,
    CovenantKind,
    infer_covenant_kind,
    lookup_covenant_kind,
)

__all__ = [
    # Analysis Schema
    "CLAUSE_FIELD_DEFAULTS",
    "COERCED_FIELDS",
    "REQUIRED_SECTIONS",
    "RESPONSE_SCHEMA",
    "validate_payload",
    # Clause Types
    "CANONICAL_CLAUSES",
    "COVENANT_NAME_KEYWORDS",
    "KNOWN_COVENANTS",
    "CovenantKind",
    "infer_covenant_kind",
    "lookup_covenant_kind",
]
