"""Export formats for analysis results."""

from .csv_export import (
    CSV_HEADERS,
    csv_export_filename,
    export_clauses_csv,
    export_result_json,
)

__all__ = [
    "CSV_HEADERS",
    "csv_export_filename",
    "export_clauses_csv",
    "export_result_json",
]
