"""Tests for clause audit CSV and JSON export."""

import csv
import io
import json
from datetime import date

from loan_audit.analysis.normalizer import normalize
from loan_audit.export.csv_export import (
    CSV_HEADERS,
    csv_export_filename,
    export_clauses_csv,
    export_result_json,
    quote_cell,
)


class TestExportClausesCsv:
    """Tests for export_clauses_csv()."""

    def test_header_row(self, payload, agreement_text):
        content = export_clauses_csv(normalize(payload, agreement_text))

        assert content.split("\n")[0] == (
            "Clause Name,Confidence Score (%),Review Required,Provision Summary,"
            "Audit Logic,Market Standard Context,Deviation Analysis,Counterparty Impact"
        )

    def test_one_row_per_clause_in_order(self, payload, agreement_text):
        content = export_clauses_csv(normalize(payload, agreement_text))
        rows = list(csv.reader(io.StringIO(content)))

        assert len(rows) == 5
        assert [row[0] for row in rows[1:]] == [
            "Facility Amount",
            "Leverage Ratio",
            "Interest Cover Ratio",
            "Governing Law",
        ]

    def test_row_field_order(self, payload, agreement_text):
        content = export_clauses_csv(normalize(payload, agreement_text))
        row = list(csv.reader(io.StringIO(content)))[1]

        assert row == [
            "Facility Amount",
            "95",
            "NO",
            "A term loan facility of GBP 50,000,000.",
            "Amount is clearly stated.",
            "LMA term loan precedent.",
            "Standard",
            "None.",
        ]

    def test_review_required_rendered_yes(self, payload, agreement_text):
        content = export_clauses_csv(normalize(payload, agreement_text))
        rows = list(csv.reader(io.StringIO(content)))

        assert rows[4][2] == "YES"

    def test_embedded_quotes_are_doubled(self, payload, agreement_text):
        payload["clauses"][0]["extracted_text"] = 'The "Facility" means, in aggregate, GBP 50m.'

        content = export_clauses_csv(normalize(payload, agreement_text))

        assert '"The ""Facility"" means, in aggregate, GBP 50m."' in content

    def test_round_trip_with_csv_reader(self, payload, agreement_text):
        tricky = 'He said "no",\nthen ""waived"" it'
        payload["clauses"][0]["explanation"] = tricky

        content = export_clauses_csv(normalize(payload, agreement_text))
        rows = list(csv.reader(io.StringIO(content)))

        assert rows[1][4] == tricky

    def test_no_clauses(self, payload, agreement_text):
        payload["clauses"] = []

        content = export_clauses_csv(normalize(payload, agreement_text))

        assert content == ",".join(CSV_HEADERS)

    def test_quote_cell(self):
        assert quote_cell('a"b') == '"a""b"'
        assert quote_cell("") == '""'


class TestExportHelpers:
    """Tests for filename and JSON export."""

    def test_filename(self):
        assert csv_export_filename(date(2025, 3, 1)) == "CLAUSE_AUDIT_DATA_2025-03-01.csv"

    def test_json_export(self, payload, agreement_text):
        data = json.loads(export_result_json(normalize(payload, agreement_text)))

        assert data["dealReadiness"]["status"] == "Ready with Review"
        assert data["confidenceAnalysis"][1]["reviewRequired"] is True
        assert data["riskAssessment"]["overallRating"] == "Medium"
        assert data["rawText"] == agreement_text
