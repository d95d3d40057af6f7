"""Tests for the loan-audit command line."""

import csv
import json

from loan_audit.cli import main


class TestSlackCommand:

    def test_safe_covenant(self, capsys):
        assert main(["slack", "3.5", "2.1", "Leverage Ratio"]) == 0

        out = capsys.readouterr().out
        assert "[max]" in out
        assert "40.0%" in out
        assert "SAFE" in out

    def test_non_numeric(self, capsys):
        assert main(["slack", "abc", "2.1", "Leverage Ratio"]) == 0

        assert "Enter numeric limit and actual values" in capsys.readouterr().out

    def test_undefined_percentage(self, capsys):
        assert main(["slack", "0", "1", "Leverage Ratio"]) == 0

        out = capsys.readouterr().out
        assert "(n/a)" in out
        assert "BREACH" in out


class TestNormalizeCommand:

    def test_writes_exports(self, tmp_path, payload, agreement_text, capsys):
        payload_path = tmp_path / "payload.json"
        document_path = tmp_path / "agreement.txt"
        csv_path = tmp_path / "audit.csv"
        json_path = tmp_path / "audit.json"
        payload_path.write_text(json.dumps(payload), encoding="utf-8")
        document_path.write_text(agreement_text, encoding="utf-8")

        code = main([
            "normalize", str(payload_path), str(document_path),
            "--csv", str(csv_path), "--json", str(json_path),
        ])

        assert code == 0
        out = capsys.readouterr().out
        assert "Deal Readiness: 78 (Ready with Review)" in out
        assert "Leverage Ratio" in out
        with open(csv_path, newline="", encoding="utf-8") as handle:
            rows = list(csv.reader(handle))
        assert len(rows) == 5
        assert json.loads(json_path.read_text(encoding="utf-8"))["rawText"] == agreement_text

    def test_schema_violation_exit_code(self, tmp_path, payload, agreement_text, capsys):
        del payload["clauses"]
        payload_path = tmp_path / "payload.json"
        document_path = tmp_path / "agreement.txt"
        payload_path.write_text(json.dumps(payload), encoding="utf-8")
        document_path.write_text(agreement_text, encoding="utf-8")

        assert main(["normalize", str(payload_path), str(document_path)]) == 1
        assert "clauses" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["normalize", str(tmp_path / "none.json"), str(tmp_path / "none.txt")]) == 1

    def test_unwritable_export_path(self, tmp_path, payload, agreement_text, capsys):
        payload_path = tmp_path / "payload.json"
        document_path = tmp_path / "agreement.txt"
        payload_path.write_text(json.dumps(payload), encoding="utf-8")
        document_path.write_text(agreement_text, encoding="utf-8")

        code = main([
            "normalize", str(payload_path), str(document_path),
            "--csv", str(tmp_path / "missing" / "audit.csv"),
        ])

        assert code == 1
        assert "ERROR" in capsys.readouterr().err
