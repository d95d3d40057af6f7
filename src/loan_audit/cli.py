"""Command line entry point for loan agreement audits.

Usage:
    loan-audit normalize payload.json agreement.txt --csv audit.csv
    loan-audit analyze agreement.txt --json audit.json     # Calls Bedrock
    loan-audit slack 3.5 2.1 "Leverage Ratio"
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .analysis.classifiers import classify_confidence
from .analysis.covenants import compute_slack, extract_covenants
from .analysis.normalizer import normalize_json
from .common.config import Settings
from .common.exceptions import AuditError
from .common.models import AnalysisResult, SlackCalculation
from .export.csv_export import export_clauses_csv, export_result_json
from .intelligence.bedrock_client import DocumentIntelligenceClient


def print_report(result: AnalysisResult) -> None:
    readiness = result.deal_readiness
    print(f"\nDeal Readiness: {readiness.score} ({readiness.status.value})")
    print(f"Overall Risk: {result.risk_assessment.overall_rating.value}")
    print(f"Facility: {result.overview.facility_type} / {result.overview.currency} {result.overview.amount}")

    print(f"\nClauses ({len(result.clauses)}):")
    for clause in result.clauses:
        band = classify_confidence(clause.confidence_score)
        flag = "REVIEW" if clause.review_required else "ok"
        print(f"  [{flag:>6}] {clause.name}: {clause.confidence_score}% {band.label}"
              f" ({clause.market_deviation.value})")

    covenants = extract_covenants(result.clauses)
    if covenants:
        print("\nFinancial covenants (use 'loan-audit slack' to compute headroom):")
        for covenant in covenants:
            print(f"  - {covenant.name}")


def print_slack(calculation: Optional[SlackCalculation]) -> None:
    if calculation is None:
        print("Enter numeric limit and actual values to calculate slack")
        return
    percentage = "n/a" if calculation.percentage is None else f"{calculation.percentage:.1f}%"
    print(f"{calculation.clause_name} [{calculation.covenant_type.value}] "
          f"slack={calculation.slack:.2f} ({percentage}) "
          f"{'SAFE' if calculation.is_safe else 'BREACH'}")
    print(calculation.headroom_message())


def write_outputs(result: AnalysisResult, csv_path: Optional[str], json_path: Optional[str]) -> None:
    if csv_path:
        Path(csv_path).write_text(export_clauses_csv(result), encoding="utf-8")
        print(f"\nWrote clause audit CSV to {csv_path}")
    if json_path:
        Path(json_path).write_text(export_result_json(result), encoding="utf-8")
        print(f"Wrote analysis JSON to {json_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loan-audit", description="Loan agreement audit")
    commands = parser.add_subparsers(dest="command", required=True)

    norm = commands.add_parser("normalize", help="Normalize a saved analysis payload")
    norm.add_argument("payload", help="JSON payload from the intelligence model")
    norm.add_argument("document", help="Agreement text the payload was produced from")
    norm.add_argument("--csv")
    norm.add_argument("--json")

    analyze = commands.add_parser("analyze", help="Analyze an agreement with Bedrock")
    analyze.add_argument("document")
    analyze.add_argument("--csv")
    analyze.add_argument("--json")

    slack = commands.add_parser("slack", help="Covenant headroom for a limit and actual value")
    slack.add_argument("limit")
    slack.add_argument("actual")
    slack.add_argument("name", help="Covenant clause name, e.g. 'Leverage Ratio'")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "slack":
            print_slack(compute_slack(args.limit, args.actual, args.name))
            return 0

        document_text = Path(args.document).read_text(encoding="utf-8")
        if args.command == "normalize":
            payload = Path(args.payload).read_text(encoding="utf-8")
            result = normalize_json(payload, document_text)
        else:
            result = DocumentIntelligenceClient(Settings.from_env()).analyze(document_text)
        print_report(result)
        write_outputs(result, args.csv, args.json)
    except AuditError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
