#!/usr/bin/env python3
"""Command-line entrypoint: spending reports and MCC lookups from CSV exports."""

from __future__ import annotations

import argparse
import datetime
import json
import sys
from pathlib import Path

from ai_assistant import generate_ai_summary
from categorization import category_stats, classify
from config import Settings, clamp_household_size, load_settings
from currency import fetch_exchange_rates, parse_rate_table
from local_sources import read_statement_files
from logging_setup import configure_logging, get_logger
from parsing import merge_transactions
from report import generate_report, report_as_text, report_to_json

logger = get_logger(__name__)


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None


def _load_rates(args: argparse.Namespace, settings: Settings) -> dict:
    if args.rates_file:
        raw = json.loads(Path(args.rates_file).expanduser().read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Rates file must hold a JSON object: {args.rates_file}")
        return parse_rate_table(raw, reporting_currency=settings.reporting_currency)
    if args.offline:
        logger.info("Offline mode: foreign amounts stay unconverted")
        return {}
    return fetch_exchange_rates(
        url=settings.fx_url,
        timeout=settings.fx_timeout,
        reporting_currency=settings.reporting_currency,
    )


def _run_report(args: argparse.Namespace, settings: Settings) -> int:
    uploads = read_statement_files(args.paths, recursive=args.recursive)
    if not uploads:
        raise ValueError("No CSV exports found in the given paths")

    parsed = merge_transactions(uploads)
    if parsed.errors:
        print(f"warning: {len(parsed.errors)} row(s) rejected", file=sys.stderr)
        for error in parsed.errors[:10]:
            print(f"  {error}", file=sys.stderr)

    household_size = clamp_household_size(
        args.household_size if args.household_size is not None else settings.household_size
    )
    report = generate_report(
        parsed.transactions,
        _load_rates(args, settings),
        household_size=household_size,
        now=args.as_of,
        card_ids=args.cards,
        reporting_currency=settings.reporting_currency,
    )

    print(report_to_json(report) if args.format == "json" else report_as_text(report))
    if args.ai:
        mode, summary = generate_ai_summary(report, api_key=settings.openai_api_key, model=settings.ai_model)
        print("")
        print(f"--- Summary ({mode}) ---")
        print(summary)
    return 0


def _run_classify(args: argparse.Namespace) -> int:
    for code in args.codes:
        entry = classify(code)
        print(f"{entry.code}\t{entry.category.value}\t{entry.subcategory or ''}\t{entry.description}")
    return 0


def _run_categories() -> int:
    print(category_stats().to_string(index=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spendscope", description="Card spending categorization and insights.")
    parser.add_argument("--env-file", default=None, help="Path to a .env file with settings.")
    sub = parser.add_subparsers(dest="command", required=True)

    report = sub.add_parser("report", help="Build a spending report from CSV exports.")
    report.add_argument("paths", nargs="+", help="CSV files or folders holding CSV exports.")
    report.add_argument("--recursive", action="store_true", help="Search folders recursively.")
    report.add_argument("--household-size", type=int, default=None, help="People sharing the budget.")
    report.add_argument("--cards", nargs="*", default=None, help="Only include these card ids.")
    report.add_argument("--format", choices=["text", "json"], default="text")
    rates = report.add_mutually_exclusive_group()
    rates.add_argument("--rates-file", default=None, help="JSON object of currency -> reporting-currency rate.")
    rates.add_argument("--offline", action="store_true", help="Skip the exchange-rate service.")
    report.add_argument("--as-of", type=_parse_date, default=None, help="Reference date for recent-spend checks.")
    report.add_argument("--ai", action="store_true", help="Append a narrative summary of the report.")

    classify_cmd = sub.add_parser("classify", help="Look up merchant category codes.")
    classify_cmd.add_argument("codes", nargs="+")

    sub.add_parser("categories", help="Count table codes per category.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    configure_logging(settings.log_level)

    try:
        if args.command == "report":
            return _run_report(args, settings)
        if args.command == "classify":
            return _run_classify(args)
        return _run_categories()
    except (ValueError, FileNotFoundError, NotADirectoryError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
