"""Card-transaction CSV loading and validation."""

from __future__ import annotations

import csv
import datetime
import io
from pathlib import Path
from typing import Any, Iterator

import pandas as pd

from currency import to_decimal
from logging_setup import get_logger
from models import ParseResult, Transaction

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".csv",)

EXPECTED_HEADERS = (
    "CardId",
    "Age_cat",
    "trx_date",
    "trx_code",
    "trx_amount",
    "trx_currency",
    "trx_desc",
    "trx_city",
    "trx_country",
    "trx_mcc",
    "MccDesc",
    "MccGroup",
    "IsCardPresent",
    "IsPurchase",
    "IsCash",
    "LimitExhaustion_cat",
)


def _source_name(uploaded_file: Any) -> str:
    if isinstance(uploaded_file, (str, Path)):
        return str(uploaded_file)
    return str(getattr(uploaded_file, "name", ""))


def _read_text(uploaded_file: Any) -> str:
    if isinstance(uploaded_file, (str, Path)):
        raw = Path(uploaded_file).read_bytes()
    else:
        if hasattr(uploaded_file, "seek"):
            uploaded_file.seek(0)
        raw = uploaded_file.read()
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8-sig")
    return raw


def _iter_records(text: str) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(file line number, fields)`` for every non-blank CSV record."""
    reader = csv.reader(io.StringIO(text), skipinitialspace=True)
    line_number = 1
    for fields in reader:
        if len(fields) > 1 or (fields and fields[0].strip()):
            yield line_number, fields
        # Quoted fields may span several physical lines.
        line_number = reader.line_num + 1


def _validate_headers(header: list[str]) -> None:
    actual = [str(col).strip() for col in header]
    if [col.lower() for col in actual] != [col.lower() for col in EXPECTED_HEADERS]:
        raise ValueError(
            "CSV headers do not match expected format: expected "
            f"{', '.join(EXPECTED_HEADERS)}; found {', '.join(actual)}"
        )


def _load_raw_statement(uploaded_file: Any) -> tuple[pd.DataFrame, list[tuple[int, str]]]:
    """Rows with the expected width, indexed by file line, plus rejected widths."""
    name = _source_name(uploaded_file).lower()
    if name and not name.endswith(SUPPORTED_EXTENSIONS):
        raise ValueError(f"Unsupported file type: {name}. Supported: csv.")

    records = list(_iter_records(_read_text(uploaded_file)))
    if not records:
        raise ValueError(f"CSV file is empty: {name or '<upload>'}")
    (_, header), body = records[0], records[1:]
    _validate_headers(header)

    width = len(EXPECTED_HEADERS)
    rows, lines, rejected = [], [], []
    for line_number, fields in body:
        if len(fields) != width:
            rejected.append((line_number, f"Expected {width} columns, found {len(fields)}"))
            continue
        rows.append(fields)
        lines.append(line_number)

    frame = pd.DataFrame(rows, columns=list(EXPECTED_HEADERS), index=pd.Index(lines, name="line"), dtype=str)
    return frame, rejected


def _parse_bool(value: str) -> bool:
    return str(value).strip().upper() == "TRUE"


def parse_transaction_row(row: dict[str, str]) -> Transaction:
    """Convert one untyped CSV row into a Transaction, raising ValueError when invalid."""
    card_id = str(row.get("CardId", "")).strip()
    if not card_id:
        raise ValueError("CardId is required")

    raw_date = str(row.get("trx_date", "")).strip()
    try:
        trx_date = datetime.datetime.strptime(raw_date, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Valid transaction date is required, got {raw_date!r}") from None

    raw_amount = str(row.get("trx_amount", "")).strip()
    amount = to_decimal(raw_amount) if raw_amount else None
    if amount is None:
        raise ValueError(f"Invalid amount {raw_amount!r}")

    return Transaction(
        card_id=card_id,
        trx_date=trx_date,
        amount=amount,
        currency=str(row.get("trx_currency", "")).strip(),
        description=str(row.get("trx_desc", "")).strip(),
        city=str(row.get("trx_city", "")).strip(),
        country=str(row.get("trx_country", "")).strip(),
        mcc=str(row.get("trx_mcc", "")).strip(),
        is_card_present=_parse_bool(row.get("IsCardPresent", "")),
        is_purchase=_parse_bool(row.get("IsPurchase", "")),
        is_cash=_parse_bool(row.get("IsCash", "")),
        trx_code=str(row.get("trx_code", "")).strip(),
        age_category=str(row.get("Age_cat", "")).strip(),
        limit_exhaustion_category=str(row.get("LimitExhaustion_cat", "")).strip(),
    )


def load_transactions(uploaded_file: Any) -> ParseResult:
    """Load a card-transaction CSV; invalid rows are reported, not raised."""
    frame, rejected = _load_raw_statement(uploaded_file)
    total_rows = len(frame) + len(rejected)
    result = ParseResult()

    for line_number, row in zip(frame.index, frame.to_dict(orient="records")):
        try:
            result.transactions.append(parse_transaction_row(row))
        except ValueError as exc:
            rejected.append((int(line_number), str(exc)))

    for line_number, message in sorted(rejected):
        logger.debug("Rejected line %d of %s: %s", line_number, _source_name(uploaded_file), message)
        result.errors.append(f"Line {line_number}: {message}")

    if result.errors:
        logger.warning(
            "Rejected %d of %d row(s) in %s",
            len(result.errors),
            total_rows,
            _source_name(uploaded_file) or "<upload>",
        )
    return result


def deduplicate_transactions(transactions: list[Transaction]) -> list[Transaction]:
    """Remove exact duplicate records across overlapping exports."""
    seen: set[Transaction] = set()
    out = []
    for txn in transactions:
        if txn in seen:
            continue
        seen.add(txn)
        out.append(txn)
    return out


def merge_transactions(uploaded_files: list[Any], drop_duplicates: bool = True) -> ParseResult:
    """Load, combine, deduplicate and sort multiple exports."""
    merged = ParseResult()
    for uploaded_file in uploaded_files:
        loaded = load_transactions(uploaded_file)
        name = _source_name(uploaded_file) or "<upload>"
        merged.transactions.extend(loaded.transactions)
        merged.errors.extend(f"{name}: {error}" for error in loaded.errors)

    if drop_duplicates:
        merged.transactions = deduplicate_transactions(merged.transactions)
    merged.transactions.sort(key=lambda txn: (txn.trx_date, txn.card_id))
    return merged
