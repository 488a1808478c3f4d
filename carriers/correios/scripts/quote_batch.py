"""
Quote Shipments in Bulk
=======================

Validates every row of a CSV of quote requests, calculates Express, Standard
and pickup quotes for the valid ones, and writes them to a new CSV.

Input columns use the API request keys:
    cepDestino, peso, comprimento, altura, largura, formato[, diametro]

Usage:
    python -m carriers.correios.scripts.quote_batch --input requests.csv --output quotes.csv
    python -m carriers.correios.scripts.quote_batch --input requests.csv --origin 01310100
    python -m carriers.correios.scripts.quote_batch --input requests.csv --dry-run
"""

import argparse
import sys
from pathlib import Path

import polars as pl

from carriers.correios.calculate_costs import calculate_costs
from carriers.correios.errors import RequestValidationError
from carriers.correios.models import DEFAULT_ORIGIN, Origin
from carriers.correios.quote import request_frame
from carriers.correios.validation import POSTAL_CODE_RE, validate_request


# =============================================================================
# CONFIGURATION
# =============================================================================

NUMERIC_INPUT_COLUMNS = {
    "peso": pl.Float64,
    "comprimento": pl.Float64,
    "altura": pl.Float64,
    "largura": pl.Float64,
    "formato": pl.Int64,
    "diametro": pl.Float64,
}

OUTPUT_COLUMNS = [
    # Request (7)
    "destination_postal_code", "weight_g", "length_cm", "height_cm",
    "width_cm", "package_format", "diameter_cm",
    # Weight and distance (4)
    "distance_factor", "cubic_weight_kg", "uses_cubic_weight", "billable_weight_kg",
    # Express (2)
    "express_cost_total", "express_days",
    # Standard (2)
    "standard_cost_total", "standard_days",
    # Pickup (2)
    "pickup_cost_total", "pickup_days",
    # Metadata (1)
    "calculator_version",
]


# =============================================================================
# HELPERS
# =============================================================================

def load_requests(path: Path) -> pl.DataFrame:
    """
    Load request rows, keeping CEPs as strings (leading zeros).

    Every cell is read as text and numeric columns are cast per cell, so an
    unparsable value only nulls its own cell and rejects its own row.
    """
    df = pl.read_csv(path, infer_schema=False)
    return df.with_columns([
        pl.col(col).cast(dtype, strict=False)
        for col, dtype in NUMERIC_INPUT_COLUMNS.items()
        if col in df.columns
    ])


def validate_rows(df: pl.DataFrame) -> tuple[list, list[tuple[int, list[str]]]]:
    """
    Validate every row.

    Returns:
        (valid requests, [(row_number, messages), ...] for invalid rows)
    """
    valid = []
    invalid = []
    for i, row in enumerate(df.iter_rows(named=True), start=1):
        try:
            valid.append(validate_request(row))
        except RequestValidationError as e:
            invalid.append((i, e.messages))
    return valid, invalid


def quote_requests(requests: list, origin: Origin) -> pl.DataFrame:
    """Calculate quotes for validated requests, keeping only output columns."""
    return calculate_costs(request_frame(requests), origin).select(OUTPUT_COLUMNS)


# =============================================================================
# MAIN
# =============================================================================

def main() -> int:
    parser = argparse.ArgumentParser(description="Quote Correios shipments from a CSV")
    parser.add_argument("--input", type=Path, required=True,
                        help="CSV of quote requests")
    parser.add_argument("--output", type=Path,
                        help="CSV to write quotes to (default: <input>_quotes.csv)")
    parser.add_argument("--origin", type=str, default=DEFAULT_ORIGIN.postal_code,
                        help=f"Origin CEP (default: {DEFAULT_ORIGIN.postal_code})")
    parser.add_argument("--dry-run", action="store_true",
                        help="Validate and calculate, but do not write output")
    args = parser.parse_args()

    output = args.output or args.input.with_name(f"{args.input.stem}_quotes.csv")
    origin = DEFAULT_ORIGIN._replace(postal_code=args.origin)

    print("=" * 60)
    print("Correios Bulk Quote")
    print("=" * 60)
    print(f"Input:  {args.input}")
    print(f"Origin: {origin.postal_code}")

    if not POSTAL_CODE_RE.fullmatch(origin.postal_code):
        print(f"\nInvalid origin CEP: {args.origin}")
        return 1

    df = load_requests(args.input)
    print(f"\nLoaded {len(df):,} request(s)")

    requests, invalid = validate_rows(df)
    if invalid:
        print(f"\nSkipping {len(invalid):,} invalid row(s):")
        for row_number, messages in invalid:
            print(f"  row {row_number}: {'; '.join(messages)}")

    if not requests:
        print("\nNo valid requests to quote.")
        return 1

    result = quote_requests(requests, origin)
    print(f"\nQuoted {len(result):,} shipment(s)")
    print(f"  Express total:  R$ {result['express_cost_total'].sum():,.2f}")
    print(f"  Standard total: R$ {result['standard_cost_total'].sum():,.2f}")

    if args.dry_run:
        print("\n[DRY RUN] Not writing output.")
        return 0

    result.write_csv(output)
    print(f"\nQuotes saved to: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
