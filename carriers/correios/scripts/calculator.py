"""
Correios Shipping Quote Calculator
==================================

Interactive CLI tool to quote a single shipment.

Usage:
    python -m carriers.correios.scripts.calculator
"""

import sys

import polars as pl

from carriers.correios.calculate_costs import calculate_costs
from carriers.correios.errors import RequestValidationError
from carriers.correios.models import DEFAULT_ORIGIN, PackageFormat
from carriers.correios.quote import options_from_row, request_frame
from carriers.correios.validation import ShippingRequest, normalize_postal_code, validate_request
from carriers.correios.version import VERSION


def _prompt_number(label: str, default: float) -> float | str:
    """Prompt for a number; unparsable input is returned as text for validation to reject."""
    text = input(f"{label} [default: {default:g}]: ").strip()
    if not text:
        return default
    try:
        return float(text.replace(",", "."))
    except ValueError:
        return text


def _prompt_format(default: int) -> int | str:
    """Prompt for a format choice; only an empty answer takes the default."""
    text = input(f"Select (1-3) [default: {default}]: ").strip()
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        return text


def get_user_input() -> dict:
    """Prompt user for shipment details, keyed like an API request."""
    print("\n=== Correios Shipping Quote Calculator ===")
    print(f"Version: {VERSION}")
    print(f"Origin CEP: {DEFAULT_ORIGIN.postal_code}\n")

    cep = normalize_postal_code(input("Destination CEP: ").strip())

    weight = _prompt_number("Weight (g, 1-30000)", DEFAULT_ORIGIN.default_weight_g)
    length = _prompt_number("Length (cm, 11-105)", DEFAULT_ORIGIN.default_length_cm)
    height = _prompt_number("Height (cm, 2-105)", DEFAULT_ORIGIN.default_height_cm)
    width = _prompt_number("Width (cm, 11-105)", DEFAULT_ORIGIN.default_width_cm)

    print("\nPackage format:")
    print("  1. Box / package")
    print("  2. Roll / prism")
    print("  3. Envelope")
    package_format = _prompt_format(DEFAULT_ORIGIN.default_format)

    return {
        "cepDestino": cep,
        "peso": weight,
        "comprimento": length,
        "altura": height,
        "largura": width,
        "formato": package_format,
    }


def print_results(df: pl.DataFrame, request: ShippingRequest) -> None:
    """Print calculation results."""
    row = df.row(0, named=True)

    print("\n" + "=" * 50)
    print("QUOTE RESULTS")
    print("=" * 50)

    # Input summary
    print(
        f"\nShipment: {request.length_cm:g}x{request.height_cm:g}x{request.width_cm:g} cm, "
        f"{request.weight_g:g} g ({PackageFormat(request.package_format).name.lower()})"
    )
    print(f"Destination: CEP {request.destination_postal_code}")
    print(f"Distance factor: {row['distance_factor']:.4f}")

    # Weight calculations
    print(f"\nBillable weight: {row['billable_weight_kg']:.3f} kg", end="")
    if row['uses_cubic_weight']:
        print(f" (cubic: {row['cubic_weight_kg']:.3f} kg)")
    else:
        print(" (actual)")

    # Options
    print("\n--- Options ---")
    for option in options_from_row(row):
        print(
            f"{option.service_name:<14} ({option.service_code:>6})  "
            f"R$ {option.price:>8.2f}  {option.estimated_days:>2} day(s)"
        )

    print("=" * 50)


def main() -> int:
    raw = get_user_input()

    try:
        request = validate_request(raw)
    except RequestValidationError as e:
        print("\nInvalid shipment:")
        for message in e.messages:
            print(f"  - {message}")
        return 1

    df = calculate_costs(request_frame([request]))
    print_results(df, request)
    return 0


if __name__ == "__main__":
    sys.exit(main())
