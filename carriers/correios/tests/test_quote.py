"""
Unit Tests for Single-Request Quotes

Tests option ordering, pickup sentinel, origin injection, and failure paths.

Run with: pytest carriers/correios/tests/test_quote.py -v
"""

from unittest.mock import patch

import pytest
import polars as pl

from carriers.correios import quote as quote_module
from carriers.correios.errors import CalculationError, RequestValidationError
from carriers.correios.models import Origin, ShippingOption
from carriers.correios.quote import RateCalculator, calculate, request_frame
from carriers.correios.validation import validate_request


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def reference_request():
    """500 g, 30x20x20 cm box to the origin CEP."""
    return validate_request({
        "cepDestino": "78556100",
        "peso": 500,
        "comprimento": 30,
        "altura": 20,
        "largura": 20,
        "formato": 1,
    })


@pytest.fixture
def calculator():
    return RateCalculator()


# =============================================================================
# OPTIONS
# =============================================================================

class TestOptions:
    """Tests for the quoted option list."""

    def test_reference_scenario(self, calculator, reference_request):
        options = calculator.calculate(reference_request)
        assert options == [
            ShippingOption("04014", "Express", 37.00, 2),
            ShippingOption("04510", "Standard", 22.20, 5),
            ShippingOption("PICKUP", "Store Pickup", 0.0, 0),
        ]

    def test_fixed_order(self, calculator, reference_request):
        options = calculator.calculate(reference_request)
        assert [o.service_name for o in options] == ["Express", "Standard", "Store Pickup"]

    @pytest.mark.parametrize("cep,peso", [
        ("01310100", 1),
        ("99999999", 30000),
        ("69900000", 2750),
    ])
    def test_pickup_always_free(self, calculator, cep, peso):
        request = validate_request({
            "cepDestino": cep, "peso": peso,
            "comprimento": 105, "altura": 105, "largura": 105, "formato": 1,
        })
        options = calculator.calculate(request)
        assert len(options) == 3
        assert options[-1].service_code == "PICKUP"
        assert options[-1].price == 0
        assert options[-1].estimated_days == 0

    def test_optional_fees_zero(self, calculator, reference_request):
        for option in calculator.calculate(reference_request):
            assert option.own_hand_fee == 0.0
            assert option.receipt_notice_fee == 0.0
            assert option.declared_value_fee == 0.0

    def test_days_are_ints(self, calculator, reference_request):
        for option in calculator.calculate(reference_request):
            assert isinstance(option.estimated_days, int)
            assert option.estimated_days >= 0


# =============================================================================
# ORIGIN
# =============================================================================

class TestOrigin:
    """The origin is injected at construction."""

    def test_injected_origin_changes_distance(self, reference_request):
        # 68556100 -> 78556100 is a distance factor of 1.0
        options = RateCalculator(Origin(postal_code="68556100")).calculate(reference_request)
        assert options[0].price == pytest.approx(87.00)
        assert options[0].estimated_days == 5

    def test_module_calculate_default_origin(self, reference_request):
        assert calculate(reference_request) == RateCalculator().calculate(reference_request)

    def test_module_calculate_with_origin(self, reference_request):
        origin = Origin(postal_code="68556100")
        assert calculate(reference_request, origin)[1].price == pytest.approx(52.20)

    def test_calls_are_independent(self, calculator, reference_request):
        first = calculator.calculate(reference_request)
        assert calculator.calculate(reference_request) == first


# =============================================================================
# RAW QUOTES
# =============================================================================

class TestQuote:
    """Tests for validate-then-calculate quoting."""

    def test_quote_valid(self, calculator):
        options = calculator.quote({
            "cepDestino": "78556100", "peso": 500,
            "comprimento": 30, "altura": 20, "largura": 20, "formato": 1,
        })
        assert options[0].price == pytest.approx(37.00)

    def test_quote_default_package(self, calculator):
        """Only a CEP: the reference package is quoted."""
        options = calculator.quote({"cepDestino": "78556100"})
        assert [o.price for o in options] == [pytest.approx(37.00), pytest.approx(22.20), 0.0]

    def test_invalid_request_never_calculated(self, calculator):
        with patch.object(quote_module, "calculate_costs") as calculate_costs:
            with pytest.raises(RequestValidationError) as exc_info:
                calculator.quote({
                    "cepDestino": "78556100", "peso": -5,
                    "comprimento": 30, "altura": 20, "largura": 20, "formato": 9,
                })
        calculate_costs.assert_not_called()
        assert len(exc_info.value.messages) >= 2

    @pytest.mark.parametrize("raw", [None, ["78556100", 500], "78556100"])
    def test_non_mapping_rejected(self, calculator, raw):
        with pytest.raises(RequestValidationError) as exc_info:
            calculator.quote(raw)
        assert exc_info.value.messages == ["body: must be an object"]


# =============================================================================
# FAILURES
# =============================================================================

class TestCalculationFailure:
    """Failures after validation surface as CalculationError."""

    def test_unexpected_error_wrapped(self, calculator, reference_request):
        with patch.object(quote_module, "calculate_costs", side_effect=pl.exceptions.ComputeError("boom")):
            with pytest.raises(CalculationError) as exc_info:
                calculator.calculate(reference_request)
        assert isinstance(exc_info.value.__cause__, pl.exceptions.ComputeError)
        assert exc_info.value.code == "CALCULATION_ERROR"

    def test_contract_violation_propagates(self, calculator, reference_request):
        error = CalculationError("contract")
        with patch.object(quote_module, "calculate_costs", side_effect=error):
            with pytest.raises(CalculationError) as exc_info:
                calculator.calculate(reference_request)
        assert exc_info.value is error


# =============================================================================
# REQUEST FRAME
# =============================================================================

class TestRequestFrame:

    def test_one_row_per_request(self, reference_request):
        df = request_frame([reference_request, reference_request])
        assert len(df) == 2
        assert df["destination_postal_code"].to_list() == ["78556100", "78556100"]
        assert df["diameter_cm"].null_count() == 2
        assert df["package_format"].to_list() == [1, 1]
