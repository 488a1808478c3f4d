"""
Unit Tests for Bulk Quoting

Run with: pytest carriers/correios/tests/test_quote_batch.py -v
"""

import pytest

from carriers.correios.models import DEFAULT_ORIGIN
from carriers.correios.scripts.quote_batch import (
    OUTPUT_COLUMNS,
    load_requests,
    quote_requests,
    validate_rows,
)


@pytest.fixture
def requests_csv(tmp_path):
    """Two valid rows (one with leading-zero CEP) and one invalid row."""
    path = tmp_path / "requests.csv"
    path.write_text(
        "cepDestino,peso,comprimento,altura,largura,formato,diametro\n"
        "78556100,500,30,20,20,1,\n"
        "01310100,1200,40,10,30,2,8\n"
        "78556100,-5,30,20,20,9,\n"
    )
    return path


class TestQuoteBatch:

    def test_leading_zeros_kept(self, requests_csv):
        df = load_requests(requests_csv)
        assert df["cepDestino"].to_list()[1] == "01310100"

    def test_invalid_rows_reported(self, requests_csv):
        valid, invalid = validate_rows(load_requests(requests_csv))
        assert len(valid) == 2
        assert [row for row, _ in invalid] == [3]
        assert len(invalid[0][1]) >= 2

    def test_quotes_valid_rows(self, requests_csv):
        valid, _ = validate_rows(load_requests(requests_csv))
        result = quote_requests(valid, DEFAULT_ORIGIN)
        assert result.columns == OUTPUT_COLUMNS
        assert result["express_cost_total"][0] == pytest.approx(37.00)
        assert result["standard_cost_total"][0] == pytest.approx(22.20)
        assert result["pickup_cost_total"].to_list() == [0.0, 0.0]

    def test_unparsable_cell_rejects_only_its_row(self, tmp_path):
        path = tmp_path / "requests.csv"
        path.write_text(
            "cepDestino,peso,comprimento,altura,largura,formato\n"
            "78556100,500,30,20,20,1\n"
            "78556100,heavy,30,20,20,x\n"
            "01310100,1200,40,10,30,2\n"
        )
        valid, invalid = validate_rows(load_requests(path))
        assert len(valid) == 2
        assert [row for row, _ in invalid] == [2]
        assert [m.split(":")[0] for m in invalid[0][1]] == ["peso", "formato"]
