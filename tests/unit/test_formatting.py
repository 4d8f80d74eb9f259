"""Unit tests for display strings"""

from quote_gateway.utils.formatting import format_bps, format_taeg


def test_format_taeg():
    assert format_taeg(0.1234) == "12.34 %"
    assert format_taeg(0.0) == "0.00 %"
    assert format_taeg(None) == "--- %"


def test_format_bps():
    assert format_bps(1234) == "1234 bps"
    assert format_bps(0) == "0 bps"
    assert format_bps(None) == "--- bps"
