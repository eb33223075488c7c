"""Tests for number formatters."""

import pytest
from meshview.contracts.metric_kinds import MetricKind
from meshview.formatting.numbers import (
    METRIC_TO_FORMATTER,
    add_commas,
    format_latency_ms,
    format_latency_sec,
    format_metric,
    format_percent,
    format_si,
    format_with_comma,
    numeric_sort_key,
    round_number,
    style_num,
)
from meshview.utils.errors import UnknownMetricKindError


@pytest.fixture(autouse=True)
def no_ascii_env(monkeypatch):
    """Keep MESHVIEW_ASCII from the outer environment out of the tests."""
    monkeypatch.delenv("MESHVIEW_ASCII", raising=False)


class TestAddCommas:
    """Test thousands separator insertion."""
    
    def test_integer(self):
        assert add_commas(1234567) == "1,234,567"
    
    def test_fraction_untouched(self):
        assert add_commas(1234567.891) == "1,234,567.891"
    
    def test_integral_float_has_no_decimal_point(self):
        assert add_commas(1500.0) == "1,500"
    
    def test_short_and_negative(self):
        assert add_commas(999) == "999"
        assert add_commas(-1234) == "-1,234"
    
    def test_string_input(self):
        assert add_commas("1234.5") == "1,234.5"


class TestRoundNumber:
    """Test decimal rounding."""
    
    def test_rounds_to_decimals(self):
        assert round_number(1.23456, 3) == 1.235
        assert round_number(12.3456, 2) == 12.35
    
    def test_ties_round_up(self):
        assert round_number(2.5, 0) == 3.0
        assert round_number(-2.5, 0) == -2.0


class TestFormatWithComma:
    """Test comma formatting of counts."""
    
    def test_absent(self):
        assert format_with_comma(None) == "---"
    
    def test_nan_is_placeholder(self):
        assert format_with_comma(float("nan")) == "---"
    
    def test_values(self):
        assert format_with_comma(0) == "0"
        assert format_with_comma(1234567) == "1,234,567"
        assert format_with_comma(1234.5678) == "1,234.5678"
        assert format_with_comma(-9876543.21) == "-9,876,543.21"
        assert format_with_comma(12.0) == "12"
    
    def test_large_counts_keep_every_digit(self):
        assert format_with_comma(1234567890123) == "1,234,567,890,123"
        assert format_with_comma(98765432109876.0) == "98,765,432,109,876"
        assert format_with_comma(12345678901234567890) == "12,345,678,901,234,567,890"
    
    def test_float_uses_shortest_digits(self):
        assert format_with_comma(0.1 + 0.2) == "0.30000000000000004"
        assert format_with_comma(1e16) == "10,000,000,000,000,000"


class TestStyleNum:
    """Test generic scaled-unit formatting."""
    
    def test_truncated_thousands(self):
        assert style_num(1500, "", True) == "1.5k"
    
    def test_untruncated_thousands(self):
        assert style_num(1500, "", False) == "1,500"
    
    def test_nan(self):
        assert style_num(float("nan"), "", True) == "N/A"
        assert style_num("abc") == "N/A"
    
    def test_millions_and_billions(self):
        assert style_num(1234567, " RPS") == "1.235M RPS"
        assert style_num(2500000000) == "2.5G"
        assert style_num(1.5e12) == "1,500G"
    
    def test_small_values_keep_two_decimals(self):
        assert style_num(999) == "999"
        assert style_num(12.3456) == "12.35"
        assert style_num(0.456) == "0.46"
    
    def test_rounding_can_reach_next_unit_value(self):
        assert style_num(999.999) == "1k"
    
    def test_untruncated_rounds_to_integer(self):
        assert style_num(1234.5, "", False) == "1,235"
    
    def test_negative_values_are_not_truncated(self):
        assert style_num(-5000) == "-5,000"
    
    def test_none_coerces_to_zero(self):
        assert style_num(None, "", False) == "0"


class TestFormatSi:
    """Test SI-prefixed formatting."""
    
    def test_three_significant_digits(self):
        assert format_si(1) == "1.00"
        assert format_si(12.3456) == "12.3"
        assert format_si(123.456) == "123"
        assert format_si(1500) == "1.50k"
    
    def test_rounding_carries_into_next_prefix(self):
        assert format_si(999600) == "1.00M"
    
    def test_small_and_signed(self):
        assert format_si(0.0042) == "4.20m"
        assert format_si(-1500) == "-1.50k"
        assert format_si(0) == "0.00"
    
    def test_absent(self):
        assert format_si(None) == "---"


class TestFormatLatencySec:
    """Test latency formatting from seconds."""
    
    def test_zero(self):
        assert format_latency_sec(0) == "0 s"
        assert format_latency_sec("0") == "0 s"
    
    def test_microseconds(self):
        assert format_latency_sec(0.0005) == "500 µs"
    
    def test_microseconds_rounding_to_thousand(self):
        assert format_latency_sec(0.00099999) == "1,000 µs"
    
    def test_milliseconds(self):
        assert format_latency_sec(0.25) == "250 ms"
        assert format_latency_sec(0.999) == "999 ms"
        assert format_latency_sec(0.0012345) == "1 ms"
    
    def test_seconds(self):
        assert format_latency_sec(12.3456) == "12.3 s"
        assert format_latency_sec(1) == "1.00 s"
        assert format_latency_sec(1500) == "1.50k s"
    
    def test_string_input(self):
        assert format_latency_sec("0.25") == "250 ms"
        assert format_latency_sec("0.25s") == "250 ms"
    
    def test_unparsable(self):
        assert format_latency_sec(None) == "---"
        assert format_latency_sec("abc") == "---"
        assert format_latency_sec(float("nan")) == "---"
    
    def test_ascii_mode(self):
        assert format_latency_sec(0.0005, ascii_mode=True) == "500 us"
    
    def test_ascii_env(self, monkeypatch):
        monkeypatch.setenv("MESHVIEW_ASCII", "1")
        assert format_latency_sec(0.0005) == "500 us"
        assert format_latency_sec(0.0005, ascii_mode=False) == "500 µs"


class TestFormatLatencyMs:
    """Test latency formatting from milliseconds."""
    
    def test_absent(self):
        assert format_latency_ms(None) == "---"
    
    def test_delegates_to_seconds(self):
        assert format_latency_ms(250) == "250 ms"
        assert format_latency_ms(12345.6) == "12.3 s"
        assert format_latency_ms(0.5) == "500 µs"
        assert format_latency_ms(0) == "0 s"
    
    def test_nan(self):
        assert format_latency_ms(float("nan")) == "---"


class TestFormatPercent:
    """Test success ratio percentages."""
    
    def test_two_decimals(self):
        assert format_percent(0.9567) == "95.67%"
        assert format_percent(1) == "100.00%"
        assert format_percent(0) == "0.00%"
    
    def test_absent(self):
        assert format_percent(None) == "---"
    
    def test_nan(self):
        assert format_percent(float("nan")) == "---"


class TestMetricDispatch:
    """Test the metric kind to formatter table."""
    
    def test_every_kind_has_formatter(self):
        assert set(METRIC_TO_FORMATTER) == set(MetricKind)
        assert len(METRIC_TO_FORMATTER) == 5
    
    @pytest.mark.parametrize("kind", ["REQUEST_RATE", "SUCCESS_RATE", "LATENCY", "NO_UNIT"])
    def test_absent_renders_placeholder(self, kind):
        assert format_metric(kind, None) == "---"
    
    def test_request_rate(self):
        assert format_metric(MetricKind.REQUEST_RATE, 1500) == "1.5k RPS"
        assert format_metric(MetricKind.REQUEST_RATE, 12.5) == "12.5 RPS"
    
    def test_success_rate(self):
        assert format_metric(MetricKind.SUCCESS_RATE, 0.5) == "50.00%"
        assert format_metric(MetricKind.SUCCESS_RATE, float("nan")) == "---"
    
    def test_latency(self):
        assert format_metric(MetricKind.LATENCY, 250) == "250 ms"
    
    def test_untruncated_distinguishes_absent_and_nan(self):
        assert format_metric(MetricKind.UNTRUNCATED, 12345) == "12,345"
        assert format_metric(MetricKind.UNTRUNCATED, float("nan")) == "N/A"
        assert format_metric(MetricKind.UNTRUNCATED, None) == "0"
    
    def test_no_unit(self):
        assert format_metric(MetricKind.NO_UNIT, 1500) == "1.5k"
    
    def test_unknown_kind(self):
        with pytest.raises(UnknownMetricKindError):
            format_metric("THROUGHPUT", 1)


class TestNumericSortKey:
    """Test table sort key."""
    
    def test_missing_values_sort_first(self):
        assert sorted([3, None, 1], key=numeric_sort_key) == [None, 1, 3]
    
    def test_missing_sorts_as_minus_one(self):
        assert numeric_sort_key(None) == -1
