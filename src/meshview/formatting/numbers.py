"""Number formatters - convert raw metric values into dashboard strings.

Every formatter here is total: a missing value renders as ``PLACEHOLDER`` and
malformed numbers degrade to a placeholder string instead of raising.
"""

import math
import os
import re
from decimal import Decimal, Context, ROUND_HALF_UP
from typing import Any, Callable, Dict, Optional, Tuple, Union
from ..contracts.metric_kinds import MetricKind
from ..utils.errors import UnknownMetricKindError

PLACEHOLDER = "---"
NOT_AVAILABLE = "N/A"

SI_PREFIXES = ["y", "z", "a", "f", "p", "n", "µ", "m", "", "k", "M", "G", "T", "P", "E", "Z", "Y"]

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_COMMA_GROUP = re.compile(r"(\d+)(\d{3})")

# Wide enough to quantize any finite double without InvalidOperation
_WIDE = Context(prec=800)


def _use_ascii(ascii_mode: Optional[bool] = None) -> bool:
    """Resolve whether to use ASCII unit suffixes (checked at format time)."""
    if ascii_mode is not None:
        return bool(ascii_mode)
    return os.environ.get("MESHVIEW_ASCII", "").lower() in ("1", "true", "yes")


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _to_number(value: Any) -> float:
    """Numeric coercion: None counts as 0, unparsable text as NaN."""
    if value is None:
        return 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        return _int_to_float(value)
    try:
        return float(str(value).strip() or 0)
    except (TypeError, ValueError):
        return math.nan


def _parse_float(value: Any) -> Optional[float]:
    """Parse the leading float of a value ("0.25s" -> 0.25); None if there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        result = value
    elif isinstance(value, int):
        result = _int_to_float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if not match:
            return None
        result = float(match.group(1))
    return None if math.isnan(result) else result


def _number_to_string(value: Any) -> str:
    """Stringify a number without a trailing '.0' on integral floats."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    text = repr(value)
    if abs(value) >= 1e21 or abs(value) < 1e-6:
        mantissa, _, exponent = text.partition("e")
        return f"{mantissa}e{int(exponent):+d}"
    if "e" in text:
        return format(Decimal(text), "f")
    if text.endswith(".0"):
        return text[:-2]
    return text


def _round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward positive infinity."""
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    if value - floor >= 0.5:
        floor += 1
    return float(floor)


def round_number(num: float, dec: int) -> float:
    """Round a number to a given number of decimals."""
    factor = 10 ** dec
    return _round_half_up(num * factor) / factor


def add_commas(value: Any) -> str:
    """Add thousands separators to a number (converting it to a string in the process)."""
    parts = _number_to_string(value).split(".")
    integer = parts[0]
    fraction = "." + parts[1] if len(parts) > 1 else ""
    while _COMMA_GROUP.search(integer):
        integer = _COMMA_GROUP.sub(r"\1,\2", integer, count=1)
    return integer + fraction


def format_with_comma(value: Any) -> str:
    """Format a count with thousands separators; no unit, no extra rounding."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, int) and not isinstance(value, bool):
        return add_commas(str(value))

    number = _to_number(value)
    if math.isnan(number):
        return PLACEHOLDER
    return add_commas(_number_to_string(number))


def _exponential_parts(value: float, significant: int) -> Tuple[str, int]:
    """
    Split a positive number into its leading significant digits and decimal exponent.

    Ties round away from zero on the exact binary value, so 1.125 gives
    ("113", 0) for three digits.
    """
    if value == 0:
        return "0" * max(significant, 1), 0
    if significant <= 0:
        shortest = Decimal(repr(value)).normalize()
        return "".join(str(d) for d in shortest.as_tuple().digits), shortest.adjusted()

    exact = Decimal(value)
    exponent = exact.adjusted()
    rounded = exact.quantize(Decimal(1).scaleb(exponent - significant + 1), rounding=ROUND_HALF_UP, context=_WIDE)
    if rounded.adjusted() > exponent:
        exponent += 1
        rounded = exact.quantize(Decimal(1).scaleb(exponent - significant + 1), rounding=ROUND_HALF_UP, context=_WIDE)
    digits = "".join(str(d) for d in rounded.as_tuple().digits)
    return digits.ljust(significant, "0"), exponent


def format_si(value: Any, precision: int = 3) -> str:
    """
    Format a number with `precision` significant digits and an SI prefix.

    Trailing zeros are kept so widths line up in tables:
    1 -> "1.00", 12.3456 -> "12.3", 1500 -> "1.50k", 0.0042 -> "4.20m".
    """
    if value is None:
        return PLACEHOLDER
    number = _to_number(value)
    if math.isnan(number):
        return PLACEHOLDER
    if math.isinf(number):
        return _number_to_string(number)

    sign = "-" if number < 0 else ""
    magnitude = abs(number)
    digits, exponent = _exponential_parts(magnitude, precision)
    prefix_exponent = max(-8, min(8, exponent // 3))
    i = exponent - prefix_exponent * 3 + 1
    n = len(digits)

    if i == n:
        coefficient = digits
    elif i > n:
        coefficient = digits + "0" * (i - n)
    elif i > 0:
        coefficient = digits[:i] + "." + digits[i:]
    else:
        tail, _ = _exponential_parts(magnitude, max(0, precision + i - 1))
        coefficient = "0." + "0" * (-i) + tail

    return sign + add_commas(coefficient) + SI_PREFIXES[8 + prefix_exponent]


def format_percent(value: Any, decimals: int = 2) -> str:
    """Format a ratio as a percentage: 0.9567 -> "95.67%"."""
    if value is None:
        return PLACEHOLDER
    number = _to_number(value)
    if math.isnan(number):
        return PLACEHOLDER
    scaled = number * 100
    if math.isinf(scaled):
        return _number_to_string(scaled) + "%"

    rounded = Decimal(scaled).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=_WIDE)
    text = format(abs(rounded), "f")
    # A negative value that rounds to zero loses its sign
    if rounded < 0:
        text = "-" + text
    return text + "%"


def _nice_latency(value: float) -> str:
    return add_commas(_round_half_up(value))


def format_latency_sec(latency: Any, ascii_mode: Optional[bool] = None) -> str:
    """
    Format a duration given in seconds.

    Sub-millisecond values are shown in microseconds and sub-second values in
    milliseconds, both rounded to whole units; anything longer gets three
    significant digits. Strings are parsed by their leading number.
    """
    seconds = _parse_float(latency)
    if seconds is None:
        return PLACEHOLDER
    if seconds == 0.0:
        return "0 s"
    if seconds < 0.001:
        micro = "us" if _use_ascii(ascii_mode) else "µs"
        return f"{_nice_latency(seconds * 1000 * 1000)} {micro}"
    if seconds < 1.0:
        return f"{_nice_latency(seconds * 1000)} ms"
    return f"{format_si(seconds)} s"


def format_latency_ms(latency: Any, ascii_mode: Optional[bool] = None) -> str:
    """Format a duration given in milliseconds."""
    if latency is None:
        return PLACEHOLDER
    return format_latency_sec(_to_number(latency) / 1000, ascii_mode=ascii_mode)


def style_num(number: Any, unit: str = "", truncate: bool = True) -> str:
    """
    Shorten and style a number.

    With `truncate`, values above 999 are scaled by powers of 1000 and get a
    k/M/G suffix (three decimals kept). Without it, values above 999 are
    rounded to integers and comma-separated. Everything else keeps two
    decimals. `unit` is appended verbatim.
    """
    number = _to_number(number)
    if math.isnan(number):
        return NOT_AVAILABLE

    if truncate and number > 999999999:
        return add_commas(round_number(number / 1000000000.0, 3)) + "G" + unit
    elif truncate and number > 999999:
        return add_commas(round_number(number / 1000000.0, 3)) + "M" + unit
    elif truncate and number > 999:
        return add_commas(round_number(number / 1000.0, 3)) + "k" + unit
    elif number > 999:
        return add_commas(round_number(number, 0)) + unit
    else:
        return add_commas(round_number(number, 2)) + unit


def _format_request_rate(value: Any) -> str:
    return PLACEHOLDER if value is None else style_num(value, " RPS", True)


def _format_untruncated(value: Any) -> str:
    # No absence check here: None coerces to 0 and NaN becomes "N/A"
    return style_num(value, "", False)


def _format_no_unit(value: Any) -> str:
    return PLACEHOLDER if value is None else style_num(value, "", True)


METRIC_TO_FORMATTER: Dict[MetricKind, Callable[[Any], str]] = {
    MetricKind.REQUEST_RATE: _format_request_rate,
    MetricKind.SUCCESS_RATE: format_percent,
    MetricKind.LATENCY: format_latency_ms,
    MetricKind.UNTRUNCATED: _format_untruncated,
    MetricKind.NO_UNIT: _format_no_unit,
}


def format_metric(kind: Union[MetricKind, str], value: Any) -> str:
    """
    Format a metric value with the formatter registered for its kind.

    Raises:
        UnknownMetricKindError: If `kind` is not a MetricKind
    """
    try:
        metric_kind = MetricKind(kind)
    except ValueError:
        expected = ", ".join(k.value for k in MetricKind)
        raise UnknownMetricKindError(f"Unknown metric kind: {kind!r} (expected one of {expected})") from None
    return METRIC_TO_FORMATTER[metric_kind](value)


def numeric_sort_key(value: Optional[float]) -> float:
    """Sort key for table columns; missing values sort as -1."""
    return -1 if value is None else value
