"""Integer minor units <-> human decimal strings.

Every function here is total: malformed input degrades to zero or to a
literal passthrough, it never raises.
"""

import re

_DECIMAL_RE = re.compile(r"[+-]?\d+")
_HEX_RE = re.compile(r"0[xX][0-9a-fA-F]*")
_THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")


def parse_int_or_zero(value: str | int | None) -> int:
    """Parse a base-10 or 0x-prefixed base-16 literal. None / malformed -> 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return 0
    text = value.strip()
    if _HEX_RE.fullmatch(text):
        digits = text[2:]
        return int(digits, 16) if digits else 0
    if _DECIMAL_RE.fullmatch(text):
        return int(text)
    return 0


def _parse_strict(value: str | int) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if _HEX_RE.fullmatch(text) and len(text) > 2:
        return int(text[2:], 16)
    if _DECIMAL_RE.fullmatch(text):
        return int(text)
    return None


def format_integer(digits: str) -> str:
    """Insert thousands separators into a run of digits: 1234567 -> 1,234,567."""
    return _THOUSANDS_RE.sub(",", digits)


def format_number(text: str) -> str:
    """Thousands separators left of the decimal point only."""
    if "." in text:
        whole, fraction = text.split(".", 1)
        return f"{format_integer(whole)}.{fraction}"
    return format_integer(text)


def to_decimal_string(raw: str | int, decimals: int) -> str:
    """Render minor units as a decimal string: (1500000, 6) -> "1.5".

    Trailing fractional zeros are stripped and the whole part is thousands
    separated. Malformed text is returned unmodified.
    """
    value = _parse_strict(raw)
    if value is None:
        return str(raw)
    sign = "-" if value < 0 else ""
    value = abs(value)
    decimals = max(int(decimals), 0)
    base = 10**decimals
    whole, fraction = divmod(value, base)
    whole_text = format_integer(str(whole))
    if fraction == 0:
        return f"{sign}{whole_text}"
    fraction_text = str(fraction).rjust(decimals, "0").rstrip("0")
    return f"{sign}{whole_text}.{fraction_text}"


def format_large_number(text: str | int | None) -> str:
    """Integer with thousands separators; malformed text passes through."""
    if text is None:
        return "0"
    value = _parse_strict(text)
    if value is None:
        return str(text)
    return to_decimal_string(value, 0)


def format_native_amount(raw: str | int | None, symbol: str, decimals: int, fallback_unit: str) -> str:
    """"1.5 ETH". Malformed raw text is shown as-is with the minor-unit label instead ("12abc wei")."""
    if raw is None:
        return f"0 {symbol}"
    value = _parse_strict(raw)
    if value is None:
        return f"{format_number(str(raw))} {fallback_unit}"
    return f"{to_decimal_string(value, decimals)} {symbol}"


def shorten_address(address: str | None, head: int = 6, tail: int = 4) -> str:
    """0xabcdef...1234 style. Missing address -> "unknown"."""
    if not address:
        return "unknown"
    lowered = address.lower()
    if len(lowered) <= head + tail:
        return lowered
    return f"{lowered[:head]}...{lowered[-tail:]}"
