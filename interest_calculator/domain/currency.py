"""Parsing and formatting of user-facing currency amounts."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, Pattern, Tuple, Union


@dataclass(frozen=True)
class Currency:
    code: str
    symbol: str
    decimals: int
    decimal_sep: str = "."
    group_sep: str = ","
    # 1,00,000 style grouping is accepted alongside 100,000
    lakh_grouping: bool = False


SUPPORTED_CURRENCIES: Dict[str, Currency] = {
    "USD": Currency(code="USD", symbol="$", decimals=2),
    "EUR": Currency(code="EUR", symbol="€", decimals=2, decimal_sep=",", group_sep="."),
    "GBP": Currency(code="GBP", symbol="£", decimals=2),
    "JPY": Currency(code="JPY", symbol="¥", decimals=0),
    "INR": Currency(code="INR", symbol="₹", decimals=2, lakh_grouping=True),
}

_PERCENT_RE = re.compile(r"^\d+(\.\d*)?$|^\.\d+$")


class AmountParseError(ValueError):
    def __init__(self, raw: object, reason: str):
        super().__init__(f"cannot parse {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


def get_currency(code: str) -> Currency:
    try:
        return SUPPORTED_CURRENCIES[code.upper()]
    except KeyError:
        raise ValueError(f"unsupported currency {code!r}") from None


def _amount_pattern(currency: Currency) -> Pattern[str]:
    group = re.escape(currency.group_sep)
    decimal = re.escape(currency.decimal_sep)
    integer = rf"\d{{1,3}}(?:{group}\d{{3}})+|\d+"
    if currency.lakh_grouping:
        integer = rf"\d{{1,2}}(?:{group}\d{{2}})*{group}\d{{3}}|" + integer
    return re.compile(rf"^(?:{integer})(?:{decimal}\d*)?$|^{decimal}\d+$")


_AMOUNT_PATTERNS: Dict[str, Pattern[str]] = {
    code: _amount_pattern(currency) for code, currency in SUPPORTED_CURRENCIES.items()
}


def _split_sign(raw: Union[str, int, float], cleaned: str) -> Tuple[bool, str]:
    negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        negative, cleaned = True, cleaned[1:-1].strip()
    if cleaned.startswith("-"):
        negative, cleaned = not negative, cleaned[1:].strip()
    if not cleaned:
        raise AmountParseError(raw, "no digits")
    return negative, cleaned


def parse_amount(raw: Union[str, int, float], currency_code: str) -> float:
    """
    Turn a form value such as "$10,000.50", "€1.234,50", "10000 USD" or "(250)" into a float.

    Plain numbers pass through unchanged. The currency's symbol, and its ISO
    code as a leading or trailing token, are stripped. Group separators must
    sit between whole digit groups and the decimal separator is the
    currency's own, so "€1,234.50" is rejected rather than misread.
    """
    if isinstance(raw, bool):
        raise AmountParseError(raw, "booleans are not amounts")
    if isinstance(raw, (int, float)):
        return float(raw)
    if not isinstance(raw, str):
        raise AmountParseError(raw, "expected a string or number")

    currency = get_currency(currency_code)
    cleaned = raw.replace("\u00a0", " ").strip()
    cleaned = re.sub(
        rf"^{currency.code}\s*|\s*{currency.code}$", "", cleaned, flags=re.IGNORECASE
    ).strip()
    cleaned = cleaned.replace(currency.symbol, "").strip()

    negative, body = _split_sign(raw, cleaned)
    if not _AMOUNT_PATTERNS[currency.code].match(body):
        raise AmountParseError(raw, f"not a {currency.code} amount")

    value = float(body.replace(currency.group_sep, "").replace(currency.decimal_sep, "."))
    return -value if negative else value


def parse_percent(raw: Union[str, int, float]) -> float:
    """Parse "5", "5%" or "-1.5 %" into a percent value (5 means 5%)."""
    if isinstance(raw, bool):
        raise AmountParseError(raw, "booleans are not rates")
    if isinstance(raw, (int, float)):
        return float(raw)
    if not isinstance(raw, str):
        raise AmountParseError(raw, "expected a string or number")

    cleaned = raw.strip()
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1]
    negative, body = _split_sign(raw, cleaned.replace(" ", ""))
    if not _PERCENT_RE.match(body):
        raise AmountParseError(raw, "not a number")
    value = float(body)
    return -value if negative else value


def format_currency(amount: float, currency_code: str) -> str:
    """Render an amount for display, e.g. 16470.094 -> "$16,470.09", 1234.5 -> "€1.234,50"."""
    if not math.isfinite(amount):
        return "n/a"
    currency = get_currency(currency_code)
    text = f"{abs(amount):,.{currency.decimals}f}"
    text = text.translate(str.maketrans({",": currency.group_sep, ".": currency.decimal_sep}))
    # no sign on amounts that round to zero
    sign = "-" if round(amount, currency.decimals) < 0 else ""
    return f"{sign}{currency.symbol}{text}"


__all__ = [
    "Currency",
    "SUPPORTED_CURRENCIES",
    "AmountParseError",
    "get_currency",
    "parse_amount",
    "parse_percent",
    "format_currency",
]
