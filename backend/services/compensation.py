"""Currency range detection shared by the scorer and the field extractor."""

import re

CURRENCY_SYMBOLS = "$€£¥₹"
CURRENCY_CODES: tuple[str, ...] = (
    "USD", "EUR", "GBP", "CAD", "AUD", "NZD", "CHF", "JPY", "INR", "SGD",
    "HKD", "CNY", "SEK", "NOK", "DKK", "PLN", "BRL", "MXN", "ZAR", "ILS",
)

# 120,000 / 120000.50 / 120k / 120K; only starts at the first digit of a number
_AMOUNT = r"(?<![\d.,])\d[\d,]*(?:\.\d+)?\s?[kK]?"
_SEP = r"\s*(?:[-–—]+|to)\s*"
_SYMBOL = f"[{re.escape(CURRENCY_SYMBOLS)}]"
_CODE = r"\b(?:" + "|".join(CURRENCY_CODES) + r")\b"

# Ordered: symbol-prefixed, code-prefixed, code-suffixed.
RANGE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(rf"{_SYMBOL}\s?{_AMOUNT}{_SEP}{_SYMBOL}?\s?{_AMOUNT}"),
    re.compile(rf"{_CODE}\s?{_SYMBOL}?\s?{_AMOUNT}{_SEP}(?:{_CODE}\s?)?{_SYMBOL}?\s?{_AMOUNT}"),
    re.compile(rf"{_AMOUNT}{_SEP}{_AMOUNT}\s?{_CODE}"),
)

# "Salary: $140,000" counts as disclosed pay even without a range.
LABELED_AMOUNT_WINDOW = 30
LABELED_AMOUNT_RE = re.compile(
    rf"\b(?:salary|compensation)\b[^\n]{{0,{LABELED_AMOUNT_WINDOW}}}?{_SYMBOL}\s?\d[\d,]*",
    re.IGNORECASE,
)


def find_compensation_range(text: str) -> str:
    """First currency range in ``text``, stripped; ``""`` when none."""
    for pattern in RANGE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0).strip()
    return ""


def has_compensation(text: str) -> bool:
    return bool(find_compensation_range(text)) or bool(LABELED_AMOUNT_RE.search(text))
