"""Amount and weight parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

CURRENCY_PATTERN = re.compile(r"(egp|le|l\.e\.?|[$€£])", re.IGNORECASE)
WEIGHT_UNIT_PATTERN = re.compile(r"(kgs?|kilograms?)$", re.IGNORECASE)


def _parse_decimal(text: str, kind: str) -> Decimal:
    # Thousands separators
    text = text.replace(",", "").strip()
    try:
        value = Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse {kind} '{text}': {e}")
    if not value.is_finite():
        raise ValueError(f"Could not parse {kind} '{text}': not a finite number")
    return value


def parse_amount(amount_str: str) -> Decimal:
    """Parse a money amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "EGP 123.45", "123.45 LE", "$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()

    is_negative = False
    if text.startswith("(") and text.endswith(")"):
        is_negative = True
        text = text[1:-1]

    text = CURRENCY_PATTERN.sub("", text)
    amount = _parse_decimal(text, "amount")
    return -amount if is_negative else amount


def parse_weight(weight_str: str) -> Decimal:
    """Parse a weight in kilograms, e.g. "120.5" or "120.5 kg".

    Raises:
        ValueError: If weight string cannot be parsed
    """
    if not weight_str or not weight_str.strip():
        raise ValueError("Empty weight string")

    text = WEIGHT_UNIT_PATTERN.sub("", weight_str.strip())
    return _parse_decimal(text, "weight")
