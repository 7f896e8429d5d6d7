"""Balance arithmetic for daily delivery records.

All values are ``Decimal`` and nothing is quantized. Sums and products run
in the default context (28 significant digits), which holds every realistic
weight and price exactly, so the stored record satisfies its invariants:

    net_weight    = gross_weight - empty_weight
    total         = net_weight * price_per_kg
    remaining     = total - paid
    total_balance = remaining + old_balance
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from cageledger.domain.entities import ZERO
from cageledger.domain.errors import ValidationError, invalid_date, invalid_number


@dataclass(frozen=True)
class DerivedFields:
    """Fields computed for a record before it is persisted."""

    net_weight: Decimal
    total: Decimal
    remaining: Decimal
    old_balance: Decimal
    total_balance: Decimal


def net_weight(gross_weight: Decimal, empty_weight: Decimal) -> Decimal:
    """Goods-only weight. Negative when empty exceeds gross."""
    return gross_weight - empty_weight


def line_total(net: Decimal, price_per_kg: Decimal) -> Decimal:
    return net * price_per_kg


def remaining_amount(total: Decimal, paid: Decimal) -> Decimal:
    """Unpaid part of a record. Negative when overpaid."""
    return total - paid


def sum_remaining(remainders: Iterable[Optional[Decimal]]) -> Decimal:
    """Sum remainders, counting missing values as zero."""
    return sum((value if value is not None else ZERO for value in remainders), ZERO)


def compute_derived_fields(
    gross_weight: Decimal,
    empty_weight: Decimal,
    price_per_kg: Decimal,
    paid: Decimal,
    old_balance: Decimal = ZERO,
) -> DerivedFields:
    """Compute every derived field of a record from its raw inputs.

    Args:
        gross_weight: Weight with containers, in kilograms
        empty_weight: Container-only weight, in kilograms
        price_per_kg: Price per kilogram of goods
        paid: Amount paid against this record
        old_balance: Sum of the customer's remainders on earlier dates

    Returns:
        DerivedFields for the record
    """
    net = net_weight(gross_weight, empty_weight)
    total = line_total(net, price_per_kg)
    remaining = remaining_amount(total, paid)
    return DerivedFields(
        net_weight=net,
        total=total,
        remaining=remaining,
        old_balance=old_balance,
        total_balance=remaining + old_balance,
    )


def to_decimal(field: str, value: object) -> Decimal:
    """Convert a caller-supplied number to Decimal.

    ``None`` and empty strings count as zero. Floats are converted through
    their ``str`` form so that ``0.1`` stays ``Decimal("0.1")``.

    Raises:
        ValidationError: If the value is not a finite number
    """
    if value is None:
        return ZERO
    if isinstance(value, bool):
        raise ValidationError(invalid_number(field, value))
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        if not value.strip():
            return ZERO
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValidationError(invalid_number(field, value)) from e
    else:
        raise ValidationError(invalid_number(field, value))

    if not result.is_finite():
        raise ValidationError(invalid_number(field, value))
    return result


def to_cages(value: object) -> int:
    """Validate the cage count.

    Any integer is accepted, including zero and negatives. Integral strings
    such as ``"12"`` are converted.

    Raises:
        ValidationError: If the count is missing or not an integer
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("Number of cages is required")
    if isinstance(value, bool):
        raise ValidationError(invalid_number("cages", value))
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise ValidationError(invalid_number("cages", value)) from e
    raise ValidationError(invalid_number("cages", value))


def to_record_date(value: object) -> date:
    """Validate a record date.

    Accepts a ``date`` or an ISO ``YYYY-MM-DD`` string.

    Raises:
        ValidationError: If the value is not a well-formed calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # fromisoformat also accepts compact forms like 20240101
        if len(text) == 10 and text[4] == "-" and text[7] == "-":
            try:
                return date.fromisoformat(text)
            except ValueError as e:
                raise ValidationError(invalid_date(value)) from e
    raise ValidationError(invalid_date(value))
