"""Aggregation of delivery records into daily totals."""

from typing import Iterable

from cageledger.domain.entities import DailySummary, Transaction


def summarize(transactions: Iterable[Transaction]) -> DailySummary:
    """Fold transactions into a DailySummary.

    Sums cages, net weight, total, paid and remaining. An empty input yields
    the all-zero summary. No I/O.

    Args:
        transactions: Already-loaded transactions

    Returns:
        DailySummary with the totals
    """
    result = DailySummary()
    for txn in transactions:
        result = combine(
            result,
            DailySummary(
                total_cages=txn.cages,
                total_weight=txn.net_weight,
                total_amount=txn.total,
                total_paid=txn.paid,
                total_remaining=txn.remaining,
            ),
        )
    return result


def combine(left: DailySummary, right: DailySummary) -> DailySummary:
    """Add two summaries field by field.

    ``combine(summarize(a), summarize(b)) == summarize([*a, *b])``.
    """
    return DailySummary(
        total_cages=left.total_cages + right.total_cages,
        total_weight=left.total_weight + right.total_weight,
        total_amount=left.total_amount + right.total_amount,
        total_paid=left.total_paid + right.total_paid,
        total_remaining=left.total_remaining + right.total_remaining,
    )
