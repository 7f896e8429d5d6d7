"""Utility functions for cageledger."""

from cageledger.utils.date_parser import parse_date
from cageledger.utils.number_parser import parse_amount, parse_weight
from cageledger.utils.customer_resolver import resolve_customer

__all__ = ["parse_date", "parse_amount", "parse_weight", "resolve_customer"]
