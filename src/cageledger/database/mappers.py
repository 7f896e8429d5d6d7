"""Mapper functions to convert between SQLAlchemy rows and store documents.

Documents are plain dicts keyed by column name. This keeps the SQLAlchemy
models out of the domain layer, which only ever sees documents.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from cageledger.database.base import Document
from cageledger.database.models import Base, DecimalText

# Assigned by the store, never taken from caller-supplied fields
READ_ONLY_FIELDS = frozenset({"id", "created_at"})


def row_to_document(row: Base) -> Document:
    """Convert a SQLAlchemy row into a document dict."""
    return {column.name: getattr(row, column.name) for column in row.__table__.columns}


def unknown_fields(model: type[Base], fields: dict[str, Any]) -> list[str]:
    """Return the field names that have no matching column on the model."""
    columns = set(model.__table__.columns.keys())
    return sorted(name for name in fields if name not in columns)


def decimal_columns(model: type[Base]) -> frozenset[str]:
    """Return the names of the model's exact-decimal columns."""
    return frozenset(
        column.name for column in model.__table__.columns if isinstance(column.type, DecimalText)
    )


def as_decimal(value: Any) -> Optional[Decimal]:
    """Coerce a filter value for comparison against a decimal column."""
    if value is None or isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOperation(f"Not a decimal: {value!r}")
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def apply_fields(row: Base, fields: dict[str, Any]) -> None:
    """Copy writable fields onto a row."""
    for name, value in fields.items():
        if name in READ_ONLY_FIELDS:
            continue
        setattr(row, name, value)
