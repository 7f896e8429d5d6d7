"""Abstract document store interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Any

CUSTOMER = "Customer"
DAILY_RECORD = "DailyRecord"

Document = dict[str, Any]


@dataclass(frozen=True)
class StoreQuery:
    """Filters and ordering for ``Store.query``.

    Attributes:
        equal: Field name to value; documents must match every entry
        less_than: Field name to bound; documents must be strictly below every bound
        order_by: Optional field to sort by
        descending: Sort direction for ``order_by``
    """

    equal: dict[str, Any] = field(default_factory=dict)
    less_than: dict[str, Any] = field(default_factory=dict)
    order_by: Optional[str] = None
    descending: bool = False


class Store(ABC):
    """Abstract document store for cageledger.

    Documents are plain dicts keyed by collection and a store-assigned id.
    Every document read back carries ``id`` and ``created_at`` in addition to
    the fields it was inserted with. Implementations raise ``StorageError``
    for any backend failure, including unknown collections or fields.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Create whatever the backend needs to hold the collections."""
        pass

    @abstractmethod
    def insert(self, collection: str, fields: Document) -> Document:
        """Insert a document in one write. Returns ``{"id", "created_at"}``."""
        pass

    @abstractmethod
    def get(self, collection: str, document_id: str) -> Optional[Document]:
        """Get a document by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def query(self, collection: str, query: Optional[StoreQuery] = None) -> list[Document]:
        """Return documents matching the query, in the requested order."""
        pass

    @abstractmethod
    def update(self, collection: str, document_id: str, fields: Document) -> Optional[Document]:
        """Apply a partial update. Returns the full document, or None if it does not exist."""
        pass

    @abstractmethod
    def delete(self, collection: str, document_id: str) -> bool:
        """Delete a document. Returns False if it did not exist."""
        pass
