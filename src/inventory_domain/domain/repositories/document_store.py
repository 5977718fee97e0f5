# src/inventory_domain/domain/repositories/document_store.py
"""Document store interface used by the inventory domain."""
from abc import ABC, abstractmethod
from typing import Any, Optional

PRODUCTS_COLLECTION = "products"
WAREHOUSES_COLLECTION = "warehouses"
WAREHOUSE_STOCKS_COLLECTION = "warehouseStocks"


class IDocumentStore(ABC):
    """
    Generic keyed document store.

    Implementations raise StoreError for every failed operation. Documents returned by
    `get` and `query` carry their id under the "id" key.
    """

    @abstractmethod
    def put(self, collection: str, doc_id: str, doc: dict[str, Any]) -> None:
        """Inserts or fully replaces the document stored under `doc_id`."""
        pass

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        """Retrieves a single document, or None when it does not exist."""
        pass

    @abstractmethod
    def query(self, collection: str, filter: dict[str, Any]) -> list[dict[str, Any]]:
        """Retrieves every document whose fields equal all of the filter's values."""
        pass
