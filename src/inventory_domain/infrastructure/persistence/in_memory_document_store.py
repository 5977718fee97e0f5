# src/inventory_domain/infrastructure/persistence/in_memory_document_store.py
"""In-memory implementation of the document store."""

import copy
import logging
from typing import Any, Optional

from src.inventory_domain.domain.repositories.document_store import IDocumentStore

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(IDocumentStore):
    """Dictionary-backed document store. Queries yield documents in first-insertion order."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def put(self, collection: str, doc_id: str, doc: dict[str, Any]) -> None:
        body = copy.deepcopy(doc)
        body.pop("id", None)
        self._collections.setdefault(collection, {})[doc_id] = body
        logger.debug(f"Stored {collection}/{doc_id}")

    def get(self, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        body = self._collections.get(collection, {}).get(doc_id)
        if body is None:
            return None
        return self._with_id(doc_id, body)

    def query(self, collection: str, filter: dict[str, Any]) -> list[dict[str, Any]]:
        return [
            self._with_id(doc_id, body)
            for doc_id, body in self._collections.get(collection, {}).items()
            if all(key in body and body[key] == value for key, value in filter.items())
        ]

    def count(self, collection: str) -> int:
        """Returns the number of documents in a collection."""
        return len(self._collections.get(collection, {}))

    @staticmethod
    def _with_id(doc_id: str, body: dict[str, Any]) -> dict[str, Any]:
        document = copy.deepcopy(body)
        document["id"] = doc_id
        return document
