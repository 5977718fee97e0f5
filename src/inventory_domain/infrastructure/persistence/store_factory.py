"""Selects the document store implementation from settings."""

import logging

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError
from src.inventory_domain.domain.repositories.document_store import IDocumentStore
from src.inventory_domain.infrastructure.persistence.in_memory_document_store import InMemoryDocumentStore
from src.inventory_domain.infrastructure.persistence.mysql_document_store import MySQLDocumentStore

logger = logging.getLogger(__name__)


def build_document_store() -> IDocumentStore:
    backend = settings.STORE_BACKEND.lower()
    if backend == "memory":
        logger.info("Using in-memory document store")
        return InMemoryDocumentStore()
    if backend == "mysql":
        logger.info(f"Using MySQL document store (table {settings.STORE_TABLE} on {settings.DB_HOST})")
        store = MySQLDocumentStore()
        store.create_tables()
        return store
    raise ApplicationError(f"Unsupported STORE_BACKEND '{settings.STORE_BACKEND}'. Expected 'memory' or 'mysql'.")
