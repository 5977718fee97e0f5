# src/inventory_domain/infrastructure/persistence/mysql_document_store.py
"""MySQL implementation of the document store."""

import json
import logging
from typing import Any, Optional

import mysql.connector
from mysql.connector import Error

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import StoreError
from src.inventory_domain.domain.repositories.document_store import IDocumentStore

logger = logging.getLogger(__name__)


class MySQLDocumentStore(IDocumentStore):
    """Stores every collection in one table of JSON documents keyed by (collection, doc_id)."""

    def __init__(self, table_name: Optional[str] = None) -> None:
        """Initializes the store."""
        self._connection = None
        self.table_name = table_name or settings.STORE_TABLE

    def _get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise StoreError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    def create_tables(self) -> None:
        """Creates the document table if it does not exist yet."""
        create_documents_table_query = f"""
        CREATE TABLE IF NOT EXISTS {self.table_name} (
            id BIGINT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            collection VARCHAR(255) NOT NULL,
            doc_id VARCHAR(512) NOT NULL,
            body JSON NOT NULL,
            date_synced DATETIME DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            UNIQUE KEY uk_collection_doc (collection, doc_id),
            INDEX idx_collection (collection)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_documents_table_query)
            conn.commit()
            logger.info(f"Document table {self.table_name} checked/created.")
        except Error as e:
            conn.rollback()
            raise StoreError(f"Error creating document table {self.table_name}: {e}", original_exception=e)
        finally:
            cursor.close()

    def put(self, collection: str, doc_id: str, doc: dict[str, Any]) -> None:
        """Inserts or replaces a document (upsert on the unique collection/doc_id key)."""
        conn = self._get_connection()
        cursor = conn.cursor()

        insert_query = f"""
        INSERT INTO {self.table_name} (collection, doc_id, body)
        VALUES (%s, %s, %s)
        ON DUPLICATE KEY UPDATE
        body = VALUES(body),
        date_synced = CURRENT_TIMESTAMP
        """
        body = {key: value for key, value in doc.items() if key != "id"}

        try:
            cursor.execute(insert_query, (collection, doc_id, json.dumps(body)))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise StoreError(
                f"Error saving {collection}/{doc_id}: {e}", original_exception=e, collection=collection, doc_id=doc_id
            )
        finally:
            cursor.close()

    def get(self, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        """Retrieves a single document by id."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        document = None
        try:
            query = f"""
            SELECT doc_id, body
            FROM {self.table_name}
            WHERE collection = %s AND doc_id = %s
            LIMIT 1
            """
            cursor.execute(query, (collection, doc_id))
            row = cursor.fetchone()
            if row:
                document = self._row_to_document(row)
        except Error as e:
            raise StoreError(
                f"Error fetching {collection}/{doc_id}: {e}", original_exception=e, collection=collection, doc_id=doc_id
            )
        finally:
            cursor.close()
        return document

    def query(self, collection: str, filter: dict[str, Any]) -> list[dict[str, Any]]:
        """Retrieves documents of a collection matching every filter field, in insertion order."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)

        conditions = ["collection = %s"]
        params: list[Any] = [collection]
        for key, value in filter.items():
            conditions.append("JSON_UNQUOTE(JSON_EXTRACT(body, %s)) = %s")
            params.extend([f'$."{key}"', self._filter_value(value)])

        try:
            query = f"""
            SELECT doc_id, body
            FROM {self.table_name}
            WHERE {" AND ".join(conditions)}
            ORDER BY id
            """
            cursor.execute(query, tuple(params))
            rows = cursor.fetchall()
            return [self._row_to_document(row) for row in rows]
        except Error as e:
            raise StoreError(f"Error querying {collection} with {filter}: {e}", original_exception=e, collection=collection)
        finally:
            cursor.close()

    @staticmethod
    def _filter_value(value: Any) -> str:
        # JSON_UNQUOTE yields text, so compare against the JSON rendering of non-strings
        if isinstance(value, str):
            return value
        return json.dumps(value)

    @staticmethod
    def _row_to_document(row: dict[str, Any]) -> dict[str, Any]:
        body = row["body"]
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8")
        if isinstance(body, str):
            body = json.loads(body)
        document = dict(body)
        document["id"] = row["doc_id"]
        return document

    def __del__(self) -> None:
        """Closes the database connection when the object is destroyed."""
        if self._connection and self._connection.is_connected():
            self._connection.close()
