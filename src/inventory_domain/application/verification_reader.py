# src/inventory_domain/application/verification_reader.py
"""Reading persisted warehouse stock back for a product."""

import logging
from typing import Any, Iterable

from src.common.dtos.stock_dtos import StockDiscrepancyDTO
from src.common.exceptions.custom_exceptions import ReadError, StoreError
from src.inventory_domain.domain.entities.product_details import ProductDetails
from src.inventory_domain.domain.entities.stock_ledger import StockLedger
from src.inventory_domain.domain.entities.stock_line import StockLine
from src.inventory_domain.domain.entities.warehouse import Warehouse
from src.inventory_domain.domain.repositories.document_store import (
    PRODUCTS_COLLECTION,
    WAREHOUSE_STOCKS_COLLECTION,
    IDocumentStore,
)
from src.inventory_domain.domain.services.identifier_sanitizer import sanitize
from src.inventory_domain.domain.services.quantity_coercion import coerce_quantity

logger = logging.getLogger(__name__)


class VerificationReader:
    """Reads back the warehouseStocks records of a product."""

    def __init__(self, store: IDocumentStore) -> None:
        self.store = store

    def verify(self, product_id: str) -> list[StockLine]:
        """
        Returns every persisted stock line of a product, in store order.

        No ordering by warehouse is applied; stale records left by earlier saves are included.
        """
        logger.info(f"Verifying warehouse stocks for product {product_id}...")
        try:
            records = self.store.query(WAREHOUSE_STOCKS_COLLECTION, {"productId": product_id})
        except StoreError as e:
            logger.error(f"Error reading warehouse stocks for product {product_id}: {e}")
            raise ReadError(f"Could not read warehouse stocks for product {product_id}", cause=e) from e

        lines = [self._record_to_line(record) for record in records]
        logger.info(f"Retrieved {len(lines)} warehouse stocks for product {product_id}")
        return lines

    def load_ledger(self, product_id: str, warehouses: Iterable[Warehouse]) -> StockLedger:
        """
        Rebuilds a ledger from the persisted product and its stock records.

        Records are matched to warehouses by sanitized warehouse id; warehouses without a record stay at 0.
        """
        try:
            product = self.store.get(PRODUCTS_COLLECTION, product_id)
        except StoreError as e:
            raise ReadError(f"Could not read product {product_id}", cause=e) from e
        if product is None:
            raise ReadError(f"Product {product_id} not found")

        ledger = StockLedger.initialize(
            product_id=product_id,
            product_name=product.get("name", ""),
            warehouses=warehouses,
            details=self._record_to_details(product),
        )

        persisted = {sanitize(line.warehouse_id): line for line in self.verify(product_id)}
        for line in ledger.lines:
            match = persisted.get(sanitize(line.warehouse_id))
            if match is not None:
                line.quantity = match.quantity
        return ledger

    @staticmethod
    def _record_to_line(record: dict[str, Any]) -> StockLine:
        warehouse_id = record.get("warehouseId") or ""
        return StockLine(
            warehouse_id=warehouse_id,
            warehouse_name=record.get("warehouseName") or warehouse_id,
            quantity=coerce_quantity(record.get("quantity")),
        )

    @staticmethod
    def _record_to_details(record: dict[str, Any]) -> ProductDetails:
        try:
            return ProductDetails(
                sku=record.get("sku") or "",
                description=record.get("description") or "",
                price=float(record.get("price") or 0),
                cost=float(record.get("cost") or 0),
                category=record.get("category") or "",
                default_warehouse=record.get("defaultWarehouse") or "",
            )
        except (TypeError, ValueError) as e:
            raise ReadError(f"Product record {record.get('id')} has invalid attributes", cause=e) from e


def find_discrepancies(ledger: StockLedger, persisted_lines: Iterable[StockLine]) -> list[StockDiscrepancyDTO]:
    """
    Compares a ledger with stock lines read back from the store.

    Only non-zero ledger lines are expected to be persisted. Lines are matched by sanitized
    warehouse id. Persisted records with no non-zero ledger counterpart (for example a stale
    record of a warehouse zeroed since) are reported as "unexpected".
    """
    persisted = {sanitize(line.warehouse_id): line for line in persisted_lines}
    expected = {sanitize(line.warehouse_id): line for line in ledger.non_zero_lines()}
    discrepancies: list[StockDiscrepancyDTO] = []

    for key, line in expected.items():
        stored = persisted.get(key)
        if stored is None:
            discrepancies.append(
                StockDiscrepancyDTO(
                    warehouse_id=line.warehouse_id,
                    warehouse_name=line.warehouse_name,
                    kind="missing",
                    expected_quantity=line.quantity,
                )
            )
        elif stored.quantity != line.quantity:
            discrepancies.append(
                StockDiscrepancyDTO(
                    warehouse_id=line.warehouse_id,
                    warehouse_name=line.warehouse_name,
                    kind="mismatch",
                    expected_quantity=line.quantity,
                    persisted_quantity=stored.quantity,
                )
            )

    for key, stored in persisted.items():
        if key not in expected:
            discrepancies.append(
                StockDiscrepancyDTO(
                    warehouse_id=stored.warehouse_id,
                    warehouse_name=stored.warehouse_name,
                    kind="unexpected",
                    expected_quantity=0,
                    persisted_quantity=stored.quantity,
                )
            )
    return discrepancies
