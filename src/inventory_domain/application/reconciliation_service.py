# src/inventory_domain/application/reconciliation_service.py
"""Application service persisting a stock ledger as a product snapshot plus per-warehouse stock records."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from src.common.dtos.stock_dtos import SaveReportDTO, TraceEntryDTO
from src.common.exceptions.custom_exceptions import SaveError, StoreError, ValidationError
from src.common.utils.date_utils import trace_timestamp, utc_now_iso
from src.inventory_domain.domain.entities.stock_ledger import StockLedger
from src.inventory_domain.domain.repositories.document_store import (
    PRODUCTS_COLLECTION,
    WAREHOUSE_STOCKS_COLLECTION,
    IDocumentStore,
)
from src.inventory_domain.domain.services.identifier_sanitizer import build_stock_record_id

logger = logging.getLogger(__name__)


@dataclass
class WriteStep:
    """One `put` of the save protocol."""

    collection: str
    doc_id: str
    doc: dict[str, Any]
    message: str

    @property
    def path(self) -> str:
        return f"{self.collection}/{self.doc_id}"


class ReconciliationService:
    """
    Saves a ledger: the product record (with a totalStock snapshot) first, then one
    warehouseStocks record per non-zero line, strictly one write after another.

    There is no transaction across the writes. The first failing write aborts the save,
    and everything written before it stays persisted. Zero-quantity lines are skipped,
    so an earlier non-zero record for that warehouse is left in place.
    """

    def __init__(
        self,
        store: IDocumentStore,
        clock: Callable[[], str] = utc_now_iso,
        trace_clock: Callable[[], str] = trace_timestamp,
    ) -> None:
        """Initializes the ReconciliationService."""
        self.store = store
        self.clock = clock
        self.trace_clock = trace_clock

    def save(self, ledger: StockLedger) -> SaveReportDTO:
        """
        Persists the ledger.

        Returns:
            SaveReportDTO listing every record written, in order, with its trace.

        Raises:
            ValidationError: the ledger has no product id; nothing is written.
            SaveError: a store call failed; `cause` holds the StoreError and `report` the writes done so far.
        """
        if not ledger.product_id or not ledger.product_id.strip():
            raise ValidationError("Product id is required to save stock")

        total_stock = ledger.total_stock()
        report = SaveReportDTO(product_id=ledger.product_id, total_stock=total_stock)
        logger.info(
            f"Saving product {ledger.product_id} with {len(ledger.lines)} warehouse stocks (total stock {total_stock})"
        )

        try:
            existing_product = self.store.get(PRODUCTS_COLLECTION, ledger.product_id)
        except StoreError as e:
            logger.error(f"Could not read product {ledger.product_id} before saving: {e}")
            raise SaveError(f"Could not read product {ledger.product_id}", cause=e, report=report) from e

        created_at = existing_product.get("createdAt") if existing_product else None
        steps = self.plan_writes(ledger, total_stock, created_at=created_at)
        self._run_steps(steps, report)

        logger.info(
            f"Saved product {ledger.product_id}: {report.stock_records_written} stock records written, "
            f"{len(ledger.lines) - report.stock_records_written} zero lines skipped"
        )
        return report

    def plan_writes(
        self, ledger: StockLedger, total_stock: int, created_at: Optional[str] = None
    ) -> list[WriteStep]:
        """Builds the ordered list of writes for a ledger: product first, then each non-zero line."""
        now = self.clock()
        details = ledger.details

        steps = [
            WriteStep(
                collection=PRODUCTS_COLLECTION,
                doc_id=ledger.product_id,
                doc={
                    "name": ledger.product_name,
                    "sku": details.sku,
                    "description": details.description,
                    "price": details.price,
                    "cost": details.cost,
                    "category": details.category,
                    "defaultWarehouse": details.default_warehouse,
                    "totalStock": total_stock,
                    "createdAt": created_at or now,
                    "updatedAt": now,
                },
                message=f"Saved product with ID: {ledger.product_id}",
            )
        ]

        for line in ledger.non_zero_lines():
            steps.append(
                WriteStep(
                    collection=WAREHOUSE_STOCKS_COLLECTION,
                    doc_id=build_stock_record_id(ledger.product_id, line.warehouse_id),
                    doc={
                        "productId": ledger.product_id,
                        "warehouseId": line.warehouse_id,
                        "warehouseName": line.warehouse_name,
                        "quantity": line.quantity,
                        "createdAt": now,
                        "updatedAt": now,
                    },
                    message=f"Saved stock for warehouse {line.warehouse_name}: {line.quantity} units",
                )
            )
        return steps

    def _run_steps(self, steps: list[WriteStep], report: SaveReportDTO) -> None:
        """Executes writes in order, stopping at the first failure."""
        for position, step in enumerate(steps, start=1):
            try:
                self.store.put(step.collection, step.doc_id, step.doc)
            except StoreError as e:
                logger.error(f"Write {position}/{len(steps)} to {step.path} failed, aborting save: {e}")
                raise SaveError(
                    f"Write {position} of {len(steps)} ({step.path}) failed; "
                    f"{len(report.written_ids)} earlier writes remain persisted",
                    cause=e,
                    report=report,
                ) from e

            report.written_ids.append(step.path)
            report.trace.append(TraceEntryDTO(timestamp=self.trace_clock(), message=step.message))
            logger.info(step.message)
