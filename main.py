"""Main application entry point for the warehouse stock reconciliation check."""

import logging
from datetime import datetime

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError, ReadError, SaveError, ValidationError
from src.common.logger_config import setup_logging
from src.inventory_domain.application.reconciliation_service import ReconciliationService
from src.inventory_domain.application.verification_reader import VerificationReader, find_discrepancies
from src.inventory_domain.application.warehouse_registry import WarehouseRegistry
from src.inventory_domain.domain.entities.product_details import ProductDetails
from src.inventory_domain.domain.entities.stock_ledger import StockLedger
from src.inventory_domain.infrastructure.persistence.store_factory import build_document_store

logger = logging.getLogger(__name__)

DEFAULT_WAREHOUSE_NAMES = ["Main Depot", "North Annex"]


def run_stock_reconciliation_check() -> None:
    """
    Creates a test product across all known warehouses, saves it and reads the stock back.
    Prints any difference between the ledger and what the store holds.
    """
    print(f"\n--- Starting stock reconciliation check at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} ---")

    try:
        store = build_document_store()
        registry = WarehouseRegistry(store)
        reconciliation_service = ReconciliationService(store)
        verification_reader = VerificationReader(store)

        warehouses = registry.list_warehouses()
        if not warehouses:
            warehouses = [registry.create_warehouse(name) for name in DEFAULT_WAREHOUSE_NAMES]

        product_id = f"test_product_{int(datetime.now().timestamp() * 1000)}"
        ledger = StockLedger.initialize(
            product_id=product_id,
            product_name="Test Product",
            warehouses=warehouses,
            details=ProductDetails(
                sku=f"TEST-{product_id.rsplit('_', 1)[-1]}",
                description="Test product for warehouse stock testing",
                price=10,
                cost=5,
                category="Test",
            ),
        )
        # Stock only the first warehouse so the skipped zero lines are visible in the read-back
        ledger.set_quantity(warehouses[0].id, 5)

        report = reconciliation_service.save(ledger)
        for entry in report.trace:
            print(f"  {entry}")

        persisted_lines = verification_reader.verify(product_id)
        print(f"  Retrieved {len(persisted_lines)} warehouse stocks (ledger total: {ledger.total_stock()})")
        for line in persisted_lines:
            print(f"    Verified stock: Warehouse {line.warehouse_name}: {line.quantity} units")

        discrepancies = find_discrepancies(ledger, persisted_lines)
        if not discrepancies:
            print("  Persisted stock matches the ledger.")
        for discrepancy in discrepancies:
            print(
                f"    {discrepancy.kind.upper()}: {discrepancy.warehouse_name} "
                f"expected {discrepancy.expected_quantity}, persisted {discrepancy.persisted_quantity}"
            )

    except SaveError as e:
        print(f"Save aborted: {e}")
        if e.report:
            print(f"  Writes persisted before the failure: {', '.join(e.report.written_ids) or 'none'}")
    except (ValidationError, ReadError, ApplicationError) as e:
        print(f"An error occurred during the stock reconciliation check: {e}")

    print(f"--- Stock reconciliation check finished at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} ---")


if __name__ == "__main__":
    setup_logging()
    logger.info(f"Warehouse stock reconciliation started (store backend: {settings.STORE_BACKEND}).")
    run_stock_reconciliation_check()
