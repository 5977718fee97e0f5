# tests/conftest.py
import pytest
from unittest.mock import Mock

from src.common.config.settings import settings
from src.inventory_domain.application.reconciliation_service import ReconciliationService
from src.inventory_domain.application.verification_reader import VerificationReader
from src.inventory_domain.application.warehouse_registry import WarehouseRegistry
from src.inventory_domain.domain.entities.product_details import ProductDetails
from src.inventory_domain.domain.entities.stock_ledger import StockLedger
from src.inventory_domain.domain.entities.warehouse import Warehouse
from src.inventory_domain.domain.repositories.document_store import IDocumentStore
from src.inventory_domain.infrastructure.persistence.in_memory_document_store import InMemoryDocumentStore

FIXED_NOW = "2024-05-01T10:00:00+00:00"


@pytest.fixture(autouse=True)
def mock_settings_sanitize_mode(mocker) -> None:
    """Pins identifier sanitization to ASCII mode for consistent testing."""
    mocker.patch.object(settings, "SANITIZE_MODE", "ascii")
    mocker.patch.object(settings, "APP_TIMEZONE", "UTC")


@pytest.fixture
def fixed_clock() -> Mock:
    """Clock returning a constant ISO timestamp."""
    return Mock(return_value=FIXED_NOW)


@pytest.fixture
def in_memory_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def mock_document_store() -> Mock:
    """Mock for IDocumentStore."""
    store = Mock(spec=IDocumentStore)
    store.get.return_value = None
    store.query.return_value = []
    return store


@pytest.fixture
def reconciliation_service(in_memory_store, fixed_clock) -> ReconciliationService:
    """ReconciliationService writing to an in-memory store with a fixed clock."""
    return ReconciliationService(store=in_memory_store, clock=fixed_clock, trace_clock=Mock(return_value="10:00:00"))


@pytest.fixture
def verification_reader(in_memory_store) -> VerificationReader:
    return VerificationReader(store=in_memory_store)


@pytest.fixture
def warehouse_registry(in_memory_store, fixed_clock) -> WarehouseRegistry:
    return WarehouseRegistry(store=in_memory_store, clock=fixed_clock)


@pytest.fixture
def sample_warehouses() -> list[Warehouse]:
    """Two warehouses, the first with an id containing spaces and capitals."""
    return [
        Warehouse(id="Main Depot", name="Main Depot"),
        Warehouse(id="north_annex", name="North Annex"),
    ]


@pytest.fixture
def five_warehouses() -> list[Warehouse]:
    return [Warehouse(id=f"w{index}", name=f"Warehouse {index}") for index in range(1, 6)]


@pytest.fixture
def sample_ledger(sample_warehouses) -> StockLedger:
    """Ledger for product p1 with Main Depot at 5 and North Annex at 0."""
    ledger = StockLedger.initialize(
        product_id="p1",
        product_name="Trail Shoe",
        warehouses=sample_warehouses,
        details=ProductDetails(sku="TS-1", description="Trail running shoe", price=89.9, cost=40.0, category="Shoes"),
    )
    ledger.set_quantity("Main Depot", 5)
    return ledger
