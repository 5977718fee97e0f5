"""Stock ledger aggregate."""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from src.inventory_domain.domain.services.quantity_coercion import coerce_quantity
from .product_details import ProductDetails
from .stock_line import StockLine
from .warehouse import Warehouse

logger = logging.getLogger(__name__)


@dataclass
class StockLedger:
    """
    In-memory view of one product's stock across all known warehouses.

    Holds at most one line per warehouse id, in the order warehouses became known.
    The total is always derived from the lines and never stored on the ledger.
    """

    product_id: str
    product_name: str
    lines: list[StockLine] = field(default_factory=list)
    details: ProductDetails = field(default_factory=ProductDetails)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for line in self.lines:
            if line.warehouse_id in seen:
                raise ValueError(f"Duplicate stock line for warehouse '{line.warehouse_id}'.")
            seen.add(line.warehouse_id)

    @classmethod
    def initialize(
        cls,
        product_id: str,
        product_name: str,
        warehouses: Iterable[Warehouse],
        details: Optional[ProductDetails] = None,
    ) -> "StockLedger":
        """Creates a ledger with one zero-quantity line per warehouse, preserving warehouse order."""
        ledger = cls(product_id=product_id, product_name=product_name, details=details or ProductDetails())
        ledger.refresh_warehouses(warehouses)
        return ledger

    def get_line(self, warehouse_id: str) -> Optional[StockLine]:
        for line in self.lines:
            if line.warehouse_id == warehouse_id:
                return line
        return None

    def add_warehouse(self, warehouse: Warehouse) -> None:
        """Appends a zero-quantity line for a new warehouse; a known warehouse only gets its name refreshed."""
        existing = self.get_line(warehouse.id)
        if existing is not None:
            existing.warehouse_name = warehouse.name
            return
        self.lines.append(StockLine(warehouse_id=warehouse.id, warehouse_name=warehouse.name, quantity=0))

    def refresh_warehouses(self, warehouses: Iterable[Warehouse]) -> None:
        """Merges a (re)loaded warehouse list into the ledger without touching quantities."""
        for warehouse in warehouses:
            self.add_warehouse(warehouse)

    def set_quantity(self, warehouse_id: str, quantity: Any) -> None:
        """
        Sets the quantity of the matching line.

        Anything that is not a valid non-negative integer resets the line to 0.
        Unknown warehouse ids are ignored.
        """
        line = self.get_line(warehouse_id)
        if line is None:
            logger.debug(f"Ignoring quantity for unknown warehouse '{warehouse_id}' on product {self.product_id}")
            return
        line.quantity = coerce_quantity(quantity)

    def total_stock(self) -> int:
        return sum(line.quantity for line in self.lines)

    def non_zero_lines(self) -> list[StockLine]:
        return [line for line in self.lines if line.quantity > 0]
