"""Data Transfer Objects for warehouse stock reconciliation."""

from dataclasses import dataclass, field


@dataclass
class TraceEntryDTO:
    """A single human-readable observation written while a save progresses."""

    timestamp: str
    message: str

    def __str__(self) -> str:
        return f"[{self.timestamp}] {self.message}"


@dataclass
class SaveReportDTO:
    """Outcome of a reconciliation save: what was written, in order."""

    product_id: str
    total_stock: int
    written_ids: list[str] = field(default_factory=list)  # "collection/doc_id", in write order
    trace: list[TraceEntryDTO] = field(default_factory=list)

    @property
    def stock_records_written(self) -> int:
        return sum(1 for written_id in self.written_ids if written_id.startswith("warehouseStocks/"))


@dataclass
class StockDiscrepancyDTO:
    """DTO describing one difference between a ledger and the persisted stock records."""

    warehouse_id: str
    warehouse_name: str
    kind: str  # "missing", "mismatch" or "unexpected"
    expected_quantity: int
    persisted_quantity: int | None = None
