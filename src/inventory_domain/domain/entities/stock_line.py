"""Stock line entity."""

from dataclasses import dataclass


@dataclass
class StockLine:
    """Represents one warehouse's quantity entry for a product."""

    warehouse_id: str
    warehouse_name: str
    quantity: int = 0

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative.")
