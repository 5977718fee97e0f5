"""Product details value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDetails:
    """Descriptive product attributes persisted alongside the stock snapshot."""

    sku: str = ""
    description: str = ""
    price: float = 0.0
    cost: float = 0.0
    category: str = ""
    default_warehouse: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("Price cannot be negative.")
        if self.cost < 0:
            raise ValueError("Cost cannot be negative.")
