"""Warehouse value object."""

from dataclasses import dataclass


@dataclass(frozen=True)  # Warehouses are referenced by the ledger, never owned
class Warehouse:
    """Represents a known warehouse; identity is `id`."""

    id: str
    name: str
    address: str = ""
