"""Tests for the StockLedger aggregate."""

import pytest

from src.inventory_domain.domain.entities.stock_ledger import StockLedger
from src.inventory_domain.domain.entities.stock_line import StockLine
from src.inventory_domain.domain.entities.warehouse import Warehouse


def test_initialize_creates_zero_line_per_warehouse_in_order(five_warehouses) -> None:
    ledger = StockLedger.initialize("p1", "Trail Shoe", five_warehouses)

    assert [line.warehouse_id for line in ledger.lines] == ["w1", "w2", "w3", "w4", "w5"]
    assert all(line.quantity == 0 for line in ledger.lines)
    assert ledger.lines[0].warehouse_name == "Warehouse 1"


def test_initialize_empty() -> None:
    ledger = StockLedger.initialize("p1", "Trail Shoe", [])

    assert ledger.lines == []
    assert ledger.total_stock() == 0


def test_initialize_ignores_duplicate_warehouses() -> None:
    warehouses = [Warehouse(id="w1", name="One"), Warehouse(id="w1", name="One again")]

    ledger = StockLedger.initialize("p1", "Trail Shoe", warehouses)

    assert len(ledger.lines) == 1
    assert ledger.lines[0].warehouse_name == "One again"


def test_add_warehouse_appends_new_line(sample_ledger) -> None:
    sample_ledger.add_warehouse(Warehouse(id="south", name="South Yard"))

    assert sample_ledger.lines[-1] == StockLine(warehouse_id="south", warehouse_name="South Yard", quantity=0)
    assert len(sample_ledger.lines) == 3


def test_add_known_warehouse_only_refreshes_name(sample_ledger) -> None:
    sample_ledger.add_warehouse(Warehouse(id="Main Depot", name="Main Depot (renamed)"))

    assert len(sample_ledger.lines) == 2
    line = sample_ledger.get_line("Main Depot")
    assert line.warehouse_name == "Main Depot (renamed)"
    assert line.quantity == 5


def test_refresh_warehouses_keeps_quantities(sample_ledger, sample_warehouses) -> None:
    sample_ledger.refresh_warehouses(sample_warehouses + [Warehouse(id="east", name="East")])

    assert [line.warehouse_id for line in sample_ledger.lines] == ["Main Depot", "north_annex", "east"]
    assert sample_ledger.total_stock() == 5


def test_set_quantity_updates_total(sample_ledger) -> None:
    sample_ledger.set_quantity("north_annex", 7)
    assert sample_ledger.total_stock() == 12

    sample_ledger.set_quantity("Main Depot", "3")
    assert sample_ledger.total_stock() == 10
    assert sample_ledger.total_stock() == sum(line.quantity for line in sample_ledger.lines)


def test_set_quantity_non_numeric_resets_to_zero(sample_ledger) -> None:
    sample_ledger.set_quantity("Main Depot", "abc")

    assert sample_ledger.get_line("Main Depot").quantity == 0
    assert sample_ledger.total_stock() == 0


def test_set_quantity_negative_resets_to_zero(sample_ledger) -> None:
    sample_ledger.set_quantity("Main Depot", -4)

    assert sample_ledger.get_line("Main Depot").quantity == 0


def test_set_quantity_unknown_warehouse_is_noop(sample_ledger) -> None:
    sample_ledger.set_quantity("nowhere", 99)

    assert sample_ledger.total_stock() == 5
    assert sample_ledger.get_line("nowhere") is None


def test_non_zero_lines(sample_ledger) -> None:
    assert [line.warehouse_id for line in sample_ledger.non_zero_lines()] == ["Main Depot"]


def test_ledger_rejects_duplicate_lines() -> None:
    with pytest.raises(ValueError):
        StockLedger(
            product_id="p1",
            product_name="Trail Shoe",
            lines=[StockLine("w1", "One", 1), StockLine("w1", "One", 2)],
        )


def test_stock_line_rejects_negative_quantity() -> None:
    with pytest.raises(ValueError, match="Quantity cannot be negative."):
        StockLine(warehouse_id="w1", warehouse_name="One", quantity=-1)
