"""Application service for creating and listing warehouses."""

import logging
from typing import Callable

from src.common.exceptions.custom_exceptions import ValidationError
from src.common.utils.date_utils import utc_now_iso
from src.inventory_domain.domain.entities.warehouse import Warehouse
from src.inventory_domain.domain.repositories.document_store import WAREHOUSES_COLLECTION, IDocumentStore
from src.inventory_domain.domain.services.identifier_sanitizer import sanitize

logger = logging.getLogger(__name__)


class WarehouseRegistry:

    def __init__(self, store: IDocumentStore, clock: Callable[[], str] = utc_now_iso) -> None:
        self.store = store
        self.clock = clock

    def create_warehouse(self, name: str, address: str = "") -> Warehouse:
        """Creates a warehouse whose id is the sanitized name. Re-creating a name overwrites that warehouse."""
        display_name = (name or "").strip()
        if not display_name:
            raise ValidationError("Please enter a warehouse name")

        warehouse_id = sanitize(display_name)
        now = self.clock()
        self.store.put(
            WAREHOUSES_COLLECTION,
            warehouse_id,
            {"name": display_name, "address": address, "createdAt": now, "updatedAt": now},
        )
        logger.info(f"Created new warehouse: {display_name} (ID: {warehouse_id})")
        return Warehouse(id=warehouse_id, name=display_name, address=address)

    def list_warehouses(self) -> list[Warehouse]:
        records = self.store.query(WAREHOUSES_COLLECTION, {})
        warehouses = [
            Warehouse(id=record["id"], name=record.get("name") or record["id"], address=record.get("address") or "")
            for record in records
        ]
        logger.info(f"Loaded {len(warehouses)} warehouses")
        return warehouses
