# src/inventory_domain/domain/services/identifier_sanitizer.py
"""Mapping of human-entered names to storage-safe identifiers."""

import string

from src.common.config.settings import settings

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

SANITIZE_MODES = ("ascii", "unicode")


def sanitize(raw: str | None, mode: str | None = None) -> str:
    """
    Trims, collapses every whitespace run to a single "_" and lower-cases.

    `mode="ascii"` lower-cases A-Z only and leaves other characters untouched;
    `mode="unicode"` applies full case folding. Defaults to settings.SANITIZE_MODE.
    The result is idempotent: sanitize(sanitize(x)) == sanitize(x).
    """
    mode = (mode or settings.SANITIZE_MODE).lower()
    if mode not in SANITIZE_MODES:
        raise ValueError(f"Unknown sanitize mode '{mode}'. Expected one of {SANITIZE_MODES}.")
    if not raw:
        return ""

    collapsed = "_".join(raw.split())
    if mode == "unicode":
        return collapsed.casefold()
    return collapsed.translate(_ASCII_LOWER)


def build_stock_record_id(product_id: str, warehouse_id: str, mode: str | None = None) -> str:
    """Composite id of a product's stock record in one warehouse."""
    return f"{product_id}_{sanitize(warehouse_id, mode)}"
