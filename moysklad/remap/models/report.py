"""Stock report models."""

from __future__ import annotations

from .base import RemapModel
from .meta import Metadata, MetaRef


class StockRow(RemapModel):
    """One assortment row of the extended stock report."""

    meta: Metadata | None = None
    name: str | None = None
    code: str | None = None
    article: str | None = None
    external_code: str | None = None
    folder: dict | None = None
    uom: MetaRef | dict | None = None
    stock: float | None = None
    in_transit: float | None = None
    reserve: float | None = None
    quantity: float | None = None
    price: float | None = None
    sale_price: float | None = None
    stock_days: float | None = None


class CurrentStockRow(RemapModel):
    """One row of the current stock report."""

    assortment_id: str
    store_id: str | None = None
    stock: float | None = None
    quantity: float | None = None
    free_stock: float | None = None
