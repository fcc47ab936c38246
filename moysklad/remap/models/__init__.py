"""Data models for remap API resources.

Architecture:
    This module exports all Pydantic v2 models used to validate service
    responses. All models are immutable (frozen=True) and keep unknown
    fields, so new service fields never break parsing.

Design Decisions:
    - camelCase aliases: Python attributes stay snake_case
    - ServiceDateTime: Timestamps decode from and encode to Moscow-time strings
    - Generic ListResponse: One envelope model for every collection

Model Categories:
    - Envelope: Metadata, ListMetadata, MetaRef, Context, ListResponse
    - Dictionaries: Counterparty, Product, Variant, Organization, Store
    - Assortment: AssortmentRow (mixed goods rows)
    - Documents: CustomerOrder, Demand, Supply, PaymentIn, PaymentOut,
      InvoiceOut, PurchaseOrder, Enter
    - Security: AccessToken
    - Reports: StockRow, CurrentStockRow
"""

from .base import RemapModel, ServiceDateTime
from .document import (
    CustomerOrder,
    Demand,
    DocumentModel,
    Enter,
    InvoiceOut,
    PaymentIn,
    PaymentOut,
    PurchaseOrder,
    Supply,
)
from .entity import (
    AssortmentRow,
    Counterparty,
    EntityModel,
    Organization,
    Product,
    Store,
    Variant,
)
from .meta import Context, ListMetadata, ListResponse, Metadata, MetaRef
from .report import CurrentStockRow, StockRow
from .security import AccessToken

__all__ = [
    "AccessToken",
    "AssortmentRow",
    "Context",
    "Counterparty",
    "CurrentStockRow",
    "CustomerOrder",
    "Demand",
    "DocumentModel",
    "Enter",
    "EntityModel",
    "InvoiceOut",
    "ListMetadata",
    "ListResponse",
    "MetaRef",
    "Metadata",
    "Organization",
    "PaymentIn",
    "PaymentOut",
    "Product",
    "PurchaseOrder",
    "RemapModel",
    "ServiceDateTime",
    "StockRow",
    "Store",
    "Supply",
    "Variant",
]
