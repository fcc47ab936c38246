"""Document models (orders, shipments, receipts, payments).

Money amounts are reported by the service in minor units (kopecks).
"""

from __future__ import annotations

from pydantic import Field

from .base import ServiceDateTime
from .entity import EntityModel
from .meta import MetaRef


class DocumentModel(EntityModel):
    """Fields common to every document."""

    moment: ServiceDateTime | None = None
    applicable: bool | None = None
    sum: float | None = Field(default=None, ge=0)
    agent: MetaRef | None = None
    organization: MetaRef | None = None
    state: MetaRef | None = None
    rate: dict | None = None
    positions: dict | None = None
    deleted: ServiceDateTime | None = None


class CustomerOrder(DocumentModel):
    """Customer order."""

    store: MetaRef | None = None
    delivery_planned_moment: ServiceDateTime | None = None
    payed_sum: float | None = None
    shipped_sum: float | None = None
    invoiced_sum: float | None = None
    reserved_sum: float | None = None


class Demand(DocumentModel):
    """Shipment to a customer."""

    store: MetaRef | None = None
    customer_order: MetaRef | None = None
    payed_sum: float | None = None


class Supply(DocumentModel):
    """Receipt of goods from a supplier."""

    store: MetaRef | None = None
    incoming_number: str | None = None
    incoming_date: ServiceDateTime | None = None
    payed_sum: float | None = None


class PaymentIn(DocumentModel):
    """Incoming payment."""

    incoming_number: str | None = None
    incoming_date: ServiceDateTime | None = None
    payment_purpose: str | None = None
    operations: list[MetaRef] = Field(default_factory=list)


class PaymentOut(DocumentModel):
    """Outgoing payment."""

    payment_purpose: str | None = None
    expense_item: MetaRef | None = None
    contract: MetaRef | None = None
    vat_sum: float | None = None


class InvoiceOut(DocumentModel):
    """Invoice issued to a customer."""

    payment_planned_moment: ServiceDateTime | None = None
    contract: MetaRef | None = None
    payed_sum: float | None = None
    shipped_sum: float | None = None


class PurchaseOrder(DocumentModel):
    """Order placed with a supplier."""

    store: MetaRef | None = None
    delivery_planned_moment: ServiceDateTime | None = None
    payed_sum: float | None = None
    shipped_sum: float | None = None
    invoiced_sum: float | None = None


class Enter(DocumentModel):
    """Stock entry (goods received without a supplier)."""

    store: MetaRef | None = None
    overhead: dict | None = None
