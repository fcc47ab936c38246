"""Document endpoints."""

from __future__ import annotations

from ..core.enums import Entity
from ..models import (
    CustomerOrder,
    Demand,
    Enter,
    InvoiceOut,
    PaymentIn,
    PaymentOut,
    PurchaseOrder,
    Supply,
)
from .base import DocumentEndpoint


class CustomerOrderEndpoint(DocumentEndpoint[CustomerOrder]):
    entity = Entity.CUSTOMER_ORDER
    model = CustomerOrder


class DemandEndpoint(DocumentEndpoint[Demand]):
    entity = Entity.DEMAND
    model = Demand


class SupplyEndpoint(DocumentEndpoint[Supply]):
    entity = Entity.SUPPLY
    model = Supply


class PaymentInEndpoint(DocumentEndpoint[PaymentIn]):
    entity = Entity.PAYMENT_IN
    model = PaymentIn


class PaymentOutEndpoint(DocumentEndpoint[PaymentOut]):
    entity = Entity.PAYMENT_OUT
    model = PaymentOut


class InvoiceOutEndpoint(DocumentEndpoint[InvoiceOut]):
    entity = Entity.INVOICE_OUT
    model = InvoiceOut


class PurchaseOrderEndpoint(DocumentEndpoint[PurchaseOrder]):
    entity = Entity.PURCHASE_ORDER
    model = PurchaseOrder


class EnterEndpoint(DocumentEndpoint[Enter]):
    entity = Entity.ENTER
    model = Enter
