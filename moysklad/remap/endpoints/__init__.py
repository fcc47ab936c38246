"""Remap endpoint registry.

This module exports the endpoint classes and maps each endpoint ID to its
class, so callers can resolve endpoints by name.
"""

from __future__ import annotations

from .assortment import AssortmentEndpoint
from .base import DocumentEndpoint, Endpoint, EntityEndpoint, PaginatedEndpoint
from .documents import (
    CustomerOrderEndpoint,
    DemandEndpoint,
    EnterEndpoint,
    InvoiceOutEndpoint,
    PaymentInEndpoint,
    PaymentOutEndpoint,
    PurchaseOrderEndpoint,
    SupplyEndpoint,
)
from .entities import (
    CounterpartyEndpoint,
    OrganizationEndpoint,
    ProductEndpoint,
    StoreEndpoint,
    VariantEndpoint,
)
from .report import StockReportEndpoint
from .security import SecurityEndpoint, TokenEndpoint

# Registry mapping endpoint IDs to endpoint classes
_ENDPOINT_REGISTRY: dict[str, type[Endpoint]] = {
    "counterparty": CounterpartyEndpoint,
    "product": ProductEndpoint,
    "variant": VariantEndpoint,
    "organization": OrganizationEndpoint,
    "store": StoreEndpoint,
    "assortment": AssortmentEndpoint,
    "customer_order": CustomerOrderEndpoint,
    "demand": DemandEndpoint,
    "supply": SupplyEndpoint,
    "payment_in": PaymentInEndpoint,
    "payment_out": PaymentOutEndpoint,
    "invoice_out": InvoiceOutEndpoint,
    "purchase_order": PurchaseOrderEndpoint,
    "enter": EnterEndpoint,
    "report_stock": StockReportEndpoint,
    "security": SecurityEndpoint,
}


def get_endpoint_class(endpoint_id: str) -> type[Endpoint] | None:
    """Get endpoint class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "counterparty", "report_stock")

    Returns:
        Endpoint class if found, None otherwise
    """
    return _ENDPOINT_REGISTRY.get(endpoint_id)


def list_endpoints() -> list[str]:
    """List all registered endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "AssortmentEndpoint",
    "CounterpartyEndpoint",
    "CustomerOrderEndpoint",
    "DemandEndpoint",
    "DocumentEndpoint",
    "Endpoint",
    "EnterEndpoint",
    "EntityEndpoint",
    "InvoiceOutEndpoint",
    "OrganizationEndpoint",
    "PaginatedEndpoint",
    "PaymentInEndpoint",
    "PaymentOutEndpoint",
    "ProductEndpoint",
    "PurchaseOrderEndpoint",
    "SecurityEndpoint",
    "StockReportEndpoint",
    "StoreEndpoint",
    "SupplyEndpoint",
    "TokenEndpoint",
    "VariantEndpoint",
    "get_endpoint_class",
    "list_endpoints",
]
