"""Core enumerations shared by models and endpoints.

Architecture:
    String enums mirror the literal values the service puts in ``meta.type``
    and ``meta.mediaType``, so they compare equal to raw JSON values and
    serialize without conversion.

Key Types:
    - Entity: Entity type names used in ``/entity/<type>`` paths
    - MediaType: Media type reported in metadata
    - CounterpartyCompanyType: Legal form of a counterparty
    - OrderDirection: Sort direction for ``order`` query parameters
"""

from enum import Enum


class Entity(str, Enum):
    """Entity types addressable under ``/entity``."""

    COUNTERPARTY = "counterparty"
    PRODUCT = "product"
    VARIANT = "variant"
    SERVICE = "service"
    BUNDLE = "bundle"
    ORGANIZATION = "organization"
    STORE = "store"
    EMPLOYEE = "employee"
    GROUP = "group"
    CONSIGNMENT = "consignment"
    ASSORTMENT = "assortment"
    CUSTOMER_ORDER = "customerorder"
    DEMAND = "demand"
    SUPPLY = "supply"
    PAYMENT_IN = "paymentin"
    PAYMENT_OUT = "paymentout"
    INVOICE_OUT = "invoiceout"
    PURCHASE_ORDER = "purchaseorder"
    ENTER = "enter"
    STATE = "state"
    CURRENCY = "currency"
    UOM = "uom"
    PRODUCT_FOLDER = "productfolder"

    @property
    def path(self) -> str:
        """REST path of the entity collection."""
        return f"/entity/{self.value}"


class MediaType(str, Enum):
    """Media type advertised in entity metadata."""

    JSON = "application/json"


class CounterpartyCompanyType(str, Enum):
    """Legal form of a counterparty."""

    LEGAL = "legal"
    ENTREPRENEUR = "entrepreneur"
    INDIVIDUAL = "individual"


class OrderDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
