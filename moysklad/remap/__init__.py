"""Moysklad remap - Async client for the MoySklad JSON API 1.2."""

from .client import Moysklad
from .config import BASE_URL, VERSION, BasicAuth, TokenAuth
from .core import (
    CounterpartyCompanyType,
    Entity,
    MediaType,
    MoyskladApiError,
    MoyskladError,
    OrderDirection,
    RateLimitError,
    ResponseFormatError,
)
from .endpoints import get_endpoint_class, list_endpoints
from .models import (
    AccessToken,
    AssortmentRow,
    Context,
    Counterparty,
    CurrentStockRow,
    CustomerOrder,
    Demand,
    Enter,
    InvoiceOut,
    ListMetadata,
    ListResponse,
    Metadata,
    MetaRef,
    Organization,
    PaymentIn,
    PaymentOut,
    Product,
    PurchaseOrder,
    StockRow,
    Store,
    Supply,
    Variant,
)
from .runtime.batching import BatchGetOptions, BatchGetResult, batch_get
from .runtime.rest import HTTPClient, compose_search_parameters
from .utils import (
    compose_datetime,
    extract_id_from_meta_href,
    is_assortment_of_type,
    parse_datetime,
)

__version__ = VERSION

__all__ = [
    # Client
    "Moysklad",
    "HTTPClient",
    "BASE_URL",
    "BasicAuth",
    "TokenAuth",
    # Batch retrieval
    "BatchGetOptions",
    "BatchGetResult",
    "batch_get",
    # Endpoints
    "get_endpoint_class",
    "list_endpoints",
    # Enums
    "CounterpartyCompanyType",
    "Entity",
    "MediaType",
    "OrderDirection",
    # Exceptions
    "MoyskladApiError",
    "MoyskladError",
    "RateLimitError",
    "ResponseFormatError",
    # Models
    "AccessToken",
    "AssortmentRow",
    "Context",
    "Counterparty",
    "CurrentStockRow",
    "CustomerOrder",
    "Demand",
    "Enter",
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
    "StockRow",
    "Store",
    "Supply",
    "Variant",
    # Utilities
    "compose_datetime",
    "compose_search_parameters",
    "extract_id_from_meta_href",
    "is_assortment_of_type",
    "parse_datetime",
]
