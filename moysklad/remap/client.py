"""Remap API client facade.

This client bundles one HTTP transport with an instance of every registered
endpoint, so all endpoints share one session, one credential set and one
set of batch retrieval options.

Architecture:
    Endpoints are resolved from the endpoint registry and exposed as
    attributes named after their endpoint ID (``client.counterparty``,
    ``client.report_stock``). The transport is available as ``client.client``
    for requests not covered by an endpoint.
"""

from __future__ import annotations

from .config import BASE_URL, DEFAULT_TIMEOUT, USER_AGENT, Auth, BasicAuth, TokenAuth
from .endpoints import (
    AssortmentEndpoint,
    CounterpartyEndpoint,
    CustomerOrderEndpoint,
    DemandEndpoint,
    Endpoint,
    EnterEndpoint,
    InvoiceOutEndpoint,
    OrganizationEndpoint,
    PaymentInEndpoint,
    PaymentOutEndpoint,
    ProductEndpoint,
    PurchaseOrderEndpoint,
    SecurityEndpoint,
    StockReportEndpoint,
    StoreEndpoint,
    SupplyEndpoint,
    VariantEndpoint,
    get_endpoint_class,
    list_endpoints,
)
from .runtime.batching import BatchGetOptions
from .runtime.rest import HTTPClient


def _resolve_auth(
    token: str | None,
    login: str | None,
    password: str | None,
    auth: Auth | None,
) -> Auth:
    forms = [auth is not None, token is not None, login is not None or password is not None]
    if sum(forms) != 1:
        raise ValueError("Exactly one of auth, token or login/password must be provided")
    if auth is not None:
        return auth
    if token is not None:
        return TokenAuth(token)
    if login is None or password is None:
        raise ValueError("Both login and password are required for basic auth")
    return BasicAuth(login, password)


class Moysklad:
    """Client for the remap JSON API.

    Example:
        >>> async with Moysklad(token="...") as ms:
        ...     result = await ms.counterparty.all(filter={"archived": False})
        ...     print(result.size, len(result.rows))
    """

    counterparty: CounterpartyEndpoint
    product: ProductEndpoint
    variant: VariantEndpoint
    organization: OrganizationEndpoint
    store: StoreEndpoint
    assortment: AssortmentEndpoint
    customer_order: CustomerOrderEndpoint
    demand: DemandEndpoint
    supply: SupplyEndpoint
    payment_in: PaymentInEndpoint
    payment_out: PaymentOutEndpoint
    invoice_out: InvoiceOutEndpoint
    purchase_order: PurchaseOrderEndpoint
    enter: EnterEndpoint
    report_stock: StockReportEndpoint
    security: SecurityEndpoint

    def __init__(
        self,
        *,
        token: str | None = None,
        login: str | None = None,
        password: str | None = None,
        auth: Auth | None = None,
        base_url: str = BASE_URL,
        user_agent: str = USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        batch_get_options: BatchGetOptions | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: Bearer access token
            login: Login for basic auth (requires password)
            password: Password for basic auth (requires login)
            auth: Prebuilt TokenAuth or BasicAuth credentials
            base_url: API root URL
            user_agent: User-Agent header value
            timeout: Total per-request timeout in seconds
            batch_get_options: Page sizes and concurrency for ``all()``

        Raises:
            ValueError: If not exactly one credential form was given
        """
        self.client = HTTPClient(
            _resolve_auth(token, login, password, auth),
            base_url=base_url,
            user_agent=user_agent,
            timeout=timeout,
            batch_get_options=batch_get_options,
        )
        self._endpoints: dict[str, Endpoint] = {}
        for endpoint_id in list_endpoints():
            endpoint = get_endpoint_class(endpoint_id)(self.client)  # type: ignore[misc]
            self._endpoints[endpoint_id] = endpoint
            setattr(self, endpoint_id, endpoint)

    def endpoint(self, endpoint_id: str) -> Endpoint:
        """Get an endpoint instance by ID.

        Raises:
            ValueError: If no endpoint is registered under that ID
        """
        try:
            return self._endpoints[endpoint_id]
        except KeyError:
            raise ValueError(f"Unknown endpoint: {endpoint_id}") from None

    async def __aenter__(self) -> Moysklad:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
