"""Base endpoint classes.

Architecture:
    PaginatedEndpoint implements reading a collection (``list``, ``first``,
    ``size``, ``all``) for any path returning a list envelope.
    EntityEndpoint adds single-entity CRUD under ``/entity/<type>``;
    DocumentEndpoint adds moving documents to the trash.

    Responses are validated with the endpoint's pydantic model. A response
    that does not validate raises ResponseFormatError, so a malformed page
    fails ``all()`` instead of being read as empty.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_EXPAND_LIMIT
from ..core.enums import Entity, MediaType
from ..core.exceptions import ResponseFormatError
from ..models import ListResponse
from ..runtime.batching import BatchGetResult, batch_get
from ..runtime.batching.telemetry import log_page_size_clamped
from ..runtime.rest import HTTPClient, compose_search_parameters
from ..runtime.rest.query import OrderOption

ModelT = TypeVar("ModelT", bound=BaseModel)


def _to_payload(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True, mode="json")
    return dict(data)


class Endpoint:
    """Base for every endpoint: holds the shared HTTP transport."""

    def __init__(self, client: HTTPClient) -> None:
        self._client = client


class PaginatedEndpoint(Endpoint, Generic[ModelT]):
    """Read access to an offset-paginated collection."""

    path: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def _parse(self, payload: Any) -> ModelT:
        try:
            return self.model.model_validate(payload)  # type: ignore[return-value]
        except ValidationError as e:
            raise ResponseFormatError(f"Malformed response from {self.path}: {e}") from e

    def _parse_list(self, payload: Any) -> ListResponse[ModelT]:
        try:
            return ListResponse[self.model].model_validate(payload)  # type: ignore[name-defined]
        except ValidationError as e:
            raise ResponseFormatError(f"Malformed list response from {self.path}: {e}") from e

    async def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        expand: Mapping[str, Any] | None = None,
        order: OrderOption | Sequence[OrderOption] | None = None,
        search: str | None = None,
        filter: Mapping[str, Any] | None = None,  # noqa: A002
        namedfilter: str | None = None,
        **extra: Any,
    ) -> ListResponse[ModelT]:
        """Fetch one page of the collection.

        Args:
            limit: Page size (1..1000, or 0 to fetch metadata only)
            offset: Rows to skip
            expand: Relations to expand, e.g. ``{"agent": True}``
            order: Sort order, e.g. ``("updated", "desc")``
            search: Full-text search string
            filter: Filter conditions, e.g. ``{"archived": False}``
            namedfilter: Saved filter href
            **extra: Additional query parameters

        Returns:
            Parsed page envelope
        """
        params = compose_search_parameters(
            limit=limit,
            offset=offset,
            expand=expand,
            order=order,
            search=search,
            filter=filter,
            namedfilter=namedfilter,
            **extra,
        )
        payload = await self._client.get(self.path, params=params)
        return self._parse_list(payload)

    async def first(self, **query: Any) -> ListResponse[ModelT]:
        """Fetch a page holding only the first matching row."""
        query.pop("offset", None)
        return await self.list(**{**query, "limit": 1})

    async def size(self, **query: Any) -> int:
        """Number of rows matching the query."""
        query.pop("offset", None)
        page = await self.list(**{**query, "limit": 0})
        return page.meta.size

    async def all(
        self,
        *,
        expand: Mapping[str, Any] | None = None,
        page_size: int | None = None,
        concurrency_limit: int | None = None,
        **query: Any,
    ) -> BatchGetResult[ModelT]:
        """Fetch every row of the collection.

        The size is read once with a ``limit=0`` request, then pages are
        fetched with at most ``concurrency_limit`` requests in flight. Rows
        come back in offset order. Any failure aborts the whole call.

        Args:
            expand: Relations to expand; selects the expand page size by default
            page_size: Rows per page (default from the client's BatchGetOptions);
                capped at 100 when expand is given, 1000 otherwise
            concurrency_limit: Requests in flight (default from BatchGetOptions)
            **query: order, search, filter, namedfilter and extra parameters

        Returns:
            Rows with the counted size and the count response's context
        """
        options = self._client.batch_get_options
        if page_size is None:
            page_size = options.page_size_for(has_expand=bool(expand))
        elif expand and page_size > DEFAULT_EXPAND_LIMIT:
            log_page_size_clamped(
                endpoint_id=self.path, requested=page_size, applied=DEFAULT_EXPAND_LIMIT
            )
            page_size = DEFAULT_EXPAND_LIMIT
        if concurrency_limit is None:
            concurrency_limit = options.concurrency_limit

        query.pop("limit", None)
        query.pop("offset", None)
        head: ListResponse[ModelT] | None = None

        async def count() -> int:
            nonlocal head
            head = await self.list(limit=0, expand=expand, **query)
            return head.meta.size

        async def fetch_page(offset: int, limit: int) -> list[ModelT]:
            page = await self.list(limit=limit, offset=offset, expand=expand, **query)
            return page.rows

        rows = await batch_get(
            count=count,
            fetch_page=fetch_page,
            page_size=page_size,
            concurrency_limit=concurrency_limit,
            endpoint_id=self.path,
        )
        return BatchGetResult(rows=rows, size=head.meta.size, context=head.context)


class EntityEndpoint(PaginatedEndpoint[ModelT]):
    """Collection and single-entity operations under ``/entity/<type>``."""

    entity: ClassVar[Entity]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "entity" in cls.__dict__:
            cls.path = cls.entity.path

    async def get(self, entity_id: str, *, expand: Mapping[str, Any] | None = None) -> ModelT:
        """Fetch one entity by id."""
        params = compose_search_parameters(expand=expand)
        payload = await self._client.get([self.path, entity_id], params=params)
        return self._parse(payload)

    async def create(self, data: BaseModel | Mapping[str, Any]) -> ModelT:
        """Create an entity."""
        payload = await self._client.post(self.path, json_body=_to_payload(data))
        return self._parse(payload)

    async def update(
        self,
        entity_id: str,
        data: BaseModel | Mapping[str, Any],
        *,
        expand: Mapping[str, Any] | None = None,
    ) -> ModelT:
        """Update an entity by id."""
        params = compose_search_parameters(expand=expand)
        payload = await self._client.put(
            [self.path, entity_id], json_body=_to_payload(data), params=params
        )
        return self._parse(payload)

    async def upsert(
        self,
        data: BaseModel | Mapping[str, Any] | Sequence[BaseModel | Mapping[str, Any]],
        *,
        expand: Mapping[str, Any] | None = None,
    ) -> ModelT | list[ModelT]:
        """Create or update one entity or a list of entities.

        Items carrying ``meta`` are updated, the rest are created.

        Returns:
            The saved entity, or a list of them when a list was sent
        """
        params = compose_search_parameters(expand=expand)
        if isinstance(data, BaseModel | Mapping):
            payload = await self._client.post(self.path, json_body=_to_payload(data), params=params)
            return self._parse(payload)

        body = [_to_payload(item) for item in data]
        payload = await self._client.post(self.path, json_body=body, params=params)
        if not isinstance(payload, list):
            raise ResponseFormatError(f"Expected a list from {self.path}, got {type(payload).__name__}")
        return [self._parse(item) for item in payload]

    async def delete(self, entity_id: str) -> None:
        """Delete an entity by id."""
        await self._client.delete([self.path, entity_id])

    async def batch_delete(self, entity_ids: Sequence[str]) -> Any:
        """Delete several entities in one request.

        Returns:
            The service's per-entity result list
        """
        body = [
            {
                "meta": {
                    "href": self._client.build_url([self.path, entity_id]),
                    "type": self.entity.value,
                    "mediaType": MediaType.JSON.value,
                }
            }
            for entity_id in entity_ids
        ]
        return await self._client.post([self.path, "delete"], json_body=body)


class DocumentEndpoint(EntityEndpoint[ModelT]):
    """Entity endpoint for documents, which can be moved to the trash."""

    async def trash(self, entity_id: str) -> None:
        """Move a document to the trash."""
        await self._client.post([self.path, entity_id, "trash"])
