"""Stock report endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import ResponseFormatError
from ..models import CurrentStockRow, StockRow
from ..runtime.rest import compose_search_parameters
from .base import PaginatedEndpoint

_CURRENT_ROWS = TypeAdapter(list[CurrentStockRow])


class StockReportEndpoint(PaginatedEndpoint[StockRow]):
    """Extended stock report (``/report/stock/all``).

    The extended report is paginated like an entity collection, so
    ``list``, ``size`` and ``all`` work as for entities.
    """

    path = "/report/stock/all"
    model = StockRow

    async def current(self, **query: Any) -> list[CurrentStockRow]:
        """Fetch the current stock report.

        This report is not paginated and returns a plain list of rows.

        Args:
            **query: Query parameters, e.g. ``stockType="freeStock"`` or
                ``filter={"storeId": [...]}``

        Returns:
            Current stock rows
        """
        params = compose_search_parameters(**query)
        payload = await self._client.get([self.path, "current"], params=params)
        try:
            return _CURRENT_ROWS.validate_python(payload)
        except ValidationError as e:
            raise ResponseFormatError(f"Malformed response from {self.path}/current: {e}") from e
