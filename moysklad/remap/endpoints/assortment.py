"""Assortment endpoint."""

from __future__ import annotations

from ..core.enums import Entity
from ..models import AssortmentRow
from .base import PaginatedEndpoint


class AssortmentEndpoint(PaginatedEndpoint[AssortmentRow]):
    """Mixed collection of products, variants, services, bundles and consignments.

    The collection is read-only: use ``list``, ``first``, ``size`` and
    ``all``. Narrow rows by kind with ``utils.is_assortment_of_type``.

    Example:
        >>> result = await ms.assortment.all(filter={"barcode": "4600000000000"})
    """

    path = Entity.ASSORTMENT.path
    model = AssortmentRow
