"""Entity models for dictionaries (counterparties, goods, organizations, stores)."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from ..core.enums import CounterpartyCompanyType
from .base import RemapModel, ServiceDateTime
from .meta import Metadata, MetaRef


class EntityModel(RemapModel):
    """Fields common to every entity."""

    id: str | None = None
    account_id: str | None = None
    meta: Metadata | None = None
    name: str | None = None
    code: str | None = None
    external_code: str | None = None
    description: str | None = None
    archived: bool | None = None
    shared: bool | None = None
    owner: MetaRef | None = None
    group: MetaRef | None = None
    created: ServiceDateTime | None = None
    updated: ServiceDateTime | None = None


class Counterparty(EntityModel):
    """Counterparty (customer or supplier)."""

    company_type: CounterpartyCompanyType | None = None
    legal_title: str | None = None
    inn: str | None = None
    kpp: str | None = None
    ogrn: str | None = None
    email: str | None = None
    phone: str | None = None
    actual_address: str | None = None
    legal_address: str | None = None
    tags: list[str] = Field(default_factory=list)
    sales_amount: float | None = None
    bonus_points: int | None = None

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        """Tags are case-insensitive on the service side; keep them lowercase."""
        return [tag.strip().lower() for tag in v]


class Product(EntityModel):
    """Product (goods item)."""

    article: str | None = None
    path_name: str | None = None
    product_folder: MetaRef | None = None
    uom: MetaRef | None = None
    sale_prices: list[dict[str, Any]] = Field(default_factory=list)
    buy_price: dict[str, Any] | None = None
    barcodes: list[dict[str, str]] = Field(default_factory=list)
    weight: float | None = Field(default=None, ge=0)
    volume: float | None = Field(default=None, ge=0)
    variants_count: int | None = Field(default=None, ge=0)


class Variant(EntityModel):
    """Product variant (modification)."""

    product: MetaRef | None = None
    characteristics: list[dict[str, Any]] = Field(default_factory=list)
    sale_prices: list[dict[str, Any]] = Field(default_factory=list)


class Organization(EntityModel):
    """Own legal entity."""

    company_type: CounterpartyCompanyType | None = None
    legal_title: str | None = None
    inn: str | None = None
    kpp: str | None = None
    is_egais_enable: bool | None = None


class Store(EntityModel):
    """Warehouse."""

    address: str | None = None
    path_name: str | None = None
    parent: MetaRef | None = None


class AssortmentRow(EntityModel):
    """Row of the assortment collection.

    Rows are products, variants, services, bundles or consignments; the
    kind is given by ``meta.type``. Fields specific to one kind are kept
    as extra fields.
    """

    article: str | None = None
    path_name: str | None = None
    product_folder: MetaRef | None = None
    uom: MetaRef | None = None
    sale_prices: list[dict[str, Any]] = Field(default_factory=list)
    barcodes: list[dict[str, str]] = Field(default_factory=list)
    stock: float | None = None
    reserve: float | None = None
    in_transit: float | None = None
    quantity: float | None = None
