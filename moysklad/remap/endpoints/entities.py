"""Dictionary entity endpoints."""

from __future__ import annotations

from ..core.enums import Entity
from ..models import Counterparty, Organization, Product, Store, Variant
from .base import EntityEndpoint


class CounterpartyEndpoint(EntityEndpoint[Counterparty]):
    entity = Entity.COUNTERPARTY
    model = Counterparty


class ProductEndpoint(EntityEndpoint[Product]):
    entity = Entity.PRODUCT
    model = Product


class VariantEndpoint(EntityEndpoint[Variant]):
    entity = Entity.VARIANT
    model = Variant


class OrganizationEndpoint(EntityEndpoint[Organization]):
    entity = Entity.ORGANIZATION
    model = Organization


class StoreEndpoint(EntityEndpoint[Store]):
    entity = Entity.STORE
    model = Store
