"""Unit tests for entity endpoints."""

from __future__ import annotations

import asyncio

import pytest

from moysklad.remap.core import ResponseFormatError
from moysklad.remap.endpoints import (
    CounterpartyEndpoint,
    CustomerOrderEndpoint,
    DemandEndpoint,
    DocumentEndpoint,
    EnterEndpoint,
    InvoiceOutEndpoint,
    PaymentOutEndpoint,
    ProductEndpoint,
    PurchaseOrderEndpoint,
    get_endpoint_class,
    list_endpoints,
)
from moysklad.remap.models import (
    Counterparty,
    InvoiceOut,
    PaymentOut,
    Product,
    PurchaseOrder,
)

BASE = "https://api.moysklad.ru/api/remap/1.2"


class TestListing:
    """Test single-page reads."""

    @pytest.mark.asyncio
    async def test_list_composes_query(self, mock_client, list_payload):
        mock_client.get.return_value = list_payload(
            "/entity/product", [{"id": "p1", "name": "Widget"}], size=1
        )
        endpoint = ProductEndpoint(mock_client)

        page = await endpoint.list(limit=10, filter={"archived": False}, order=("name", "asc"))

        mock_client.get.assert_awaited_once_with(
            "/entity/product",
            params={"limit": "10", "order": "name,asc", "filter": "archived=false"},
        )
        assert page.rows[0].name == "Widget"
        assert page.meta.size == 1

    @pytest.mark.asyncio
    async def test_size_requests_limit_zero(self, mock_client, list_payload):
        mock_client.get.return_value = list_payload("/entity/counterparty", [], size=4321, limit=0)
        endpoint = CounterpartyEndpoint(mock_client)

        assert await endpoint.size(search="acme", offset=50) == 4321
        mock_client.get.assert_awaited_once_with(
            "/entity/counterparty", params={"limit": "0", "search": "acme"}
        )

    @pytest.mark.asyncio
    async def test_first_requests_one_row(self, mock_client, list_payload):
        mock_client.get.return_value = list_payload("/entity/product", [{"id": "p1"}], size=7)
        endpoint = ProductEndpoint(mock_client)

        page = await endpoint.first(order=("updated", "desc"))

        assert mock_client.get.await_args.kwargs["params"]["limit"] == "1"
        assert page.rows[0].id == "p1"

    @pytest.mark.asyncio
    async def test_malformed_page_raises_format_error(self, mock_client):
        mock_client.get.return_value = {"rows": []}
        endpoint = ProductEndpoint(mock_client)

        with pytest.raises(ResponseFormatError):
            await endpoint.list()


class TestAll:
    """Test whole-collection retrieval through endpoints."""

    @staticmethod
    def _serve(mock_client, list_payload, path: str, size: int, *, delay: float = 0.0):
        calls: list[dict] = []

        async def get(request_path, params=None):
            calls.append(dict(params or {}))
            limit = int(params["limit"])
            offset = int(params.get("offset", 0))
            if limit == 0:
                return list_payload(path, [], size=size, limit=0)
            await asyncio.sleep(delay * ((offset // limit) % 2))
            rows = [{"id": str(i)} for i in range(offset, min(offset + limit, size))]
            return list_payload(path, rows, size=size, limit=limit, offset=offset)

        mock_client.get.side_effect = get
        return calls

    @pytest.mark.asyncio
    async def test_all_returns_rows_in_order(self, mock_client, list_payload):
        calls = self._serve(mock_client, list_payload, "/entity/product", 2500, delay=0.01)
        endpoint = ProductEndpoint(mock_client)

        result = await endpoint.all(filter={"archived": False})

        assert result.size == 2500
        assert len(result.rows) == 2500
        assert [row.id for row in result.rows] == [str(i) for i in range(2500)]
        assert all(isinstance(row, Product) for row in result)
        assert result.context.employee.meta.type == "employee"
        assert calls[0] == {"limit": "0", "filter": "archived=false"}
        assert sorted(int(c.get("offset", -1)) for c in calls[1:]) == [0, 1000, 2000]

    @pytest.mark.asyncio
    async def test_all_empty_collection_only_counts(self, mock_client, list_payload):
        calls = self._serve(mock_client, list_payload, "/entity/counterparty", 0)

        result = await CounterpartyEndpoint(mock_client).all()

        assert result.rows == []
        assert result.size == 0
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_all_with_expand_uses_expand_page_size(self, mock_client, list_payload):
        calls = self._serve(mock_client, list_payload, "/entity/customerorder", 250)

        result = await CustomerOrderEndpoint(mock_client).all(expand={"agent": True})

        assert len(result) == 250
        page_limits = {c["limit"] for c in calls[1:]}
        assert page_limits == {"100"}
        assert all(c["expand"] == "agent" for c in calls)

    @pytest.mark.asyncio
    async def test_all_explicit_page_size_and_concurrency(self, mock_client, list_payload):
        calls = self._serve(mock_client, list_payload, "/entity/product", 50)

        result = await ProductEndpoint(mock_client).all(page_size=20, concurrency_limit=1)

        assert len(result) == 50
        assert [c.get("offset") for c in calls[1:]] == ["0", "20", "40"]

    @pytest.mark.asyncio
    async def test_all_explicit_page_size_capped_with_expand(self, mock_client, list_payload):
        """Expanded list requests are capped at 100 rows per page."""
        calls = self._serve(mock_client, list_payload, "/entity/demand", 250)

        result = await DemandEndpoint(mock_client).all(expand={"agent": True}, page_size=500)

        assert len(result) == 250
        assert {c["limit"] for c in calls[1:]} == {"100"}
        assert [c["offset"] for c in calls[1:]] == ["0", "100", "200"]

    @pytest.mark.asyncio
    async def test_all_explicit_page_size_kept_without_expand(self, mock_client, list_payload):
        calls = self._serve(mock_client, list_payload, "/entity/product", 600)

        await ProductEndpoint(mock_client).all(page_size=500)

        assert {c["limit"] for c in calls[1:]} == {"500"}

    @pytest.mark.asyncio
    async def test_all_malformed_page_fails(self, mock_client, list_payload):
        async def get(request_path, params=None):
            if params["limit"] == "0":
                return list_payload("/entity/product", [], size=1500, limit=0)
            if params["offset"] == "1000":
                return {"unexpected": True}
            return list_payload("/entity/product", [{"id": "x"}], size=1500)

        mock_client.get.side_effect = get

        with pytest.raises(ResponseFormatError):
            await ProductEndpoint(mock_client).all()


class TestCrud:
    """Test single-entity operations."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, mock_client):
        mock_client.get.return_value = {"id": "c1", "name": "Acme"}
        endpoint = CounterpartyEndpoint(mock_client)

        counterparty = await endpoint.get("c1", expand={"owner": True})

        mock_client.get.assert_awaited_once_with(
            ["/entity/counterparty", "c1"], params={"limit": "100", "expand": "owner"}
        )
        assert isinstance(counterparty, Counterparty)
        assert counterparty.name == "Acme"

    @pytest.mark.asyncio
    async def test_create_serializes_model(self, mock_client):
        mock_client.post.return_value = {"id": "c1", "name": "Acme", "companyType": "legal"}
        endpoint = CounterpartyEndpoint(mock_client)

        created = await endpoint.create(Counterparty(name="Acme", legal_title="ООО Акме"))

        mock_client.post.assert_awaited_once_with(
            "/entity/counterparty", json_body={"name": "Acme", "legalTitle": "ООО Акме", "tags": []}
        )
        assert created.id == "c1"

    @pytest.mark.asyncio
    async def test_update_passes_dict_through(self, mock_client):
        mock_client.put.return_value = {"id": "p1", "name": "New"}
        endpoint = ProductEndpoint(mock_client)

        updated = await endpoint.update("p1", {"name": "New"})

        mock_client.put.assert_awaited_once_with(
            ["/entity/product", "p1"], json_body={"name": "New"}, params=None
        )
        assert updated.name == "New"

    @pytest.mark.asyncio
    async def test_upsert_list(self, mock_client):
        mock_client.post.return_value = [{"id": "1"}, {"id": "2"}]
        endpoint = ProductEndpoint(mock_client)

        saved = await endpoint.upsert([{"name": "a"}, Product(name="b")])

        assert [p.id for p in saved] == ["1", "2"]
        assert mock_client.post.await_args.kwargs["json_body"] == [
            {"name": "a"},
            {"name": "b", "salePrices": [], "barcodes": []},
        ]

    @pytest.mark.asyncio
    async def test_upsert_list_requires_list_response(self, mock_client):
        mock_client.post.return_value = {"id": "1"}
        with pytest.raises(ResponseFormatError):
            await ProductEndpoint(mock_client).upsert([{"name": "a"}])

    @pytest.mark.asyncio
    async def test_delete(self, mock_client):
        mock_client.delete.return_value = None
        await ProductEndpoint(mock_client).delete("p1")
        mock_client.delete.assert_awaited_once_with(["/entity/product", "p1"])

    @pytest.mark.asyncio
    async def test_batch_delete_sends_meta(self, mock_client):
        mock_client.post.return_value = [{"info": "deleted"}]
        endpoint = CounterpartyEndpoint(mock_client)

        await endpoint.batch_delete(["c1", "c2"])

        args, kwargs = mock_client.post.await_args
        assert args == (["/entity/counterparty", "delete"],)
        assert kwargs["json_body"][1] == {
            "meta": {
                "href": f"{BASE}/entity/counterparty/c2",
                "type": "counterparty",
                "mediaType": "application/json",
            }
        }

    @pytest.mark.asyncio
    async def test_document_trash(self, mock_client):
        mock_client.post.return_value = None
        await CustomerOrderEndpoint(mock_client).trash("o1")
        mock_client.post.assert_awaited_once_with(["/entity/customerorder", "o1", "trash"])


class TestRegistry:
    def test_lookup(self):
        assert get_endpoint_class("customer_order") is CustomerOrderEndpoint
        assert get_endpoint_class("missing") is None

    def test_list_endpoints(self):
        endpoints = list_endpoints()
        assert "counterparty" in endpoints
        assert "report_stock" in endpoints
        assert len(endpoints) == 16

    def test_paths_follow_entity_types(self):
        assert CustomerOrderEndpoint.path == "/entity/customerorder"
        assert get_endpoint_class("payment_in").path == "/entity/paymentin"

    @pytest.mark.parametrize(
        "endpoint_id,path",
        [
            ("payment_out", "/entity/paymentout"),
            ("invoice_out", "/entity/invoiceout"),
            ("purchase_order", "/entity/purchaseorder"),
            ("enter", "/entity/enter"),
        ],
    )
    def test_document_endpoints_registered(self, endpoint_id, path):
        endpoint_class = get_endpoint_class(endpoint_id)
        assert issubclass(endpoint_class, DocumentEndpoint)
        assert endpoint_class.path == path


class TestDocumentEndpoints:
    """Test the plain document endpoints end to end."""

    @pytest.mark.asyncio
    async def test_payment_out_get(self, mock_client):
        mock_client.get.return_value = {
            "id": "p1",
            "paymentPurpose": "Оплата по счету 12",
            "moment": "2024-02-01 10:00:00.000",
            "sum": 50000,
        }

        payment = await PaymentOutEndpoint(mock_client).get("p1")

        mock_client.get.assert_awaited_once_with(["/entity/paymentout", "p1"], params=None)
        assert isinstance(payment, PaymentOut)
        assert payment.payment_purpose == "Оплата по счету 12"

    @pytest.mark.asyncio
    async def test_purchase_order_all(self, mock_client, list_payload):
        async def get(path, params=None):
            if params["limit"] == "0":
                return list_payload(path, [], size=2, limit=0)
            return list_payload(path, [{"id": "o1"}, {"id": "o2"}], size=2)

        mock_client.get.side_effect = get

        result = await PurchaseOrderEndpoint(mock_client).all()

        assert [o.id for o in result] == ["o1", "o2"]
        assert all(isinstance(o, PurchaseOrder) for o in result)

    @pytest.mark.asyncio
    async def test_enter_trash(self, mock_client):
        mock_client.post.return_value = None
        await EnterEndpoint(mock_client).trash("e1")
        mock_client.post.assert_awaited_once_with(["/entity/enter", "e1", "trash"])

    @pytest.mark.asyncio
    async def test_invoice_out_create(self, mock_client):
        mock_client.post.return_value = {"id": "i1", "name": "00012"}

        invoice = await InvoiceOutEndpoint(mock_client).create({"name": "00012"})

        mock_client.post.assert_awaited_once_with("/entity/invoiceout", json_body={"name": "00012"})
        assert isinstance(invoice, InvoiceOut)
