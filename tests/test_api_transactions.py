"""API tests for warehouse -> supplier and supplier -> company transactions."""

from datetime import date

RECEIPTS = "/transactions/warehouse-to-supplier/"
DISPATCHES = "/transactions/supplier-to-company/"


async def _stock(api, qty=100):
    supplier = await api.supplier()
    part = await api.part()
    company = await api.company(supplier["id"])
    await api.receipt(supplier["id"], part["id"], qty)
    return supplier, part, company


# =============================================================================
# WAREHOUSE -> SUPPLIER
# =============================================================================

class TestWarehouseDispatch:

    async def test_create(self, api, client):
        supplier = await api.supplier()
        part = await api.part()

        response = await client.post(
            RECEIPTS,
            json={
                "date": "2024-01-10",
                "supplier_id": supplier["id"],
                "part_id": part["id"],
                "dc_number": "DC1",
                "send_quantity": 100,
            },
        )

        body = response.json()
        assert response.status_code == 200
        assert body["message"] == "Transaction created successfully"
        assert body["data"]["send_quantity"] == 100
        assert body["data"]["date"] == "2024-01-10"

    async def test_unknown_supplier_or_part(self, api, client):
        supplier = await api.supplier()
        part = await api.part()
        base = {"date": "2024-01-10", "dc_number": "DC1", "send_quantity": 1}

        no_supplier = await client.post(RECEIPTS, json={**base, "supplier_id": 999, "part_id": part["id"]})
        no_part = await client.post(RECEIPTS, json={**base, "supplier_id": supplier["id"], "part_id": 999})

        assert no_supplier.json()["error_code"] == "SUPPLIER_NOT_FOUND"
        assert no_part.json()["error_code"] == "PART_NOT_FOUND"

    async def test_quantity_must_be_positive(self, api, client):
        supplier = await api.supplier()
        part = await api.part()

        response = await client.post(
            RECEIPTS,
            json={
                "date": "2024-01-10",
                "supplier_id": supplier["id"],
                "part_id": part["id"],
                "dc_number": "DC1",
                "send_quantity": 0,
            },
        )

        assert response.status_code == 422

    async def test_quantity_beyond_column_range(self, api, client):
        supplier = await api.supplier()
        part = await api.part()

        response = await client.post(
            RECEIPTS,
            json={
                "date": "2024-01-10",
                "supplier_id": supplier["id"],
                "part_id": part["id"],
                "dc_number": "DC1",
                "send_quantity": 10**20,
            },
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert (await client.get(RECEIPTS)).json()["data"]["total"] == 0

    async def test_largest_storable_quantity_accepted(self, api, client):
        supplier = await api.supplier()
        part = await api.part()

        txn = await api.receipt(supplier["id"], part["id"], 2_147_483_647)

        assert txn["send_quantity"] == 2_147_483_647

    async def test_list_is_newest_first_with_names(self, api, client):
        supplier = await api.supplier(name="Acme Forge")
        part = await api.part(part_name="Bearing")
        await api.receipt(supplier["id"], part["id"], 5, "DC-OLD", on=date(2024, 1, 1))
        await api.receipt(supplier["id"], part["id"], 5, "DC-NEW", on=date(2024, 3, 1))

        data = (await client.get(RECEIPTS)).json()["data"]

        assert data["total"] == 2
        assert [t["dc_number"] for t in data["items"]] == ["DC-NEW", "DC-OLD"]
        assert data["items"][0]["supplier_name"] == "Acme Forge"
        assert data["items"][0]["part_name"] == "Bearing"

    async def test_list_filters(self, api, client):
        first = await api.supplier(name="Acme Forge")
        second = await api.supplier(name="Bolt Works")
        part = await api.part()
        await api.receipt(first["id"], part["id"], 5, "DC-1", on=date(2024, 1, 5))
        await api.receipt(second["id"], part["id"], 5, "DC-2", on=date(2024, 2, 5))

        by_name = (await client.get(RECEIPTS, params={"supplier": "bolt"})).json()["data"]
        by_id = (await client.get(RECEIPTS, params={"supplier_id": first["id"]})).json()["data"]
        by_date = (await client.get(RECEIPTS, params={"date_to": "2024-01-31"})).json()["data"]

        assert [t["dc_number"] for t in by_name["items"]] == ["DC-2"]
        assert [t["dc_number"] for t in by_id["items"]] == ["DC-1"]
        assert [t["dc_number"] for t in by_date["items"]] == ["DC-1"]


# =============================================================================
# SUPPLIER -> COMPANY
# =============================================================================

class TestCompanyDispatch:

    async def test_supplier_comes_from_company(self, api, client):
        supplier, part, company = await _stock(api)

        txn = await api.dispatch(company["id"], part["id"], 40)

        assert txn["supplier_id"] == supplier["id"]
        assert txn["company_id"] == company["id"]

    async def test_dispatch_up_to_available(self, api, client):
        _, part, company = await _stock(api, qty=100)
        await api.dispatch(company["id"], part["id"], 40)

        exact = await client.post(
            DISPATCHES,
            json={"date": "2024-01-15", "company_id": company["id"], "part_id": part["id"], "send_quantity": 60},
        )

        assert exact.status_code == 200

    async def test_over_dispatch_rejected(self, api, client):
        _, part, company = await _stock(api, qty=100)
        await api.dispatch(company["id"], part["id"], 40)

        response = await client.post(
            DISPATCHES,
            json={"date": "2024-01-15", "company_id": company["id"], "part_id": part["id"], "send_quantity": 61},
        )

        body = response.json()
        assert response.status_code == 409
        assert body["message"] == "Insufficient quantity. Available: 60"
        assert body["error_code"] == "INSUFFICIENT_STOCK"
        assert body["details"] == {"available": 60, "requested": 61}

        listing = (await client.get(DISPATCHES)).json()["data"]
        assert listing["total"] == 1

    async def test_no_stock_at_all(self, api, client):
        supplier = await api.supplier()
        part = await api.part()
        company = await api.company(supplier["id"])

        response = await client.post(
            DISPATCHES,
            json={"date": "2024-01-15", "company_id": company["id"], "part_id": part["id"], "send_quantity": 1},
        )

        assert response.status_code == 409
        assert response.json()["message"] == "Insufficient quantity. Available: 0"

    async def test_stock_of_other_supplier_not_usable(self, api, client):
        _, part, _ = await _stock(api, qty=100)
        other = await api.supplier()
        other_company = await api.company(other["id"])

        response = await client.post(
            DISPATCHES,
            json={"date": "2024-01-15", "company_id": other_company["id"], "part_id": part["id"], "send_quantity": 1},
        )

        assert response.status_code == 409

    async def test_unknown_company_or_part(self, api, client):
        _, part, company = await _stock(api)
        base = {"date": "2024-01-15", "send_quantity": 1}

        no_company = await client.post(DISPATCHES, json={**base, "company_id": 999, "part_id": part["id"]})
        no_part = await client.post(DISPATCHES, json={**base, "company_id": company["id"], "part_id": 999})

        assert no_company.status_code == 404
        assert no_company.json()["error_code"] == "COMPANY_NOT_FOUND"
        assert no_part.json()["error_code"] == "PART_NOT_FOUND"

    async def test_quantity_must_be_positive(self, api, client):
        _, part, company = await _stock(api)

        response = await client.post(
            DISPATCHES,
            json={"date": "2024-01-15", "company_id": company["id"], "part_id": part["id"], "send_quantity": 0},
        )

        assert response.status_code == 422

    async def test_quantity_beyond_column_range(self, api, client):
        _, part, company = await _stock(api)

        response = await client.post(
            DISPATCHES,
            json={"date": "2024-01-15", "company_id": company["id"], "part_id": part["id"], "send_quantity": 10**20},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert (await client.get(DISPATCHES)).json()["data"]["total"] == 0

    async def test_list_with_names_and_filters(self, api, client):
        supplier, part, company = await _stock(api)
        other_company = await api.company(supplier["id"], company_name="Orbit Auto")
        await api.dispatch(company["id"], part["id"], 10)
        await api.dispatch(other_company["id"], part["id"], 20)

        everything = (await client.get(DISPATCHES)).json()["data"]
        orbit = (await client.get(DISPATCHES, params={"company": "orbit"})).json()["data"]
        by_company = (await client.get(DISPATCHES, params={"company_id": company["id"]})).json()["data"]

        assert everything["total"] == 2
        assert everything["items"][0]["supplier_name"] == supplier["name"]
        assert [t["send_quantity"] for t in orbit["items"]] == [20]
        assert [t["send_quantity"] for t in by_company["items"]] == [10]

    async def test_company_reassignment_keeps_old_dispatch_supplier(self, api, client):
        supplier, part, company = await _stock(api)
        await api.dispatch(company["id"], part["id"], 10)
        other = await api.supplier()

        await client.patch(f"/companies/{company['id']}", json={"supplier_id": other["id"]})

        items = (await client.get(DISPATCHES)).json()["data"]["items"]
        assert items[0]["supplier_id"] == supplier["id"]
