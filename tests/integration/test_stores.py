import pytest
from httpx import AsyncClient
from fastapi import status

BASE_URL = "/api/v1/stores"

@pytest.mark.asyncio
class TestStores:
    """Test store endpoints"""

    async def test_create_store(self, client: AsyncClient, catalog):
        response = await client.post(BASE_URL, json={"name": " Harbor Grill ", "address": " 4 Pier Road "})
        assert response.status_code == status.HTTP_201_CREATED

        body = response.json()
        assert body["message"] == "Store created successfully"
        assert body["data"]["name"] == "Harbor Grill"
        assert body["data"]["address"] == "4 Pier Road"

        stores = (await client.get(BASE_URL)).json()["data"]
        assert [s["name"] for s in stores] == ["Harbor Grill", "Main Street Bistro"]

    async def test_store_usable_for_locations(self, client: AsyncClient):
        store_id = (
            await client.post(BASE_URL, json={"name": "Harbor Grill", "address": "4 Pier Road"})
        ).json()["data"]["id"]

        response = await client.post("/api/v1/locations", json={"storeId": store_id, "name": "Bar"})
        assert response.status_code == status.HTTP_201_CREATED

    async def test_duplicate_store_name(self, client: AsyncClient, catalog):
        response = await client.post(BASE_URL, json={"name": "main street BISTRO", "address": "Elsewhere"})
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["message"] == "There is already a store with that name."

    async def test_name_and_address_required(self, client: AsyncClient, catalog):
        response = await client.post(BASE_URL, json={"address": "4 Pier Road"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "The name is required"

        response = await client.post(BASE_URL, json={"name": "Harbor Grill", "address": "  "})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Address is required"

    async def test_update_store(self, client: AsyncClient, catalog):
        url = f"{BASE_URL}/{catalog['store_id']}"
        response = await client.put(url, json={"name": "Main Street Bistro", "address": "122 Main Street"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["address"] == "122 Main Street"

    async def test_update_to_existing_name(self, client: AsyncClient, catalog):
        other_id = (
            await client.post(BASE_URL, json={"name": "Harbor Grill", "address": "4 Pier Road"})
        ).json()["data"]["id"]

        response = await client.put(
            f"{BASE_URL}/{other_id}", json={"name": "Main Street Bistro", "address": "4 Pier Road"}
        )
        assert response.status_code == status.HTTP_409_CONFLICT

    async def test_unknown_store(self, client: AsyncClient, catalog):
        response = await client.get(f"{BASE_URL}/9999")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Store not found"

        response = await client.put(f"{BASE_URL}/9999", json={"name": "Ghost", "address": "Nowhere"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

        response = await client.delete(f"{BASE_URL}/9999")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_delete_store_with_locations_and_catalog(self, client: AsyncClient, catalog):
        response = await client.delete(f"{BASE_URL}/{catalog['store_id']}")
        assert response.status_code == status.HTTP_200_OK

        assert (await client.get(f"{BASE_URL}/{catalog['store_id']}")).status_code == status.HTTP_404_NOT_FOUND
        locations = (await client.get("/api/v1/locations", params={"storeId": catalog["store_id"]})).json()["data"]
        assert locations == []

    async def test_delete_store_with_inventories(self, client: AsyncClient, catalog):
        payload = {
            "storeId": catalog["store_id"],
            "locationId": catalog["bar_id"],
            "inventoryDate": "2026-10-01",
        }
        created = await client.post("/api/v1/inventories", json=payload)
        assert created.status_code == status.HTTP_201_CREATED

        response = await client.delete(f"{BASE_URL}/{catalog['store_id']}")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Cannot delete store. It has inventories"
