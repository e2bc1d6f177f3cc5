import pytest
from httpx import AsyncClient
from fastapi import status

BASE_URL = "/api/v1/locations"

@pytest.mark.asyncio
class TestLocations:
    """Test location endpoints"""

    async def test_create_location(self, client: AsyncClient, catalog):
        response = await client.post(BASE_URL, json={"storeId": catalog["store_id"], "name": "  Patio  "})
        assert response.status_code == status.HTTP_201_CREATED

        data = response.json()["data"]
        assert data["name"] == "Patio"
        assert data["storeId"] == catalog["store_id"]
        assert data["storeName"] == "Main Street Bistro"

    async def test_list_locations_by_store(self, client: AsyncClient, catalog):
        response = await client.get(BASE_URL, params={"storeId": catalog["store_id"]})
        assert response.status_code == status.HTTP_200_OK
        assert [l["name"] for l in response.json()["data"]] == ["Bar", "Kitchen", "Walk-in Cooler"]

    async def test_duplicate_name_in_store(self, client: AsyncClient, catalog):
        response = await client.post(BASE_URL, json={"storeId": catalog["store_id"], "name": "bar "})
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["message"] == "There is already a location with that name for this store."

    async def test_name_is_required(self, client: AsyncClient, catalog):
        response = await client.post(BASE_URL, json={"storeId": catalog["store_id"], "name": "   "})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "The name is required"

    async def test_store_is_required(self, client: AsyncClient, catalog):
        response = await client.post(BASE_URL, json={"name": "Patio"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "The store is required"

    async def test_unknown_store(self, client: AsyncClient, catalog):
        response = await client.post(BASE_URL, json={"storeId": 9999, "name": "Patio"})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "The store does not exist"

    async def test_rename_location(self, client: AsyncClient, catalog):
        url = f"{BASE_URL}/{catalog['cooler_id']}"
        response = await client.put(url, json={"storeId": catalog["store_id"], "name": "Cooler"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["name"] == "Cooler"

        # Keeping its own name is not a duplicate
        response = await client.put(url, json={"storeId": catalog["store_id"], "name": "cooler"})
        assert response.status_code == status.HTTP_200_OK

    async def test_rename_to_existing_name(self, client: AsyncClient, catalog):
        response = await client.put(
            f"{BASE_URL}/{catalog['cooler_id']}", json={"storeId": catalog["store_id"], "name": "Kitchen"}
        )
        assert response.status_code == status.HTTP_409_CONFLICT

    async def test_get_unknown_location(self, client: AsyncClient, catalog):
        response = await client.get(f"{BASE_URL}/9999")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Location not found"

    async def test_delete_location(self, client: AsyncClient, catalog):
        response = await client.delete(f"{BASE_URL}/{catalog['cooler_id']}")
        assert response.status_code == status.HTTP_200_OK

        response = await client.get(f"{BASE_URL}/{catalog['cooler_id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_delete_location_with_inventories(self, client: AsyncClient, catalog):
        payload = {
            "storeId": catalog["store_id"],
            "locationId": catalog["bar_id"],
            "inventoryDate": "2026-10-01",
        }
        created = await client.post("/api/v1/inventories", json=payload)
        assert created.status_code == status.HTTP_201_CREATED

        response = await client.delete(f"{BASE_URL}/{catalog['bar_id']}")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Cannot delete location. It has inventories"
