import pytest
from datetime import date
from sqlalchemy import func, select
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.models.inventory.inventory import Inventory
from app.models.inventory.inventory_item import InventoryItem
from app.schemas.inventory.inventory import InventoryCreate, InventoryItemInput, InventoryUpdate, ItemOrder
from app.services.inventory.inventory_count_service import InventoryCountService
from app.services.inventory.inventory_repository import InventoryRepository

@pytest.fixture
def service(db_session) -> InventoryCountService:
    return InventoryCountService(InventoryRepository(db_session))

def new_inventory(catalog, status=None, items=()):
    return InventoryCreate(
        store_id=catalog["store_id"],
        location_id=catalog["bar_id"],
        inventory_date=date(2026, 10, 1),
        status=status,
        items=list(items),
    )

async def count_rows(session, model) -> int:
    result = await session.execute(select(func.count(model.id)))
    return result.scalar()

@pytest.mark.asyncio
class TestInventoryCountService:
    """Test the count service against a real session"""

    async def test_create_defaults_to_unlocked(self, service, catalog, db_session):
        created = await service.create_inventory(new_inventory(catalog))
        inventory = await db_session.get(Inventory, created.id)
        assert inventory.status == "Unlocked"
        assert not inventory.is_locked

    async def test_failed_write_rolls_back(self, service, catalog, db_session):
        items = [
            InventoryItemInput(product_id=catalog["vodka_id"], quantity=1),
            InventoryItemInput(product_id=catalog["lemons_id"], quantity="", product_name="Lemons"),
        ]
        with pytest.raises(ValidationError) as exc_info:
            await service.create_inventory(new_inventory(catalog, items=items))

        assert exc_info.value.detail == "Invalid quantity for product: Lemons"
        assert await count_rows(db_session, Inventory) == 0
        assert await count_rows(db_session, InventoryItem) == 0

    async def test_conflict_while_active(self, service, catalog):
        await service.create_inventory(new_inventory(catalog))
        with pytest.raises(ConflictError):
            await service.create_inventory(new_inventory(catalog))

    async def test_update_after_lock_is_rejected(self, service, catalog):
        items = [InventoryItemInput(product_id=catalog["vodka_id"], quantity=2)]
        created = await service.create_inventory(new_inventory(catalog, status="Locked", items=items))

        with pytest.raises(ConflictError):
            await service.update_inventory(created.id, InventoryUpdate(inventory_date=date(2026, 10, 2)))

        assert await service.toggle_lock_inventory(created.id) == "Unlocked"
        await service.update_inventory(created.id, InventoryUpdate(inventory_date=date(2026, 10, 2)))
        detail = await service.get_inventory(created.id)
        assert detail.inventory_date == date(2026, 10, 2)
        assert len(detail.items) == 1

    async def test_reorder_ignores_foreign_items(self, service, catalog):
        items = [InventoryItemInput(product_id=catalog["vodka_id"], quantity=2)]
        created = await service.create_inventory(new_inventory(catalog, items=items))
        detail = await service.get_inventory(created.id)

        updated = await service.reorder_inventory_items(
            created.id,
            [
                ItemOrder(id_inventory_item=detail.items[0].id, display_order=4),
                ItemOrder(id_inventory_item=9999, display_order=1),
            ],
        )
        assert updated == 1

    async def test_missing_inventory(self, service, catalog):
        with pytest.raises(NotFoundError):
            await service.get_inventory(9999)
        with pytest.raises(NotFoundError):
            await service.delete_inventory(9999)
        with pytest.raises(NotFoundError):
            await service.reorder_inventory_items(9999, [])

    async def test_concurrent_create_maps_index_violation_to_conflict(self, service, catalog, db_session, monkeypatch):
        await service.create_inventory(new_inventory(catalog))

        # Both requests read "no active count" before either one inserts
        async def no_active_inventory(location_id, exclude_id=None):
            return None

        monkeypatch.setattr(service.repository, "find_active_inventory", no_active_inventory)

        with pytest.raises(ConflictError) as exc_info:
            await service.create_inventory(new_inventory(catalog))

        assert "active inventory already exists" in exc_info.value.detail
        assert await count_rows(db_session, Inventory) == 1

    async def test_concurrent_unlock_maps_index_violation_to_conflict(self, service, catalog, db_session, monkeypatch):
        items = [InventoryItemInput(product_id=catalog["vodka_id"], quantity=2)]
        locked = await service.create_inventory(new_inventory(catalog, status="Locked", items=items))
        await service.create_inventory(new_inventory(catalog))

        async def no_active_inventory(location_id, exclude_id=None):
            return None

        monkeypatch.setattr(service.repository, "find_active_inventory", no_active_inventory)

        with pytest.raises(ConflictError):
            await service.toggle_lock_inventory(locked.id)

        inventory = await service.get_inventory(locked.id)
        assert inventory.status == "Locked"
