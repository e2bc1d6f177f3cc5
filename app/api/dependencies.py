from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.services.inventory.inventory_count_service import InventoryCountService
from app.services.inventory.inventory_repository import InventoryRepository
from app.services.organization.location_service import LocationService
from app.services.organization.store_service import StoreService

def get_inventory_repository(
    session: AsyncSession = Depends(get_async_session)
) -> InventoryRepository:
    return InventoryRepository(session)

def get_inventory_service(
    repository: InventoryRepository = Depends(get_inventory_repository)
) -> InventoryCountService:
    return InventoryCountService(repository)

def get_location_service(
    session: AsyncSession = Depends(get_async_session)
) -> LocationService:
    return LocationService(session)

def get_store_service(
    session: AsyncSession = Depends(get_async_session)
) -> StoreService:
    return StoreService(session)
