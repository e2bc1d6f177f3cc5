import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, select

from app.core.exceptions import DuplicateError, NotFoundError, ValidationError
from app.models.inventory.inventory import Inventory
from app.models.organization.location import Location
from app.models.organization.store import Store
from app.schemas.organization.location_schema import LocationBase, LocationCreate, LocationUpdate
from app.services.common.existence_checks import find_existing_id, name_exists

logger = logging.getLogger(__name__)

DUPLICATE_LOCATION = "There is already a location with that name for this store."


class LocationService:
    def __init__(self, session: AsyncSession):
        self.session = session

    def _location_query(self):
        return (
            select(
                Location.id,
                Location.location_name.label("name"),
                Location.store_id,
                Store.store_name,
                Location.created_at,
            )
            .join(Store, Location.store_id == Store.id)
        )

    # ---------- Getters ----------
    async def get_locations(self, store_id: Optional[int] = None) -> List[Dict[str, Any]]:
        query = self._location_query()
        if store_id:
            query = query.where(Location.store_id == store_id)
        result = await self.session.execute(query.order_by(Store.store_name, Location.location_name))
        return [dict(row) for row in result.mappings().all()]

    async def get_location(self, location_id: int) -> Dict[str, Any]:
        result = await self.session.execute(self._location_query().where(Location.id == location_id))
        row = result.mappings().first()
        if not row:
            raise NotFoundError("Location not found")
        return dict(row)

    # ---------- Create / Update / Delete ----------
    async def _validate(self, data: LocationBase, exclude_id: Optional[int] = None) -> str:
        if not data.store_id:
            raise ValidationError("The store is required")
        if not data.name or not data.name.strip():
            raise ValidationError("The name is required")

        if await find_existing_id(self.session, Store, Store.id == data.store_id) is None:
            raise NotFoundError("The store does not exist")

        name = data.name.strip()
        if await name_exists(
            self.session,
            Location,
            Location.location_name,
            name,
            Location.store_id == data.store_id,
            exclude_id=exclude_id,
        ):
            raise DuplicateError(DUPLICATE_LOCATION)
        return name

    async def create_location(self, data: LocationCreate) -> Dict[str, Any]:
        name = await self._validate(data)
        try:
            location = Location(store_id=data.store_id, location_name=name)
            self.session.add(location)
            await self.session.commit()
            await self.session.refresh(location)
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating location: {e}")
            raise
        logger.info(f"Location created: {name} (store {data.store_id})")
        return await self.get_location(location.id)

    async def update_location(self, location_id: int, data: LocationUpdate) -> Dict[str, Any]:
        result = await self.session.execute(select(Location).where(Location.id == location_id))
        location = result.scalar_one_or_none()
        if not location:
            raise NotFoundError("Location not found")

        name = await self._validate(data, exclude_id=location_id)
        try:
            location.store_id = data.store_id
            location.location_name = name
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error updating location {location_id}: {e}")
            raise
        logger.info(f"Location updated: {location_id} -> {name}")
        return await self.get_location(location_id)

    async def delete_location(self, location_id: int) -> None:
        if await find_existing_id(self.session, Location, Location.id == location_id) is None:
            raise NotFoundError("Location not found")
        if await find_existing_id(self.session, Inventory, Inventory.location_id == location_id) is not None:
            raise ValidationError("Cannot delete location. It has inventories")
        try:
            await self.session.execute(delete(Location).where(Location.id == location_id))
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error deleting location {location_id}: {e}")
            raise
        logger.info(f"Location deleted: {location_id}")
