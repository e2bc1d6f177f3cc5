import logging
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, select

from app.core.exceptions import DuplicateError, NotFoundError, ValidationError
from app.models.catalog.product_by_store import ProductByStore
from app.models.inventory.inventory import Inventory
from app.models.organization.location import Location
from app.models.organization.store import Store
from app.schemas.organization.store_schema import StoreBase, StoreCreate, StoreUpdate
from app.services.common.existence_checks import find_existing_id, name_exists

logger = logging.getLogger(__name__)

DUPLICATE_STORE = "There is already a store with that name."


class StoreService:
    def __init__(self, session: AsyncSession):
        self.session = session

    def _store_query(self):
        return select(
            Store.id,
            Store.store_name.label("name"),
            Store.address,
            Store.created_at,
        )

    # ---------- Getters ----------
    async def get_stores(self) -> List[Dict[str, Any]]:
        result = await self.session.execute(self._store_query().order_by(Store.store_name))
        return [dict(row) for row in result.mappings().all()]

    async def get_store(self, store_id: int) -> Dict[str, Any]:
        result = await self.session.execute(self._store_query().where(Store.id == store_id))
        row = result.mappings().first()
        if not row:
            raise NotFoundError("Store not found")
        return dict(row)

    # ---------- Create / Update / Delete ----------
    async def _validate(self, data: StoreBase, exclude_id: Optional[int] = None) -> Tuple[str, str]:
        if not data.name or not data.name.strip():
            raise ValidationError("The name is required")
        if not data.address or not data.address.strip():
            raise ValidationError("Address is required")

        name = data.name.strip()
        if await name_exists(self.session, Store, Store.store_name, name, exclude_id=exclude_id):
            raise DuplicateError(DUPLICATE_STORE)
        return name, data.address.strip()

    async def create_store(self, data: StoreCreate) -> Dict[str, Any]:
        name, address = await self._validate(data)
        try:
            store = Store(store_name=name, address=address)
            self.session.add(store)
            await self.session.commit()
            await self.session.refresh(store)
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating store: {e}")
            raise
        logger.info(f"Store created: {name}")
        return await self.get_store(store.id)

    async def update_store(self, store_id: int, data: StoreUpdate) -> Dict[str, Any]:
        result = await self.session.execute(select(Store).where(Store.id == store_id))
        store = result.scalar_one_or_none()
        if not store:
            raise NotFoundError("Store not found")

        name, address = await self._validate(data, exclude_id=store_id)
        try:
            store.store_name = name
            store.address = address
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error updating store {store_id}: {e}")
            raise
        logger.info(f"Store updated: {store_id} -> {name}")
        return await self.get_store(store_id)

    async def delete_store(self, store_id: int) -> None:
        """Remove a store with its locations and catalog settings."""
        if await find_existing_id(self.session, Store, Store.id == store_id) is None:
            raise NotFoundError("Store not found")
        if await find_existing_id(self.session, Inventory, Inventory.store_id == store_id) is not None:
            raise ValidationError("Cannot delete store. It has inventories")
        try:
            await self.session.execute(delete(ProductByStore).where(ProductByStore.store_id == store_id))
            await self.session.execute(delete(Location).where(Location.store_id == store_id))
            await self.session.execute(delete(Store).where(Store.id == store_id))
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error deleting store {store_id}: {e}")
            raise
        logger.info(f"Store deleted: {store_id}")
