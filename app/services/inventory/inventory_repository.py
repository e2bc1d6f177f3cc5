from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional, Tuple
from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.catalog.product import Product
from app.models.catalog.product_by_store import ProductByStore
from app.models.inventory.inventory import Inventory
from app.models.inventory.inventory_item import InventoryItem
from app.models.inventory.inventory_loss import InventoryLoss
from app.models.organization.location import Location
from app.models.organization.store import Store
from app.models.shared.enums import InventoryStatus
from app.services.common.existence_checks import find_existing_id
from app.utils.inventory_calculations import build_order_map


class InventoryRepository:
    """Persistence for inventories, their items and losses.

    All writes are expected to run inside ``transaction()``.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["InventoryRepository"]:
        """Commit on success, roll back and re-raise on any error."""
        try:
            yield self
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    # ---------- Catalog lookups ----------
    async def store_exists(self, store_id: int) -> bool:
        return await find_existing_id(self.session, Store, Store.id == store_id) is not None

    async def get_location(self, location_id: int) -> Optional[Location]:
        result = await self.session.execute(select(Location).where(Location.id == location_id))
        return result.scalar_one_or_none()

    async def get_missing_product_ids(self, product_ids: Iterable[int]) -> List[int]:
        wanted = set(product_ids)
        if not wanted:
            return []
        result = await self.session.execute(select(Product.id).where(Product.id.in_(wanted)))
        found = set(result.scalars().all())
        return sorted(wanted - found)

    async def get_missing_location_ids(self, location_ids: Iterable[int], store_id: int) -> List[int]:
        wanted = set(location_ids)
        if not wanted:
            return []
        result = await self.session.execute(
            select(Location.id).where(Location.id.in_(wanted), Location.store_id == store_id)
        )
        found = set(result.scalars().all())
        return sorted(wanted - found)

    async def get_product_weights(self, product_id: int) -> Tuple[Optional[Decimal], Optional[Decimal]]:
        result = await self.session.execute(
            select(Product.full_weight, Product.empty_weight).where(Product.id == product_id)
        )
        row = result.first()
        if row is None:
            return None, None
        return row.full_weight, row.empty_weight

    # ---------- Inventory lookups ----------
    async def get_inventory(self, inventory_id: int) -> Optional[Inventory]:
        result = await self.session.execute(select(Inventory).where(Inventory.id == inventory_id))
        return result.scalar_one_or_none()

    async def find_active_inventory(self, location_id: int, exclude_id: Optional[int] = None) -> Optional[int]:
        """Id of the unlocked inventory at ``location_id``, if any."""
        return await find_existing_id(
            self.session,
            Inventory,
            Inventory.location_id == location_id,
            Inventory.status == InventoryStatus.UNLOCKED.value,
            exclude_id=exclude_id,
        )

    async def get_last_inventory_id(self, location_id: int, exclude_id: Optional[int] = None) -> Optional[int]:
        query = select(func.max(Inventory.id)).where(Inventory.location_id == location_id)
        if exclude_id is not None:
            query = query.where(Inventory.id != exclude_id)
        result = await self.session.execute(query)
        return result.scalar()

    async def get_last_inventory_order(self, location_id: int, exclude_id: Optional[int] = None) -> Dict[int, int]:
        """product id -> display order in the most recent count at the location"""
        last_id = await self.get_last_inventory_id(location_id, exclude_id=exclude_id)
        if last_id is None:
            return {}
        result = await self.session.execute(
            select(InventoryItem.product_id, InventoryItem.display_order)
            .where(InventoryItem.inventory_id == last_id)
            .order_by(InventoryItem.display_order, InventoryItem.id)
        )
        return build_order_map(result.all())

    async def count_items(self, inventory_id: int) -> int:
        result = await self.session.execute(
            select(func.count(InventoryItem.id)).where(InventoryItem.inventory_id == inventory_id)
        )
        return int(result.scalar() or 0)

    # ---------- Writes ----------
    async def add_inventory(self, **values: Any) -> Inventory:
        inventory = Inventory(**values)
        self.session.add(inventory)
        await self.session.flush()
        return inventory

    async def update_inventory_fields(self, inventory_id: int, **values: Any) -> None:
        await self.session.execute(
            update(Inventory).where(Inventory.id == inventory_id).values(**values)
        )

    async def add_item(self, item: InventoryItem) -> None:
        self.session.add(item)
        await self.session.flush()

    async def add_loss(self, loss: InventoryLoss) -> None:
        self.session.add(loss)
        await self.session.flush()

    async def delete_items(self, inventory_id: int) -> None:
        await self.session.execute(delete(InventoryItem).where(InventoryItem.inventory_id == inventory_id))

    async def delete_losses(self, inventory_id: int) -> None:
        await self.session.execute(delete(InventoryLoss).where(InventoryLoss.inventory_id == inventory_id))

    async def delete_inventory(self, inventory_id: int) -> None:
        await self.delete_items(inventory_id)
        await self.delete_losses(inventory_id)
        await self.session.execute(delete(Inventory).where(Inventory.id == inventory_id))

    async def update_item_order(self, inventory_id: int, item_id: int, display_order: int) -> int:
        result = await self.session.execute(
            update(InventoryItem)
            .where(InventoryItem.id == item_id, InventoryItem.inventory_id == inventory_id)
            .values(display_order=display_order)
        )
        return result.rowcount

    # ---------- Read models ----------
    def _summary_query(self):
        total_products = (
            select(func.count(InventoryItem.id))
            .where(InventoryItem.inventory_id == Inventory.id)
            .correlate(Inventory)
            .scalar_subquery()
        )
        total_losses = (
            select(func.count(InventoryLoss.id))
            .where(InventoryLoss.inventory_id == Inventory.id)
            .correlate(Inventory)
            .scalar_subquery()
        )
        return (
            select(
                Inventory.id,
                Inventory.inventory_type,
                Inventory.inventory_date,
                Inventory.status,
                Inventory.store_id,
                Store.store_name,
                Inventory.location_id,
                Location.location_name,
                Inventory.total_ws_value,
                Inventory.total_losses_value,
                total_products.label("total_products"),
                total_losses.label("total_losses"),
                Inventory.created_at,
                Inventory.updated_at,
            )
            .join(Store, Inventory.store_id == Store.id)
            .outerjoin(Location, Inventory.location_id == Location.id)
        )

    async def list_inventories(self, store_id: Optional[int] = None) -> List[Dict[str, Any]]:
        query = self._summary_query()
        if store_id:
            query = query.where(Inventory.store_id == store_id)
        query = query.order_by(Inventory.inventory_date.desc(), Inventory.id.desc())
        result = await self.session.execute(query)
        return [dict(row) for row in result.mappings().all()]

    async def get_inventory_summary(self, inventory_id: int) -> Optional[Dict[str, Any]]:
        result = await self.session.execute(self._summary_query().where(Inventory.id == inventory_id))
        row = result.mappings().first()
        return dict(row) if row else None

    async def get_inventory_items(self, inventory_id: int) -> List[Dict[str, Any]]:
        result = await self.session.execute(
            select(
                InventoryItem.id,
                InventoryItem.product_id,
                InventoryItem.location_id,
                Location.location_name,
                InventoryItem.display_order,
                InventoryItem.quantity_type,
                InventoryItem.quantity,
                InventoryItem.case_size,
                InventoryItem.weight_oz,
                InventoryItem.full_weight,
                InventoryItem.empty_weight,
                InventoryItem.net_weight,
                InventoryItem.wholesale_value,
                Product.product_name,
                Product.product_code,
                Product.container_type,
                Product.container_size,
                Product.container_unit,
                Product.case_size.label("product_case_size"),
                Product.full_weight.label("product_full_weight"),
                Product.empty_weight.label("product_empty_weight"),
                Product.wholesale_price,
            )
            .join(Product, InventoryItem.product_id == Product.id)
            .outerjoin(Location, InventoryItem.location_id == Location.id)
            .where(InventoryItem.inventory_id == inventory_id)
            .order_by(InventoryItem.display_order, Product.product_name)
        )
        return [dict(row) for row in result.mappings().all()]

    async def get_inventory_losses(self, inventory_id: int) -> List[Dict[str, Any]]:
        result = await self.session.execute(
            select(
                InventoryLoss.id,
                InventoryLoss.product_id,
                InventoryLoss.quantity,
                InventoryLoss.unit,
                InventoryLoss.reason,
                InventoryLoss.net_weight,
                InventoryLoss.loss_value,
                InventoryLoss.created_at,
                Product.product_name,
                Product.product_code,
            )
            .join(Product, InventoryLoss.product_id == Product.id)
            .where(InventoryLoss.inventory_id == inventory_id)
            .order_by(InventoryLoss.created_at.desc(), InventoryLoss.id.desc())
        )
        return [dict(row) for row in result.mappings().all()]

    async def get_available_products(self, store_id: int) -> List[Dict[str, Any]]:
        result = await self.session.execute(
            select(
                Product.id,
                Product.product_name.label("name"),
                Product.product_code,
                Product.container_type,
                Product.container_size,
                Product.container_unit,
                Product.container_size_base_unit,
                Product.container_size_base_unit_type,
                Product.case_size,
                Product.wholesale_price,
                Product.full_weight,
                Product.empty_weight,
                Product.full_weight_unit.label("weight_unit"),
                ProductByStore.par,
                ProductByStore.reorder_point,
                ProductByStore.order_by_the,
            )
            .join(ProductByStore, Product.id == ProductByStore.product_id)
            .where(ProductByStore.store_id == store_id)
            .order_by(Product.product_name)
        )
        return [dict(row) for row in result.mappings().all()]

    async def get_inventory_products(self, inventory_id: int) -> List[Dict[str, Any]]:
        """Items of a count with the catalog data needed to pre-fill a new one"""
        result = await self.session.execute(
            select(
                InventoryItem.display_order,
                InventoryItem.quantity_type,
                InventoryItem.full_weight,
                InventoryItem.empty_weight,
                InventoryItem.net_weight,
                Product.id.label("product_id"),
                Product.product_name,
                Product.product_code,
                Product.container_type,
                Product.container_size,
                Product.container_unit,
                Product.case_size,
                Product.full_weight.label("product_full_weight"),
                Product.empty_weight.label("product_empty_weight"),
                Product.wholesale_price,
            )
            .join(Product, InventoryItem.product_id == Product.id)
            .where(InventoryItem.inventory_id == inventory_id)
            .order_by(InventoryItem.display_order)
        )
        return [dict(row) for row in result.mappings().all()]
