import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple
from sqlalchemy.exc import IntegrityError

from app.core.config import settings
from app.core.exceptions import (
    BaseAppException,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from app.models.inventory.inventory_item import InventoryItem
from app.models.inventory.inventory_loss import InventoryLoss
from app.models.shared.enums import InventoryStatus
from app.schemas.inventory.inventory import (
    InventoryCreate,
    InventoryCreated,
    InventoryDetail,
    InventoryItemInput,
    InventoryLossInput,
    InventoryUpdate,
    ItemOrder,
    LastInventoryProducts,
)
from app.services.inventory.inventory_repository import InventoryRepository
from app.utils.inventory_calculations import WeightReading, assign_display_order, parse_weight, reconcile_weights
from app.utils.validators.validation_utils import InventoryValidator, parse_number

logger = logging.getLogger(__name__)

UNLOCKED = InventoryStatus.UNLOCKED.value
LOCKED = InventoryStatus.LOCKED.value

ACTIVE_INVENTORY_EXISTS = (
    "An active inventory already exists for this location. "
    "Please close it before creating a new one."
)
EMPTY_INVENTORY_CLOSE = "You must add at least one product before closing the inventory"
ACTIVE_INDEX_NAME = "uq_inventories_active_location"


def _is_active_location_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return ACTIVE_INDEX_NAME in message or "inventories.location_id" in message


class InventoryCountService:
    """
    Physical inventory counts.

    A count is created Unlocked (or directly Locked when it already has
    products). While Unlocked its items, losses, date and location can be
    rewritten; once Locked it can only be unlocked again. Every multi-row
    write runs in one repository transaction, so a failure leaves no partial
    count behind.
    """

    def __init__(self, repository: InventoryRepository):
        self.repository = repository

    # ---------- Queries ----------
    async def get_inventories(self, store_id: Optional[int] = None) -> List[Dict[str, Any]]:
        return await self.repository.list_inventories(store_id)

    async def get_inventory(self, inventory_id: int) -> InventoryDetail:
        summary = await self.repository.get_inventory_summary(inventory_id)
        if not summary:
            raise NotFoundError("Inventory not found")
        items = await self.repository.get_inventory_items(inventory_id)
        losses = await self.repository.get_inventory_losses(inventory_id)
        return InventoryDetail.model_validate({**summary, "items": items, "losses": losses})

    async def get_available_products(self, store_id: Optional[int]) -> List[Dict[str, Any]]:
        if not store_id:
            raise ValidationError("storeId is required")
        return await self.repository.get_available_products(store_id)

    async def get_last_inventory_products(self, location_id: int) -> LastInventoryProducts:
        last_id = await self.repository.get_last_inventory_id(location_id)
        if last_id is None:
            return LastInventoryProducts()
        items = await self.repository.get_inventory_products(last_id)
        return LastInventoryProducts.model_validate({"last_inventory_id": last_id, "items": items})

    # ---------- Create ----------
    async def create_inventory(self, data: InventoryCreate) -> InventoryCreated:
        status = data.status or UNLOCKED

        if not data.store_id or not data.inventory_date:
            raise ValidationError("Store and date are required")
        if status == LOCKED and not data.items:
            raise ValidationError(EMPTY_INVENTORY_CLOSE)
        if not data.location_id:
            raise ValidationError("Location is required")

        try:
            async with self.repository.transaction():
                await self._ensure_store_location(data.store_id, data.location_id)
                if await self.repository.find_active_inventory(data.location_id):
                    raise ConflictError(ACTIVE_INVENTORY_EXISTS)
                if status == LOCKED:
                    self._validate_quantities(data.items)
                await self._ensure_products_exist(data.items, data.waste)
                await self._ensure_item_locations(data.store_id, data.items)

                ordered_items = await self._order_items(data.location_id, data.items)

                inventory = await self.repository.add_inventory(
                    store_id=data.store_id,
                    location_id=data.location_id,
                    inventory_type=settings.DEFAULT_INVENTORY_TYPE,
                    inventory_date=data.inventory_date,
                    status=status,
                    total_ws_value=0,
                    total_losses_value=0,
                )
                inventory_id = inventory.id

                total_ws_value = await self._write_items(inventory_id, ordered_items)
                total_waste_value = await self._write_losses(inventory_id, data.waste)
                await self.repository.update_inventory_fields(
                    inventory_id,
                    total_ws_value=total_ws_value,
                    total_losses_value=total_waste_value,
                )
        except IntegrityError as e:
            if _is_active_location_violation(e):
                raise ConflictError(ACTIVE_INVENTORY_EXISTS)
            logger.error(f"Integrity error creating inventory: {e}")
            raise InternalError("Error creating the inventory", error=str(e.orig))
        except BaseAppException:
            raise
        except Exception as e:
            logger.error(f"Error creating inventory: {e}")
            raise InternalError("Error creating the inventory", error=str(e))

        logger.info(
            f"Inventory {inventory_id} created at location {data.location_id} "
            f"({status}, {len(ordered_items)} items, {len(data.waste)} losses)"
        )
        return InventoryCreated(
            id=inventory_id,
            total_ws_value=float(total_ws_value),
            total_waste_value=float(total_waste_value),
        )

    # ---------- Update ----------
    async def update_inventory(self, inventory_id: int, data: InventoryUpdate) -> None:
        try:
            async with self.repository.transaction():
                inventory = await self.repository.get_inventory(inventory_id)
                if not inventory:
                    raise NotFoundError("Inventory not found")
                if inventory.is_locked:
                    raise ConflictError("Cannot edit a locked inventory")

                location_id = data.location_id or inventory.location_id
                if data.location_id and data.location_id != inventory.location_id:
                    await self._ensure_store_location(inventory.store_id, data.location_id)
                    if await self.repository.find_active_inventory(data.location_id, exclude_id=inventory_id):
                        raise ConflictError("An active inventory already exists for this location")

                if data.status == LOCKED:
                    if not location_id:
                        raise ValidationError("Location is required")
                    if data.items:
                        self._validate_quantities(data.items)
                    elif await self.repository.count_items(inventory_id) == 0:
                        raise ValidationError(EMPTY_INVENTORY_CLOSE)

                await self._ensure_products_exist(data.items or [], data.waste or [])
                await self._ensure_item_locations(inventory.store_id, data.items or [])

                values = {}
                if data.inventory_date:
                    values["inventory_date"] = data.inventory_date
                if data.location_id:
                    values["location_id"] = data.location_id
                if data.status:
                    values["status"] = data.status
                if values:
                    await self.repository.update_inventory_fields(inventory_id, **values)

                # An empty item list leaves the counted items as they are
                if data.items:
                    ordered_items = await self._order_items(location_id, data.items, exclude_id=inventory_id)
                    await self.repository.delete_items(inventory_id)
                    total_ws_value = await self._write_items(inventory_id, ordered_items)

                    await self.repository.delete_losses(inventory_id)
                    total_waste_value = await self._write_losses(inventory_id, data.waste or [])

                    await self.repository.update_inventory_fields(
                        inventory_id,
                        total_ws_value=total_ws_value,
                        total_losses_value=total_waste_value,
                    )
                elif data.waste is not None:
                    await self.repository.delete_losses(inventory_id)
                    total_waste_value = await self._write_losses(inventory_id, data.waste)
                    await self.repository.update_inventory_fields(
                        inventory_id, total_losses_value=total_waste_value
                    )
        except IntegrityError as e:
            if _is_active_location_violation(e):
                raise ConflictError("An active inventory already exists for this location")
            logger.error(f"Integrity error updating inventory {inventory_id}: {e}")
            raise InternalError("Error updating the inventory", error=str(e.orig))
        except BaseAppException:
            raise
        except Exception as e:
            logger.error(f"Error updating inventory {inventory_id}: {e}")
            raise InternalError("Error updating the inventory", error=str(e))

        logger.info(f"Inventory {inventory_id} updated: {sorted(data.model_dump(exclude_unset=True))}")

    # ---------- Lock / delete / reorder ----------
    async def toggle_lock_inventory(self, inventory_id: int) -> str:
        """Flip Locked <-> Unlocked. Item contents are not re-validated."""
        inventory = await self.repository.get_inventory(inventory_id)
        if not inventory:
            raise NotFoundError("Inventory not found")

        new_status = UNLOCKED if inventory.is_locked else LOCKED
        if new_status == UNLOCKED and inventory.location_id:
            other_id = await self.repository.find_active_inventory(inventory.location_id, exclude_id=inventory_id)
            if other_id:
                raise ConflictError(
                    f"Inventory {other_id} is already active for this location. Lock it before unlocking this one."
                )

        try:
            async with self.repository.transaction():
                await self.repository.update_inventory_fields(inventory_id, status=new_status)
        except IntegrityError as e:
            if _is_active_location_violation(e):
                raise ConflictError("Another inventory is already active for this location")
            raise InternalError("Error updating the inventory status", error=str(e.orig))
        except Exception as e:
            logger.error(f"Error toggling lock on inventory {inventory_id}: {e}")
            raise InternalError("Error updating the inventory status", error=str(e))

        logger.info(f"Inventory {inventory_id} is now {new_status}")
        return new_status

    async def delete_inventory(self, inventory_id: int) -> None:
        try:
            async with self.repository.transaction():
                inventory = await self.repository.get_inventory(inventory_id)
                if not inventory:
                    raise NotFoundError("Inventory not found")
                if inventory.is_locked:
                    raise ConflictError("Cannot delete a locked inventory")
                await self.repository.delete_inventory(inventory_id)
        except BaseAppException:
            raise
        except Exception as e:
            logger.error(f"Error deleting inventory {inventory_id}: {e}")
            raise InternalError("Error deleting the inventory", error=str(e))

        logger.info(f"Inventory {inventory_id} deleted")

    async def reorder_inventory_items(self, inventory_id: int, item_orders: Sequence[ItemOrder]) -> int:
        """Apply client display orders; weights and totals are left as they are."""
        try:
            async with self.repository.transaction():
                inventory = await self.repository.get_inventory(inventory_id)
                if not inventory:
                    raise NotFoundError("Inventory not found")
                if inventory.is_locked:
                    raise ConflictError("Cannot reorder a locked inventory")

                updated = 0
                for order in item_orders:
                    updated += await self.repository.update_item_order(
                        inventory_id, order.id_inventory_item, order.display_order
                    )
        except BaseAppException:
            raise
        except Exception as e:
            logger.error(f"Error reordering items of inventory {inventory_id}: {e}")
            raise InternalError("Error reordering the inventory items", error=str(e))

        logger.info(f"Inventory {inventory_id} reordered ({updated}/{len(item_orders)} items)")
        return updated

    # ---------- Helpers ----------
    async def _ensure_store_location(self, store_id: int, location_id: int) -> None:
        if not await self.repository.store_exists(store_id):
            raise ValidationError("Store not found")
        location = await self.repository.get_location(location_id)
        if not location:
            raise ValidationError("Location not found")
        if location.store_id != store_id:
            raise ValidationError("Location does not belong to the store")

    async def _ensure_products_exist(
        self, items: Sequence[InventoryItemInput], waste: Sequence[InventoryLossInput]
    ) -> None:
        product_ids = [item.product_id for item in items] + [loss.product_id for loss in waste]
        missing = await self.repository.get_missing_product_ids(product_ids)
        if missing:
            raise ValidationError(f"Products not found: {', '.join(str(p) for p in missing)}")

    async def _ensure_item_locations(self, store_id: int, items: Sequence[InventoryItemInput]) -> None:
        """Per-item location overrides must be locations of the same store."""
        location_ids = [item.location_id for item in items if item.location_id is not None]
        missing = await self.repository.get_missing_location_ids(location_ids, store_id)
        if missing:
            raise ValidationError(f"Locations not found for this store: {', '.join(str(l) for l in missing)}")

    @staticmethod
    def _validate_quantities(items: Sequence[InventoryItemInput]) -> None:
        is_valid, message = InventoryValidator.validate_quantities(items)
        if not is_valid:
            raise ValidationError(message)

    async def _order_items(
        self,
        location_id: int,
        items: Sequence[InventoryItemInput],
        exclude_id: Optional[int] = None,
    ) -> List[Tuple[InventoryItemInput, int]]:
        if not items:
            return []
        previous_order = await self.repository.get_last_inventory_order(location_id, exclude_id=exclude_id)
        return assign_display_order(items, previous_order)

    async def _resolve_weights(self, product_id: int, full_weight: Any, empty_weight: Any) -> WeightReading:
        """Item weights, completed from the catalog when a side is missing."""
        if parse_weight(full_weight) is not None and parse_weight(empty_weight) is not None:
            return reconcile_weights(full_weight, empty_weight)
        product_full, product_empty = await self.repository.get_product_weights(product_id)
        return reconcile_weights(full_weight, empty_weight, product_full, product_empty)

    async def _write_items(
        self, inventory_id: int, ordered_items: Sequence[Tuple[InventoryItemInput, int]]
    ) -> Decimal:
        total_ws_value = Decimal(0)
        for item, display_order in ordered_items:
            quantity = parse_number(item.quantity)
            if quantity is None:
                label = item.product_name or f"#{item.product_id}"
                logger.warning(f"Invalid quantity {item.quantity!r} for product {label}")
                raise ValidationError(f"Invalid quantity for product: {label}")

            ws_value = parse_number(item.wholesale_value) or Decimal(0)
            case_size = parse_number(item.case_size)
            weights = await self._resolve_weights(item.product_id, item.full_weight, item.empty_weight)

            await self.repository.add_item(
                InventoryItem(
                    inventory_id=inventory_id,
                    product_id=item.product_id,
                    location_id=item.location_id,
                    display_order=display_order,
                    quantity_type=item.quantity_type,
                    quantity=quantity,
                    case_size=int(case_size) if case_size is not None else None,
                    weight_oz=parse_number(item.weight_oz),
                    full_weight=weights.full_weight,
                    empty_weight=weights.empty_weight,
                    net_weight=weights.net_weight,
                    wholesale_value=ws_value,
                )
            )
            total_ws_value += ws_value
        return total_ws_value

    async def _write_losses(self, inventory_id: int, waste: Sequence[InventoryLossInput]) -> Decimal:
        total_waste_value = Decimal(0)
        for loss in waste:
            quantity = parse_number(loss.quantity)
            if quantity is None:
                label = loss.product_name or f"#{loss.product_id}"
                raise ValidationError(f"Invalid waste quantity for product: {label}")

            loss_value = parse_number(loss.wholesale_value) or Decimal(0)
            weights = await self._resolve_weights(loss.product_id, loss.full_weight, loss.empty_weight)

            await self.repository.add_loss(
                InventoryLoss(
                    inventory_id=inventory_id,
                    product_id=loss.product_id,
                    quantity=quantity,
                    unit=loss.quantity_type or settings.DEFAULT_LOSS_UNIT,
                    reason=loss.reason or "",
                    net_weight=weights.net_weight,
                    loss_value=loss_value,
                )
            )
            total_waste_value += loss_value
        return total_waste_value
