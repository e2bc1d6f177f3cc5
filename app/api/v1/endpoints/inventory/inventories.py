from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from app.api.dependencies import get_inventory_service
from app.schemas.common.response import ApiResponse
from app.schemas.inventory.inventory import (
    AvailableProduct,
    InventoryCreate,
    InventoryCreated,
    InventoryDetail,
    InventoryLockState,
    InventoryReorder,
    InventorySummary,
    InventoryUpdate,
    LastInventoryProducts,
)
from app.services.inventory.inventory_count_service import InventoryCountService

router = APIRouter()

# Fixed paths are declared before /{inventory_id}
@router.get("/available-products", response_model=ApiResponse[List[AvailableProduct]])
async def get_available_products(
    store_id: Optional[int] = Query(None, alias="storeId"),
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Catalog products that can be counted at a store"""
    products = await service.get_available_products(store_id)
    return ApiResponse(data=products)

@router.get("/last-products/{location_id}", response_model=ApiResponse[LastInventoryProducts])
async def get_last_inventory_products(
    location_id: int,
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Products of the latest count at a location, to pre-fill a new count"""
    last_products = await service.get_last_inventory_products(location_id)
    message = None if last_products.last_inventory_id else "No previous inventories for this location"
    return ApiResponse(data=last_products, message=message)

@router.get("", response_model=ApiResponse[List[InventorySummary]])
async def get_inventories(
    store_id: Optional[int] = Query(None, alias="storeId"),
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Get all inventories, optionally for one store"""
    inventories = await service.get_inventories(store_id)
    return ApiResponse(data=inventories)

@router.get("/{inventory_id}", response_model=ApiResponse[InventoryDetail])
async def get_inventory(
    inventory_id: int,
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Get inventory with its items and losses"""
    inventory = await service.get_inventory(inventory_id)
    return ApiResponse(data=inventory)

@router.post("", response_model=ApiResponse[InventoryCreated], status_code=status.HTTP_201_CREATED)
async def create_inventory(
    inventory_data: InventoryCreate,
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Create a new inventory count"""
    created = await service.create_inventory(inventory_data)
    return ApiResponse(data=created, message="Inventory created successfully")

@router.put("/{inventory_id}", response_model=ApiResponse[None])
async def update_inventory(
    inventory_id: int,
    inventory_data: InventoryUpdate,
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Update an unlocked inventory count"""
    await service.update_inventory(inventory_id, inventory_data)
    return ApiResponse(message="Inventory updated successfully")

@router.delete("/{inventory_id}", response_model=ApiResponse[None])
async def delete_inventory(
    inventory_id: int,
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Delete an unlocked inventory count"""
    await service.delete_inventory(inventory_id)
    return ApiResponse(message="Inventory deleted successfully")

@router.patch("/{inventory_id}/toggle-lock", response_model=ApiResponse[InventoryLockState])
async def toggle_lock_inventory(
    inventory_id: int,
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Lock or unlock an inventory count.

    Unlocking is refused while another count at the same location is
    Unlocked, since a location has at most one open count.
    """
    new_status = await service.toggle_lock_inventory(inventory_id)
    action = "locked" if new_status == "Locked" else "unlocked"
    return ApiResponse(data=InventoryLockState(status=new_status), message=f"Inventory {action} successfully")

@router.patch("/{inventory_id}/reorder", response_model=ApiResponse[None])
async def reorder_inventory_items(
    inventory_id: int,
    reorder_data: InventoryReorder,
    service: InventoryCountService = Depends(get_inventory_service)
):
    """Save a new display order for the items of a count"""
    await service.reorder_inventory_items(inventory_id, reorder_data.item_orders)
    return ApiResponse(message="Order updated successfully")
