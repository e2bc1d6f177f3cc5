from fastapi import APIRouter, Depends, status
from typing import List
from app.api.dependencies import get_store_service
from app.schemas.common.response import ApiResponse
from app.schemas.organization.store_schema import StoreCreate, StoreUpdate, StoreResponse
from app.services.organization.store_service import StoreService

router = APIRouter()

@router.get("", response_model=ApiResponse[List[StoreResponse]])
async def get_stores(service: StoreService = Depends(get_store_service)):
    """Get all stores"""
    return ApiResponse(data=await service.get_stores())

@router.get("/{store_id}", response_model=ApiResponse[StoreResponse])
async def get_store(
    store_id: int,
    service: StoreService = Depends(get_store_service)
):
    """Get store by ID"""
    return ApiResponse(data=await service.get_store(store_id))

@router.post("", response_model=ApiResponse[StoreResponse], status_code=status.HTTP_201_CREATED)
async def create_store(
    store: StoreCreate,
    service: StoreService = Depends(get_store_service)
):
    """Create a new store"""
    created = await service.create_store(store)
    return ApiResponse(data=created, message="Store created successfully")

@router.put("/{store_id}", response_model=ApiResponse[StoreResponse])
async def update_store(
    store_id: int,
    store: StoreUpdate,
    service: StoreService = Depends(get_store_service)
):
    """Update store"""
    updated = await service.update_store(store_id, store)
    return ApiResponse(data=updated, message="Store updated successfully")

@router.delete("/{store_id}", response_model=ApiResponse[None])
async def delete_store(
    store_id: int,
    service: StoreService = Depends(get_store_service)
):
    """Delete a store and its locations"""
    await service.delete_store(store_id)
    return ApiResponse(message="Store deleted successfully")
