from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from app.api.dependencies import get_location_service
from app.schemas.common.response import ApiResponse
from app.schemas.organization.location_schema import LocationCreate, LocationUpdate, LocationResponse
from app.services.organization.location_service import LocationService

router = APIRouter()

@router.get("", response_model=ApiResponse[List[LocationResponse]])
async def get_locations(
    store_id: Optional[int] = Query(None, alias="storeId"),
    service: LocationService = Depends(get_location_service)
):
    """Get all locations, optionally for one store"""
    return ApiResponse(data=await service.get_locations(store_id))

@router.get("/{location_id}", response_model=ApiResponse[LocationResponse])
async def get_location(
    location_id: int,
    service: LocationService = Depends(get_location_service)
):
    """Get location by ID"""
    return ApiResponse(data=await service.get_location(location_id))

@router.post("", response_model=ApiResponse[LocationResponse], status_code=status.HTTP_201_CREATED)
async def create_location(
    location: LocationCreate,
    service: LocationService = Depends(get_location_service)
):
    """Create a new location"""
    created = await service.create_location(location)
    return ApiResponse(data=created, message="Location created successfully")

@router.put("/{location_id}", response_model=ApiResponse[LocationResponse])
async def update_location(
    location_id: int,
    location: LocationUpdate,
    service: LocationService = Depends(get_location_service)
):
    """Update location"""
    updated = await service.update_location(location_id, location)
    return ApiResponse(data=updated, message="Location updated successfully")

@router.delete("/{location_id}", response_model=ApiResponse[None])
async def delete_location(
    location_id: int,
    service: LocationService = Depends(get_location_service)
):
    """Delete location"""
    await service.delete_location(location_id)
    return ApiResponse(message="Location deleted successfully")
