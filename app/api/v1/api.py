from fastapi import APIRouter
from app.api.v1.endpoints.inventory import inventories
from app.api.v1.endpoints.organization import locations, stores

api_router = APIRouter()

# Organization routes
api_router.include_router(stores.router, prefix="/stores", tags=["Organization"])
api_router.include_router(locations.router, prefix="/locations", tags=["Organization"])

# Inventory routes
api_router.include_router(inventories.router, prefix="/inventories", tags=["Inventory"])
