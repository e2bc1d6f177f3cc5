import logging
from typing import Dict, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.models.catalog.product import Product
from app.models.catalog.product_by_store import ProductByStore
from app.models.organization.location import Location
from app.models.organization.store import Store

logger = logging.getLogger(__name__)

DEMO_STORE = "Main Street Bistro"
DEMO_STORE_ADDRESS = "120 Main Street"
DEMO_LOCATIONS = ["Bar", "Kitchen", "Walk-in Cooler"]
DEMO_PRODUCTS = [
    {
        "product_name": "House Vodka",
        "product_code": "VOD-750",
        "container_type": "Bottle",
        "container_size": 750,
        "container_unit": "ml",
        "case_size": 12,
        "wholesale_price": 14.50,
        "full_weight": 1250,
        "empty_weight": 500,
        "full_weight_unit": "g",
    },
    {
        "product_name": "Olive Oil",
        "product_code": "OIL-1G",
        "container_type": "Jug",
        "container_size": 1,
        "container_unit": "Gallon",
        "case_size": 4,
        "wholesale_price": 32.00,
        "full_weight": 3700,
        "empty_weight": 200,
        "full_weight_unit": "g",
    },
    {
        "product_name": "Lemons",
        "product_code": "LEM-EA",
        "container_type": "Each",
        "container_size": 1,
        "container_unit": "Each",
        "case_size": 100,
        "wholesale_price": 0.35,
    },
]

async def create_initial_data(session: AsyncSession) -> Dict[str, object]:
    """Create a demo store with locations and a small catalog (idempotent)"""
    try:
        logger.info("Creating initial data...")

        store = await create_demo_store(session)
        locations = await create_demo_locations(session, store)
        products = await create_demo_products(session, store)

        await session.commit()
        logger.info("Initial data created successfully")
        return {"store": store, "locations": locations, "products": products}

    except Exception as e:
        logger.error(f"Error creating initial data: {str(e)}")
        await session.rollback()
        raise

async def create_demo_store(session: AsyncSession) -> Store:
    result = await session.execute(select(Store).where(Store.store_name == DEMO_STORE))
    store = result.scalar_one_or_none()
    if not store:
        store = Store(store_name=DEMO_STORE, address=DEMO_STORE_ADDRESS)
        session.add(store)
        await session.flush()
    return store

async def create_demo_locations(session: AsyncSession, store: Store) -> List[Location]:
    locations = []
    for name in DEMO_LOCATIONS:
        result = await session.execute(
            select(Location).where(Location.store_id == store.id, Location.location_name == name)
        )
        location = result.scalar_one_or_none()
        if not location:
            location = Location(store_id=store.id, location_name=name)
            session.add(location)
            await session.flush()
        locations.append(location)
    return locations

async def create_demo_products(session: AsyncSession, store: Store) -> List[Product]:
    products = []
    for data in DEMO_PRODUCTS:
        result = await session.execute(select(Product).where(Product.product_code == data["product_code"]))
        product = result.scalar_one_or_none()
        if not product:
            product = Product(**data)
            session.add(product)
            await session.flush()
            session.add(ProductByStore(product_id=product.id, store_id=store.id, par=10, reorder_point=4, order_by_the="case"))
        products.append(product)
    await session.flush()
    return products
