"""
Catalog Seed Data (async, idempotent)
- Demo store and its counting locations
- Products and their per-store settings
Run:  python scripts/seed/catalog_data.py
"""

import os, sys
import asyncio
import logging
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from app.core.database import async_session_maker
from app.db.init_db import create_tables
from app.db.seeds.initial_data import create_initial_data

logger = logging.getLogger(__name__)

async def main():
    await create_tables()
    async with async_session_maker() as session:
        data = await create_initial_data(session)
    logger.info(
        f"Seeded store '{data['store'].store_name}' with "
        f"{len(data['locations'])} locations and {len(data['products'])} products"
    )

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
