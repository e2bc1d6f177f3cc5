import asyncio
import logging
from app.core.database import engine, async_session_maker
from app.models import *  # Import all models
from app.models.base import Base
from app.db.seeds.initial_data import create_initial_data

logger = logging.getLogger(__name__)

async def create_tables():
    """Create all database tables"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating tables: {str(e)}")
        raise

async def init_db(seed: bool = False):
    """Initialize the database for local development"""
    try:
        logger.info("Initializing database...")
        await create_tables()

        if seed:
            async with async_session_maker() as session:
                await create_initial_data(session)

        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        raise

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_db(seed=True))
