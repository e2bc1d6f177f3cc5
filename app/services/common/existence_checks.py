"""
Scoped existence checks shared by services.

A record "already exists" when a row matches the scope predicates, ignoring
the record currently being updated.
"""
from typing import Any, Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.utils.validators.validation_utils import normalize_name


async def find_existing_id(
    session: AsyncSession,
    model: Any,
    *conditions: Any,
    exclude_id: Optional[int] = None,
) -> Optional[int]:
    query = select(model.id).where(*conditions)
    if exclude_id is not None:
        query = query.where(model.id != exclude_id)
    result = await session.execute(query.order_by(model.id).limit(1))
    return result.scalar_one_or_none()


async def name_exists(
    session: AsyncSession,
    model: Any,
    name_column: Any,
    name: str,
    *scope: Any,
    exclude_id: Optional[int] = None,
) -> bool:
    """Case and whitespace insensitive name check within ``scope``."""
    existing_id = await find_existing_id(
        session,
        model,
        func.lower(func.trim(name_column)) == normalize_name(name),
        *scope,
        exclude_id=exclude_id,
    )
    return existing_id is not None
