from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class StoreBase(BaseModel):
    # Presence is checked by the service so the client gets a readable message
    name: Optional[str] = None
    address: Optional[str] = None

class StoreCreate(StoreBase):
    pass

class StoreUpdate(StoreBase):
    pass

class StoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    address: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
