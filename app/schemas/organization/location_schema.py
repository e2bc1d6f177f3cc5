from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class LocationBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Presence is checked by the service so the client gets a readable message
    store_id: Optional[int] = Field(default=None, alias="storeId")
    name: Optional[str] = None

class LocationCreate(LocationBase):
    pass

class LocationUpdate(LocationBase):
    pass

class LocationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    store_id: int = Field(alias="storeId")
    store_name: Optional[str] = Field(default=None, alias="storeName")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
