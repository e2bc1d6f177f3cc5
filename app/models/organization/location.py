from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class Location(BaseModel):
    __tablename__ = 'locations'

    store_id = Column(Integer, ForeignKey('stores.id'), nullable=False, index=True)
    location_name = Column(String(100), nullable=False)

    # Relationships
    store = relationship("Store", back_populates="locations")
    inventories = relationship("Inventory", back_populates="location")
