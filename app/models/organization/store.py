from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class Store(BaseModel):
    __tablename__ = 'stores'

    store_name = Column(String(100), nullable=False)
    address = Column(String(255))

    # Relationships
    locations = relationship("Location", back_populates="store", cascade="all, delete-orphan")
    inventories = relationship("Inventory", back_populates="store")
    store_products = relationship("ProductByStore", back_populates="store")
