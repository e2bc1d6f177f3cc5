from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class InventoryItem(BaseModel):
    __tablename__ = 'inventory_items'

    inventory_id = Column(Integer, ForeignKey('inventories.id', ondelete='CASCADE'), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey('products.id'), nullable=False)
    location_id = Column(Integer, ForeignKey('locations.id'))  # per-item location override
    display_order = Column(Integer, nullable=False, default=0)
    quantity_type = Column(String(20))
    quantity = Column(Numeric(12, 3), nullable=False)
    case_size = Column(Integer)
    weight_oz = Column(Numeric(10, 3))
    full_weight = Column(Numeric(10, 3))
    empty_weight = Column(Numeric(10, 3))
    net_weight = Column(Numeric(10, 3))  # NULL unless full > empty
    wholesale_value = Column(Numeric(12, 2), nullable=False, default=0)

    # Relationships
    inventory = relationship("Inventory", back_populates="items")
    product = relationship("Product")
    location = relationship("Location")
