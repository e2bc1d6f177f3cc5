from sqlalchemy import Column, Integer, String, Text, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class InventoryLoss(BaseModel):
    __tablename__ = 'inventory_losses'

    inventory_id = Column(Integer, ForeignKey('inventories.id', ondelete='CASCADE'), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey('products.id'), nullable=False)
    quantity = Column(Numeric(12, 3), nullable=False)
    unit = Column(String(20), nullable=False, default="units")
    reason = Column(Text, nullable=False, default="")
    net_weight = Column(Numeric(10, 3))
    loss_value = Column(Numeric(12, 2), nullable=False, default=0)

    # Relationships
    inventory = relationship("Inventory", back_populates="losses")
    product = relationship("Product")
