from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class ProductByStore(BaseModel):
    __tablename__ = 'products_by_store'
    __table_args__ = (
        UniqueConstraint('product_id', 'store_id', name='uq_products_by_store'),
    )

    product_id = Column(Integer, ForeignKey('products.id', ondelete='CASCADE'), nullable=False)
    store_id = Column(Integer, ForeignKey('stores.id', ondelete='CASCADE'), nullable=False, index=True)
    par = Column(Numeric(10, 2))
    reorder_point = Column(Numeric(10, 2))
    order_by_the = Column(String(20))  # case, unit

    # Relationships
    product = relationship("Product", back_populates="store_products")
    store = relationship("Store", back_populates="store_products")
