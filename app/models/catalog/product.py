from sqlalchemy import Column, Integer, String, Numeric
from sqlalchemy.orm import relationship, validates
from app.db.base import BaseModel
from app.utils.unit_conversions import convert_to_base_unit, get_base_unit_label

class Product(BaseModel):
    __tablename__ = 'products'

    product_name = Column(String(255), nullable=False)
    product_code = Column(String(50), index=True)
    container_type = Column(String(50))
    container_size = Column(Numeric(10, 3))
    container_unit = Column(String(20))
    container_size_base_unit = Column(Numeric(12, 3))  # ml or g
    container_size_base_unit_type = Column(String(10))  # ml, g, unit
    case_size = Column(Integer)
    wholesale_price = Column(Numeric(10, 2))
    full_weight = Column(Numeric(10, 3))
    empty_weight = Column(Numeric(10, 3))
    full_weight_unit = Column(String(20))

    # Relationships
    store_products = relationship("ProductByStore", back_populates="product", cascade="all, delete-orphan")

    @validates("container_size", "container_unit")
    def _sync_base_unit(self, key, value):
        size = value if key == "container_size" else self.container_size
        unit = value if key == "container_unit" else self.container_unit
        base_value = convert_to_base_unit(float(size) if size is not None else None, unit)
        self.container_size_base_unit = base_value
        self.container_size_base_unit_type = get_base_unit_label(unit) or None
        return value
