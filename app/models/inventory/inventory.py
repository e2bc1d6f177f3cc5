from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
from app.models.shared.enums import InventoryStatus, InventoryType

class Inventory(BaseModel):
    __tablename__ = 'inventories'
    __table_args__ = (
        # One unlocked count per location
        Index(
            'uq_inventories_active_location',
            'location_id',
            unique=True,
            postgresql_where=text("status = 'Unlocked'"),
            sqlite_where=text("status = 'Unlocked'"),
        ),
    )

    store_id = Column(Integer, ForeignKey('stores.id'), nullable=False, index=True)
    location_id = Column(Integer, ForeignKey('locations.id'), nullable=True)
    inventory_type = Column(String(20), nullable=False, default=InventoryType.STANDARD.value)
    inventory_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default=InventoryStatus.UNLOCKED.value)  # Unlocked, Locked
    total_ws_value = Column(Numeric(12, 2), nullable=False, default=0)
    total_losses_value = Column(Numeric(12, 2), nullable=False, default=0)

    # Relationships
    store = relationship("Store", back_populates="inventories")
    location = relationship("Location", back_populates="inventories")
    items = relationship(
        "InventoryItem",
        back_populates="inventory",
        cascade="all, delete-orphan",
        order_by="InventoryItem.display_order",
    )
    losses = relationship(
        "InventoryLoss",
        back_populates="inventory",
        cascade="all, delete-orphan",
    )

    @property
    def is_locked(self) -> bool:
        return self.status == InventoryStatus.LOCKED.value
