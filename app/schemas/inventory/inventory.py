from pydantic import BaseModel, ConfigDict, Field, validator
from typing import List, Optional, Union
from datetime import date, datetime

from app.models.shared.enums import INVENTORY_STATUS_ALIASES

# Quantities and weights arrive as numbers or strings typed by the user;
# they are parsed by the service so bad input can name the product.
NumericInput = Optional[Union[float, str]]


def _normalize_status(v):
    if v is None:
        return v
    if v not in INVENTORY_STATUS_ALIASES:
        raise ValueError("Status must be Unlocked or Locked")
    return INVENTORY_STATUS_ALIASES[v].value


class InventoryItemInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId")
    product_name: Optional[str] = Field(default=None, alias="productName")
    location_id: Optional[int] = Field(default=None, alias="locationId")
    quantity_type: Optional[str] = Field(default=None, alias="quantityType")
    quantity: NumericInput = None
    case_size: NumericInput = Field(default=None, alias="caseSize")
    weight_oz: NumericInput = Field(default=None, alias="weightOz")
    full_weight: NumericInput = Field(default=None, alias="fullWeight")
    empty_weight: NumericInput = Field(default=None, alias="emptyWeight")
    wholesale_value: NumericInput = Field(default=None, alias="wholesaleValue")


class InventoryLossInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId")
    product_name: Optional[str] = Field(default=None, alias="productName")
    quantity: NumericInput = None
    quantity_type: Optional[str] = Field(default=None, alias="quantityType")
    reason: Optional[str] = None
    full_weight: NumericInput = Field(default=None, alias="fullWeight")
    empty_weight: NumericInput = Field(default=None, alias="emptyWeight")
    wholesale_value: NumericInput = Field(default=None, alias="wholesaleValue")


class InventoryCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    store_id: Optional[int] = Field(default=None, alias="storeId")
    location_id: Optional[int] = Field(default=None, alias="locationId")
    inventory_date: Optional[date] = Field(default=None, alias="inventoryDate")
    status: Optional[str] = None
    items: List[InventoryItemInput] = Field(default_factory=list)
    waste: List[InventoryLossInput] = Field(default_factory=list)

    @validator("status")
    def validate_status(cls, v):
        return _normalize_status(v)


class InventoryUpdate(BaseModel):
    """Only the sections present in the request body are written."""
    model_config = ConfigDict(populate_by_name=True)

    location_id: Optional[int] = Field(default=None, alias="locationId")
    inventory_date: Optional[date] = Field(default=None, alias="inventoryDate")
    status: Optional[str] = None
    items: Optional[List[InventoryItemInput]] = None
    waste: Optional[List[InventoryLossInput]] = None

    @validator("status")
    def validate_status(cls, v):
        return _normalize_status(v)


class ItemOrder(BaseModel):
    id_inventory_item: int
    display_order: int


class InventoryReorder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_orders: List[ItemOrder] = Field(default_factory=list, alias="itemOrders")


# ---------- Responses ----------

class InventoryCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    total_ws_value: float = Field(alias="totalWsValue")
    total_waste_value: float = Field(alias="totalWasteValue")


class InventoryLockState(BaseModel):
    status: str


class InventorySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    inventory_type: str
    inventory_date: date
    status: str
    store_id: int
    store_name: Optional[str] = None
    location_id: Optional[int] = None
    location_name: Optional[str] = None
    total_ws_value: float = 0
    total_losses_value: float = 0
    total_products: int = 0
    total_losses: int = 0
    created_at: Optional[datetime] = None


class InventoryItemDetail(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    location_id: Optional[int] = None
    location_name: Optional[str] = None
    display_order: int
    quantity_type: Optional[str] = None
    quantity: float
    case_size: Optional[int] = None
    weight_oz: Optional[float] = None
    full_weight: Optional[float] = None
    empty_weight: Optional[float] = None
    net_weight: Optional[float] = None
    wholesale_value: float = 0
    product_name: Optional[str] = None
    product_code: Optional[str] = None
    container_type: Optional[str] = None
    container_size: Optional[float] = None
    container_unit: Optional[str] = None
    product_case_size: Optional[int] = None
    product_full_weight: Optional[float] = None
    product_empty_weight: Optional[float] = None
    wholesale_price: Optional[float] = None


class InventoryLossDetail(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    quantity: float
    unit: str
    reason: str = ""
    net_weight: Optional[float] = None
    loss_value: float = 0
    product_name: Optional[str] = None
    product_code: Optional[str] = None
    created_at: Optional[datetime] = None


class InventoryDetail(InventorySummary):
    updated_at: Optional[datetime] = None
    items: List[InventoryItemDetail] = Field(default_factory=list)
    losses: List[InventoryLossDetail] = Field(default_factory=list)


class AvailableProduct(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    product_code: Optional[str] = None
    container_type: Optional[str] = None
    container_size: Optional[float] = None
    container_unit: Optional[str] = None
    container_size_base_unit: Optional[float] = None
    container_size_base_unit_type: Optional[str] = None
    case_size: Optional[int] = None
    wholesale_price: Optional[float] = None
    full_weight: Optional[float] = None
    empty_weight: Optional[float] = None
    weight_unit: Optional[str] = None
    par: Optional[float] = None
    reorder_point: Optional[float] = None
    order_by_the: Optional[str] = None


class LastInventoryProduct(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    display_order: int
    quantity_type: Optional[str] = None
    full_weight: Optional[float] = None
    empty_weight: Optional[float] = None
    net_weight: Optional[float] = None
    product_id: int = Field(alias="productId")
    product_name: str = Field(alias="productName")
    product_code: Optional[str] = Field(default=None, alias="productCode")
    container_type: Optional[str] = Field(default=None, alias="containerType")
    container_size: Optional[float] = Field(default=None, alias="containerSize")
    container_unit: Optional[str] = Field(default=None, alias="containerUnit")
    case_size: Optional[int] = Field(default=None, alias="caseSize")
    product_full_weight: Optional[float] = None
    product_empty_weight: Optional[float] = None
    wholesale_price: Optional[float] = Field(default=None, alias="wholesalePrice")


class LastInventoryProducts(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    last_inventory_id: Optional[int] = Field(default=None, alias="lastInventoryId")
    items: List[LastInventoryProduct] = Field(default_factory=list)
