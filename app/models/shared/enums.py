from enum import Enum

class InventoryStatus(str, Enum):
    UNLOCKED = "Unlocked"
    LOCKED = "Locked"

# Legacy clients still send "Open" for a count that is being edited
INVENTORY_STATUS_ALIASES = {
    "Open": InventoryStatus.UNLOCKED,
    "Unlocked": InventoryStatus.UNLOCKED,
    "Locked": InventoryStatus.LOCKED,
}

class InventoryType(str, Enum):
    STANDARD = "Standard"

class UnitKind(str, Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"
    UNKNOWN = "unknown"
