from app.models.organization.store import Store
from app.models.organization.location import Location
from app.models.catalog.product import Product
from app.models.catalog.product_by_store import ProductByStore
from app.models.inventory.inventory import Inventory
from app.models.inventory.inventory_item import InventoryItem
from app.models.inventory.inventory_loss import InventoryLoss
