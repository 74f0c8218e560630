from src.engine.category_index import CategoryIndex
from src.engine.item_store import ItemStore
from src.engine.order_queue import InvalidOrderError, OrderQueue
from src.engine.persistence import InventoryFileError, load_inventory, save_inventory
from src.engine.transaction_log import TransactionLog
from src.engine.warehouse_system import WarehouseSystem

__all__ = [
    "CategoryIndex",
    "InvalidOrderError",
    "InventoryFileError",
    "ItemStore",
    "OrderQueue",
    "TransactionLog",
    "WarehouseSystem",
    "load_inventory",
    "save_inventory",
]
