"""
Depo envanter yonetimi - interaktif konsol arayuzu.

Numarali menu ile motor islemlerini cagirir ve sonuclari yazdirir.
Kullanim:
    python warehouse_cli.py
Ayarlar .env veya WAREHOUSE_* environment variable'larindan okunur.
"""

import logging
import sys

import env_loader

from src.config import WarehouseConfig
from src.engine.persistence import InventoryFileError
from src.engine.warehouse_system import WarehouseSystem
from src.models.warehouse import InventoryItem, OrderOutcome

logger = logging.getLogger("warehouse_cli")

MENU_TEXT = """
Warehouse Management System
1. Add New Item
2. Remove Item
3. Update Item
4. Find Item
5. Display All Items
6. Display Low Stock Items
7. Display Items by Category
8. Sort Items by Name
9. Sort Items by Quantity
10. Create Order
11. Process Next Order
12. Display Order Queue
13. Display Transaction History
0. Exit"""


def setup_logging(config: WarehouseConfig) -> None:
    # Menu ciktisi temiz kalsin diye loglar dosyaya gider
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        filename=config.log_file,
    )


def prompt_int(label: str) -> int:
    """Gecerli bir tam sayi girilene kadar sorar."""
    while True:
        raw = input(label).strip()
        try:
            return int(raw)
        except ValueError:
            print("Please enter a whole number.")


def prompt_float(label: str) -> float:
    while True:
        raw = input(label).strip()
        try:
            return float(raw)
        except ValueError:
            print("Please enter a number.")


def input_item_details(system: WarehouseSystem, is_new: bool = True) -> InventoryItem:
    """Kullanicidan urun alanlarini toplar. Yeni urunde ID motordan alinir."""
    item_id = system.next_id if is_new else prompt_int("Enter item ID: ")
    name = input("Enter item name: ").strip()
    category = input("Enter category: ").strip()
    quantity = prompt_int("Enter quantity: ")
    price = prompt_float("Enter price: ")
    min_stock_level = prompt_int("Enter minimum stock level: ")
    return InventoryItem(item_id, name, category, quantity, price, min_stock_level)


def print_item_table(items: list) -> None:
    print(f"{'ID':>5} | {'Name':>20} | {'Category':>15} | {'Quantity':>10} | {'Price':>10} | {'Min Stock':>15}")
    print("-" * 90)
    for item in items:
        print(
            f"{item.id:>5} | {item.name:>20} | {item.category:>15} | "
            f"{item.quantity:>10} | {item.price:>10.2f} | {item.min_stock_level:>15}"
        )


def print_item_details(item: InventoryItem) -> None:
    print("Item found:")
    print(f"ID: {item.id}")
    print(f"Name: {item.name}")
    print(f"Category: {item.category}")
    print(f"Quantity: {item.quantity}")
    print(f"Price: {item.price:.2f}")
    print(f"Min Stock Level: {item.min_stock_level}")


def show_low_stock(system: WarehouseSystem) -> None:
    items = system.get_low_stock_items()
    if not items:
        print("No items are low on stock.")
        return
    print("Low Stock Items:")
    for item in items:
        print(
            f"ID: {item.id}, Name: {item.name}, "
            f"Current Stock: {item.quantity}, Min Stock: {item.min_stock_level}"
        )


def show_by_category(system: WarehouseSystem) -> None:
    category = input("Enter category: ").strip()
    items = system.get_items_by_category(category)
    if not items:
        print(f"No items found in category: {category}")
        return
    print(f"Items in category '{category}':")
    for item in items:
        print(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, Price: {item.price:.2f}")


def show_order_queue(system: WarehouseSystem) -> None:
    queued = system.get_order_queue_snapshot()
    if not queued:
        print("No pending orders.")
        return
    print("\nPending Orders:")
    print("-" * 50)
    for entry in queued:
        order = entry.order
        print(f"Order #{order.order_id}:")
        print(f"  Item: {entry.item_name} (ID: {order.item_id})")
        print(f"  Quantity: {order.quantity}")
        print(f"  Status: {order.status.value}\n")


def show_history(system: WarehouseSystem) -> None:
    print("\nRecent Transaction History:")
    print("-" * 50)
    for entry in system.get_transaction_history():
        print(entry.format())


def handle_choice(choice: int, system: WarehouseSystem) -> bool:
    """Tek bir menu secimini calistirir. Cikis icin False dondurur."""
    if choice == 0:
        print("Thank you for using the Warehouse Management System!")
        return False

    if choice == 1:
        item = input_item_details(system)
        system.add_item(item)
        print("Item added successfully!")
    elif choice == 2:
        if system.remove_item(prompt_int("Enter item ID to remove: ")):
            print("Item removed successfully!")
        else:
            print("Item not found!")
    elif choice == 3:
        item = input_item_details(system, is_new=False)
        if system.update_item(item):
            print("Item updated successfully!")
        else:
            print("Item not found!")
    elif choice == 4:
        item = system.find_item(prompt_int("Enter item ID to find: "))
        if item:
            print_item_details(item)
        else:
            print("Item not found!")
    elif choice == 5:
        print_item_table(system.get_all_items())
    elif choice == 6:
        show_low_stock(system)
    elif choice == 7:
        show_by_category(system)
    elif choice == 8:
        for item in system.sort_by_name():
            print(f"ID: {item.id}, Name: {item.name}, Category: {item.category}, Quantity: {item.quantity}")
    elif choice == 9:
        for item in system.sort_by_quantity():
            print(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}")
    elif choice == 10:
        item_id = prompt_int("Enter item ID: ")
        quantity = prompt_int("Enter quantity: ")
        result = system.create_order(item_id, quantity)
        if result.success:
            print("Order created successfully!")
        else:
            print(f"Invalid item ID or quantity! ({result.message})")
    elif choice == 11:
        result = system.process_next_order()
        if result.outcome == OrderOutcome.EMPTY:
            print("No orders to process!")
        else:
            print(f"{result.message}{'!' if result.success else ''}")
    elif choice == 12:
        show_order_queue(system)
    elif choice == 13:
        show_history(system)
    else:
        print("Invalid choice! Please try again.")
    return True


def run(system: WarehouseSystem) -> None:
    """Cikis secilene veya girdi bitene kadar menu dongusu."""
    while True:
        print(MENU_TEXT)
        try:
            raw = input("Enter your choice: ").strip()
        except EOFError:
            print()
            return
        try:
            choice = int(raw)
        except ValueError:
            print("Invalid choice! Please try again.")
            continue

        try:
            if not handle_choice(choice, system):
                return
        except EOFError:
            print()
            return
        except ValueError as e:
            print(f"❌ Invalid value: {e}")
        except OSError as e:
            print(f"❌ Could not write inventory file: {e}")


def main() -> int:
    config = WarehouseConfig.from_env()
    setup_logging(config)

    try:
        system = WarehouseSystem(config.data_file, config=config)
    except InventoryFileError as e:
        logger.error("Envanter dosyasi okunamadi: %s", e)
        print(f"❌ Could not read inventory file: {e}")
        return 1

    run(system)
    return 0


if __name__ == "__main__":
    sys.exit(main())
