"""Depo Durum Motoru - ürün deposu, kategori ağacı, işlem geçmişi ve
sipariş kuyruğunu birlikte yönetir.

- Her değişiklik işlemi dönmeden önce envanter dosyasını baştan yazar.
- Kullanıcıyla doğrudan etkileşim yoktur; sonuçlar dönüş değeriyle bildirilir.
- Bulunamayan kayıtlar False/None ile, geçersiz siparişler OrderResult ile
  raporlanır. Dosya yazma hataları (OSError) çağırana iletilir.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from src.config import WarehouseConfig
from src.engine.category_index import CategoryIndex
from src.engine.item_store import ItemStore
from src.engine.order_queue import InvalidOrderError, OrderQueue
from src.engine.persistence import load_inventory, save_inventory
from src.engine.transaction_log import TransactionLog
from src.models.warehouse import (
    InventoryItem,
    OrderOutcome,
    OrderResult,
    QueuedOrder,
    Transaction,
)

logger = logging.getLogger(__name__)


class WarehouseSystem:
    """Tek süreçli depo envanter motoru."""

    def __init__(
        self,
        filename: Union[str, Path],
        config: Optional[WarehouseConfig] = None,
    ):
        self.filename = Path(filename)
        self.config = config or WarehouseConfig(data_file=str(filename))

        self._items = ItemStore()
        self._categories = CategoryIndex()
        self._history = TransactionLog()
        self._orders = OrderQueue(self._items.find)

        loaded = load_inventory(self.filename)
        self._items.load(loaded)
        for item in loaded:
            self._categories.file_item(item.category, item.id)

        logger.info("Depo sistemi başlatıldı: %s (%d ürün)", self.filename, len(self._items))

    @property
    def next_id(self) -> int:
        return self._items.next_id

    @property
    def categories(self) -> CategoryIndex:
        return self._categories

    def _save(self) -> None:
        try:
            save_inventory(self.filename, self._items.all())
        except OSError as e:
            # Bellekteki durum zaten değişti; dosya ile ayrışmış olabilir
            logger.error("Envanter dosyası yazılamadı: %s (%s)", self.filename, e)
            raise

    # --- Ürün işlemleri ---

    def add_item(self, item: InventoryItem) -> None:
        """Ürünü ekler, kategori ağacına kaydeder, loglar ve dosyaya yazar."""
        self._items.add(item)
        self._categories.file_item(item.category, item.id)
        self._history.record("Add", item.id, f"Added {item.name} to category {item.category}")
        logger.info("Ürün eklendi: #%d %s (%s)", item.id, item.name, item.category)
        self._save()

    def create_item(
        self,
        name: str,
        category: str,
        quantity: int,
        price: float,
        min_stock_level: int,
    ) -> InventoryItem:
        """Sıradaki ID ile yeni ürün oluşturup ekler."""
        item = InventoryItem(
            id=self.next_id,
            name=name,
            category=category,
            quantity=quantity,
            price=price,
            min_stock_level=min_stock_level,
        )
        self.add_item(item)
        return item

    def remove_item(self, item_id: int) -> bool:
        if not self._items.remove(item_id):
            return False
        self._history.record("Remove", item_id, f"Removed item {item_id}")
        logger.info("Ürün silindi: #%d", item_id)
        self._save()
        return True

    def update_item(self, item: InventoryItem) -> bool:
        if not self._items.update(item):
            return False
        self._history.record(
            "Update",
            item.id,
            f"Updated {item.name}: quantity={item.quantity}, price={item.price:.2f}",
        )
        logger.info("Ürün güncellendi: #%d %s", item.id, item.name)
        self._save()
        return True

    def find_item(self, item_id: int) -> Optional[InventoryItem]:
        return self._items.find(item_id)

    def get_all_items(self) -> list[InventoryItem]:
        return self._items.all()

    def get_items_by_category(self, category: str) -> list[InventoryItem]:
        return self._items.by_category(category)

    def get_low_stock_items(self) -> list[InventoryItem]:
        return [item for item in self._items.all() if item.is_low_stock]

    def sort_by_name(self) -> list[InventoryItem]:
        return sorted(self._items.all(), key=lambda i: i.name)

    def sort_by_quantity(self) -> list[InventoryItem]:
        return sorted(self._items.all(), key=lambda i: i.quantity)

    # --- Sipariş işlemleri ---

    def create_order(self, item_id: int, quantity: int) -> OrderResult:
        """Sipariş oluşturur. Geçersiz ürün veya miktarda durum değişmez."""
        try:
            order = self._orders.enqueue(item_id, quantity)
        except InvalidOrderError as e:
            logger.warning("Geçersiz sipariş: %s", e)
            return OrderResult(OrderOutcome.INVALID, message=str(e))

        self._history.record("Order Created", item_id, f"Ordered {quantity} units")
        return OrderResult(
            OrderOutcome.CREATED,
            order=order,
            message=f"Order #{order.order_id} created",
        )

    def process_next_order(self) -> OrderResult:
        """Kuyruğun başındaki siparişi karşılamaya çalışır.

        - Ürün artık yoksa sipariş sessizce düşürülür (loglanmaz, geri eklenmez).
        - Stok yeterliyse stok düşülür, işlem kaydedilir, dosya yazılır.
        - Stok yetersizse sipariş kuyruğun sonuna geri eklenir.
        """
        order = self._orders.dequeue()
        if order is None:
            return OrderResult(OrderOutcome.EMPTY, message="No orders to process")

        item = self._items.find(order.item_id)
        if item is None:
            logger.warning("Sipariş #%d düşürüldü: ürün #%d artık yok", order.order_id, order.item_id)
            return OrderResult(
                OrderOutcome.DROPPED,
                order=order,
                message=f"Order #{order.order_id} dropped: item {order.item_id} no longer exists",
            )

        if item.quantity < order.quantity:
            self._orders.requeue(order)
            logger.warning(
                "Yetersiz stok: sipariş #%d (mevcut=%d, istenen=%d), kuyruğa geri eklendi",
                order.order_id,
                item.quantity,
                order.quantity,
            )
            return OrderResult(
                OrderOutcome.INSUFFICIENT_STOCK,
                order=order,
                message=f"Insufficient stock for order #{order.order_id}",
            )

        item.quantity -= order.quantity
        self._history.record(
            "Order Processed",
            order.item_id,
            f"Processed order #{order.order_id} for {order.quantity} units",
        )
        logger.info("Sipariş #%d karşılandı (item=%d, kalan=%d)", order.order_id, item.id, item.quantity)
        self._save()
        return OrderResult(
            OrderOutcome.PROCESSED,
            order=order,
            message=f"Order #{order.order_id} processed successfully",
        )

    # --- Salt-okunur görünümler ---

    def get_transaction_history(self, limit: Optional[int] = None) -> list[Transaction]:
        if limit is None:
            limit = self.config.history_limit
        return self._history.recent(limit)

    def get_order_queue_snapshot(self) -> list[QueuedOrder]:
        return self._orders.snapshot()
