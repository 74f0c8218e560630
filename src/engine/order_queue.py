"""Sipariş karşılama kuyruğu (FIFO, başarısız sipariş sona geri eklenir)."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterator, Optional

from src.models.warehouse import UNKNOWN_ITEM, InventoryItem, Order, QueuedOrder

logger = logging.getLogger(__name__)

ItemLookup = Callable[[int], Optional[InventoryItem]]


class InvalidOrderError(ValueError):
    """Sipariş validasyon hatası."""
    pass


class OrderQueue:
    def __init__(self, lookup: ItemLookup) -> None:
        self._lookup = lookup
        self._orders: deque[Order] = deque()
        self._next_order_id = 1

    def enqueue(self, item_id: int, quantity: int) -> Order:
        """Yeni sipariş oluşturup kuyruğun sonuna ekler."""
        if quantity <= 0:
            raise InvalidOrderError(f"Sipariş miktarı pozitif olmalı: {quantity}")
        if self._lookup(item_id) is None:
            raise InvalidOrderError(f"Ürün bulunamadı: {item_id}")

        order = Order(order_id=self._next_order_id, item_id=item_id, quantity=quantity)
        self._next_order_id += 1
        self._orders.append(order)
        logger.info("Sipariş #%d kuyruğa eklendi (item=%d, miktar=%d)", order.order_id, item_id, quantity)
        return order

    def dequeue(self) -> Optional[Order]:
        """Baştaki siparişi çıkarır; kuyruk boşsa None."""
        if not self._orders:
            return None
        return self._orders.popleft()

    def requeue(self, order: Order) -> None:
        """Siparişi kuyruğun sonuna geri ekler."""
        self._orders.append(order)

    def snapshot(self) -> list[QueuedOrder]:
        """Kuyruğu değiştirmeden, ürün adları çözülmüş kopyasını döndürür."""
        views = []
        for order in self:
            item = self._lookup(order.item_id)
            views.append(QueuedOrder(order=order, item_name=item.name if item else UNKNOWN_ITEM))
        return views

    def __iter__(self) -> Iterator[Order]:
        return iter(tuple(self._orders))

    def __len__(self) -> int:
        return len(self._orders)
