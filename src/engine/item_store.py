"""ID anahtarlı ürün deposu."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from src.models.warehouse import InventoryItem

logger = logging.getLogger(__name__)


class ItemStore:
    """ID -> InventoryItem eşlemesi; iterasyon her zaman artan ID sırasıyla."""

    def __init__(self) -> None:
        self._items: dict[int, InventoryItem] = {}
        self.next_id = 1

    def load(self, items: Iterable[InventoryItem]) -> None:
        """Dosyadan okunan kayıtları ekler; sayaç en büyük ID'nin bir fazlasına ilerler."""
        for item in items:
            self._items[item.id] = item
            self.next_id = max(self.next_id, item.id + 1)

    def add(self, item: InventoryItem) -> None:
        """Kaydı ekler ya da aynı ID'li kaydın üzerine yazar.

        Sayaç koşulsuz olarak item.id + 1 olur; daha küçük bir ID eklemek
        sayacı geri çeker.
        """
        self._items[item.id] = item
        self.next_id = item.id + 1

    def remove(self, item_id: int) -> bool:
        return self._items.pop(item_id, None) is not None

    def update(self, item: InventoryItem) -> bool:
        if item.id not in self._items:
            return False
        self._items[item.id] = item
        return True

    def find(self, item_id: int) -> Optional[InventoryItem]:
        """Kaydın kendisini döndürür; çağıran yerinde değiştirebilir."""
        return self._items.get(item_id)

    def all(self) -> list[InventoryItem]:
        return [self._items[k] for k in sorted(self._items)]

    def by_category(self, category: str) -> list[InventoryItem]:
        """Kategori alanı birebir eşleşen kayıtlar (alt kategoriler dahil değil)."""
        return [item for item in self.all() if item.category == category]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self.all())
