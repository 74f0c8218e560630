"""Yalnızca eklenebilen işlem geçmişi; okuma en yeniden en eskiye."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterator

from src.models.warehouse import Transaction

logger = logging.getLogger(__name__)


class TransactionLog:
    def __init__(self) -> None:
        self._entries: list[Transaction] = []

    def record(self, action: str, item_id: int, details: str) -> Transaction:
        """Şimdiki zamanla yeni bir işlem kaydı ekler."""
        entry = Transaction(action=action, item_id=item_id, details=details)
        self._entries.append(entry)
        logger.debug("İşlem kaydedildi: %s (item=%d)", action, item_id)
        return entry

    def recent(self, limit: int) -> list[Transaction]:
        """En fazla `limit` adet son işlemi, en yenisi başta olacak şekilde döndürür."""
        if limit <= 0:
            return []
        return list(islice(self, limit))

    def __iter__(self) -> Iterator[Transaction]:
        # Anlık görüntü üzerinde gezinir, log değişmez
        return reversed(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
