"""Depo envanter veri modelleri."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

CSV_HEADER = ["ID", "Name", "Category", "Quantity", "Price", "MinStockLevel"]
ROOT_CATEGORY = "Root"
UNKNOWN_ITEM = "Unknown"


class OrderStatus(str, Enum):
    PENDING = "Pending"


class OrderOutcome(str, Enum):
    CREATED = "created"
    INVALID = "invalid"
    PROCESSED = "processed"
    INSUFFICIENT_STOCK = "insufficient_stock"
    DROPPED = "dropped"
    EMPTY = "empty"


@dataclass
class InventoryItem:
    id: int
    name: str
    category: str
    quantity: int
    price: float
    min_stock_level: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"Miktar negatif olamaz: {self.quantity}")
        if self.price < 0:
            raise ValueError(f"Fiyat negatif olamaz: {self.price}")
        if self.min_stock_level < 0:
            raise ValueError(f"Minimum stok seviyesi negatif olamaz: {self.min_stock_level}")

    @property
    def is_low_stock(self) -> bool:
        """Miktar minimum stok seviyesine eşit veya altındaysa True."""
        return self.quantity <= self.min_stock_level

    def to_row(self) -> list[str]:
        """CSV satırı olarak alanları döndürür (fiyat 2 ondalık)."""
        return [
            str(self.id),
            self.name,
            self.category,
            str(self.quantity),
            f"{self.price:.2f}",
            str(self.min_stock_level),
        ]

    @classmethod
    def from_row(cls, row: list[str]) -> InventoryItem:
        """Altı alanlı CSV satırından kayıt oluşturur.

        Sayısal alanlar hatalıysa ValueError fırlatır.
        """
        if len(row) != len(CSV_HEADER):
            raise ValueError(f"{len(CSV_HEADER)} alan bekleniyordu, {len(row)} bulundu")
        id_, name, category, quantity, price, min_stock_level = row
        return cls(
            id=int(id_),
            name=name,
            category=category,
            quantity=int(quantity),
            price=float(price),
            min_stock_level=int(min_stock_level),
        )


@dataclass(frozen=True)
class Transaction:
    action: str
    item_id: int
    details: str
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self) -> str:
        return f"{self.timestamp.ctime()} - {self.action} (Item ID: {self.item_id}) {self.details}"


@dataclass
class Order:
    order_id: int
    item_id: int
    quantity: int
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class QueuedOrder:
    """Kuyruktaki siparişin ürün adı çözülmüş salt-okunur görünümü."""
    order: Order
    item_name: str = UNKNOWN_ITEM


@dataclass
class OrderResult:
    outcome: OrderOutcome
    order: Optional[Order] = None
    message: str = ""

    @property
    def success(self) -> bool:
        return self.outcome in (OrderOutcome.CREATED, OrderOutcome.PROCESSED)


@dataclass
class CategoryNode:
    name: str
    children: list[int] = field(default_factory=list)
    item_ids: list[int] = field(default_factory=list)
