"""Envanter dosyası okuma/yazma - düz CSV kalıcılık katmanı.

Dosya biçimi:
    ID,Name,Category,Quantity,Price,MinStockLevel
    1,Telefon,Electronics/Phones,10,299.99,3

- Her değişiklikte dosya baştan yazılır (geçici dosya/rename yok).
- Dosya yoksa "kayıtlı veri yok" kabul edilir.
- Tek bir hatalı satır tüm yüklemeyi başarısız kılar. UTF-8 olmayan dosya
  da ayrıştırma hatası sayılır.
- Virgül içeren değerler tırnak içinde yazılır. Tırnaksız yazılmış eski
  dosyalarda alan başındaki `"` tırnak olarak okunur: `"Big" box` -> `Big box`.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Union

from src.models.warehouse import CSV_HEADER, InventoryItem

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class InventoryFileError(ValueError):
    """Envanter dosyası ayrıştırma hatası."""
    pass


def load_inventory(path: PathLike) -> list[InventoryItem]:
    """Envanter dosyasını okur ve kayıt listesini döndürür."""
    path = Path(path)
    if not path.exists():
        logger.info("Envanter dosyası bulunamadı, boş envanterle başlanıyor: %s", path)
        return []

    items: list[InventoryItem] = []
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        try:
            # Başlık satırını atla
            next(reader, None)
            for row in reader:
                if not row:
                    continue
                items.append(InventoryItem.from_row(row))
        except (ValueError, csv.Error) as e:
            # UnicodeDecodeError da ValueError alt sınıfı
            raise InventoryFileError(f"{path}:{reader.line_num}: {e}") from e

    logger.info("%d kayıt yüklendi: %s", len(items), path)
    return items


def save_inventory(path: PathLike, items: Iterable[InventoryItem]) -> None:
    """Tüm envanteri ID sırasıyla dosyaya yazar."""
    rows = [item.to_row() for item in sorted(items, key=lambda i: i.id)]
    with Path(path).open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(rows)
    logger.debug("%d kayıt yazıldı: %s", len(rows), path)
