"""Hiyerarşik kategori ağacı.

Düğümler bir listede (arena) tutulur, her düğüm çocuklarını liste
indeksleriyle gösterir. İndeks 0 her zaman "Root" düğümüdür.
Düğümler ilk başvuruda oluşturulur ve hiçbir zaman silinmez; ürün
silinse bile kategori düğümü kalır.
"""

from __future__ import annotations

import logging
from typing import Optional

from src.models.warehouse import ROOT_CATEGORY, CategoryNode

logger = logging.getLogger(__name__)

DELIMITER = "/"


def split_path(path: str) -> list[str]:
    """'Electronics/Phones' -> ['Electronics', 'Phones']. Sondaki ayraç yok sayılır."""
    if not path:
        return []
    segments = path.split(DELIMITER)
    if segments[-1] == "":
        segments.pop()
    return segments


class CategoryIndex:
    def __init__(self) -> None:
        self._nodes: list[CategoryNode] = [CategoryNode(ROOT_CATEGORY)]

    @property
    def root(self) -> CategoryNode:
        return self._nodes[0]

    def node(self, index: int) -> CategoryNode:
        return self._nodes[index]

    def children(self, node: CategoryNode) -> list[CategoryNode]:
        return [self._nodes[i] for i in node.children]

    def _child(self, node: CategoryNode, name: str) -> Optional[int]:
        for index in node.children:
            if self._nodes[index].name == name:
                return index
        return None

    def find(self, path: str) -> Optional[CategoryNode]:
        """Yol üzerindeki düğümü oluşturmadan arar."""
        current = 0
        for name in split_path(path):
            found = self._child(self._nodes[current], name)
            if found is None:
                return None
            current = found
        return self._nodes[current]

    def find_or_create(self, path: str) -> CategoryNode:
        """Yolu kökten yürür, eksik segmentleri yeni çocuk düğüm olarak ekler."""
        current = 0
        for name in split_path(path):
            found = self._child(self._nodes[current], name)
            if found is None:
                self._nodes.append(CategoryNode(name))
                found = len(self._nodes) - 1
                self._nodes[current].children.append(found)
                logger.debug("Kategori düğümü oluşturuldu: %s (%s)", name, path)
            current = found
        return self._nodes[current]

    def file_item(self, path: str, item_id: int) -> CategoryNode:
        """Ürün ID'sini yolun son düğümüne kaydeder. Boş yol kök düğüme denk gelir ve kaydedilmez."""
        node = self.find_or_create(path)
        if node is not self.root and item_id not in node.item_ids:
            node.item_ids.append(item_id)
        return node

    def __len__(self) -> int:
        return len(self._nodes)
