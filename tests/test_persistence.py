"""Envanter dosyası kalıcılık testleri."""

import pytest

from src.engine.persistence import InventoryFileError, load_inventory, save_inventory
from src.models.warehouse import InventoryItem

HEADER = "ID,Name,Category,Quantity,Price,MinStockLevel\n"


def _sample_items() -> list[InventoryItem]:
    return [
        InventoryItem(3, "Desk", "Furniture", 2, 149.5, 1),
        InventoryItem(1, "Phone", "Electronics/Phones", 10, 299.999, 3),
    ]


class TestLoad:
    def test_missing_file_returns_empty(self, tmp_path):
        assert load_inventory(tmp_path / "missing.csv") == []

    def test_header_only(self, tmp_path):
        path = tmp_path / "inventory.csv"
        path.write_text(HEADER)
        assert load_inventory(path) == []

    def test_reads_rows(self, tmp_path):
        path = tmp_path / "inventory.csv"
        path.write_text(HEADER + "1,Phone,Electronics/Phones,10,299.99,3\n2,Chair,Furniture,0,20.00,5\n")
        items = load_inventory(path)
        assert [i.id for i in items] == [1, 2]
        assert items[0].category == "Electronics/Phones"
        assert items[1].price == 20.0

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "inventory.csv"
        path.write_text(HEADER + "1,Phone,Electronics,1,1.00,0\n\n")
        assert len(load_inventory(path)) == 1

    def test_malformed_number_fails_whole_load(self, tmp_path):
        path = tmp_path / "inventory.csv"
        path.write_text(HEADER + "1,Phone,Electronics,1,1.00,0\n2,Chair,Furniture,many,2.00,0\n")
        with pytest.raises(InventoryFileError, match=":3:"):
            load_inventory(path)

    def test_non_utf8_file_is_parse_error(self, tmp_path):
        path = tmp_path / "inventory.csv"
        path.write_bytes(HEADER.encode() + b"1,Caf\xe9,Food,1,1.00,0\n")
        with pytest.raises(InventoryFileError):
            load_inventory(path)

    def test_leading_quote_in_unquoted_file_is_unquoted(self, tmp_path):
        """Tırnaksız dosyada alan başındaki tırnak CSV tırnağı olarak okunur."""
        path = tmp_path / "inventory.csv"
        path.write_text(HEADER + '1,"Big" box,Storage,1,1.00,0\n')
        assert load_inventory(path)[0].name == "Big box"

    def test_unquoted_comma_is_parse_error(self, tmp_path):
        path = tmp_path / "inventory.csv"
        path.write_text(HEADER + "1,Phone, black,Electronics,1,1.00,0\n")
        with pytest.raises(InventoryFileError):
            load_inventory(path)


class TestSave:
    def test_writes_header_sorted_rows_and_two_decimals(self, tmp_path):
        path = tmp_path / "inventory.csv"
        save_inventory(path, _sample_items())
        assert path.read_text() == (
            HEADER
            + "1,Phone,Electronics/Phones,10,300.00,3\n"
            + "3,Desk,Furniture,2,149.50,1\n"
        )

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "inventory.csv"
        save_inventory(path, _sample_items())
        save_inventory(path, [])
        assert path.read_text() == HEADER

    def test_round_trip_empty(self, tmp_path):
        path = tmp_path / "inventory.csv"
        save_inventory(path, [])
        assert load_inventory(path) == []

    def test_round_trip_populated(self, tmp_path):
        path = tmp_path / "inventory.csv"
        items = _sample_items()
        save_inventory(path, items)
        loaded = load_inventory(path)

        expected = sorted(items, key=lambda i: i.id)
        assert [(i.id, i.name, i.category, i.quantity, i.min_stock_level) for i in loaded] == [
            (i.id, i.name, i.category, i.quantity, i.min_stock_level) for i in expected
        ]
        assert [round(i.price, 2) for i in loaded] == [round(i.price, 2) for i in expected]

    def test_comma_in_name_survives_round_trip(self, tmp_path):
        path = tmp_path / "inventory.csv"
        save_inventory(path, [InventoryItem(1, "Bolt, M6", "Hardware/Bolts", 100, 0.1, 20)])
        assert load_inventory(path)[0].name == "Bolt, M6"

    def test_unwritable_path_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            save_inventory(tmp_path / "missing-dir" / "inventory.csv", _sample_items())
