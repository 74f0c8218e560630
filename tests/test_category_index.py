"""Kategori ağacı unit testleri."""

from src.engine.category_index import CategoryIndex, split_path


class TestSplitPath:
    def test_segments(self):
        assert split_path("Electronics/Phones") == ["Electronics", "Phones"]

    def test_empty(self):
        assert split_path("") == []

    def test_trailing_delimiter(self):
        assert split_path("A/") == ["A"]


class TestFindOrCreate:
    def test_root(self):
        index = CategoryIndex()
        assert index.root.name == "Root"
        assert index.root.item_ids == []
        assert len(index) == 1

    def test_siblings_under_shared_parent(self):
        index = CategoryIndex()
        index.file_item("A/B", 1)
        index.file_item("A/C", 2)

        top = index.children(index.root)
        assert [n.name for n in top] == ["A"]
        children = index.children(top[0])
        assert [n.name for n in children] == ["B", "C"]
        assert children[0].item_ids == [1]
        assert children[1].item_ids == [2]

    def test_existing_path_not_duplicated(self):
        index = CategoryIndex()
        first = index.file_item("A/B", 1)
        second = index.file_item("A/B", 3)
        assert first is second
        assert len(index) == 3
        assert index.find("A/B").item_ids == [1, 3]

    def test_same_item_filed_once(self):
        index = CategoryIndex()
        index.file_item("A", 1)
        index.file_item("A", 1)
        assert index.find("A").item_ids == [1]

    def test_intermediate_nodes_hold_no_items(self):
        index = CategoryIndex()
        index.file_item("A/B/C", 1)
        assert index.find("A").item_ids == []
        assert index.find("A/B/C").item_ids == [1]

    def test_empty_path_files_nothing_at_root(self):
        index = CategoryIndex()
        node = index.file_item("", 1)
        assert node is index.root
        assert index.root.item_ids == []


class TestFind:
    def test_find_does_not_create(self):
        index = CategoryIndex()
        assert index.find("X/Y") is None
        assert len(index) == 1

    def test_node_by_index(self):
        index = CategoryIndex()
        index.find_or_create("A")
        assert index.node(index.root.children[0]).name == "A"
