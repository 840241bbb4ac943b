"""Filter, grouping, sorting, and flattening of flat item lists."""

from __future__ import annotations

import unittest

from keyedbrowser.tree_model import (
    FileNode,
    FolderNode,
    Item,
    TreeOptions,
    build_tree,
    filter_items_by_name,
    find_item,
    group_by_folder,
    page_rows,
    selected_nodes,
    sort_by_name,
)


def _items(*keys: str) -> list[Item]:
    return [Item(key=key) for key in keys]


def _flat(items: list[Item], **kwargs) -> list[tuple[str, int]]:
    build = build_tree(items, TreeOptions(**kwargs))
    return [(row.key, row.depth) for row in build.flattened]


class NameFilterTests(unittest.TestCase):
    def test_every_term_must_appear_as_substring(self) -> None:
        items = _items("docs/Report-2024.pdf", "docs/report.txt", "img/2024.png")
        kept = filter_items_by_name(items, "REPORT 2024")
        self.assertEqual([item.key for item in kept], ["docs/Report-2024.pdf"])

    def test_substring_match_is_not_word_match(self) -> None:
        kept = filter_items_by_name(_items("photos/vacation.jpg"), "cat")
        self.assertEqual([item.key for item in kept], ["photos/vacation.jpg"])

    def test_blank_filter_keeps_everything(self) -> None:
        items = _items("a/", "b.txt")
        self.assertEqual(filter_items_by_name(items, "   "), items)

    def test_filtering_is_idempotent(self) -> None:
        items = _items("a/", "a/b.txt", "c.txt", "ab/", "ab/x.md")
        once = filter_items_by_name(items, "a b")
        twice = filter_items_by_name(once, "a b")
        self.assertEqual(once, twice)


class GroupingTests(unittest.TestCase):
    def test_group_by_folder_nests_children_and_synthesizes_implied_folders(self) -> None:
        items = [Item(key="a/", size=0, modified="t1"), Item(key="a/b/c.txt", size=4), Item(key="d.txt")]
        nodes = group_by_folder(items, "")

        self.assertEqual([node.key for node in nodes], ["a/", "d.txt"])
        folder_a = nodes[0]
        self.assertIsInstance(folder_a, FolderNode)
        self.assertEqual(folder_a.item.modified, "t1")
        self.assertFalse(folder_a.key_derived)
        folder_b = folder_a.children[0]
        self.assertIsInstance(folder_b, FolderNode)
        self.assertEqual(folder_b.key, "a/b/")
        self.assertTrue(folder_b.key_derived)
        self.assertEqual([child.key for child in folder_b.children], ["a/b/c.txt"])

    def test_group_by_folder_respects_root_prefix(self) -> None:
        items = _items("a/x.txt", "a/y/z.txt", "other.txt")
        nodes = group_by_folder(items, "a/")
        self.assertEqual([node.key for node in nodes], ["a/y/", "a/x.txt"])

    def test_sort_by_name_puts_folders_first_case_insensitively(self) -> None:
        nodes = group_by_folder(_items("b.txt", "A.txt", "z/", "c/", "c/B.md", "c/a.md"), "")
        ordered = sort_by_name(nodes)
        self.assertEqual([node.key for node in ordered], ["c/", "z/", "A.txt", "b.txt"])
        self.assertEqual([child.key for child in ordered[0].children], ["c/a.md", "c/B.md"])


class FlattenTests(unittest.TestCase):
    def test_closed_folders_yield_only_top_level_rows_at_depth_zero(self) -> None:
        items = _items("a/", "a/b.txt", "a/c/", "a/c/d.txt", "e.txt")
        self.assertEqual(_flat(items), [("a/", 0), ("e.txt", 0)])

    def test_open_folders_are_descended_with_increasing_depth(self) -> None:
        items = _items("a/", "a/b.txt", "a/c/", "a/c/d.txt", "e.txt")
        rows = _flat(items, open_folders=frozenset({"a/", "a/c/"}))
        self.assertEqual(
            rows,
            [("a/", 0), ("a/c/", 1), ("a/c/d.txt", 2), ("a/b.txt", 1), ("e.txt", 0)],
        )

    def test_nested_children_mode_leaves_open_folders_to_presentation(self) -> None:
        items = _items("a/", "a/b.txt")
        rows = _flat(items, open_folders=frozenset({"a/"}), nest_children=True)
        self.assertEqual(rows, [("a/", 0)])

    def test_filter_hides_folders_and_sees_through_closed_ones(self) -> None:
        items = _items("a/", "a/b.txt", "c.txt")
        self.assertEqual(_flat(items, name_filter="b"), [("a/b.txt", 0)])

    def test_filter_with_folders_shown_flattens_depth(self) -> None:
        items = _items("a/", "a/sub/", "a/sub/b.txt", "c.txt")
        rows = _flat(items, name_filter="a", show_folders_on_filter=True)
        self.assertEqual(rows, [("a/", 0), ("a/sub/", 0), ("a/sub/b.txt", 0)])

    def test_without_grouper_folders_are_dropped(self) -> None:
        items = _items("a/", "a/b.txt", "c.txt")
        rows = _flat(items, group=None, open_folders=frozenset({"a/"}))
        self.assertEqual(rows, [("a/b.txt", 0), ("c.txt", 0)])

    def test_empty_input_yields_empty_output(self) -> None:
        build = build_tree([], TreeOptions(name_filter="x"))
        self.assertEqual(build.tree, ())
        self.assertEqual(build.flattened, ())


class PipelineHelperTests(unittest.TestCase):
    def test_page_rows_only_truncates_search_results(self) -> None:
        build = build_tree(_items(*[f"f{idx:02d}.txt" for idx in range(25)]))
        rows, has_more = page_rows(build.flattened, 20, filter_active=False)
        self.assertEqual((len(rows), has_more), (25, False))
        rows, has_more = page_rows(build.flattened, 20, filter_active=True)
        self.assertEqual((len(rows), has_more), (20, True))
        rows, has_more = page_rows(build.flattened, 40, filter_active=True)
        self.assertEqual((len(rows), has_more), (25, False))

    def test_find_item_returns_exact_item_or_placeholder(self) -> None:
        real = Item(key="a/", modified="t", size=3)
        self.assertIs(find_item([real, Item(key="a/b.txt")], "a/"), real)
        self.assertEqual(find_item([Item(key="x/y.txt")], "x/"), Item(key="x/"))

    def test_selected_nodes_ignores_visibility(self) -> None:
        build = build_tree(_items("a/", "a/b.txt", "c.txt"))
        found = selected_nodes(build.tree, {"a/b.txt", "c.txt"})
        self.assertEqual([node.key for node in found], ["a/b.txt", "c.txt"])
        self.assertTrue(all(isinstance(node, FileNode) for node in found))


if __name__ == "__main__":
    unittest.main()
