"""Action modes, preemption, and the create-folder draft row."""

from __future__ import annotations

import unittest

from keyedbrowser.browser import (
    ACTION_CREATE_FOLDER,
    ACTION_DELETE,
    ACTION_MOVE,
    ACTION_RENAME,
    BrowserCallbacks,
    FileBrowser,
)
from keyedbrowser.tree_model import Item


def _browser(*keys: str, create_folder=None) -> FileBrowser:
    return FileBrowser(
        [Item(key=key) for key in keys],
        callbacks=BrowserCallbacks(create_folder=create_folder or (lambda _key: None)),
    )


class ActionStateMachineTests(unittest.TestCase):
    def test_begin_preempts_previous_action(self) -> None:
        browser = _browser("a.txt", "b.txt")
        browser.actions.begin(ACTION_RENAME, ["a.txt"])
        browser.actions.begin(ACTION_DELETE, ["b.txt"])
        self.assertEqual(browser.state.active_action, ACTION_DELETE)
        self.assertEqual(browser.state.action_targets, ["b.txt"])

    def test_begin_rejects_unknown_action(self) -> None:
        browser = _browser()
        with self.assertRaises(ValueError):
            browser.actions.begin("explode", [])

    def test_action_bar_entry_points_target_selection(self) -> None:
        browser = _browser("a.txt", "b.txt")
        browser.set_selection(["a.txt", "b.txt"])
        browser.actions.begin_move()
        self.assertEqual(browser.state.active_action, ACTION_MOVE)
        self.assertEqual(browser.state.action_targets, ["a.txt", "b.txt"])

    def test_end_keeps_real_selection(self) -> None:
        browser = _browser("a.txt")
        browser.select("a.txt")
        browser.actions.begin_rename()
        browser.actions.end()
        self.assertIsNone(browser.state.active_action)
        self.assertEqual(browser.state.action_targets, [])
        self.assertEqual(browser.state.selection, ["a.txt"])

    def test_begin_create_folder_under_selected_folder_opens_it(self) -> None:
        browser = _browser("docs/", "docs/readme.md")
        browser.select("docs/")
        draft_key = browser.begin_create_folder()

        self.assertEqual(draft_key, "docs/__new__/")
        self.assertEqual(browser.state.active_action, ACTION_CREATE_FOLDER)
        self.assertEqual(browser.state.action_targets, ["docs/__new__/"])
        self.assertEqual(browser.state.selection, ["docs/__new__/"])
        self.assertIn("docs/", browser.state.open_folders)

    def test_begin_create_folder_uses_parent_of_selected_file(self) -> None:
        browser = _browser("docs/", "docs/readme.md")
        browser.select("docs/readme.md")
        self.assertEqual(browser.begin_create_folder(), "docs/__new__/")

    def test_begin_create_folder_is_noop_while_creating(self) -> None:
        browser = _browser()
        self.assertEqual(browser.begin_create_folder(), "__new__/")
        self.assertIsNone(browser.begin_create_folder())
        self.assertEqual(browser.state.action_targets, ["__new__/"])

    def test_begin_create_folder_requires_collaborator(self) -> None:
        browser = FileBrowser([Item(key="a/")])
        self.assertIsNone(browser.begin_create_folder())
        self.assertIsNone(browser.state.active_action)

    def test_draft_row_is_rendered_only_while_creating(self) -> None:
        browser = _browser("docs/")
        browser.select("docs/")
        browser.begin_create_folder()

        rows = browser.build().flattened
        draft_rows = [row for row in rows if row.node.item.draft]
        self.assertEqual([(row.key, row.depth) for row in draft_rows], [("docs/__new__/", 1)])
        self.assertEqual(draft_rows[0].node.item.size, 0)

        browser.actions.end()
        self.assertFalse(any(row.node.item.draft for row in browser.build().flattened))

    def test_abandoned_create_clears_placeholder_selection(self) -> None:
        browser = _browser("docs/")
        browser.select("docs/")
        browser.begin_create_folder()
        browser.actions.end()
        self.assertEqual(browser.state.selection, [])

    def test_confirmed_create_keeps_real_selection(self) -> None:
        created: list[str] = []
        browser = _browser("docs/", create_folder=created.append)
        browser.select("docs/")
        browser.begin_create_folder()
        browser.mutations.create_folder("docs/reports/")
        browser.actions.end()

        self.assertEqual(created, ["docs/reports/"])
        self.assertEqual(browser.state.selection, ["docs/reports/"])


if __name__ == "__main__":
    unittest.main()
