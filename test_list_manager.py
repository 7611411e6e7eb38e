import unittest

from app_state import AppState, ValidationError
from list_manager import ListManager


def _manager(titles, selection=0):
    state = AppState.from_titles(titles)
    state.selection = selection
    return ListManager(state), state


class AddItemTests(unittest.TestCase):
    def test_blank_titles_fail_validation(self):
        manager, state = _manager(["A"])
        for title in ("", "   ", "\t\n"):
            err = manager.add_item(title)
            self.assertIsInstance(err, ValidationError)
            self.assertEqual(err.operation, "validate")
        self.assertEqual([i.title for i in state.items], ["A"])

    def test_title_is_trimmed_and_appended_open(self):
        manager, state = _manager(["A"], selection=0)
        self.assertIsNone(manager.add_item(" x "))
        self.assertEqual(state.items[-1].title, "x")
        self.assertFalse(state.items[-1].completed)
        self.assertEqual(state.selection, 0)

    def test_error_message_names_operation(self):
        manager, _ = _manager([])
        err = manager.add_item("")
        self.assertEqual(str(err), "todo operation: validate: item title cannot be empty")


class DeleteItemTests(unittest.TestCase):
    def test_out_of_range_index_fails(self):
        manager, state = _manager(["A", "B"])
        for index in (-1, 2, 10):
            err = manager.delete_item(index)
            self.assertEqual(err.operation, "delete")
        self.assertEqual(len(state.items), 2)

    def test_delete_last_index_clamps_selection(self):
        manager, state = _manager(["A", "B", "C"], selection=2)
        self.assertIsNone(manager.delete_item(2))
        self.assertEqual(state.selection, 1)

    def test_delete_middle_keeps_order(self):
        manager, state = _manager(["A", "B", "C", "D"], selection=1)
        manager.delete_item(1)
        self.assertEqual([i.title for i in state.items], ["A", "C", "D"])
        self.assertEqual(state.selection, 1)

    def test_delete_only_item_resets_selection(self):
        manager, state = _manager(["A"])
        manager.delete_item(0)
        self.assertEqual(state.items, [])
        self.assertEqual(state.selection, 0)


class ToggleTests(unittest.TestCase):
    def test_toggle_twice_restores(self):
        manager, state = _manager(["A", "B", "C"])
        for i in range(3):
            before = state.items[i].completed
            manager.toggle_item(i)
            self.assertNotEqual(state.items[i].completed, before)
            manager.toggle_item(i)
            self.assertEqual(state.items[i].completed, before)

    def test_toggle_out_of_range_fails(self):
        manager, _ = _manager([])
        err = manager.toggle_item(0)
        self.assertEqual(err.operation, "toggle")
        self.assertEqual(err.cause, "invalid index")

    def test_toggle_all_from_mixed_completes_everything(self):
        manager, state = _manager(["A", "B", "C"])
        manager.toggle_item(1)
        manager.toggle_all_items()
        self.assertTrue(all(i.completed for i in state.items))

    def test_toggle_all_flips_uniform_lists(self):
        manager, state = _manager(["A", "B"])
        manager.toggle_all_items()
        self.assertEqual([i.completed for i in state.items], [True, True])
        manager.toggle_all_items()
        self.assertEqual([i.completed for i in state.items], [False, False])

    def test_toggle_all_on_empty_list_is_harmless(self):
        manager, state = _manager([])
        manager.toggle_all_items()
        self.assertEqual(state.items, [])


if __name__ == "__main__":
    unittest.main()
