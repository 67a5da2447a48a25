import unittest

from booking_admin.shared.ordering import coerce_order, move_item, resequence
from booking_admin.store import StoreError

from memory_store import MemoryDocumentStore


class TestMoveItem(unittest.TestCase):
    def test_move_swaps_with_neighbour(self):
        items = ["a", "b", "c", "d"]

        self.assertEqual(move_item(items, 2, "up"), ["a", "c", "b", "d"])
        self.assertEqual(move_item(items, 1, "down"), ["a", "c", "b", "d"])
        self.assertEqual(items, ["a", "b", "c", "d"])

    def test_boundaries_are_no_ops(self):
        items = ["a", "b", "c"]

        self.assertEqual(move_item(items, 0, "up"), items)
        self.assertEqual(move_item(items, 2, "down"), items)

    def test_every_move_is_a_permutation_with_one_swap(self):
        items = list(range(6))
        for index in range(len(items)):
            for direction in ("up", "down"):
                moved = move_item(items, index, direction)
                self.assertEqual(sorted(moved), items)
                changed = [i for i, (x, y) in enumerate(zip(items, moved)) if x != y]
                self.assertIn(len(changed), (0, 2))
                if changed:
                    self.assertEqual(changed[1] - changed[0], 1)

    def test_coerce_order(self):
        self.assertEqual(coerce_order(3), 3)
        self.assertEqual(coerce_order("3"), 0)
        self.assertEqual(coerce_order(None), 0)
        self.assertEqual(coerce_order(True), 0)
        self.assertEqual(coerce_order(2.5), 0)


class TestResequence(unittest.TestCase):
    def setUp(self):
        self.store = MemoryDocumentStore(
            {"serviceCategories": {doc_id: {"name": doc_id, "order": 9} for doc_id in ("a", "b", "c")}}
        )

    def test_writes_position_as_order(self):
        written = resequence(self.store, "serviceCategories", ["c", "a", "b"])

        self.assertEqual(written, 3)
        orders = {doc_id: doc["order"] for doc_id, doc in self.store.collections["serviceCategories"].items()}
        self.assertEqual(orders, {"c": 0, "a": 1, "b": 2})

    def test_partial_failure_leaves_the_writes_already_made(self):
        self.store.fail_updates_after = 1

        with self.assertRaises(StoreError):
            resequence(self.store, "serviceCategories", ["c", "a", "b"])

        orders = {doc_id: doc["order"] for doc_id, doc in self.store.collections["serviceCategories"].items()}
        self.assertEqual(orders, {"c": 0, "a": 9, "b": 9})


if __name__ == "__main__":
    unittest.main(verbosity=2)
