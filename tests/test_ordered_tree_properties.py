import sys
import os
import unittest

from hypothesis import given, strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ordered_tree import OrderedTree, DuplicateInsert, ValueNotFound


values = st.integers(min_value=-50, max_value=50)
operations = st.lists(st.tuples(st.booleans(), values), max_size=200)


def _apply(tree, ops):
    """Run (is_insert, value) pairs; return successful insert and delete counts."""
    inserted = deleted = 0
    for is_insert, value in ops:
        try:
            if is_insert:
                tree.insert(value)
                inserted += 1
            else:
                tree.delete(value)
                deleted += 1
        except (DuplicateInsert, ValueNotFound):
            pass
    return inserted, deleted


class TestOrderedTreeProperties(unittest.TestCase):
    @given(operations)
    def test_traversal_strictly_ascending(self, ops):
        tree = OrderedTree()
        _apply(tree, ops)
        result = tree.in_order()
        self.assertTrue(all(a < b for a, b in zip(result, result[1:])))
        self.assertTrue(tree.is_valid())

    @given(operations)
    def test_size_matches_successful_operations(self, ops):
        tree = OrderedTree()
        inserted, deleted = _apply(tree, ops)
        present = [v for v in range(-50, 51) if tree.contains(v)]
        self.assertEqual(len(present), inserted - deleted)
        self.assertEqual(len(tree), inserted - deleted)

    @given(operations)
    def test_matches_reference_set(self, ops):
        tree = OrderedTree()
        reference = set()
        for is_insert, value in ops:
            if is_insert:
                if value in reference:
                    with self.assertRaises(DuplicateInsert):
                        tree.insert(value)
                else:
                    tree.insert(value)
                    reference.add(value)
            else:
                if value in reference:
                    self.assertEqual(tree.delete(value), value)
                    reference.remove(value)
                else:
                    with self.assertRaises(ValueNotFound):
                        tree.delete(value)
        self.assertEqual(tree.in_order(), sorted(reference))

    @given(st.sets(values, min_size=1), st.data())
    def test_delete_then_absent(self, initial, data):
        tree = OrderedTree(initial)
        target = data.draw(st.sampled_from(sorted(initial)))
        tree.delete(target)
        self.assertFalse(tree.contains(target))
        with self.assertRaises(ValueNotFound):
            tree.delete(target)

    @given(st.lists(values, unique=True), values)
    def test_insert_delete_round_trip(self, initial, value):
        tree = OrderedTree(v for v in initial if v != value)
        before = tree.pre_order()
        tree.insert(value)
        self.assertEqual(tree.delete(value), value)
        self.assertEqual(tree.pre_order(), before)

    @given(st.lists(values, unique=True, min_size=1))
    def test_duplicate_insert_keeps_single_copy(self, initial):
        tree = OrderedTree(initial)
        with self.assertRaises(DuplicateInsert):
            tree.insert(initial[0])
        self.assertEqual(tree.in_order().count(initial[0]), 1)
        self.assertEqual(len(tree), len(initial))


if __name__ == "__main__":
    unittest.main()
