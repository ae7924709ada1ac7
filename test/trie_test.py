import unittest
from ccspan import ClosurePolicy, PatternTrie, TrieEntry


class TestPatternTrie(unittest.TestCase):
    def setUp(self):
        self.trie = PatternTrie()

    def test_insert_and_count_locks(self):
        """Test a locked path is not counted again until unlocked"""
        self.assertTrue(self.trie.insert_and_count([1, 2]))
        self.assertFalse(self.trie.insert_and_count([1, 2]))
        self.assertEqual(self.trie.lookup([1, 2]), 1)

        self.trie.unlock_all()
        self.assertTrue(self.trie.insert_and_count([1, 2]))
        self.assertEqual(self.trie.lookup([1, 2]), 2)

    def test_insert_without_lock(self):
        """Test unlocked insertion counts every occurrence"""
        self.assertTrue(self.trie.insert_and_count([3], lock=False))
        self.assertTrue(self.trie.insert_and_count([3], lock=False))
        self.assertEqual(self.trie.lookup([3]), 2)

    def test_insert_without_create(self):
        """Test insertion of a missing path does nothing without create"""
        self.assertFalse(self.trie.insert_and_count([1, 2], create_if_missing=False))
        self.assertEqual(len(self.trie), 0)

        self.trie.insert_and_count([1, 2])
        self.trie.unlock_all()
        self.assertTrue(self.trie.insert_and_count([1, 2], create_if_missing=False))
        self.assertEqual(self.trie.lookup([1, 2]), 2)

    def test_lookup(self):
        """Test exact path lookup never creates nodes"""
        self.trie.insert_and_count([1, 2, 3])
        self.assertEqual(len(self.trie), 3)
        self.assertEqual(self.trie.lookup([1, 2, 3]), 1)
        self.assertEqual(self.trie.lookup([1, 2]), 0)  # intermediate node
        self.assertEqual(self.trie.lookup([2]), 0)
        self.assertEqual(self.trie.lookup([1, 2, 3, 4]), 0)
        self.assertEqual(self.trie.lookup([]), 0)
        self.assertEqual(len(self.trie), 3)
        self.assertIn([1, 2], self.trie)
        self.assertNotIn([2], self.trie)

    def test_capacity_growth(self):
        """Test the arena grows past its initial capacity"""
        trie = PatternTrie(capacity=4)
        for symbol in range(200):
            self.assertTrue(trie.insert_and_count([symbol]))
        trie.unlock_all()
        self.assertEqual(len(trie), 200)
        self.assertTrue(all(trie.lookup([s]) == 1 for s in range(200)))
        self.assertTrue(trie.insert_and_count([199]))

    def test_enumerate_order(self):
        """Test depth-first traversal in ascending symbol order"""
        for path in ([2], [1, 3], [1, 2], [1]):
            self.trie.insert_and_count(path)
        entries = list(self.trie.enumerate())
        self.assertEqual(
            entries,
            [
                TrieEntry((1,), 1, False),
                TrieEntry((1, 2), 1, False),
                TrieEntry((1, 3), 1, False),
                TrieEntry((2,), 1, False),
            ],
        )
        # restartable
        self.assertEqual(list(self.trie.enumerate()), entries)

    def test_enumerate_closed_only(self):
        """Test filtering the traversal to closed nodes"""
        for path in ([1], [1, 2], [2]):
            self.trie.insert_and_count(path)
        self.trie.mark([1, 2])
        self.assertEqual(
            list(self.trie.enumerate(closed_only=True)), [TrieEntry((1, 2), 1, True)]
        )
        self.trie.unmark([1, 2])
        self.assertEqual(list(self.trie.enumerate(closed_only=True)), [])

    def test_finalize_candidate(self):
        """Test minimum support gate before the closure policy"""
        for _ in range(3):
            self.trie.insert_and_count([1])
            self.trie.insert_and_count([1, 2])
            self.trie.unlock_all()
        self.trie.insert_and_count([1, 3])

        self.assertTrue(self.trie.finalize_candidate([1], 2, ClosurePolicy.PREFIX))
        self.assertTrue(self.trie.is_closed([1]))
        self.assertFalse(self.trie.finalize_candidate([1, 3], 2, ClosurePolicy.PREFIX))
        self.assertFalse(self.trie.is_closed([1, 3]))
        self.assertIn([1, 3], self.trie)

        self.assertTrue(self.trie.finalize_candidate([1, 2], 2, ClosurePolicy.PREFIX))
        self.assertTrue(self.trie.is_closed([1, 2]))
        self.assertFalse(self.trie.is_closed([1]))


if __name__ == "__main__":
    unittest.main()
