"""
Proof Generation Workflow Tests

Tests for the one-call helpers in merkle_whitelist.main.
"""

import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.dirname(__file__))

from merkle_whitelist.main import ProofResult, build_tree, generate_proof, generate_root
from merkle_whitelist.exceptions import InvalidInputError, LeafNotFoundError
from merkle_whitelist.merkle import compute_root_from_proof, hash_leaf

from fixtures import (
    ADDRESS_1, ADDRESS_2, ADDRESS_3,
    LEAF_2,
    SORTED_ROOT_3, UNSORTED_ROOT_3, SORTED_PAIR_3_1,
)

VALUES = [ADDRESS_2, ADDRESS_3, ADDRESS_1]


class TestGenerateRoot(unittest.TestCase):

    def test_sorted_default(self):
        self.assertEqual(generate_root(VALUES), SORTED_ROOT_3)

    def test_unsorted(self):
        self.assertEqual(generate_root(VALUES, sort=False), UNSORTED_ROOT_3)

    def test_build_tree(self):
        tree = build_tree(VALUES)
        self.assertTrue(tree.sort)
        self.assertEqual(tree.leaf_count, 3)

    def test_single_value_rejected(self):
        with self.assertRaises(InvalidInputError):
            generate_root([ADDRESS_1])


class TestGenerateProof(unittest.TestCase):

    def test_complete_workflow(self):
        """Test proof, root and metadata for a whitelisted address"""
        result = generate_proof(VALUES, ADDRESS_2)

        self.assertIsInstance(result, ProofResult)
        self.assertEqual(result.root.hex(), SORTED_ROOT_3)
        self.assertEqual([step.hex() for step in result.proof], [SORTED_PAIR_3_1])
        self.assertEqual(result.metadata["leaf"], LEAF_2)
        self.assertEqual(result.metadata["leaf_index"], 5)
        self.assertEqual(result.metadata["leaf_count"], 3)
        self.assertEqual(result.metadata["internal_count"], 3)
        self.assertEqual(result.metadata["node_count"], 6)
        self.assertEqual(result.metadata["proof_length"], 1)
        self.assertTrue(result.metadata["sort"])

    def test_proof_replays_to_root(self):
        for value in VALUES:
            for sort in (True, False):
                with self.subTest(value=value, sort=sort):
                    result = generate_proof(VALUES, value, sort=sort)
                    computed = compute_root_from_proof(
                        hash_leaf(value),
                        result.metadata["leaf_index"],
                        result.proof,
                        result.metadata["node_count"],
                        sort,
                    )
                    self.assertEqual(computed, result.root)

    def test_known_index(self):
        by_lookup = generate_proof(VALUES, ADDRESS_3)
        by_index = generate_proof(VALUES, ADDRESS_3, known_index=by_lookup.metadata["leaf_index"])
        self.assertEqual(by_lookup.proof, by_index.proof)

    def test_known_index_outside_leaves(self):
        for index in (-1, 0, 2, 6):
            with self.subTest(index=index):
                with self.assertRaises(InvalidInputError):
                    generate_proof(VALUES, ADDRESS_3, known_index=index)

    def test_missing_leaf(self):
        with self.assertRaises(LeafNotFoundError):
            generate_proof(VALUES, "ab" * 20)


if __name__ == "__main__":
    unittest.main(verbosity=2)
