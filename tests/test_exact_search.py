import math
import random
import unittest
from typing import Iterator, List, Sequence

from parcel_split.business_objects import BillingParams, Item
from parcel_split.costing.cost_model import evaluate, partition_cost
from parcel_split.planning.optimizer import check_partition
from parcel_split.planning.solvers.exact import search_best

ENUMERATIONS = ("subset", "permutation")


def _set_partitions(seq: Sequence[Item]) -> Iterator[List[List[Item]]]:
    """Every set partition of `seq` exactly once (no pruning, no permutations)."""
    if not seq:
        yield []
        return
    first, rest = seq[0], seq[1:]
    for smaller in _set_partitions(rest):
        for n, block in enumerate(smaller):
            yield smaller[:n] + [[first] + block] + smaller[n + 1:]
        yield [[first]] + smaller


def _brute_force_cost(items: Sequence[Item], params: BillingParams) -> float:
    best = math.inf
    for partition in _set_partitions(list(items)):
        if all(sum(it.weight for it in blk) <= params.max_weight + 1e-9 for blk in partition):
            best = min(best, partition_cost(partition, params))
    return best


def _cost_fn(params: BillingParams):
    return lambda pkg: evaluate(pkg, params).cost


class TestSearchBest(unittest.TestCase):
    def setUp(self) -> None:
        self.params = BillingParams(max_weight=5.0, unit_cost=100.0, delivery_fee=50.0, min_delivery_weight=4.0)

    def test_three_items_that_do_not_fit_together_are_split(self) -> None:
        """[A:2, B:2, C:2] with max 5: one pair (4 kg, no fee) plus a single (2 kg, fee)."""
        items = [Item("A", 2.0), Item("B", 2.0), Item("C", 2.0)]
        for enumeration in ENUMERATIONS:
            with self.subTest(enumeration=enumeration):
                best, report = search_best(items, 5.0, _cost_fn(self.params), enumeration=enumeration)
                self.assertIsNotNone(best)
                self.assertEqual(check_partition(best, items, 5.0), [])
                self.assertEqual(sorted(len(pkg) for pkg in best), [1, 2])
                self.assertEqual(partition_cost(best, self.params), 400.0 + 250.0)
                self.assertTrue(report.complete)

    def test_empty_input_returns_none(self) -> None:
        for enumeration in ENUMERATIONS:
            with self.subTest(enumeration=enumeration):
                best, report = search_best([], 5.0, _cost_fn(self.params), enumeration=enumeration)
                self.assertIsNone(best)
                self.assertEqual(report.nodes, 0)
                self.assertEqual(report.improvements, ())

    def test_item_heavier_than_max_weight_has_no_valid_partition(self) -> None:
        for enumeration in ENUMERATIONS:
            with self.subTest(enumeration=enumeration):
                best, report = search_best([Item("A", 10.0)], 5.0, _cost_fn(self.params), enumeration=enumeration)
                self.assertIsNone(best)
                self.assertTrue(report.complete)
                self.assertGreater(report.pruned_by_weight, 0)

    def test_heavy_item_among_light_ones_has_no_valid_partition(self) -> None:
        items = [Item("A", 1.0), Item("B", 1.0), Item("C", 6.0)]
        best, _ = search_best(items, 5.0, _cost_fn(self.params))
        self.assertIsNone(best)

    def test_matches_brute_force_on_small_random_inputs(self) -> None:
        rng = random.Random(20240611)
        params = BillingParams(max_weight=5.0, unit_cost=225.0, delivery_fee=80.0, min_delivery_weight=4.0)
        for trial in range(25):
            n = rng.randint(1, 6)
            items = [Item(f"I{i}", round(rng.uniform(0.1, 4.5), 2)) for i in range(n)]
            expected = _brute_force_cost(items, params)
            for enumeration in ENUMERATIONS:
                with self.subTest(trial=trial, enumeration=enumeration):
                    best, _ = search_best(items, params.max_weight, _cost_fn(params), enumeration=enumeration)
                    self.assertIsNotNone(best)
                    self.assertEqual(check_partition(best, items, params.max_weight), [])
                    self.assertAlmostEqual(partition_cost(best, params), expected, places=6)

    def test_incumbent_only_improves(self) -> None:
        """Recorded incumbents strictly decrease and the last one is the returned cost."""
        items = [Item(c, w) for c, w in zip("ABCDEF", [1.2, 2.5, 0.8, 3.1, 1.9, 0.6])]
        params = BillingParams(max_weight=5.0, unit_cost=225.0, delivery_fee=80.0, min_delivery_weight=4.0)
        for enumeration in ENUMERATIONS:
            with self.subTest(enumeration=enumeration):
                best, report = search_best(items, 5.0, _cost_fn(params), enumeration=enumeration)
                self.assertTrue(report.improvements)
                for earlier, later in zip(report.improvements, report.improvements[1:]):
                    self.assertLess(later, earlier)
                self.assertAlmostEqual(report.improvements[-1], partition_cost(best, params))

    def test_cost_pruning_cuts_the_search(self) -> None:
        items = [Item(c, 1.0) for c in "ABCDE"]
        _, report = search_best(items, 5.0, _cost_fn(self.params))
        self.assertGreater(report.pruned_by_cost, 0)

    def test_subset_enumeration_expands_fewer_nodes_than_permutation(self) -> None:
        items = [Item(c, w) for c, w in zip("ABCDE", [1.0, 1.5, 2.0, 2.5, 3.0])]
        _, by_subset = search_best(items, 5.0, _cost_fn(self.params), enumeration="subset")
        _, by_perm = search_best(items, 5.0, _cost_fn(self.params), enumeration="permutation")
        self.assertLess(by_subset.nodes, by_perm.nodes)

    def test_separate_calls_do_not_share_the_incumbent(self) -> None:
        cheap = [Item("A", 4.0)]
        costly = [Item("B", 2.0), Item("C", 2.0), Item("D", 2.0)]
        search_best(cheap, 5.0, _cost_fn(self.params))
        best, report = search_best(costly, 5.0, _cost_fn(self.params))
        self.assertIsNotNone(best)
        self.assertEqual(report.improvements[0], 750.0)
        self.assertEqual(partition_cost(best, self.params), 650.0)

    def test_node_budget_stops_the_search(self) -> None:
        items = [Item(c, 1.0) for c in "ABCDE"]
        best, report = search_best(items, 5.0, _cost_fn(self.params), node_budget=1)
        self.assertIsNone(best)
        self.assertFalse(report.complete)
        self.assertEqual(report.nodes, 1)

    def test_partial_budget_returns_a_valid_incumbent(self) -> None:
        items = [Item(c, w) for c, w in zip("ABCDEF", [1.2, 2.5, 0.8, 3.1, 1.9, 0.6])]
        for enumeration in ENUMERATIONS:
            with self.subTest(enumeration=enumeration):
                best, report = search_best(items, 5.0, _cost_fn(self.params), enumeration=enumeration, node_budget=20)
                self.assertLessEqual(report.nodes, 20)
                if best is not None:
                    self.assertEqual(check_partition(best, items, 5.0), [])

    def test_unknown_enumeration_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            search_best([Item("A", 1.0)], 5.0, _cost_fn(self.params), enumeration="random")


if __name__ == "__main__":
    unittest.main()
