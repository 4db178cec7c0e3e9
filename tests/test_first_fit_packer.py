import unittest

from parcel_split.business_objects import Item
from parcel_split.heuristics.first_fit.packer import oversize_items, pack


def _names(partition):
    return [[it.name for it in pkg] for pkg in partition]


class TestFirstFitDecreasing(unittest.TestCase):
    def test_heaviest_first_into_first_bin_with_room(self) -> None:
        items = [Item("A", 2.0), Item("B", 3.0), Item("C", 2.0)]
        self.assertEqual(_names(pack(items, 5.0)), [["B", "A"], ["C"]])

    def test_equal_weights_keep_input_order(self) -> None:
        items = [Item("A", 1.0), Item("B", 1.0), Item("C", 1.0)]
        self.assertEqual(_names(pack(items, 2.0)), [["A", "B"], ["C"]])

    def test_later_small_item_fills_earlier_bin(self) -> None:
        items = [Item("A", 4.0), Item("B", 3.0), Item("C", 2.0), Item("D", 1.0)]
        self.assertEqual(_names(pack(items, 5.0)), [["A", "D"], ["B", "C"]])

    def test_every_bin_respects_max_weight(self) -> None:
        items = [Item(chr(65 + i), w) for i, w in enumerate([1.3, 2.2, 0.4, 3.9, 2.5, 1.1, 0.7])]
        partition = pack(items, 4.0)
        for pkg in partition:
            self.assertLessEqual(sum(it.weight for it in pkg), 4.0 + 1e-9)
        self.assertCountEqual([it for pkg in partition for it in pkg], items)

    def test_float_sum_within_tolerance_shares_a_bin(self) -> None:
        items = [Item("A", 0.2), Item("B", 0.1)]
        self.assertEqual(len(pack(items, 0.3)), 1)

    def test_empty_input_gives_empty_partition(self) -> None:
        self.assertEqual(pack([], 5.0), [])

    def test_oversize_item_is_packed_alone_and_violates_max_weight(self) -> None:
        """Reference behaviour: an item heavier than max_weight gets its own over-weight bin."""
        items = [Item("A", 10.0)]
        partition = pack(items, 5.0)
        self.assertEqual(_names(partition), [["A"]])
        self.assertGreater(sum(it.weight for it in partition[0]), 5.0)
        self.assertEqual(oversize_items(items, 5.0), items)

    def test_oversize_items_lists_only_heavy_items(self) -> None:
        items = [Item("A", 1.0), Item("B", 6.0), Item("C", 5.0)]
        self.assertEqual([it.name for it in oversize_items(items, 5.0)], ["B"])


if __name__ == "__main__":
    unittest.main()
