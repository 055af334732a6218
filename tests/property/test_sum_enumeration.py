"""
Property-based tests for subset-sum enumeration (no engine required).

Each result is checked against a brute-force oracle that tries every weight
choice of the subset.
"""

from itertools import combinations, product

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ygo_bridge.enumeration.sum_utils import (
    combinations_with_weight,
    combinations_with_weight2,
    find_valid_sum_combinations,
)

pytest.importorskip("hypothesis")


def _reachable(options, target):
    return any(sum(choice) == target for choice in product(*options))


class TestSumEnumerationProperties:
    """Test properties of the sum enumeration algorithm."""

    @given(
        weights=st.lists(st.integers(min_value=1, max_value=12), min_size=0, max_size=7),
        target=st.integers(min_value=1, max_value=24),
    )
    @settings(max_examples=100)
    def test_single_weight_matches_oracle(self, weights, target):
        """A subset is returned iff counting each item as 1 or its weight reaches target."""
        result = combinations_with_weight(weights, target)
        expected = [
            list(c)
            for k in range(1, len(weights) + 1)
            for c in combinations(range(len(weights)), k)
            if _reachable([(1, weights[i]) for i in c], target)
        ]
        assert result == expected

    @given(
        weights=st.lists(
            st.lists(st.integers(min_value=1, max_value=12), min_size=1, max_size=2),
            min_size=0, max_size=7),
        target=st.integers(min_value=1, max_value=24),
    )
    @settings(max_examples=100)
    def test_dual_weight_sums_exactly(self, weights, target):
        """Every returned subset sums to target under some alternative choice."""
        result = combinations_with_weight2(weights, target)
        for combo in result:
            assert _reachable([weights[i] for i in combo], target)

    @given(
        weights=st.lists(st.integers(min_value=1, max_value=12), min_size=0, max_size=7),
        target=st.integers(min_value=1, max_value=24),
    )
    @settings(max_examples=100)
    def test_size_ascending_lexicographic(self, weights, target):
        """Smaller subsets first, lexicographic within a size, no duplicates."""
        result = combinations_with_weight(weights, target)
        keys = [(len(c), c) for c in result]
        assert keys == sorted(keys)
        assert len({tuple(c) for c in result}) == len(result)

    @given(
        levels=st.lists(st.integers(min_value=1, max_value=12), min_size=1, max_size=6),
    )
    @settings(max_examples=50)
    def test_exact_match_finds_full_selection(self, levels):
        """With target = sum of all levels, selecting everything is valid."""
        can_select = [{"value": level} for level in levels]
        result = find_valid_sum_combinations([], can_select, target_sum=sum(levels))
        assert list(range(len(levels))) in result
        for combo in result:
            assert sum(levels[i] for i in combo) == sum(levels)

    @given(
        must=st.lists(st.integers(min_value=1, max_value=12), min_size=0, max_size=3),
        can=st.lists(st.integers(min_value=1, max_value=12), min_size=0, max_size=6),
        target=st.integers(min_value=1, max_value=30),
    )
    @settings(max_examples=100)
    def test_at_least_mode(self, must, can, target):
        """Mode 1 selections (plus must-select) reach at least the target."""
        result = find_valid_sum_combinations(
            [{"value": v} for v in must], [{"value": v} for v in can], target, mode=1)
        for combo in result:
            assert sum(must) + sum(can[i] for i in combo) >= target
