"""
Subset-sum enumeration for material and cost selection.

The engine asks for "a subset of these cards whose values sum to N" in
MSG_SELECT_SUM (Xyz/Synchro/Ritual materials) and in tribute prompts. These
functions enumerate every satisfying index subset, smallest subsets first and
lexicographic within a size, so the resulting action list is stable.

Two weight shapes are supported:
    combinations_with_weight:  one weight per item; an item may also count
                               as 1 (tribute-style counting)
    combinations_with_weight2: one or two alternative weights per item
                               (variable-level cards)

Cost is exponential in the number of items. Inputs are bounded by hand and
field size; above MAX_SUM_ITEMS a warning is logged.
"""

import logging
from itertools import combinations as _index_combinations, product
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)

MAX_SUM_ITEMS = 20


def combinations(n: int, k: int) -> List[List[int]]:
    """All k-element index lists over range(n), in lexicographic order."""
    return [list(c) for c in _index_combinations(range(n), k)]


def _check_size(n: int) -> None:
    if n > MAX_SUM_ITEMS:
        logger.warning(
            "Subset-sum search over %d items exceeds MAX_SUM_ITEMS=%d; "
            "this enumerates up to 2^%d subsets", n, MAX_SUM_ITEMS, n,
        )


# =============================================================================
# SINGLE WEIGHT
# =============================================================================

def sum_to(weights: Sequence[int], indices: Sequence[int], r: int, i: int = 0) -> bool:
    """Check whether the items at indices can sum to r.

    Every item counts either as 1 or as its weight. The last item also
    satisfies when exactly 1 remains, which makes any single-item selection
    with r == 1 valid.
    """
    if r <= 0:
        return False
    if i == len(indices) - 1:
        return r == 1 or weights[indices[i]] == r
    return (
        sum_to(weights, indices, r - 1, i + 1)
        or sum_to(weights, indices, r - weights[indices[i]], i + 1)
    )


def combinations_with_weight(weights: Sequence[int], r: int) -> List[List[int]]:
    """Every non-empty index subset of weights that can sum to r.

    Example:
        >>> combinations_with_weight([1, 2, 3, 4], 4)[0]
        [3]
    """
    n = len(weights)
    _check_size(n)
    results = []
    for k in range(1, n + 1):
        for comb in combinations(n, k):
            if sum_to(weights, comb, r):
                results.append(comb)
    return results


# =============================================================================
# DUAL WEIGHT
# =============================================================================

def sum_to2(weights: Sequence[Sequence[int]], indices: Sequence[int], r: int, i: int = 0) -> bool:
    """Check whether the items at indices sum to r using one weight each.

    weights[j] holds one or two alternative values for item j.
    """
    if r <= 0:
        return False
    options = weights[indices[i]]
    if i == len(indices) - 1:
        return any(w == r for w in options[:2])
    return any(sum_to2(weights, indices, r - w, i + 1) for w in options[:2])


def combinations_with_weight2(weights: Sequence[Sequence[int]], r: int) -> List[List[int]]:
    """Every non-empty index subset whose per-item choice sums to r."""
    n = len(weights)
    _check_size(n)
    results = []
    for k in range(1, n + 1):
        for comb in combinations(n, k):
            if sum_to2(weights, comb, r):
                results.append(comb)
    return results


# =============================================================================
# MSG_SELECT_SUM
# =============================================================================

def card_weights(card: Dict) -> List[int]:
    """Alternative sum values of a parsed MSG_SELECT_SUM card.

    sum_param packs the primary value in the low 16 bits and an optional
    second value in the high 16 bits.
    """
    level1 = card.get("value", 0)
    level2 = card.get("level2", 0)
    if level2 and level2 != level1:
        return [level1, level2]
    return [level1]


def find_valid_sum_combinations(
    must_select: List[Dict],
    can_select: List[Dict],
    target_sum: int,
    min_select: int = 1,
    max_select: int = 99,
    mode: int = 0,
) -> List[List[int]]:
    """Find all selections from can_select that complete the target sum.

    Must-select cards are always included and contribute their primary value.

    Args:
        must_select: Cards that MUST be included
        can_select: Cards that CAN be selected
        target_sum: Target sum value (e.g., 12 for 2x Level 6 -> Rank 6)
        min_select: Minimum total cards, must_select included
        max_select: Maximum total cards, must_select included. Ignored in
            mode 1, where the engine sends 0.
        mode: 0 = exactly equal, 1 = at least equal

    Returns:
        Index lists into can_select, smallest selections first.
    """
    must_sum = sum(card.get("value", 0) for card in must_select)
    must_count = len(must_select)
    remaining_sum = target_sum - must_sum
    remaining_min = max(0, min_select - must_count)
    if mode == 1 or max_select == 0:
        # at-least prompts carry no upper bound (max is sent as 0)
        remaining_max = len(can_select)
    else:
        remaining_max = max(0, max_select - must_count)

    valid_combos: List[List[int]] = []
    if remaining_min == 0 and (remaining_sum == 0 or (mode == 1 and remaining_sum <= 0)):
        valid_combos.append([])

    weights = [card_weights(card) for card in can_select]

    if mode == 0:
        if remaining_sum <= 0:
            return valid_combos
        found = combinations_with_weight2(weights, remaining_sum)
    else:
        _check_size(len(weights))
        found = []
        for k in range(1, len(weights) + 1):
            for comb in combinations(len(weights), k):
                choices = product(*(weights[i] for i in comb))
                if any(sum(levels) >= remaining_sum for levels in choices):
                    found.append(comb)

    valid_combos.extend(c for c in found if remaining_min <= len(c) <= remaining_max)
    return valid_combos


__all__ = [
    'MAX_SUM_ITEMS',
    'combinations',
    'sum_to',
    'combinations_with_weight',
    'sum_to2',
    'combinations_with_weight2',
    'card_weights',
    'find_valid_sum_combinations',
]
