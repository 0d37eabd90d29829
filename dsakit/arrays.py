"""Array problems: subarray sums, monotonic stacks, searches and small DP."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def _require_items(values: Sequence) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def max_subarray(values: Sequence[int]) -> tuple[int, int, int]:
    """Kadane's algorithm: return ``(best_sum, start, end)`` of the best run."""
    _require_items(values)
    best = None
    running = 0
    start = end = candidate = 0
    for i, value in enumerate(values):
        running += value
        if best is None or best < running:
            best, start, end = running, candidate, i
        if running < 0:
            running = 0
            candidate = i + 1
    return best, start, end


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    _require_items(values)
    best = None
    running = 0
    for value in values:
        running += value
        if best is None or best < running:
            best = running
        if running < 0:
            running = 0
    return best


def _crossing_sum(values: Sequence[int], low: int, mid: int, high: int) -> int:
    total, left_best = 0, -1
    for i in range(mid, low - 1, -1):
        total += values[i]
        left_best = max(left_best, total)
    total, right_best = 0, -1
    for i in range(mid + 1, high + 1):
        total += values[i]
        right_best = max(right_best, total)
    return left_best + right_best


def _divide(values: Sequence[int], low: int, high: int) -> int:
    if low == high:
        return values[low]
    mid = (low + high) // 2
    return max(
        _divide(values, low, mid),
        _divide(values, mid + 1, high),
        _crossing_sum(values, low, mid, high),
    )


def max_subarray_sum_divide(values: Sequence[int]) -> int:
    """Divide-and-conquer maximum subarray sum.

    The crossing part starts each half from -1, so sequences holding only
    negative numbers may report a larger value than Kadane's algorithm.
    """
    _require_items(values)
    return _divide(values, 0, len(values) - 1)


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """For each item, the first later item strictly greater, or -1."""
    result = [-1] * len(values)
    pending: list[int] = []
    for i, value in enumerate(values):
        while pending and values[pending[-1]] < value:
            result[pending.pop()] = value
        pending.append(i)
    return result


def stock_spans(prices: Sequence[int]) -> list[int]:
    """Days up to and including each day whose price did not exceed that day's."""
    spans: list[int] = []
    pending: list[int] = []
    for i, price in enumerate(prices):
        while pending and prices[pending[-1]] <= price:
            pending.pop()
        spans.append(i - pending[-1] if pending else i + 1)
        pending.append(i)
    return spans


def find_bitonic_peak(values: Sequence[int]) -> int:
    """Index of the maximum of a strictly increasing-then-decreasing sequence."""
    _require_items(values)
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        rises_in = mid == 0 or values[mid] > values[mid - 1]
        falls_out = mid == len(values) - 1 or values[mid] > values[mid + 1]
        if rises_in and falls_out:
            return mid
        if rises_in:
            low = mid + 1
        elif falls_out:
            high = mid - 1
        else:
            raise ValueError("sequence is not strictly bitonic")
    raise ValueError("sequence is not strictly bitonic")


def _binary_search(values: Sequence[int], low: int, high: int, key: int, ascending: bool) -> int | None:
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if (values[mid] > key) == ascending:
            high = mid - 1
        else:
            low = mid + 1
    return None


def search_bitonic(values: Sequence[int], key: int) -> int | None:
    """Index of ``key`` in a bitonic sequence, or None if it is absent."""
    peak = find_bitonic_peak(values)
    if values[peak] == key:
        return peak
    if values[peak] < key:
        return None
    found = _binary_search(values, 0, peak, key, ascending=True)
    if found is not None:
        return found
    return _binary_search(values, peak, len(values) - 1, key, ascending=False)


def find_pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """First pair (in index order) of distinct positions summing to ``target``."""
    for i, first in enumerate(values):
        for second in values[i + 1:]:
            if first + second == target:
                return first, second
    return None


def kth_smallest(values: Sequence[int], k: int) -> int:
    """The k-th smallest item (1-based); a k past the end gives the maximum."""
    _require_items(values)
    if k < 1:
        raise ValueError("k must be at least 1")
    return heapq.nsmallest(k, values)[-1]


def smallest_missing(values: Sequence[int]) -> int | None:
    """Smallest non-negative integer below ``max(values)`` that is absent.

    Returns None when every such integer is present.
    """
    _require_items(values)
    present = {v for v in values if v >= 0}
    return next((i for i in range(max(values)) if i not in present), None)


def long_sequence_count(values: Sequence[int], target: int) -> int:
    """Fewest leading items of ``values`` repeated forever whose sum exceeds ``target``."""
    total = sum(values)
    if total <= 0:
        raise ValueError("values must have a positive sum")
    repeats = target // total
    covered = repeats * total
    count = repeats * len(values)
    for value in values:
        if covered >= target:
            break
        covered += value
        count += 1
    if covered == target:
        count += 1
    return count


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        best = 1
        for j in range(i):
            if value > values[j] and lengths[j] + 1 > best:
                best = lengths[j] + 1
        lengths.append(best)
    return max(lengths, default=0)


def find_celebrity(matrix: Sequence[Sequence[int]]) -> int | None:
    """Person known by everyone and knowing nobody, or None.

    ``matrix[i][j] == 1`` means that person i knows person j.  If several
    people qualify, the last one is returned.
    """
    size = len(matrix)
    celebrity = None
    for i in range(size):
        known_by = sum(
            1
            for j in range(size)
            if j != i and matrix[j][i] == 1 and matrix[i][j] == 0
        )
        if known_by == size - 1:
            celebrity = i
    return celebrity