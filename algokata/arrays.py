"""Exercises on lists of integers, several of which work in place."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence


def remove_duplicates(nums: list[int]) -> int:
    """Compact sorted ``nums`` so its first entries are unique; return their count."""
    written = 0
    for value in nums:
        if written == 0 or value != nums[written - 1]:
            nums[written] = value
            written += 1
    return written


def remove_element(nums: list[int], val: int) -> int:
    """Move the entries other than ``val`` to the front, in order; return their count."""
    written = 0
    for value in nums:
        if value != val:
            nums[written] = value
            written += 1
    return written


def buy_choco(prices: Sequence[int], money: int) -> int:
    """Return the money left after buying the two cheapest chocolates, if affordable."""
    if len(prices) < 2:
        raise ValueError("at least two prices are needed")
    cost = sum(heapq.nsmallest(2, prices))
    return money - cost if cost <= money else money


def h_index(citations: Sequence[int]) -> int:
    """Return the largest h such that h papers have at least h citations each."""
    ordered = sorted(citations)
    count = len(ordered)
    return next(
        (count - i for i, cited in enumerate(ordered) if cited >= count - i), 0
    )


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end, in place, keeping the other entries in order."""
    written = 0
    for value in nums:
        if value != 0:
            nums[written] = value
            written += 1
    nums[written:] = [0] * (len(nums) - written)


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` holds."""
    if not height:
        return 0
    water = 0
    left, right = 0, len(height) - 1
    left_max, right_max = height[left], height[right]
    while left < right:
        if left_max < right_max:
            water += left_max - height[left]
            left += 1
            left_max = max(left_max, height[left])
        else:
            water += right_max - height[right]
            right -= 1
            right_max = max(right_max, height[right])
    return water


def find_min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Return the fewest vertical arrows that burst every balloon ``[start, end]``."""
    if not points:
        raise ValueError("there must be at least one balloon")
    ordered = sorted(points, key=lambda point: point[1])
    arrows = 1
    last_end = ordered[0][1]
    for start, end in ordered:
        if start > last_end:
            arrows += 1
            last_end = end
    return arrows


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable from the first by the given jumps."""
    goal = len(nums) - 1
    for index in reversed(range(goal)):
        if index + nums[index] >= goal:
            goal = index
    return goal == 0


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Return how many contiguous runs of ``nums`` sum to ``k``."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the digits of the number one larger than the one ``digits`` spells."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]