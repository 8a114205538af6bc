"""Exercises on sequences of integers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, groupby, pairwise


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two distinct entries of ``nums`` adding up to ``target``."""
    ordered = sorted(range(len(nums)), key=nums.__getitem__)
    low, high = 0, len(ordered) - 1
    while low < high:
        total = nums[ordered[low]] + nums[ordered[high]]
        if total == target:
            return [ordered[low], ordered[high]]
        if total < target:
            low += 1
        else:
            high -= 1
    raise ValueError(f"no two entries add up to {target}")


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] >= height[right]:
            right -= 1
        else:
            left += 1
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one purchase followed by one sale."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    profit = 0
    for price in prices:
        lowest = min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Return the best profit when any number of trades is allowed."""
    if not prices:
        raise ValueError("prices must not be empty")
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = sorted(set(nums))
    if not values:
        return 0
    longest = current = 1
    for previous, value in pairwise(values):
        current = current + 1 if value == previous + 1 else 1
        longest = max(longest, current)
    return longest


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the station from which the whole circuit can be driven, or -1."""
    gains = [g - c for g, c in zip(gas, cost, strict=True)]
    if sum(gains) < 0:
        return -1
    start = 0
    tank = 0
    for index, gain in enumerate(gains):
        tank += gain
        if tank < 0:
            tank = 0
            start = index + 1
    return start


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so that higher-rated neighbours get more."""
    count = len(ratings)
    left = [1] * count
    right = [1] * count
    for i in range(1, count):
        if ratings[i] > ratings[i - 1]:
            left[i] = left[i - 1] + 1
    for i in reversed(range(count - 1)):
        if ratings[i] > ratings[i + 1]:
            right[i] = right[i + 1] + 1
    return sum(map(max, left, right))


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Tell for each kid whether the extra candies make theirs the greatest."""
    most = max([0, *candies])
    return [amount + extra_candies >= most for amount in candies]


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two entries of sorted ``numbers`` adding to ``target``."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    raise ValueError(f"no two entries add up to {target}")


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run whose sum reaches ``target``, or 0."""
    shortest: int | None = None
    left = 0
    total = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target and left <= right:
            length = right - left + 1
            shortest = length if shortest is None else min(shortest, length)
            total -= nums[left]
            left += 1
    return shortest or 0


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest entry of ``nums`` (1-based)."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must lie between 1 and {len(nums)}")
    return sorted(nums)[len(nums) - k]


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal entries lie at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Summarise sorted ``nums`` as ranges such as ``"0->2"`` and single values."""
    ranges = []
    for _, run in groupby(enumerate(nums), key=lambda item: item[1] - item[0]):
        values = [value for _, value in run]
        first, last = values[0], values[-1]
        ranges.append(str(first) if first == last else f"{first}->{last}")
    return ranges


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other entries."""
    if not nums:
        return []
    prefix = list(accumulate(nums[:-1], lambda acc, value: acc * value, initial=1))
    suffix = list(
        accumulate(reversed(nums[1:]), lambda acc, value: acc * value, initial=1)
    )[::-1]
    return [before * after for before, after in zip(prefix, suffix)]