"""Classic algorithms over integer sequences."""

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate, combinations
from operator import xor


def concatenate(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return [*nums, *nums]


def max_area(height: Sequence[int]) -> int:
    """Return the most water two lines of ``height`` can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """Return the largest total among the customers' accounts (never below 0)."""
    return max((sum(row) for row in accounts), default=0) if accounts else 0


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def distinct_values(arr: Sequence[int]) -> set[int]:
    """Return the set of distinct values in ``arr``."""
    return set(arr)


def count_distinct(arr: Sequence[int]) -> int:
    """Return how many distinct values ``arr`` holds."""
    return len(distinct_values(arr))


def find_max(arr: Sequence[int]) -> int:
    """Return the largest value; raise ValueError on an empty sequence."""
    if not arr:
        raise ValueError("find_max() of an empty sequence")
    best = arr[0]
    for value in arr:
        if value > best:
            best = value
    return best


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
            continue
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return rows


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable from the first."""
    final = len(nums) - 1
    for index in range(len(nums) - 2, -1, -1):
        if index + nums[index] >= final:
            final = index
    return final == 0


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps needed to reach the last index."""
    if len(nums) == 1:
        return 0
    destination = len(nums) - 1
    jumps = coverage = last_jump = 0
    for index, step in enumerate(nums):
        coverage = max(coverage, index + step)
        if index == last_jump:
            last_jump = coverage
            jumps += 1
            if coverage >= destination:
                return jumps
    return jumps


def longest_zero_sum_subarray(arr: Sequence[int]) -> int:
    """Return the length of the longest run whose prefix sum repeats an earlier prefix sum."""
    first_seen: dict[int, int] = {}
    total = best = 0
    for index, value in enumerate(arr):
        total += value
        if total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time, or -1 if none does."""
    half = len(nums) // 2
    for value, count in Counter(nums).items():
        if count > half:
            return value
    return -1


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous subarray (0 for no input)."""
    if not nums:
        return 0
    low = high = best = nums[0]
    for value in nums[1:]:
        low, high = (
            min(value, value * low, value * high),
            max(value, value * high, value * low),
        )
        best = max(best, high)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the profit from buying and selling on every rise."""
    return sum(max(today - yesterday, 0) for yesterday, today in zip(prices, prices[1:]))


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray() of an empty sequence")
    best = nums[0]
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        current = max(current, 0)
    return best


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    return list(accumulate(nums))


def single_number(nums: Sequence[int]) -> int:
    """Return the value that is not paired, given every other value occurs twice."""
    return reduce(xor, nums, 0)


def subarray_sum_count(nums: Sequence[int], k: int) -> int:
    """Return how many contiguous subarrays sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    total = found = 0
    for value in nums:
        total += value
        found += prefix_counts[total - k]
        prefix_counts[total] += 1
    return found


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first pair of indices whose values add up to ``target``, or []."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return []


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices of two values of ascending ``numbers`` summing to ``target``, or []."""
    start, end = 0, len(numbers) - 1
    while start < end:
        current = numbers[start] + numbers[end]
        if current == target:
            return [start + 1, end + 1]
        if current > target:
            end -= 1
        else:
            start += 1
    return []


def all_occurrences(arr: Sequence[int], key: int) -> list[int]:
    """Return every index at which ``key`` occurs, in ascending order."""
    return [index for index, value in enumerate(arr) if value == key]


def next_greater_elements(arr: Sequence[int]) -> list[int]:
    """Return, for each value, the next strictly greater value to its right, or -1."""
    result: list[int] = []
    stack: list[int] = []
    for value in reversed(arr):
        while stack and value >= stack[-1]:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    result.reverse()
    return result


def stock_span(stocks: Sequence[int]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price no higher."""
    spans: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(stocks):
        while stack and price >= stocks[stack[-1]]:
            stack.pop()
        spans.append(day - stack[-1] if stack else day + 1)
        stack.append(day)
    return spans


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals, ordered by start."""
    if not intervals:
        return []
    ordered = sorted(intervals, key=lambda interval: interval[0])
    merged = [list(ordered[0])]
    for start, end in ordered[1:]:
        last = merged[-1]
        if last[1] < start:
            merged.append([start, end])
        else:
            last[1] = max(last[1], end)
    return merged