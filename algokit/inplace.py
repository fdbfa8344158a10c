"""Algorithms that rearrange a list in place."""

from collections.abc import MutableSequence, Sequence


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into ``nums1``, whose first ``m`` values are sorted."""
    i, j, k = m - 1, n - 1, m + n - 1
    while j >= 0:
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact sorted ``nums`` so each value appears once; return the kept length."""
    if not nums:
        return 0
    kept = 1
    for value in list(nums[1:]):
        if value != nums[kept - 1]:
            nums[kept] = value
            kept += 1
    return kept


def remove_duplicates_at_most_twice(nums: MutableSequence[int]) -> int:
    """Compact sorted ``nums`` so each value appears at most twice; return the kept length."""
    if len(nums) <= 2:
        return len(nums)
    kept = 1
    for value in list(nums[1:]):
        if kept == 1 or value != nums[kept - 2]:
            nums[kept] = value
            kept += 1
    return kept


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move the values other than ``val`` to the front, keeping order; return their count."""
    kept = 0
    for value in list(nums):
        if value != val:
            nums[kept] = value
            kept += 1
    return kept


def reverse_in_place(s: MutableSequence) -> None:
    """Reverse ``s`` in place."""
    s.reverse()


def merge_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place, stably, by recursive merging."""
    _sort(arr, 0, len(arr) - 1)


def _sort(arr: MutableSequence[int], low: int, high: int) -> None:
    if low >= high:
        return
    mid = (low + high) // 2
    _sort(arr, low, mid)
    _sort(arr, mid + 1, high)
    arr[low:high + 1] = _merge(arr[low:mid + 1], arr[mid + 1:high + 1])


def _merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged