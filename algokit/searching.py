"""Searching in plain, sorted and rotated sorted sequences."""

from collections.abc import Sequence


def linear_search(nums: Sequence[int], target: int) -> int:
    """Return the index of the first occurrence of ``target``, or -1."""
    return next((index for index, value in enumerate(nums) if value == target), -1)


def binary_search(arr: Sequence[int], key: int) -> int:
    """Return an index of ``key`` in ascending ``arr``, or -1 if absent."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == key:
            return mid
        if arr[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated_recursive(nums: Sequence[int], target: int) -> int:
    """Recursive variant of :func:`search_rotated`."""

    def _search(left: int, right: int) -> int:
        if left > right:
            return -1
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                return _search(left, mid - 1)
            return _search(mid + 1, right)
        if nums[mid] < target <= nums[right]:
            return _search(mid + 1, right)
        return _search(left, mid - 1)

    return _search(0, len(nums) - 1)


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence that may hold duplicates."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return True
        if nums[left] == nums[mid] == nums[right]:
            left += 1
            right -= 1
        elif nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return False


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ascending ``nums`` or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return left