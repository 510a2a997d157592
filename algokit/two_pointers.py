"""Two-pointer techniques over sequences and strings."""

from __future__ import annotations

from collections.abc import Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct triplets of ``nums`` that sum to zero.

    Each triplet is in ascending order, and the triplets are ordered by
    their first and then their second element.  The input is not modified.
    """
    ordered = sorted(nums)
    last = len(ordered) - 1
    result: list[list[int]] = []
    previous: int | None = None

    for i, first in enumerate(ordered[:-1]):
        if first == previous:
            continue
        previous = first
        left, right = i + 1, last
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                result.append([first, ordered[left], ordered[right]])
                while left < right and ordered[left] == ordered[left + 1]:
                    left += 1
                while left < right and ordered[right] == ordered[right - 1]:
                    right -= 1
                left += 1
                right -= 1
    return result


def max_area(height: Sequence[int]) -> int:
    """Return the largest water area held between two of the given lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[right] > height[left]:
            left += 1
        else:
            right -= 1
    return best


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Return the squares of an ascending sequence, in ascending order."""
    left, right = 0, len(nums) - 1
    descending: list[int] = []
    while left <= right:
        if abs(nums[left]) > abs(nums[right]):
            descending.append(nums[left] * nums[left])
            left += 1
        else:
            descending.append(nums[right] * nums[right])
            right -= 1
    descending.reverse()
    return descending


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` traps."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if height[left] < height[right]:
            if height[left] > left_max:
                left_max = height[left]
            else:
                water += left_max - height[left]
            left += 1
        else:
            if height[right] > right_max:
                right_max = height[right]
            else:
                water += right_max - height[right]
            right -= 1
    return water


def two_sum_sorted(nums: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two entries of an ascending
    sequence that add up to ``target``, or an empty list if none do."""
    left, right = 0, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            return [left + 1, right + 1]
        if total > target:
            right -= 1
        else:
            left += 1
    return []


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, looking only at ASCII
    letters and digits and ignoring case."""
    kept = [char.lower() for char in s if _is_ascii_alnum(char)]
    return kept == kept[::-1]