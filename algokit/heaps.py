"""Problems solved with priority queues and related structures."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import chain

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def linked_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def k_closest(points: Iterable[Sequence[int]], k: int) -> list[list[int]]:
    """Return the ``k`` points nearest the origin, nearest first.

    Ties in distance are broken by the coordinates.  A negative ``k``
    returns every point.
    """
    ranked = sorted(
        ((x * x + y * y, x, y) for x, y, *_ in points),
    )
    if k >= 0:
        ranked = ranked[:k]
    return [[x, y] for _, x, y in ranked]


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums``; 0 when it is empty."""
    if not nums:
        return 0
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def kth_smallest_in_matrix(matrix: Sequence[Sequence[int]], k: int) -> int:
    """Return the value that follows the ``k`` smallest entries of ``matrix``.

    In other words, the entry at zero-based rank ``k`` in ascending order.
    """
    if not matrix:
        raise IndexError("matrix has no rows")
    values = list(chain.from_iterable(matrix))
    if not 0 <= k < len(values):
        raise IndexError(f"rank {k} is outside a matrix of {len(values)} entries")
    return heapq.nsmallest(k + 1, values)[-1]


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones together until at most one is left,
    and return its weight, or 0 if none is."""
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, second - heaviest)
    return -heap[0] if heap else 0


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Return a new list with every value of ``lists`` in ascending order."""
    values = chain.from_iterable(node for node in lists if node is not None)
    return linked_list(sorted(values))


def find_relative_ranks(score: Sequence[int]) -> list[str]:
    """Give each athlete a medal name or their placing as a string.

    Equal scores are ranked with the later athlete first.
    """
    order = sorted(range(len(score)), key=lambda i: (score[i], i), reverse=True)
    ranks = [""] * len(score)
    for place, athlete in enumerate(order):
        ranks[athlete] = _MEDALS[place] if place < len(_MEDALS) else str(place + 1)
    return ranks


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of each window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    window: deque[int] = deque()
    result: list[int] = []
    for right, num in enumerate(nums):
        while window and window[-1] < num:
            window.pop()
        window.append(num)
        left = right - k + 1
        if left >= 0:
            result.append(window[0])
            if window[0] == nums[left]:
                window.popleft()
    return result


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Values seen equally often are listed larger value first.
    """
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}, got {k}")
    top = heapq.nlargest(k, counts.items(), key=lambda item: (item[1], item[0]))
    return [value for value, _ in top]