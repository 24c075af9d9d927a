"""Array and list problems: sliding windows, two pointers and counting."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, groupby, pairwise


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` with ``i < j`` and ``nums[i] + nums[j] == target``, or ``[]``."""
    seen: dict[int, int] = {}
    for j, x in enumerate(nums):
        complement = target - x
        if complement in seen:
            return [seen[complement], j]
        seen[x] = j
    return []


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones obtainable by flipping at most ``k`` zeros."""
    best = 0
    left = 0
    zeros = 0
    for right, x in enumerate(nums):
        if x == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def max_area(height: Sequence[int]) -> int:
    """Largest water area held between two of the vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def unique_occurrences(arr: Sequence[int]) -> bool:
    """Whether every distinct value occurs a different number of times."""
    counts = Counter(arr)
    return len(set(counts.values())) == len(counts)


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether the extra candies would give them the most."""
    most = max(candies, default=-1)
    return [c + extra_candies >= most for c in candies]


def longest_subarray(nums: Sequence[int]) -> int:
    """Longest run of ones left after deleting exactly one element."""
    runs = [len(list(group)) for key, group in groupby(nums, key=lambda x: x == 1) if key]
    segments: list[int] = []
    current = 0
    for x in nums:
        if x == 1:
            current += 1
        else:
            segments.append(current)
            current = 0
    segments.append(current)
    if len(segments) == 1:
        return max(0, segments[0] - 1)
    del runs
    return max(a + b for a, b in pairwise(segments))


def max_operations(nums: Sequence[int], k: int) -> int:
    """Greatest number of disjoint pairs summing to ``k`` that can be removed."""
    freq = Counter(nums)
    operations = 0
    for x in nums:
        target = k - x
        if target == x:
            if freq[x] > 1:
                freq[x] -= 2
                operations += 1
        elif freq[x] > 0 and freq[target] > 0:
            freq[x] -= 1
            freq[target] -= 1
            operations += 1
    return operations


def largest_altitude(gain: Sequence[int]) -> int:
    """Highest altitude reached starting from 0 and applying each gain."""
    return max(0, *accumulate(gain)) if gain else 0


def find_difference(nums1: Sequence[int], nums2: Sequence[int]) -> list[list[int]]:
    """Distinct values only in ``nums1``, and distinct values only in ``nums2``."""
    set1, set2 = set(nums1), set(nums2)
    return [
        [x for x in dict.fromkeys(nums1) if x not in set2],
        [x for x in dict.fromkeys(nums2) if x not in set1],
    ]


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Number of (row, column) pairs of a square grid that hold the same values."""
    rows = Counter(tuple(row) for row in grid)
    return sum(rows[column] for column in zip(*grid))


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Each position's product of every other element, without division."""
    prefix = [1, *accumulate(nums, lambda a, b: a * b)][:-1] if nums else []
    result = list(prefix)
    suffix = 1
    for i in reversed(range(len(nums))):
        result[i] *= suffix
        suffix *= nums[i]
    return result


def remove_duplicates(nums: list[int]) -> int:
    """Move the first occurrence of each value to the front in place; return their count."""
    seen: set[int] = set()
    k = 0
    for j, x in enumerate(nums):
        if x not in seen:
            seen.add(x)
            nums[k], nums[j] = nums[j], nums[k]
            k += 1
    return k


def remove_element(nums: list[int], val: int) -> int:
    """Move every element other than ``val`` to the front in place; return their count."""
    k = 0
    for j, x in enumerate(nums):
        if x != val:
            nums[k], nums[j] = nums[j], nums[k]
            k += 1
    return k


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other elements."""
    k = 0
    for j, x in enumerate(nums):
        if x != 0:
            nums[k], nums[j] = nums[j], nums[k]
            k += 1


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Whether some ``i < j < k`` has ``nums[i] < nums[j] < nums[k]``."""
    first = second = math.inf
    for x in nums:
        if x <= first:
            first = x
        elif x <= second:
            second = x
        else:
            return True
    return False


def compress(chars: list[str]) -> int:
    """Run-length encode ``chars`` in place at its front; return the encoded length."""
    encoded: list[str] = []
    for char, group in groupby(list(chars)):
        run = sum(1 for _ in group)
        encoded.append(char)
        if run > 1:
            encoded.extend(str(run))
    chars[: len(encoded)] = encoded
    return len(encoded)


def find_lhs(nums: Sequence[int]) -> int:
    """Length of the longest subsequence whose maximum and minimum differ by exactly 1."""
    ordered = sorted(nums)
    left = 0
    best = 0
    for right, x in enumerate(ordered):
        while x - ordered[left] > 1:
            left += 1
        if ordered[left] != x:
            best = max(best, right - left + 1)
    return best


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Whether ``n`` flowers fit into empty plots with no two plots adjacent."""
    bed = list(flowerbed)
    last = len(bed) - 1
    for i, plot in enumerate(bed):
        if plot == 0:
            left_free = i == 0 or bed[i - 1] == 0
            right_free = i == last or bed[i + 1] == 0
            if left_free and right_free:
                bed[i] = 1
                n -= 1
    return n <= 0


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest average of a contiguous window of length ``k``."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"window length {k} must be between 1 and {len(nums)}")
    window = sum(nums[:k])
    best = window
    for outgoing, incoming in zip(nums, nums[k:]):
        window += incoming - outgoing
        best = max(best, window)
    return best / k


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for i, x in enumerate(nums):
        if 2 * left + x == total:
            return i
        left += x
    return -1


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Asteroids left after all collisions; the sign gives the direction."""
    stack: list[int] = []
    for a in asteroids:
        survives = True
        while stack and stack[-1] > 0 and a < 0:
            top = stack[-1]
            if abs(top) < abs(a):
                stack.pop()
                continue
            if abs(top) == abs(a):
                stack.pop()
            survives = False
            break
        if survives:
            stack.append(a)
    return stack