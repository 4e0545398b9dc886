"""
generic in-place routines that only use len(data), data.swap(i, j) and data.less(i, j).
ranges are half-open: [a, b).
"""
from __future__ import annotations
from .types import *


def insertion_sort(data, a: int, b: int) -> None:
    for i in range(a + 1, b):
        j = i
        while j > a and data.less(j, j - 1):
            data.swap(j, j - 1)
            j -= 1


# --- heap sort, used when quicksort recursion gets too deep ---

def _sift_down(data, lo: int, hi: int, first: int) -> None:
    root = lo
    while True:
        child = 2 * root + 1
        if child >= hi:
            return
        if child + 1 < hi and data.less(first + child, first + child + 1):
            child += 1
        if not data.less(first + root, first + child):
            return
        data.swap(first + root, first + child)
        root = child


def heap_sort(data, a: int, b: int) -> None:
    first, hi = a, b - a
    for i in range((hi - 1) // 2, -1, -1):
        _sift_down(data, i, hi, first)
    for i in range(hi - 1, -1, -1):
        data.swap(first, first + i)
        _sift_down(data, 0, i, first)


# --- intro sort ---

def _median_of_three(data, m1: int, m0: int, m2: int) -> None:
    # leaves the median of the three positions at m1
    if data.less(m1, m0):
        data.swap(m1, m0)
    if data.less(m2, m1):
        data.swap(m2, m1)
        if data.less(m1, m0):
            data.swap(m1, m0)


def _partition(data, a: int, b: int) -> int:
    mid = a + (b - a) // 2
    _median_of_three(data, a, mid, b - 1)
    # pivot now sits at a
    i, j = a + 1, b - 1
    while True:
        while i <= j and data.less(i, a):
            i += 1
        while i <= j and data.less(a, j):
            j -= 1
        if i >= j:
            break
        data.swap(i, j)
        i += 1
        j -= 1
    data.swap(a, j)
    return j


def intro_sort(data, cutoff: int = 12) -> None:
    """unstable in-place sort: quicksort, heapsort past the depth limit, insertion sort for short ranges"""
    n = len(data)
    if n < 2:
        return
    stack = [(0, n, 2 * n.bit_length())]
    while stack:
        a, b, depth = stack.pop()
        if b - a <= cutoff:
            insertion_sort(data, a, b)
            continue
        if depth == 0:
            heap_sort(data, a, b)
            continue
        p = _partition(data, a, b)
        stack.append((a, p, depth - 1))
        stack.append((p + 1, b, depth - 1))


# --- stable sort: insertion sorted blocks merged pairwise with symmerge ---

def _swap_range(data, a: int, b: int, n: int) -> None:
    for k in range(n):
        data.swap(a + k, b + k)


def rotate(data, a: int, m: int, b: int) -> None:
    """rotates [a, m) and [m, b) so that [m, b) comes first, using block swaps"""
    i, j = m - a, b - m
    while i != j:
        if i > j:
            _swap_range(data, m - i, m, j)
            i -= j
        else:
            _swap_range(data, m - i, m + j - i, i)
            j -= i
    _swap_range(data, m - i, m, i)


def _bisect(data, lo: int, hi: int, go_right) -> int:
    while lo < hi:
        h = (lo + hi) // 2
        if go_right(h):
            lo = h + 1
        else:
            hi = h
    return lo


def sym_merge(data, a: int, m: int, b: int) -> None:
    """stable in-place merge of the sorted ranges [a, m) and [m, b)"""
    if m - a == 1:
        # single element on the left: find its slot in the right run, then bubble it there
        i = _bisect(data, m, b, lambda h: data.less(h, a))
        for k in range(a, i - 1):
            data.swap(k, k + 1)
        return
    if b - m == 1:
        i = _bisect(data, a, m, lambda h: not data.less(m, h))
        for k in range(m, i, -1):
            data.swap(k, k - 1)
        return

    mid = (a + b) // 2
    n = mid + m
    if m > mid:
        start, r = n - b, mid
    else:
        start, r = a, m
    p = n - 1
    start = _bisect(data, start, r, lambda c: not data.less(p - c, c))

    end = n - start
    if start < m < end:
        rotate(data, start, m, end)
    if a < start < mid:
        sym_merge(data, a, start, mid)
    if mid < end < b:
        sym_merge(data, mid, end, b)


def stable_sort(data, block_size: int = 20) -> None:
    """stable in-place sort that moves elements only through swaps"""
    n = len(data)
    a, b = 0, block_size
    while b <= n:
        insertion_sort(data, a, b)
        a, b = b, b + block_size
    insertion_sort(data, a, n)

    while block_size < n:
        a, b = 0, 2 * block_size
        while b <= n:
            sym_merge(data, a, a + block_size, b)
            a, b = b, b + 2 * block_size
        m = a + block_size
        if m < n:
            sym_merge(data, a, m, n)
        block_size *= 2


# --- shuffle ---

def fisher_yates(data, draw: Draw) -> None:
    """
    in-place shuffle; draw(n) must return a uniform integer in [0, n).
    every index is drawn before the first swap, so a failing draw leaves data untouched.
    """
    positions = range(len(data) - 1, 0, -1)
    picks = [draw(i + 1) for i in positions]
    for i, j in zip(positions, picks):
        if i != j:
            data.swap(i, j)
