"""Classic sorting algorithms applied to product lists.

Every function leaves its input untouched and returns a new list.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Callable, Iterable

from greatshop.product import Product

by_price: Callable[[Product], float] = attrgetter("price")
by_rating: Callable[[Product], float] = attrgetter("rating")


def insertion_sort(products: Iterable[Product]) -> list[Product]:
    """Sort by price, inserting each product into the sorted prefix."""
    items = list(products)
    for i in range(1, len(items)):
        current = items[i]
        j = i
        while j > 0 and current.price < items[j - 1].price:
            items[j] = items[j - 1]
            j -= 1
        items[j] = current
    return items


def selection_sort(products: Iterable[Product]) -> list[Product]:
    """Sort by price, swapping the cheapest remaining product into place."""
    items = list(products)
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=lambda j: items[j].price)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(products: Iterable[Product]) -> list[Product]:
    """Sort by price, bubbling the cheapest product down from the end each pass."""
    items = list(products)
    n = len(items)
    for i in range(n):
        for j in range(n - 1, i, -1):
            if items[j].price < items[j - 1].price:
                items[j], items[j - 1] = items[j - 1], items[j]
    return items


def _merge(
    left: list[Product], right: list[Product], key: Callable[[Product], float]
) -> list[Product]:
    merged: list[Product] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # On a tie the right-hand product goes first.
        if key(left[i]) < key(right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(
    products: Iterable[Product], key: Callable[[Product], float] = by_price
) -> list[Product]:
    """Sort by ``key`` (price by default) with top-down merge sort."""
    items = list(products)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle], key), merge_sort(items[middle:], key), key)


def _partition(items: list[Product], left: int, right: int) -> int:
    pivot = left
    while left < right:
        if items[left].price > items[right].price:
            items[left], items[right] = items[right], items[left]
            if pivot == left:
                pivot = right
                left += 1
            else:
                pivot = left
                right -= 1
        elif pivot == left:
            right -= 1
        else:
            left += 1
    return pivot


def quick_sort(products: Iterable[Product]) -> list[Product]:
    """Sort by price with quick sort, the pivot being the first element of each range."""
    items = list(products)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            pivot = _partition(items, left, right)
            pending.append((pivot + 1, right))
            pending.append((left, pivot - 1))
    return items