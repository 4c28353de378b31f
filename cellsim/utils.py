from typing import List, TypeVar

T = TypeVar("T")


def clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def swap_remove(items: List[T], index: int) -> T:
    """Remove items[index] in O(1) by moving the last element into its slot.

    Does not preserve order.
    """
    last = items.pop()
    if index == len(items):
        return last
    removed = items[index]
    items[index] = last
    return removed
