"""Collection grouping and reduction utility functions."""

from typing import Callable, Dict, Iterable, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


def group_by(collection: Iterable[T], key_func: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Group items into an ordered multimap.

    Keys appear in first-seen order and each group keeps the relative input
    order of its members. Keys are compared by equality, so they must be
    hashable values.

    Args:
        collection: Items to group
        key_func: Function to extract the grouping key from each item

    Returns:
        Dictionary mapping each key to the list of its items
    """
    groups: Dict[K, List[T]] = {}
    for item in collection:
        groups.setdefault(key_func(item), []).append(item)
    return groups


def max_by(collection: Iterable[T], key_func: Callable[[T], float]) -> Optional[T]:
    """
    Find the item with the greatest key.

    The running maximum starts at the first item and is only replaced by a
    strictly greater key, so ties resolve to the earliest item.

    Args:
        collection: Items to scan
        key_func: Function to extract the comparison key

    Returns:
        The maximal item, or None if the collection is empty
    """
    best: Optional[T] = None
    best_key = None
    found = False
    for item in collection:
        item_key = key_func(item)
        if not found or item_key > best_key:
            best = item
            best_key = item_key
            found = True
    return best


def count_by(collection: Iterable[T], key_func: Callable[[T], K]) -> Dict[K, int]:
    """
    Count items per key.

    Args:
        collection: Items to count
        key_func: Function to extract the key from each item

    Returns:
        Dictionary of key to number of items
    """
    counts: Dict[K, int] = {}
    for item in collection:
        key = key_func(item)
        counts[key] = counts.get(key, 0) + 1
    return counts
