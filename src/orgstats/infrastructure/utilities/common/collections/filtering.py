"""Collection filtering utility functions."""

from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")


def filter_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """
    Filter collection by predicate.

    Args:
        collection: Collection to filter
        predicate: Function returning True for items to keep

    Returns:
        List of matching items in input order
    """
    return [item for item in collection if predicate(item)]


def distinct(collection: Iterable[T]) -> List[T]:
    """
    Remove duplicates by equality while preserving first-seen order.

    Args:
        collection: Collection of hashable items

    Returns:
        List of unique items
    """
    return list(dict.fromkeys(collection))
