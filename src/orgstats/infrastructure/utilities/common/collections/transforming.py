"""Collection transformation utility functions."""

from typing import Any, Callable, Dict, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def map_values(
    collection: Dict[K, V], transform_func: Callable[[V], Any]
) -> Dict[K, Any]:
    """
    Transform dictionary values.

    Args:
        collection: Dictionary to transform
        transform_func: Function to transform values

    Returns:
        Dictionary with transformed values
    """
    return {key: transform_func(value) for key, value in collection.items()}
