"""Collection utility functions organized by responsibility."""

from orgstats.infrastructure.utilities.common.collections.filtering import (
    distinct,
    filter_by,
)
from orgstats.infrastructure.utilities.common.collections.grouping import (
    count_by,
    group_by,
    max_by,
)
from orgstats.infrastructure.utilities.common.collections.transforming import (
    map_values,
)

__all__ = [
    "count_by",
    "distinct",
    "filter_by",
    "group_by",
    "map_values",
    "max_by",
]
