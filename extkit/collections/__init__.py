"""Helpers for lists, iterables and mappings."""

from .comparers import LambdaComparer
from .dicts import add_range, add_range_by, value_or_default
from .lists import (
    last_element_index,
    move_down_by_index,
    move_down_by_value,
    move_up_by_index,
    move_up_by_value,
    remove_matching,
    swap_by_index,
    swap_by_value,
)
from .sequences import (
    as_not_null,
    contains_where,
    distinct_by,
    except_by,
    for_each,
    for_each_indexed,
    index_of,
    index_where,
    intersect_by,
    is_empty,
    is_null_or_empty,
    split,
    union_by,
)

__all__ = [
    "LambdaComparer",
    "add_range",
    "add_range_by",
    "value_or_default",
    "last_element_index",
    "move_down_by_index",
    "move_down_by_value",
    "move_up_by_index",
    "move_up_by_value",
    "remove_matching",
    "swap_by_index",
    "swap_by_value",
    "as_not_null",
    "contains_where",
    "distinct_by",
    "except_by",
    "for_each",
    "for_each_indexed",
    "index_of",
    "index_where",
    "intersect_by",
    "is_empty",
    "is_null_or_empty",
    "split",
    "union_by",
]
