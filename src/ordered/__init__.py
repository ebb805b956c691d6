from .ordering import Comparer, Equality, natural_compare, natural_equals, compare_by, reverse_compare
from .setops import difference, intersect, union
from .distinct import distinct
from .join import group_join
from .search import lower_bound, upper_bound, binary_search_first, binary_search_last, insertion_point
from .container import insert_ordered, remove_ordered, OrderedSequence

__all__ = [
    "Comparer",
    "Equality",
    "natural_compare",
    "natural_equals",
    "compare_by",
    "reverse_compare",
    "difference",
    "intersect",
    "union",
    "distinct",
    "group_join",
    "lower_bound",
    "upper_bound",
    "binary_search_first",
    "binary_search_last",
    "insertion_point",
    "insert_ordered",
    "remove_ordered",
    "OrderedSequence",
]
