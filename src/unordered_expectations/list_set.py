"""Set arithmetic on an unhashable List object"""


import math
from operator import eq, truth
from typing import Any, List


def same_value(value_a: Any, value_b: Any) -> bool:
    """Equality which, unlike ==, considers any two float NaNs to match

    Identity is checked first, just as the `in` operator does.
    """

    if value_a is value_b:
        return True
    if isinstance(value_a, float) and isinstance(value_b, float):
        if math.isnan(value_a) and math.isnan(value_b):
            return True
    return truth(eq(value_a, value_b))


def contains(list_a: List[Any], item: Any) -> bool:
    """Membership test which only relies upon __eq__ (and NaN matching)"""
    return any(map(lambda x: same_value(x, item), list_a))


def list_set_difference(list_a: List[Any], list_b: List[Any]) -> List[Any]:
    """Elements of list_a which do not occur anywhere in list_b

    The elements inside of the "sets" are comparable (e.g., they implement
    __eq__) but they are either mutable or otherwise not hashable, and so
    they cannot be thrown into a native set() and compared that way. Order
    and repetition in list_a are preserved in the result.

    This straightforward algorithm assumes that the lists aren't very big.
    """

    return list(filter(lambda x: not contains(list_b, x), list_a))


def compare_list_sets(list_a: List[Any], list_b: List[Any]) -> bool:
    """Compare two "sets" which are actually just Lists of unhashable objects

    Only membership matters: an element which appears three times in list_a
    and once in list_b is considered to be matched.
    """

    return (len(list_set_difference(list_a, list_b)) == 0 and
            len(list_set_difference(list_b, list_a)) == 0)
