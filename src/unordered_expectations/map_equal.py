"""Does code return a named collection equivalent to the expected mapping?

check_mapequal() verifies that `object` and `expected` have the same names,
and that `object` reindexed by the names of `expected` equals `expected`.
The order in which the names appear is irrelevant.
"""


import logging
from typing import Any, Callable, Dict, List, Optional
import warnings

from unordered_expectations.equality import check_equal
from unordered_expectations.exception import (ExpectationWarning,
                                              InvalidArgument)
from unordered_expectations.label import quasi_label
from unordered_expectations.list_set import (compare_list_sets,
                                             list_set_difference)
from unordered_expectations.names import (is_vector, names_of,
                                          validate_names, values_of)
from unordered_expectations.outcome import (Outcome, Reporter, StopReporter,
                                            fail, succeed)
from unordered_expectations.values import render_value


logger = logging.getLogger(__name__)


# Signature of the delegated deep-equality check: (actual, expected)
EqualCheck = Callable[[Any, Any], Outcome]


def _as_dict(obj: Any) -> Dict[Any, Any]:
    """Project a vector with validated (unique) names onto a dict"""
    return dict(zip(names_of(obj), values_of(obj)))


def check_mapequal(object: Any,  # pylint: disable=redefined-builtin
                   expected: Any,
                   object_label: Optional[str] = None,
                   expected_label: Optional[str] = None,
                   equal_check: EqualCheck = check_equal,
                   stacklevel: int = 2) -> Outcome:
    """Compare two named vectors irrespective of name order

    Raises InvalidArgument if either side is not a vector, or (unless both
    are empty) if either side has duplicate or missing names. When the names
    match, the values are compared by equal_check and its Outcome is
    returned as-is.
    """

    act = quasi_label(object, object_label)
    exp = quasi_label(expected, expected_label)

    if not is_vector(act.value) or not is_vector(exp.value):
        raise InvalidArgument('`object` and `expected` must both be vectors')

    # Length-0 vectors are OK whether named or unnamed
    if len(act.value) == 0 and len(exp.value) == 0:
        logger.debug('Both %s and %s are empty', act.label, exp.label)
        warnings.warn('`object` and `expected` are empty lists',
                      ExpectationWarning,
                      stacklevel=stacklevel)
        return succeed()

    act_names = names_of(act.value)
    exp_names = names_of(exp.value)

    validate_names(act_names, "object")
    validate_names(exp_names, "expected")

    if not compare_list_sets(act_names, exp_names):
        lines: List[str] = []

        act_miss = list_set_difference(exp_names, act_names)
        if len(act_miss) > 0:
            lines.append(f'Names absent from `object`: '
                         f'{", ".join(map(render_value, act_miss))}')

        exp_miss = list_set_difference(act_names, exp_names)
        if len(exp_miss) > 0:
            lines.append(f'Names absent from `expected`: '
                         f'{", ".join(map(render_value, exp_miss))}')

        logger.debug('Names of %s and %s differ', act.label, exp.label)
        return fail("\n".join(lines))

    act_map = _as_dict(act.value)
    reindexed = {name: act_map[name] for name in exp_names}
    logger.debug('Names of %s and %s match; delegating %d values',
                 act.label, exp.label, len(reindexed))
    return equal_check(reindexed, _as_dict(exp.value))


def expect_mapequal(object: Any,  # pylint: disable=redefined-builtin
                    expected: Any,
                    object_label: Optional[str] = None,
                    expected_label: Optional[str] = None,
                    reporter: Optional[Reporter] = None,
                    equal_check: EqualCheck = check_equal) -> Any:
    """Check map equality, report the Outcome and hand back `object`"""

    if reporter is None:
        reporter = StopReporter()
    reporter.add_result(check_mapequal(object, expected,
                                       object_label=object_label,
                                       expected_label=expected_label,
                                       equal_check=equal_check,
                                       stacklevel=3))
    return object
