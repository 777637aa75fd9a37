"""Does code return a collection containing the expected values?

check_setequal() verifies that every element of `object` occurs somewhere in
`expected`, and that every element of `expected` occurs somewhere in
`object`. Order, names and repetition are all ignored.
"""


import logging
from typing import Any, List, Optional
import warnings

from unordered_expectations.exception import (ExpectationWarning,
                                              InvalidArgument)
from unordered_expectations.label import quasi_label
from unordered_expectations.list_set import list_set_difference
from unordered_expectations.names import has_names, is_vector, values_of
from unordered_expectations.outcome import (Outcome, Reporter, StopReporter,
                                            fail, succeed)
from unordered_expectations.values import format_values


logger = logging.getLogger(__name__)


def check_setequal(object: Any,  # pylint: disable=redefined-builtin
                   expected: Any,
                   object_label: Optional[str] = None,
                   expected_label: Optional[str] = None,
                   stacklevel: int = 2) -> Outcome:
    """Compare two vectors as sets, returning the Outcome

    Raises InvalidArgument if either side is not a vector. If both sides
    carry names, an ExpectationWarning is issued because they are ignored;
    stacklevel is passed on to warnings.warn.
    """

    act = quasi_label(object, object_label)
    exp = quasi_label(expected, expected_label)

    if not is_vector(act.value) or not is_vector(exp.value):
        raise InvalidArgument('`object` and `expected` must both be vectors')

    if has_names(act.value) and has_names(exp.value):
        logger.debug('Ignoring names on %s and %s', act.label, exp.label)
        warnings.warn('expect_setequal() ignores names',
                      ExpectationWarning,
                      stacklevel=stacklevel)

    act_values = values_of(act.value)
    exp_values = values_of(exp.value)
    act_miss = list_set_difference(act_values, exp_values)
    exp_miss = list_set_difference(exp_values, act_values)

    logger.debug('%d value(s) only in %s and %d value(s) only in %s',
                 len(act_miss), act.label, len(exp_miss), exp.label)

    if len(act_miss) == 0 and len(exp_miss) == 0:
        return succeed()

    lines: List[str] = [f"{act.label} (`actual`) and {exp.label} "
                        f"(`expected`) don't have the same values."]
    if len(act_miss) > 0:
        lines.append(f"* Only in `actual`:   {format_values(act_miss)}")
    if len(exp_miss) > 0:
        lines.append(f"* Only in `expected`: {format_values(exp_miss)}")
    return fail("\n".join(lines))


def expect_setequal(object: Any,  # pylint: disable=redefined-builtin
                    expected: Any,
                    object_label: Optional[str] = None,
                    expected_label: Optional[str] = None,
                    reporter: Optional[Reporter] = None) -> Any:
    """Check set equality, report the Outcome and hand back `object`

    With the default StopReporter a mismatch raises ExpectationFailure.
    Any other Reporter decides for itself; `object` is returned unchanged
    either way so that further expectations can be chained onto it.
    """

    if reporter is None:
        reporter = StopReporter()
    reporter.add_result(check_setequal(object, expected,
                                       object_label=object_label,
                                       expected_label=expected_label,
                                       stacklevel=3))
    return object
