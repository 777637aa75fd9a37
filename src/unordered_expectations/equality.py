"""Generic one-level equality check, used as the default map delegate"""


from collections import abc
import logging
from typing import Any, List, Optional

from unordered_expectations.label import safe_repr
from unordered_expectations.list_set import same_value
from unordered_expectations.outcome import Outcome, fail, succeed
from unordered_expectations.values import render_value


logger = logging.getLogger(__name__)


def describe_differences(actual: Any, expected: Any) -> List[str]:
    """One line per differing component of two values

    Two mappings are compared key by key (in the order of expected's keys)
    and each mismatching value gets its own line. Anything else is described
    as a whole.
    """

    if isinstance(actual, abc.Mapping) and isinstance(expected, abc.Mapping):
        lines: List[str] = []
        for name, expected_value in expected.items():
            if name not in actual:
                lines.append(f'Component {render_value(name)}: '
                             f'absent from actual')
            elif not same_value(actual[name], expected_value):
                lines.append(f'Component {render_value(name)}: '
                             f'{safe_repr(actual[name], short=True)} != '
                             f'{safe_repr(expected_value, short=True)}')
        for name in actual.keys():
            if name not in expected:
                lines.append(f'Component {render_value(name)}: '
                             f'absent from expected')
        return lines

    return [f'{safe_repr(actual, short=True)} != '
            f'{safe_repr(expected, short=True)}']


def check_equal(actual: Any,
                expected: Any,
                actual_label: Optional[str] = None,
                expected_label: Optional[str] = None) -> Outcome:
    """Compare two values with == and describe any mismatch

    Two NaNs are considered equal, including NaN values of a mapping.
    """

    differences: List[str] = []
    if isinstance(actual, abc.Mapping) and isinstance(expected, abc.Mapping):
        differences = describe_differences(actual, expected)
    elif not same_value(actual, expected):
        differences = describe_differences(actual, expected)

    if len(differences) == 0:
        return succeed()

    if actual_label is None:
        actual_label = '`actual`'
    if expected_label is None:
        expected_label = '`expected`'

    logger.debug('%s and %s differ in %d component(s)',
                 actual_label, expected_label, len(differences))
    return fail("\n".join([f'{actual_label} not equal to {expected_label}.']
                          + differences))
