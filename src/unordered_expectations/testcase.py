"""Expose the expectations as assert* methods on a unittest.TestCase"""


from typing import Any, Optional

from unordered_expectations.map_equal import check_mapequal
from unordered_expectations.outcome import Outcome
from unordered_expectations.set_equal import check_setequal


class ExpectationsMixin:
    """Mix into a unittest.TestCase to gain order-insensitive assertions

    Failures are reported through TestCase.fail(), so they surface as the
    test's own failureException. InvalidArgument propagates untouched and
    therefore shows up as an error rather than a failure.
    """

    def _report_outcome(self, outcome: Outcome, msg: Optional[str]) -> None:
        """Fail the running test if the Outcome did not pass"""
        if outcome.passed:
            return
        message = outcome.message
        if msg is not None:
            message = f'{message} : {msg}'
        self.fail(message)  # type: ignore[attr-defined]

    def assertSetEquivalent(self,  # pylint: disable=invalid-name
                            first: Any,
                            second: Any,
                            msg: Optional[str] = None) -> None:
        """Fail unless first and second contain the same set of values"""
        self._report_outcome(check_setequal(first, second,
                                            object_label='first',
                                            expected_label='second',
                                            stacklevel=3), msg)

    def assertMapEquivalent(self,  # pylint: disable=invalid-name
                            first: Any,
                            second: Any,
                            msg: Optional[str] = None) -> None:
        """Fail unless first and second have the same names and values"""
        self._report_outcome(check_mapequal(first, second,
                                            object_label='first',
                                            expected_label='second',
                                            stacklevel=3), msg)
