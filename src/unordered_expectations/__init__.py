"""Order-insensitive set and map expectations for unit tests"""


from unordered_expectations.exception import (ExpectationFailure,
                                              ExpectationWarning,
                                              InvalidArgument)
from unordered_expectations.map_equal import check_mapequal, expect_mapequal
from unordered_expectations.names import NamedVector
from unordered_expectations.outcome import (ListReporter, Outcome, Reporter,
                                            StopReporter)
from unordered_expectations.set_equal import check_setequal, expect_setequal
from unordered_expectations.values import format_values


__all__ = [
    "ExpectationFailure",
    "ExpectationWarning",
    "InvalidArgument",
    "ListReporter",
    "NamedVector",
    "Outcome",
    "Reporter",
    "StopReporter",
    "check_mapequal",
    "check_setequal",
    "expect_mapequal",
    "expect_setequal",
    "format_values",
]
