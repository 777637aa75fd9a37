"""Exceptions and warnings raised by the expectation helpers"""


class InvalidArgument(Exception):
    """The caller passed something that cannot be compared at all

    This is a programming error in the calling test (e.g., a non-vector or a
    collection with duplicate names) rather than a data mismatch. It is never
    turned into a failing Outcome.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExpectationFailure(AssertionError):
    """A failing Outcome which has been escalated by the StopReporter"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExpectationWarning(UserWarning):
    """Advisory notice which never changes the outcome of an expectation"""
