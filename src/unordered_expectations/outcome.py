"""Outcomes of an expectation and the reporters which consume them"""


import abc
import logging
from typing import List, NamedTuple

from unordered_expectations.exception import ExpectationFailure


logger = logging.getLogger(__name__)


class Outcome(NamedTuple):
    """Result of a single expectation check"""

    # Whether the expectation was met
    passed: bool

    # Human-readable diagnostic (empty when the expectation passed)
    message: str


def succeed() -> Outcome:
    """Construct a passing Outcome"""
    return Outcome(passed=True, message="")


def fail(message: str) -> Outcome:
    """Construct a failing Outcome carrying the given diagnostic"""
    return Outcome(passed=False, message=message)


class Reporter(abc.ABC):
    """Consume Outcomes on behalf of the surrounding test framework

    The check_* functions only ever construct Outcomes. Deciding whether a
    failure should abort the running test or merely be recorded is the job of
    a Reporter.
    """

    @abc.abstractmethod
    def add_result(self, outcome: Outcome) -> None:
        """Record (or act upon) a single Outcome"""
        pass


class StopReporter(Reporter):
    """Raise an ExpectationFailure as soon as any expectation fails"""

    def add_result(self, outcome: Outcome) -> None:
        if not outcome.passed:
            raise ExpectationFailure(outcome.message)


class ListReporter(Reporter):
    """Keep every Outcome so that a test can carry on after a failure"""

    def __init__(self):
        self.results: List[Outcome] = []

    def add_result(self, outcome: Outcome) -> None:
        if not outcome.passed:
            logger.debug('Recording failed expectation: %s', outcome.message)
        self.results.append(outcome)

    @property
    def failures(self) -> List[Outcome]:
        """Only those recorded Outcomes which did not pass"""
        return list(filter(lambda x: not x.passed, self.results))

    @property
    def passed(self) -> bool:
        """True if no recorded Outcome has failed (vacuously so if empty)"""
        return len(self.failures) == 0
