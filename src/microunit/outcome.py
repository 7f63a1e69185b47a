"""Test case outcomes and the per-case result record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class Success:
    """The case passed."""


@dataclass(frozen=True)
class Failure:
    """The case failed.

    Attributes:
        message: Optional free-form reason given to ``fail()``.
        condition: Source text of the violated assertion, if any.
    """

    message: str = ""
    condition: str | None = None


Outcome = Union[Success, Failure]

TestFunction = Callable[[], Union[Outcome, None]]


@dataclass
class TestResult:
    """Mutable record of one case's outcome, owned by a single driver pass."""

    __test__ = False  # not a pytest class

    name: str
    success: bool = True
    failure: Failure | None = None

    def apply(self, outcome: Outcome | None) -> None:
        if outcome is None or isinstance(outcome, Success):
            self.success = True
            self.failure = None
        elif isinstance(outcome, Failure):
            self.success = False
            self.failure = outcome
        else:
            raise TypeError(
                f"Test case {self.name!r} returned {type(outcome).__name__}; "
                "expected None, Success or Failure"
            )
