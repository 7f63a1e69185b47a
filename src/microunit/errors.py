"""Exceptions raised by the microunit core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from microunit.outcome import Failure


class MicrounitError(Exception):
    """Base class for framework errors."""


class InvalidTestNameError(MicrounitError, ValueError):
    pass


class DuplicateTestError(MicrounitError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Test case {name!r} is already registered")
        self.name = name


class LoadError(MicrounitError):
    pass


class CaseFailed(BaseException):
    """Raised by a violated assertion to halt the running test case.

    The driver catches it at the case boundary and records ``failure`` as
    the case outcome. It never escapes a run. ``except Exception`` inside a
    test body does not catch it.
    """

    def __init__(self, failure: Failure):
        super().__init__(failure.condition or failure.message)
        self.failure = failure
