"""Tiny unit test framework: declare named cases, run them all, get a summary."""

from microunit.assertions import assert_false, assert_true, fail, passed
from microunit.catalog import Catalog, CatalogEntry
from microunit.driver import Driver, RunReport, run
from microunit.errors import (
    CaseFailed,
    DuplicateTestError,
    InvalidTestNameError,
    LoadError,
    MicrounitError,
)
from microunit.outcome import Failure, Outcome, Success, TestResult
from microunit.registration import Registration, collect, unit

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CaseFailed",
    "Driver",
    "DuplicateTestError",
    "Failure",
    "InvalidTestNameError",
    "LoadError",
    "MicrounitError",
    "Outcome",
    "Registration",
    "RunReport",
    "Success",
    "TestResult",
    "assert_false",
    "assert_true",
    "collect",
    "fail",
    "passed",
    "run",
    "unit",
]
