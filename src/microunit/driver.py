from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from microunit.catalog import Catalog, CatalogEntry
from microunit.errors import CaseFailed
from microunit.outcome import TestResult

SEPARATOR = "-" * 80

PASS_MARK = "[    ]"
FAIL_MARK = "[!!!!]"


@dataclass
class RunReport:
    """Per-case results of one driver pass, in run order."""

    results: list[TestResult] = field(default_factory=list)

    @property
    def failures(self) -> list[str]:
        return [r.name for r in self.results if not r.success]

    @property
    def passed(self) -> bool:
        return not self.failures

    def __bool__(self) -> bool:
        return self.passed


class Driver:
    """Runs every case in a catalog once and prints a summary."""

    def __init__(
        self,
        catalog: Catalog,
        stream: TextIO | None = None,
        logger: logging.Logger | None = None,
    ):
        self.catalog = catalog
        self.stream = stream
        self.logger = logger or logging.getLogger("microunit")

    def run(self) -> bool:
        """Run all cases. Returns True if every case passed."""
        return self.execute().passed

    def execute(self) -> RunReport:
        report = RunReport()
        entries = self.catalog.entries()
        self.logger.debug(f"Running {len(entries)} test case(s)")

        for entry in entries:
            self._echo(SEPARATOR)
            self._echo(f"{PASS_MARK} Test case '{entry.name}'")
            result = self._run_case(entry)
            self._echo(f"{PASS_MARK} Success" if result.success else f"{FAIL_MARK} Failure")
            report.results.append(result)

        self._echo(SEPARATOR)
        self._echo(SEPARATOR)
        failures = report.failures
        if not failures:
            self._echo(f"{PASS_MARK} All tests passed")
        else:
            self._echo(f"{FAIL_MARK} Failed {len(failures)} test cases:")
            for name in failures:
                self._echo(f"> {name}")
        self._echo(SEPARATOR)

        self.logger.debug(
            f"Run complete: {len(report.results) - len(failures)}/{len(report.results)} passed"
        )
        return report

    def _run_case(self, entry: CatalogEntry) -> TestResult:
        result = TestResult(entry.name)
        self.logger.debug(f"Running test case '{entry.name}'")
        try:
            result.apply(entry.function())
        except CaseFailed as signal:
            result.apply(signal.failure)
        except Exception as e:
            self.logger.error(f"Test case '{entry.name}' aborted the run: {e!r}")
            raise

        if result.failure is not None:
            failure = result.failure
            if failure.condition is not None:
                self._echo(f"{PASS_MARK} Test Assert failed: {failure.condition}")
            if failure.message:
                self._echo(f"{PASS_MARK} Test failed: {failure.message}")
            else:
                self._echo(f"{PASS_MARK} Test failed")
            self.logger.info(
                f"Test case '{entry.name}' failed: "
                f"{failure.condition or failure.message or 'fail()'}"
            )
        else:
            self.logger.debug(f"Test case '{entry.name}' passed")
        return result

    def _echo(self, line: str) -> None:
        print(line, file=self.stream if self.stream is not None else sys.stdout)


def run(catalog: Catalog, stream: TextIO | None = None) -> bool:
    """Run every case in ``catalog``; True if all passed."""
    return Driver(catalog, stream=stream).run()
