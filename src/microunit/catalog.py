from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, overload

from microunit.errors import DuplicateTestError, InvalidTestNameError
from microunit.outcome import TestFunction


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    function: TestFunction


class Catalog:
    """Named test cases for a single run.

    Construct one explicitly and hand it to the driver. Entries come back
    sorted by name; once registered they are never removed.
    """

    def __init__(self) -> None:
        self._functions: dict[str, TestFunction] = {}

    def register(self, name: str, function: TestFunction) -> None:
        """Add a test case. The first registration of a name wins.

        Raises:
            InvalidTestNameError: ``name`` is not a non-empty string.
            TypeError: ``function`` is not callable.
            DuplicateTestError: ``name`` is already registered. The existing
                entry is left untouched.
        """
        if not isinstance(name, str) or not name:
            raise InvalidTestNameError(
                f"Test case name must be a non-empty string, got {name!r}"
            )
        if not callable(function):
            raise TypeError(f"Test case {name!r} is not callable: {function!r}")
        if name in self._functions:
            raise DuplicateTestError(name)
        self._functions[name] = function

    def entries(self) -> list[CatalogEntry]:
        return [
            CatalogEntry(name, self._functions[name]) for name in sorted(self._functions)
        ]

    @overload
    def unit(self, function: TestFunction) -> TestFunction: ...

    @overload
    def unit(
        self, function: None = None, *, name: str | None = None
    ) -> Callable[[TestFunction], TestFunction]: ...

    def unit(self, function=None, *, name=None):
        """Decorator registering a function on this catalog.

        Usable bare (``@catalog.unit``) or with an explicit name
        (``@catalog.unit(name="Arithmetic_OK")``).
        """
        from microunit.registration import Registration

        def decorate(fn: TestFunction) -> TestFunction:
            Registration(self, name if name is not None else fn.__name__, fn)
            return fn

        if function is not None:
            return decorate(function)
        return decorate

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._functions))

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} test cases)"
