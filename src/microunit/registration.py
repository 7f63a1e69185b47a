"""Explicit startup registration of test cases.

Test modules mark their cases with :func:`unit`; nothing is registered at
import time. The host then runs :func:`collect` for each module before
starting the driver, which is the only point where catalog contents change.
"""

from __future__ import annotations

import inspect
import logging
from types import ModuleType
from typing import Callable, overload

from microunit.catalog import Catalog
from microunit.outcome import TestFunction

logger = logging.getLogger("microunit.registration")

UNIT_ATTR = "__microunit_name__"


class Registration:
    """Registers one test case on construction and does nothing else."""

    __slots__ = ("name",)

    def __init__(self, catalog: Catalog, name: str, function: TestFunction):
        catalog.register(name, function)
        self.name = name

    def __copy__(self):
        raise TypeError("Registration objects cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Registration objects cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError("Registration objects cannot be copied")


@overload
def unit(function: TestFunction) -> TestFunction: ...


@overload
def unit(
    function: None = None, *, name: str | None = None
) -> Callable[[TestFunction], TestFunction]: ...


def unit(function=None, *, name=None):
    """Mark a module-level function as a test case.

    The case is named after the function unless ``name`` is given.
    """

    def mark(fn: TestFunction) -> TestFunction:
        setattr(fn, UNIT_ATTR, name if name is not None else fn.__name__)
        return fn

    if function is not None:
        return mark(function)
    return mark


def is_unit(obj: object) -> bool:
    return inspect.isfunction(obj) and hasattr(obj, UNIT_ATTR)


def collect(catalog: Catalog, module: ModuleType) -> list[str]:
    """Register every case marked in ``module`` onto ``catalog``.

    Cases are visited in definition order. Functions imported from other
    modules are skipped so that each case is registered by its own module,
    and a function bound under several names is registered once. Returns
    the names registered.
    """
    names: list[str] = []
    seen: set[int] = set()
    for obj in list(vars(module).values()):
        if not is_unit(obj) or obj.__module__ != module.__name__:
            continue
        if id(obj) in seen:
            continue
        seen.add(id(obj))
        registration = Registration(catalog, getattr(obj, UNIT_ATTR), obj)
        names.append(registration.name)
    logger.debug(f"Collected {len(names)} test case(s) from {module.__name__}")
    return names
