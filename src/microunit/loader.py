"""Load explicitly named test modules and build a catalog from them."""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

from microunit.catalog import Catalog
from microunit.config import is_path_target
from microunit.errors import LoadError
from microunit.registration import collect

logger = logging.getLogger("microunit.loader")


def load_module(target: str) -> ModuleType:
    """Import ``target``, either a dotted module name or a ``.py`` file path."""
    if is_path_target(target):
        return _load_file(Path(target))
    try:
        return importlib.import_module(target)
    except ModuleNotFoundError as e:
        if e.name and (target == e.name or target.startswith(e.name + ".")):
            raise LoadError(f"Test module not found: {target}") from e
        raise


def _load_file(path: Path) -> ModuleType:
    if not path.is_file():
        raise LoadError(f"Test file not found: {path}")
    path = path.resolve()
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:10]
    module_name = f"_microunit_{path.stem}_{digest}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise LoadError(f"Cannot import test file: {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        if sys.modules.get(module_name) is module:
            del sys.modules[module_name]
        raise
    logger.debug(f"Loaded {path} as {module_name}")
    return module


def build_catalog(targets: list[str]) -> Catalog:
    """Run the startup registration phase for ``targets`` in order."""
    catalog = Catalog()
    for target in targets:
        collect(catalog, load_module(target))
    return catalog
