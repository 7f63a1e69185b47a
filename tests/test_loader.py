import sys
import textwrap

import pytest

from microunit.errors import DuplicateTestError, LoadError
from microunit.loader import build_catalog, load_module

UNITS = textwrap.dedent("""\
    from microunit import assert_true, unit


    @unit
    def second_case():
        assert_true(True)


    @unit(name="first_case")
    def renamed():
        pass


    def helper():
        pass
""")


def test_load_module_from_file(tmp_path):
    path = tmp_path / "units_file.py"
    path.write_text(UNITS)

    module = load_module(str(path))

    assert hasattr(module, "second_case")
    assert module.__name__ in sys.modules


def test_load_module_by_dotted_name(tmp_path, monkeypatch):
    (tmp_path / "dotted_units.py").write_text(UNITS)
    monkeypatch.syspath_prepend(str(tmp_path))

    module = load_module("dotted_units")

    assert module.__name__ == "dotted_units"


def test_load_missing_file(tmp_path):
    with pytest.raises(LoadError):
        load_module(str(tmp_path / "nope.py"))


def test_load_missing_module():
    with pytest.raises(LoadError):
        load_module("microunit_no_such_module_here")


def test_load_module_with_broken_import_propagates(tmp_path, monkeypatch):
    (tmp_path / "broken_units.py").write_text("import microunit_missing_dependency\n")
    monkeypatch.syspath_prepend(str(tmp_path))

    with pytest.raises(ModuleNotFoundError):
        load_module("broken_units")


def test_build_catalog(tmp_path):
    path = tmp_path / "units_build.py"
    path.write_text(UNITS)

    catalog = build_catalog([str(path)])

    assert list(catalog) == ["first_case", "second_case"]


def test_build_catalog_duplicate_across_files(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    first = tmp_path / "a" / "units_a.py"
    second = tmp_path / "b" / "units_b.py"
    first.write_text(UNITS)
    second.write_text(UNITS)

    with pytest.raises(DuplicateTestError):
        build_catalog([str(first), str(second)])


def test_same_stem_in_different_directories(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    first = tmp_path / "a" / "units.py"
    second = tmp_path / "b" / "units.py"
    first.write_text(UNITS)
    second.write_text("VALUE = 2\n")

    module_a = load_module(str(first))
    module_b = load_module(str(second))

    assert module_a.__name__ != module_b.__name__
    assert sys.modules[module_a.__name__] is module_a
    assert module_b.VALUE == 2


def test_failed_load_keeps_other_module_with_same_stem(tmp_path):
    (tmp_path / "good").mkdir()
    (tmp_path / "bad").mkdir()
    good = tmp_path / "good" / "units.py"
    bad = tmp_path / "bad" / "units.py"
    good.write_text(UNITS)
    bad.write_text("raise RuntimeError('broken at import')\n")

    module = load_module(str(good))
    with pytest.raises(RuntimeError):
        load_module(str(bad))

    assert sys.modules[module.__name__] is module
