import copy
import pickle
import types

import pytest

from microunit.errors import DuplicateTestError
from microunit.registration import Registration, collect, is_unit, unit


def _make_module(name, **attrs):
    module = types.ModuleType(name)
    for key, value in attrs.items():
        if callable(value):
            value.__module__ = name
        setattr(module, key, value)
    return module


def test_registration_registers_once(catalog, mocker):
    function = mocker.Mock()
    spy = mocker.spy(catalog, "register")

    registration = Registration(catalog, "A", function)

    spy.assert_called_once_with("A", function)
    assert registration.name == "A"
    function.assert_not_called()


def test_registration_cannot_be_copied(catalog):
    registration = Registration(catalog, "A", lambda: None)
    with pytest.raises(TypeError):
        copy.copy(registration)
    with pytest.raises(TypeError):
        copy.deepcopy(registration)
    with pytest.raises(TypeError):
        pickle.dumps(registration)


def test_unit_marks_without_registering():
    def body():
        pass

    assert unit(body) is body
    assert is_unit(body)


def test_unit_with_name():
    def body():
        pass

    unit(name="Custom")(body)
    assert body.__microunit_name__ == "Custom"


def test_unmarked_function_is_not_unit():
    def helper():
        pass

    assert not is_unit(helper)


def test_collect_registers_marked_functions_in_definition_order(catalog):
    def zeta():
        pass

    def helper():
        pass

    def alpha():
        pass

    module = _make_module(
        "sample_mod", zeta=unit(zeta), helper=helper, alpha=unit(alpha)
    )

    names = collect(catalog, module)

    assert names == ["zeta", "alpha"]
    assert list(catalog) == ["alpha", "zeta"]


def test_collect_skips_units_imported_from_other_modules(catalog):
    def local():
        pass

    def foreign():
        pass

    module = _make_module("home_mod", local=unit(local))
    foreign.__module__ = "elsewhere"
    module.foreign = unit(foreign)

    assert collect(catalog, module) == ["local"]


def test_collect_duplicate_names_fail_loudly(catalog):
    def one():
        pass

    def two():
        pass

    module = _make_module("dup_mod", one=unit(name="A")(one), two=unit(name="A")(two))

    with pytest.raises(DuplicateTestError):
        collect(catalog, module)
    assert catalog.entries()[0].function is one


def test_collect_across_modules_rejects_reused_name(catalog):
    def first():
        pass

    def second():
        pass

    collect(catalog, _make_module("mod_a", first=unit(name="A")(first)))
    with pytest.raises(DuplicateTestError):
        collect(catalog, _make_module("mod_b", second=unit(name="A")(second)))
    assert len(catalog) == 1


def test_collect_registers_aliased_function_once(catalog):
    def case():
        pass

    marked = unit(case)
    module = _make_module("alias_mod", case=marked)
    module.alias = marked

    assert collect(catalog, module) == ["case"]
    assert len(catalog) == 1
