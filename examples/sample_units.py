"""Demo test module: run with ``microunit run examples/sample_units.py``.

Two of the four cases fail on purpose.
"""

from microunit import assert_true, fail, unit


def double(n):
    return 2 * n


def double_flawed(n):
    return 2 * n if n < 100 else 3 * n


@unit
def test_two_plus_two():
    assert_true(2 + 2 == 4)


@unit
def test_flawed_two_plus_two():
    assert_true(2 + 2 == 3)


@unit
def test_double():
    for i in range(1000):
        if double(i) != 2 * i:
            return fail()


@unit
def test_double_flawed():
    for i in range(1000):
        if double_flawed(i) != 2 * i:
            return fail(f"double_flawed({i}) == {double_flawed(i)}")
