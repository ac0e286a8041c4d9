import pytest

from stormbyte.errors import StormByteError
from stormbyte.variadic_value import VariadicValue


def test_default_holds_first_type():
    value = VariadicValue(int, str)
    assert value.get(int) == 0


def test_get_returns_stored_value():
    value = VariadicValue(int, str, value="Hello")
    assert value.get(str) == "Hello"


def test_get_wrong_held_type_raises():
    value = VariadicValue(int, str, value="Hello")
    with pytest.raises(StormByteError, match="does not hold"):
        value.get(int)


def test_get_type_not_allowed_raises():
    value = VariadicValue(int, str, value=5)
    with pytest.raises(TypeError):
        value.get(float)


def test_construct_with_disallowed_type_raises():
    with pytest.raises(TypeError):
        VariadicValue(int, str, value=1.5)


def test_bool_is_not_int():
    with pytest.raises(TypeError):
        VariadicValue(int, str, value=True)


def test_no_types_raises():
    with pytest.raises(TypeError):
        VariadicValue()


def test_copy_is_equal_and_independent():
    original = VariadicValue(list, str, value=[1, 2])
    duplicate = original.copy()
    assert duplicate == original
    duplicate.get(list).append(3)
    assert original.get(list) == [1, 2]
    assert duplicate != original


def test_equality_requires_same_type():
    assert VariadicValue(int, float, value=1) != VariadicValue(int, float, value=1.0)
    assert VariadicValue(int, str, value=7) == VariadicValue(int, str, value=7)


def test_types_kept_in_order():
    assert VariadicValue(str, int).types == (str, int)