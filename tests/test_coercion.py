import pytest

from opensky.decoders.coercion import json_number_array_to_int_array, json_number_to_int
from opensky.errors import DecodeError, TypeMismatchError


@pytest.mark.parametrize(
    "value, expected",
    [
        (42.0, 42),
        (-1.0, -1),
        (0.0, 0),
        (2.99, 2),
        (-2.99, -2),
        (1624891429, 1624891429),
    ],
)
def test_json_number_to_int_truncates_toward_zero(value, expected):
    assert json_number_to_int(value) == expected


@pytest.mark.parametrize("value", ["foo", True, False, [1.0, 3.0, 5.0], {}, None])
def test_json_number_to_int_rejects_non_numbers(value):
    with pytest.raises(TypeMismatchError) as excinfo:
        json_number_to_int(value)

    assert excinfo.value.value == value


def test_json_number_to_int_rejects_nan_and_infinity():
    with pytest.raises(TypeMismatchError):
        json_number_to_int(float("nan"))
    with pytest.raises(TypeMismatchError):
        json_number_to_int(float("inf"))


def test_json_number_array_to_int_array_truncates_each_element():
    assert json_number_array_to_int_array([42.0, 33.0, 12.95, -2.3]) == [42, 33, 12, -2]
    assert json_number_array_to_int_array([1.0, 2.0, 100.0, -100.0]) == [1, 2, 100, -100]
    assert json_number_array_to_int_array([1000, 1042]) == [1000, 1042]
    assert json_number_array_to_int_array([]) == []


@pytest.mark.parametrize(
    "value", [1.0, "foo", True, {"a": 1.0}, ["foo"], [1.0, None], [True, False]]
)
def test_json_number_array_to_int_array_rejects_other_shapes(value):
    with pytest.raises(TypeMismatchError):
        json_number_array_to_int_array(value)


def test_type_mismatch_is_a_decode_error():
    with pytest.raises(DecodeError):
        json_number_to_int("12")
    with pytest.raises(ValueError):
        json_number_to_int("12")
