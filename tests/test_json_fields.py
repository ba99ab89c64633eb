import pytest

from chemjson.core.exceptions import SchemaError
from chemjson.core.utils.json_fields import (
    ABSENT,
    ARRAY,
    NUMBER,
    OBJECT,
    STRING,
    finite_float,
    get_field,
    is_number,
    json_kind,
    number_list,
    require_field,
    to_uint8,
)


def test_is_number_excludes_booleans():
    assert is_number(3)
    assert is_number(-0.5)
    assert not is_number(True)
    assert not is_number("3")


@pytest.mark.parametrize(
    "value,kind",
    [(None, "null"), (False, "boolean"), (1, "number"), ("x", "string"), ([], "array"), ({}, "object")],
)
def test_json_kind(value, kind):
    assert json_kind(value) == kind


def test_missing_and_null_are_absent():
    obj = {"a": None}
    assert get_field(obj, "a", OBJECT, "a") == ABSENT
    assert get_field(obj, "b", ARRAY, "b") == ABSENT
    assert not get_field(obj, "b", ARRAY, "b").present


def test_present_field_of_expected_kind():
    field = get_field({"name": "water"}, "name", STRING, "name")
    assert field.present
    assert field.value == "water"


def test_wrong_kind_is_schema_error():
    with pytest.raises(SchemaError, match='"unit cell" is not of type object'):
        get_field({"unit cell": [1, 2, 3]}, "unit cell", OBJECT, "unit cell")
    with pytest.raises(SchemaError):
        get_field({"a": True}, "a", NUMBER, "unit cell.a")


def test_require_field():
    assert require_field({"atoms": {}}, "atoms", OBJECT, "atoms") == {}
    with pytest.raises(SchemaError, match='no "atoms.elements" key found'):
        require_field({}, "elements", OBJECT, "atoms.elements")


def test_number_list():
    assert number_list([1, 2.5, -3], "coords") == [1.0, 2.5, -3.0]
    with pytest.raises(SchemaError, match=r'"coords\[1\]" is not of type number, got string'):
        number_list([1, "2"], "coords")


@pytest.mark.parametrize(
    "value,expected",
    [
        (6, 6),
        (6.9, 6),
        (-0.5, 0),
        (256, 0),
        (300, 44),
        (-1, 255),
        (True, 1),
        (False, 0),
        ("6", 0),
        ([6], 0),
        (float("nan"), 0),
    ],
)
def test_to_uint8(value, expected):
    assert to_uint8(value) == expected


def test_to_uint8_default_applies_to_null_only():
    assert to_uint8(None, default=1) == 1
    assert to_uint8("double", default=1) == 0


def test_finite_float():
    assert finite_float(3, "a") == 3.0
    assert finite_float(-2.5, "a") == -2.5
    with pytest.raises(SchemaError, match='"unit cell.a" is out of range'):
        finite_float(10 ** 400, "unit cell.a")
    with pytest.raises(SchemaError, match="out of range"):
        finite_float(float("inf"), "a")
    with pytest.raises(SchemaError, match="not of type number, got boolean"):
        finite_float(True, "a")


def test_number_list_rejects_values_beyond_double_range():
    with pytest.raises(SchemaError, match=r'"coords\[2\]" is out of range'):
        number_list([0, 1, -(10 ** 400)], "coords")
