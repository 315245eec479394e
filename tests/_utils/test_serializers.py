from enum import Enum

import pytest

from openapi_request import (
    UnsupportedStyleError,
    UnsupportedValueError,
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
)

COLOR = {"r": 100, "g": 200, "b": 150}


class Status(str, Enum):
    AVAILABLE = "available"


def test_primitive():
    assert serialize_primitive_param("a", "b") == "a=b"
    assert serialize_primitive_param("limit", 10) == "limit=10"
    assert serialize_primitive_param("ratio", 1.5) == "ratio=1.5"
    assert serialize_primitive_param("active", True) == "active=true"
    assert serialize_primitive_param("active", False) == "active=false"
    assert serialize_primitive_param("status", Status.AVAILABLE) == "status=available"


def test_primitive_whole_floats():
    assert serialize_primitive_param("limit", 1.0) == "limit=1"
    assert serialize_primitive_param("limit", -3.0) == "limit=-3"
    assert serialize_primitive_param("big", 1e21) == "big=1e%2B21"


def test_primitive_bytes():
    assert serialize_primitive_param("a", b"abc") == "a=abc"
    assert serialize_primitive_param("a", bytearray(b"x y")) == "a=x%20y"
    assert serialize_primitive_param("a", "é".encode()) == "a=%C3%A9"


def test_primitive_encoding():
    assert serialize_primitive_param("a", "x y") == "a=x%20y"
    assert serialize_primitive_param("a", "x y", allow_reserved=True) == "a=x y"
    assert serialize_primitive_param("q", "a/b?c") == "q=a%2Fb%3Fc"
    assert serialize_primitive_param("q", "a/b?c", allow_reserved=True) == "q=a/b?c"
    # unreserved characters are never encoded
    assert serialize_primitive_param("q", "a-b_c.d~e") == "q=a-b_c.d~e"


def test_primitive_encodes_every_reserved_character():
    assert (
        serialize_primitive_param("q", ":/?#[]@!$&'()*+,;=")
        == "q=%3A%2F%3F%23%5B%5D%40%21%24%26%27%28%29%2A%2B%2C%3B%3D"
    )


def test_primitive_none():
    assert serialize_primitive_param("a", None) == ""


@pytest.mark.parametrize("value", [{"b": 1}, [1, 2], (1,), {1, 2}])
def test_primitive_rejects_composites(value):
    with pytest.raises(UnsupportedValueError, match="Deeply-nested"):
        serialize_primitive_param("a", value)


@pytest.mark.parametrize(
    "style, explode, expected",
    [
        ("simple", False, "r,100,g,200,b,150"),
        ("simple", True, "r=100,g=200,b=150"),
        ("label", False, ".r,100,g,200,b,150"),
        ("label", True, ".r=100.g=200.b=150"),
        ("matrix", False, ";color=r,100,g,200,b,150"),
        ("matrix", True, ";r=100;g=200;b=150"),
        ("form", False, "color=r,100,g,200,b,150"),
        ("form", True, "r=100&g=200&b=150"),
        ("deepObject", True, "color[r]=100&color[g]=200&color[b]=150"),
        # deepObject is always exploded
        ("deepObject", False, "color[r]=100&color[g]=200&color[b]=150"),
    ],
)
def test_object_styles(style, explode, expected):
    assert serialize_object_param("color", COLOR, style=style, explode=explode) == expected


def test_object_encoding():
    value = {"q": "a b/c"}
    assert (
        serialize_object_param("f", value, style="form", explode=False)
        == "f=q,a%20b%2Fc"
    )
    assert (
        serialize_object_param("f", value, style="form", explode=True)
        == "q=a%20b%2Fc"
    )
    assert (
        serialize_object_param(
            "f", value, style="form", explode=False, allow_reserved=True
        )
        == "f=q,a b/c"
    )
    assert (
        serialize_object_param(
            "f", value, style="deepObject", explode=True, allow_reserved=True
        )
        == "f[q]=a b/c"
    )


def test_object_keeps_insertion_order():
    value = {"z": 1, "a": 2, "m": 3}
    assert serialize_object_param("o", value, style="form", explode=True) == "z=1&a=2&m=3"


def test_object_skips_none_values():
    value = {"a": 1, "b": None, "c": 3}
    assert serialize_object_param("o", value, style="form", explode=True) == "a=1&c=3"
    assert serialize_object_param("o", value, style="form", explode=False) == "o=a,1,c,3"


@pytest.mark.parametrize("value", [None, "abc", 42, [1, 2]])
def test_object_ignores_non_objects(value):
    assert serialize_object_param("o", value, style="form", explode=True) == ""


def test_object_rejects_nested_values():
    with pytest.raises(UnsupportedValueError):
        serialize_object_param(
            "filter", {"a": {"b": 1}}, style="deepObject", explode=True
        )
    with pytest.raises(UnsupportedValueError):
        serialize_object_param("filter", {"a": [1, 2]}, style="form", explode=False)


@pytest.mark.parametrize("style", ["spaceDelimited", "pipeDelimited", "unknown"])
def test_object_rejects_unsupported_styles(style):
    with pytest.raises(UnsupportedStyleError, match=style):
        serialize_object_param("o", COLOR, style=style, explode=True)


@pytest.mark.parametrize(
    "style, explode, expected",
    [
        ("simple", False, "3,4,5"),
        ("simple", True, "3,4,5"),
        ("label", False, ".3,4,5"),
        ("label", True, ".3.4.5"),
        ("matrix", False, ";id=3,4,5"),
        ("matrix", True, ";id=3;id=4;id=5"),
        ("form", False, "id=3,4,5"),
        ("form", True, "id=3&id=4&id=5"),
        ("spaceDelimited", False, "id=3%204%205"),
        ("spaceDelimited", True, "id=3&id=4&id=5"),
        ("pipeDelimited", False, "id=3|4|5"),
        ("pipeDelimited", True, "id=3&id=4&id=5"),
    ],
)
def test_array_styles(style, explode, expected):
    assert serialize_array_param("id", [3, 4, 5], style=style, explode=explode) == expected


def test_array_accepts_tuples():
    assert serialize_array_param("id", (3, 4), style="form", explode=True) == "id=3&id=4"


def test_array_encoding():
    value = ["a b", "c/d"]
    assert serialize_array_param("t", value, style="form", explode=False) == "t=a%20b,c%2Fd"
    assert serialize_array_param("t", value, style="label", explode=True) == ".a%20b.c%2Fd"
    assert (
        serialize_array_param("t", value, style="form", explode=False, allow_reserved=True)
        == "t=a b,c/d"
    )
    assert (
        serialize_array_param("t", value, style="form", explode=True, allow_reserved=True)
        == "t=a b&t=c/d"
    )


def test_array_skips_none_items():
    assert serialize_array_param("id", [1, None, 2], style="form", explode=True) == "id=1&id=2"
    assert serialize_array_param("id", [1, None, 2], style="simple", explode=False) == "1,2"


@pytest.mark.parametrize("value", [None, "abc", b"abc", {"a": 1}, 42])
def test_array_ignores_non_arrays(value):
    assert serialize_array_param("id", value, style="form", explode=True) == ""


def test_array_rejects_nested_items():
    with pytest.raises(UnsupportedValueError):
        serialize_array_param("id", [[1, 2]], style="form", explode=True)
    with pytest.raises(UnsupportedValueError):
        serialize_array_param("id", [{"a": 1}], style="simple", explode=False)


def test_array_rejects_unsupported_styles():
    with pytest.raises(UnsupportedStyleError, match="deepObject"):
        serialize_array_param("id", [1], style="deepObject", explode=True)
