import pytest
from pydantic import ValidationError

from openapi_request import (
    QuerySerializerOptions,
    UnsupportedValueError,
    create_query_serializer,
    default_query_serializer,
)


def test_default_serializer():
    assert (
        default_query_serializer({"tags": ["a", "b"], "limit": 10})
        == "tags=a&tags=b&limit=10"
    )
    assert (
        default_query_serializer({"color": {"r": 100, "g": 200}})
        == "color[r]=100&color[g]=200"
    )


def test_absent_values_are_omitted():
    assert default_query_serializer({"a": None, "b": None, "c": []}) == ""
    assert default_query_serializer({"a": None, "b": 1, "c": [], "d": {}}) == "b=1"


@pytest.mark.parametrize("query", [None, {}, "a=1", [("a", 1)]])
def test_missing_or_invalid_query(query):
    assert default_query_serializer(query) == ""


def test_keeps_entry_order():
    assert default_query_serializer({"b": 1, "a": 2, "c": 3}) == "b=1&a=2&c=3"


def test_scalars():
    assert (
        default_query_serializer({"active": True, "ratio": 0.5, "q": "x y"})
        == "active=true&ratio=0.5&q=x%20y"
    )


def test_array_options():
    serializer = create_query_serializer(
        {"array": {"style": "pipeDelimited", "explode": False}}
    )
    assert serializer({"id": [3, 4, 5], "limit": 10}) == "id=3|4|5&limit=10"

    serializer = create_query_serializer(
        {"array": {"style": "spaceDelimited", "explode": False}}
    )
    assert serializer({"id": [3, 4, 5]}) == "id=3%204%205"

    serializer = create_query_serializer({"array": {"style": "form", "explode": False}})
    assert serializer({"id": [3, 4, 5]}) == "id=3,4,5"


def test_object_options():
    serializer = create_query_serializer({"object": {"style": "form", "explode": False}})
    assert serializer({"color": {"r": 100, "g": 200}}) == "color=r,100,g,200"

    serializer = create_query_serializer({"object": {"style": "form", "explode": True}})
    assert serializer({"color": {"r": 100, "g": 200}}) == "r=100&g=200"


def test_partial_options_keep_defaults():
    serializer = create_query_serializer({"array": {"style": "pipeDelimited"}})
    # explode still defaults to true
    assert serializer({"id": [1, 2]}) == "id=1&id=2"

    serializer = create_query_serializer({"object": {"explode": True}})
    assert serializer({"color": {"r": 1}}) == "color[r]=1"


@pytest.mark.parametrize(
    "options",
    [
        {"allowReserved": True},
        {"allow_reserved": True},
        QuerySerializerOptions(allow_reserved=True),
    ],
)
def test_allow_reserved(options):
    serializer = create_query_serializer(options)
    assert (
        serializer({"q": "a/b", "ids": ["x y"], "f": {"k": "c:d"}})
        == "q=a/b&ids=x y&f[k]=c:d"
    )


def test_reserved_characters_are_encoded_by_default():
    assert (
        default_query_serializer({"q": "a/b", "ids": ["x y"], "f": {"k": "c:d"}})
        == "q=a%2Fb&ids=x%20y&f[k]=c%3Ad"
    )


@pytest.mark.parametrize(
    "options",
    [
        {"array": {"style": "matrix", "explode": True}},
        {"object": {"style": "label", "explode": True}},
        {"arrays": {"style": "form", "explode": True}},
    ],
)
def test_invalid_options(options):
    with pytest.raises(ValidationError):
        create_query_serializer(options)


def test_nested_values_fail_fast():
    with pytest.raises(UnsupportedValueError):
        default_query_serializer({"filter": {"a": {"b": 1}}})
    with pytest.raises(UnsupportedValueError):
        default_query_serializer({"ids": [[1, 2]]})


def test_serializer_is_reusable():
    serializer = create_query_serializer()
    query = {"tags": ["a", "b"], "limit": 10}
    assert serializer(query) == serializer(query)
    assert query == {"tags": ["a", "b"], "limit": 10}
