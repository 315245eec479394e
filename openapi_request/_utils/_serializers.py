from enum import Enum
from functools import partial
from typing import Any, Callable, Mapping, Sequence, get_args
from urllib.parse import quote

from ..models.errors import UnsupportedStyleError, UnsupportedValueError
from ..models.options import ArrayStyle, ObjectStyle

OBJECT_STYLES: tuple[str, ...] = get_args(ObjectStyle)
ARRAY_STYLES: tuple[str, ...] = get_args(ArrayStyle)

# joiner between exploded values, "&" for every other style
_EXPLODE_JOINERS = {"simple": ",", "label": ".", "matrix": ";"}
# joiner between non-exploded array values, "," for every other style
_ARRAY_DELIMITERS = {"form": ",", "spaceDelimited": "%20", "pipeDelimited": "|"}
# prefix for non-exploded values, "{name}=" for every other style
_WRAPPERS: dict[str, Callable[[str, str], str]] = {
    "simple": lambda name, final: final,
    "label": lambda name, final: f".{final}",
    "matrix": lambda name, final: f";{name}={final}",
}


def is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def _to_text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    # whole floats render without the ".0", e.g. 1.0 -> "1"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def encode_value(value: Any, allow_reserved: bool = False) -> str:
    """Render a scalar as text, percent-encoding it unless reserved characters are allowed.

    Everything outside the unreserved set ``A-Z a-z 0-9 - _ . ~`` is encoded.

    Raises:
        UnsupportedValueError: If the value is an array or an object.
    """
    if is_array(value) or is_object(value) or isinstance(value, (set, frozenset)):
        raise UnsupportedValueError(value)

    text = _to_text(value)
    return text if allow_reserved else quote(text, safe="")


def _wrap(name: str, final: str, style: str) -> str:
    wrapper = _WRAPPERS.get(style)
    if wrapper is None:
        return f"{name}={final}"
    return wrapper(name, final)


def _prefix(final: str, joiner: str, style: str) -> str:
    return f"{joiner}{final}" if style in ("label", "matrix") else final


def serialize_primitive_param(
    name: str, value: Any, *, allow_reserved: bool = False
) -> str:
    """Serialize a single ``name=value`` pair.

    >>> serialize_primitive_param("a", "x y")
    'a=x%20y'
    >>> serialize_primitive_param("a", "x y", allow_reserved=True)
    'a=x y'

    Returns an empty string when ``value`` is ``None`` so callers can skip the pair.

    Raises:
        UnsupportedValueError: If ``value`` is an array or an object.
    """
    if value is None:
        return ""

    return f"{name}={encode_value(value, allow_reserved)}"


def _flat_object(
    name: str, value: Mapping[str, Any], allow_reserved: bool, *, style: str
) -> str:
    values: list[str] = []
    for key, item in value.items():
        if item is None:
            continue
        values.extend((str(key), encode_value(item, allow_reserved)))

    # non-exploded pairs are always comma separated, the style only wraps them
    return _wrap(name, ",".join(values), style)


def _exploded_object(
    name: str, value: Mapping[str, Any], allow_reserved: bool, *, style: str
) -> str:
    joiner = _EXPLODE_JOINERS.get(style, "&")
    values: list[str] = []
    for key, item in value.items():
        final_name = f"{name}[{key}]" if style == "deepObject" else str(key)
        fragment = serialize_primitive_param(
            final_name, item, allow_reserved=allow_reserved
        )
        if fragment:
            values.append(fragment)

    return _prefix(joiner.join(values), joiner, style)


_OBJECT_SERIALIZERS: dict[tuple[str, bool], Callable[..., str]] = {
    **{
        (style, False): partial(_flat_object, style=style)
        for style in OBJECT_STYLES
        if style != "deepObject"
    },
    **{(style, True): partial(_exploded_object, style=style) for style in OBJECT_STYLES},
}


def serialize_object_param(
    name: str,
    value: Any,
    *,
    style: str,
    explode: bool,
    allow_reserved: bool = False,
) -> str:
    """Serialize a shallow object according to its OpenAPI ``style`` and ``explode``.

    ``deepObject`` is always exploded.

    Examples:
        >>> color = {"r": 100, "g": 200, "b": 150}
        >>> serialize_object_param("color", color, style="form", explode=False)
        'color=r,100,g,200,b,150'
        >>> serialize_object_param("color", color, style="deepObject", explode=True)
        'color[r]=100&color[g]=200&color[b]=150'

    Returns:
        str: The serialized fragment, or an empty string if ``value`` is not an object.

    Raises:
        UnsupportedStyleError: If ``style`` can't be used with objects.
        UnsupportedValueError: If one of the values is an array or an object.
    """
    if style not in OBJECT_STYLES:
        raise UnsupportedStyleError(style, OBJECT_STYLES)
    if not is_object(value):
        return ""

    if style == "deepObject":
        explode = True

    serializer = _OBJECT_SERIALIZERS[(style, bool(explode))]
    return serializer(name, value, allow_reserved)


def _flat_array(
    name: str, value: Sequence[Any], allow_reserved: bool, *, style: str
) -> str:
    joiner = _ARRAY_DELIMITERS.get(style, ",")
    final = joiner.join(
        encode_value(item, allow_reserved) for item in value if item is not None
    )
    return _wrap(name, final, style)


def _exploded_array(
    name: str, value: Sequence[Any], allow_reserved: bool, *, style: str
) -> str:
    joiner = _EXPLODE_JOINERS.get(style, "&")
    if style in ("simple", "label"):
        values = [
            encode_value(item, allow_reserved) for item in value if item is not None
        ]
    else:
        values = [
            serialize_primitive_param(name, item, allow_reserved=allow_reserved)
            for item in value
            if item is not None
        ]

    return _prefix(joiner.join(values), joiner, style)


_ARRAY_SERIALIZERS: dict[tuple[str, bool], Callable[..., str]] = {
    **{(style, False): partial(_flat_array, style=style) for style in ARRAY_STYLES},
    **{(style, True): partial(_exploded_array, style=style) for style in ARRAY_STYLES},
}


def serialize_array_param(
    name: str,
    value: Any,
    *,
    style: str,
    explode: bool,
    allow_reserved: bool = False,
) -> str:
    """Serialize a shallow array according to its OpenAPI ``style`` and ``explode``.

    Examples:
        >>> serialize_array_param("id", [3, 4, 5], style="simple", explode=False)
        '3,4,5'
        >>> serialize_array_param("id", [3, 4, 5], style="pipeDelimited", explode=False)
        'id=3|4|5'
        >>> serialize_array_param("id", [3, 4, 5], style="form", explode=True)
        'id=3&id=4&id=5'

    Returns:
        str: The serialized fragment, or an empty string if ``value`` is not an array.

    Raises:
        UnsupportedStyleError: If ``style`` can't be used with arrays.
        UnsupportedValueError: If one of the items is an array or an object.
    """
    if style not in ARRAY_STYLES:
        raise UnsupportedStyleError(style, ARRAY_STYLES)
    if not is_array(value):
        return ""

    serializer = _ARRAY_SERIALIZERS[(style, bool(explode))]
    return serializer(name, value, allow_reserved)
