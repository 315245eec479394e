import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ..models.options import PathStyle
from ._serializers import (
    encode_value,
    is_array,
    is_object,
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
)

PATH_PARAM_RE = re.compile(r"\{[^{}]+\}")

_SCALAR_SERIALIZERS: dict[str, Callable[[str, Any], str]] = {
    "simple": lambda name, value: encode_value(value),
    "label": lambda name, value: f".{encode_value(value)}",
    "matrix": lambda name, value: f";{serialize_primitive_param(name, value)}",
}


@dataclass(frozen=True)
class PathToken:
    """A ``{...}`` placeholder of a path template.

    >>> parse_path_token("{;id*}")
    PathToken(name='id', style='matrix', explode=True)
    """

    name: str
    style: PathStyle = "simple"
    explode: bool = False


def parse_path_token(token: str) -> PathToken:
    name = token
    if name.startswith("{") and name.endswith("}"):
        name = name[1:-1]

    explode = False
    if name.endswith("*"):
        explode = True
        name = name[:-1]

    style: PathStyle = "simple"
    if name.startswith("."):
        style = "label"
        name = name[1:]
    elif name.startswith(";"):
        style = "matrix"
        name = name[1:]

    return PathToken(name=name, style=style, explode=explode)


def _serialize_token(token: PathToken, value: Any) -> str:
    if value is None:
        return ""
    if is_array(value):
        return serialize_array_param(
            token.name, value, style=token.style, explode=token.explode
        )
    if is_object(value):
        return serialize_object_param(
            token.name, value, style=token.style, explode=token.explode
        )

    return _SCALAR_SERIALIZERS[token.style](token.name, value)


def default_path_serializer(
    pathname: str, path_params: Optional[Mapping[str, Any]]
) -> str:
    """Substitute the path parameters of an OpenAPI path template.

    Supports the ``simple`` (``{id}``), ``label`` (``{.id}``) and ``matrix``
    (``{;id}``) styles, each optionally exploded with a trailing ``*``.
    Placeholders without a value are removed.

    See https://swagger.io/docs/specification/serialization/#path

    Examples:
        >>> default_path_serializer("/users/{id}", {"id": 5})
        '/users/5'
        >>> default_path_serializer("/users/{.id}", {"id": 5})
        '/users/.5'
    """
    next_url = pathname
    for match in PATH_PARAM_RE.findall(pathname):
        token = parse_path_token(match)
        value = path_params.get(token.name) if path_params else None
        next_url = next_url.replace(match, _serialize_token(token, value), 1)

    return next_url
