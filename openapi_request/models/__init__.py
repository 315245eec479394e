from .errors import UnsupportedStyleError, UnsupportedValueError
from .options import (
    ArrayQueryOptions,
    ArrayStyle,
    ObjectQueryOptions,
    ObjectStyle,
    PathStyle,
    QuerySerializerOptions,
    RequestParams,
    SerializationOptions,
    SerializationStyle,
)

__all__ = [
    "ArrayQueryOptions",
    "ArrayStyle",
    "ObjectQueryOptions",
    "ObjectStyle",
    "PathStyle",
    "QuerySerializerOptions",
    "RequestParams",
    "SerializationOptions",
    "SerializationStyle",
    "UnsupportedStyleError",
    "UnsupportedValueError",
]
