from ._logs import setup_logging
from ._path import PathToken, default_path_serializer, parse_path_token
from ._query import QuerySerializer, create_query_serializer, default_query_serializer
from ._request_spec import RequestSpec
from ._serializers import (
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
)
from ._url import create_final_url, remove_trailing_slash

__all__ = [
    "PathToken",
    "QuerySerializer",
    "RequestSpec",
    "create_final_url",
    "create_query_serializer",
    "default_path_serializer",
    "default_query_serializer",
    "parse_path_token",
    "remove_trailing_slash",
    "serialize_array_param",
    "serialize_object_param",
    "serialize_primitive_param",
    "setup_logging",
]
