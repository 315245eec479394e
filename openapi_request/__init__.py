"""Typed HTTP request helper for OpenAPI 3.x operations.

This package builds request URLs from OpenAPI path templates, path parameters and
query parameters, following the OpenAPI parameter serialization rules (``style``
and ``explode``), and wraps an ``httpx`` client so it can be called with them.

Example:
```python
    from openapi_request import OpenapiClient, create_final_url

    create_final_url(
        "/pets/{id}",
        base_url="https://api.test",
        params={"path": {"id": 42}, "query": {"tags": ["a", "b"], "limit": 10}},
    )
    # 'https://api.test/pets/42?tags=a&tags=b&limit=10'

    # export OPENAPI_BASE_URL="https://api.test"
    with OpenapiClient() as client:
        client.get("/pets/{id}", params={"path": {"id": 42}})
```
"""

from ._config import OpenapiOptions, load_options
from ._services import AsyncOpenapiClient, OpenapiClient
from ._utils import (
    PathToken,
    QuerySerializer,
    RequestSpec,
    create_final_url,
    create_query_serializer,
    default_path_serializer,
    default_query_serializer,
    parse_path_token,
    remove_trailing_slash,
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
    setup_logging,
)
from .models import (
    QuerySerializerOptions,
    RequestParams,
    SerializationOptions,
    UnsupportedStyleError,
    UnsupportedValueError,
)

__all__ = [
    "AsyncOpenapiClient",
    "OpenapiClient",
    "OpenapiOptions",
    "PathToken",
    "QuerySerializer",
    "QuerySerializerOptions",
    "RequestParams",
    "RequestSpec",
    "SerializationOptions",
    "UnsupportedStyleError",
    "UnsupportedValueError",
    "create_final_url",
    "create_query_serializer",
    "default_path_serializer",
    "default_query_serializer",
    "load_options",
    "parse_path_token",
    "remove_trailing_slash",
    "serialize_array_param",
    "serialize_object_param",
    "serialize_primitive_param",
    "setup_logging",
]
