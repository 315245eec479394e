from typing import Any, Callable, Mapping, Optional, Union

from ..models.options import QuerySerializerOptions
from ._serializers import (
    is_array,
    is_object,
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
)

QuerySerializer = Callable[[Optional[Mapping[str, Any]]], str]


def create_query_serializer(
    options: Union[QuerySerializerOptions, Mapping[str, Any], None] = None,
) -> QuerySerializer:
    """Build a function that serializes a map of query parameters to a query string.

    Arrays default to ``form`` with ``explode=True`` and objects to ``deepObject``.
    ``None`` values and empty arrays are left out of the result.

    Args:
        options: Array/object styles and the ``allow_reserved`` flag. Plain mappings
            are validated into :class:`QuerySerializerOptions`.

    Returns:
        QuerySerializer: A function returning the query string without a leading ``?``.

    Examples:
        >>> serializer = create_query_serializer({"array": {"style": "pipeDelimited", "explode": False}})
        >>> serializer({"id": [3, 4, 5], "limit": 10})
        'id=3|4|5&limit=10'
    """
    if options is None:
        options = QuerySerializerOptions()
    elif not isinstance(options, QuerySerializerOptions):
        options = QuerySerializerOptions.model_validate(options)

    allow_reserved = options.allow_reserved
    array_options = options.array_options().model_dump()
    object_options = options.object_options().model_dump()

    def query_serializer(query_params: Optional[Mapping[str, Any]]) -> str:
        if not is_object(query_params):
            return ""

        search: list[str] = []
        for name, value in query_params.items():  # type: ignore[union-attr]
            if value is None:
                continue
            if is_array(value):
                if len(value) == 0:
                    continue
                search.append(serialize_array_param(name, value, **array_options))
            elif is_object(value):
                search.append(serialize_object_param(name, value, **object_options))
            else:
                search.append(
                    serialize_primitive_param(
                        name, value, allow_reserved=allow_reserved
                    )
                )

        return "&".join(fragment for fragment in search if fragment)

    return query_serializer


default_query_serializer: QuerySerializer = create_query_serializer()
