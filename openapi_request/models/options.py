from typing import Any, Literal, Mapping, Optional, TypedDict

from pydantic import BaseModel, ConfigDict, Field

PathStyle = Literal["simple", "label", "matrix"]
ObjectStyle = Literal["simple", "label", "matrix", "form", "deepObject"]
ArrayStyle = Literal[
    "simple", "label", "matrix", "form", "spaceDelimited", "pipeDelimited"
]
SerializationStyle = Literal[
    "simple",
    "label",
    "matrix",
    "form",
    "deepObject",
    "spaceDelimited",
    "pipeDelimited",
]


class SerializationOptions(BaseModel):
    """Style and explode settings for a single parameter.

    ``style`` and ``explode`` always travel together. ``allow_reserved`` disables
    percent-encoding of the reserved URI characters ``:/?#[]@!$&'()*+,;=``.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        frozen=True,
    )

    style: SerializationStyle
    explode: bool
    allow_reserved: bool = Field(default=False, alias="allowReserved")


class ArrayQueryOptions(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    style: Literal["form", "spaceDelimited", "pipeDelimited"] = "form"
    explode: bool = True


class ObjectQueryOptions(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    style: Literal["form", "deepObject"] = "deepObject"
    explode: bool = True


class QuerySerializerOptions(BaseModel):
    """Configuration for :func:`openapi_request.create_query_serializer`.

    Accepts both the snake_case field names and the camelCase keys used by
    OpenAPI tooling, so ``{"allowReserved": True}`` and
    ``{"allow_reserved": True}`` are equivalent.

    Examples:
        >>> QuerySerializerOptions.model_validate(
        ...     {"array": {"style": "pipeDelimited", "explode": False}}
        ... ).array.style
        'pipeDelimited'
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="forbid",
    )

    array: Optional[ArrayQueryOptions] = None
    object: Optional[ObjectQueryOptions] = None
    allow_reserved: bool = Field(default=False, alias="allowReserved")

    def array_options(self) -> SerializationOptions:
        array = self.array or ArrayQueryOptions()
        return SerializationOptions(
            style=array.style,
            explode=array.explode,
            allow_reserved=self.allow_reserved,
        )

    def object_options(self) -> SerializationOptions:
        obj = self.object or ObjectQueryOptions()
        return SerializationOptions(
            style=obj.style,
            explode=obj.explode,
            allow_reserved=self.allow_reserved,
        )


class RequestParams(TypedDict, total=False):
    """Parameters of an OpenAPI operation, grouped by location."""

    path: Mapping[str, Any]
    query: Mapping[str, Any]
    header: Mapping[str, Any]
