from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from ._utils._query import QuerySerializer, default_query_serializer
from ._utils._url import remove_trailing_slash
from ._utils.constants import ENV_BASE_URL


class OpenapiOptions(BaseModel):
    """Client-wide defaults used to build request URLs.

    ``base_url`` is stored without its trailing slash.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    base_url: str = ""
    query_serializer: QuerySerializer = default_query_serializer

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return remove_trailing_slash(value)


def load_options(
    *,
    base_url: Optional[str] = None,
    query_serializer: Optional[QuerySerializer] = None,
) -> OpenapiOptions:
    """Resolve the client options.

    Explicit arguments take precedence over the environment (``OPENAPI_BASE_URL``,
    also read from a ``.env`` file), which takes precedence over the defaults.
    """
    load_dotenv(override=True)

    values: dict[str, Any] = {}
    base_url_value = base_url if base_url is not None else env.get(ENV_BASE_URL)
    if base_url_value is not None:
        values["base_url"] = base_url_value
    if query_serializer is not None:
        values["query_serializer"] = query_serializer

    return OpenapiOptions(**values)
