from logging import getLogger
from typing import Any, Mapping, Optional

from httpx import USE_CLIENT_DEFAULT

from .._config import OpenapiOptions
from ..models.options import RequestParams
from .._utils import RequestSpec, create_final_url, remove_trailing_slash
from .._utils._query import QuerySerializer
from .._utils._serializers import (
    encode_value,
    is_array,
    is_object,
    serialize_array_param,
    serialize_object_param,
)


def _header_value(name: str, value: Any) -> str:
    # header parameters always use the non-exploded "simple" style
    if is_array(value):
        return serialize_array_param(
            name, value, style="simple", explode=False, allow_reserved=True
        )
    if is_object(value):
        return serialize_object_param(
            name, value, style="simple", explode=False, allow_reserved=True
        )
    return encode_value(value, allow_reserved=True)


def header_params(params: Optional[RequestParams]) -> dict[str, str]:
    """Headers declared as OpenAPI ``header`` parameters.

    Scalars are rendered as text, arrays and objects in the ``simple`` style
    (``[1, 2]`` becomes ``1,2``). ``None`` values are dropped.
    """
    headers = (params or {}).get("header") or {}

    return {
        name: _header_value(name, value)
        for name, value in headers.items()
        if value is not None
    }


class BaseClient:
    """Rewrites OpenAPI-style calls into plain HTTP requests.

    Subclasses own the HTTP client and only have to dispatch the
    :class:`RequestSpec` built by :meth:`build_request_spec`.
    """

    def __init__(self, options: OpenapiOptions) -> None:
        self._logger = getLogger("openapi_request")
        self._options = options

        self._logger.debug(f"BASE URL: {self._options.base_url!r}")

        super().__init__()

    def build_request_spec(
        self,
        method: str,
        path: str,
        *,
        params: Optional[RequestParams] = None,
        base_url: Optional[str] = None,
        query_serializer: Optional[QuerySerializer] = None,
        body: Optional[Any] = None,
        headers: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> RequestSpec:
        """Resolve the final URL and the request options of a single call.

        Args:
            method (str): The HTTP method.
            path (str): The path template, e.g. ``/pets/{id}``.
            params (Optional[RequestParams]): The ``path``, ``query`` and ``header`` parameters.
            base_url (Optional[str]): Overrides the client's base URL for this call.
            query_serializer (Optional[QuerySerializer]): Overrides the client's query serializer for this call.
            body (Optional[Any]): The request body. ``str`` and ``bytes`` are sent as they are, anything else as JSON.
            headers (Optional[Mapping[str, Any]]): Extra headers. Header parameters win over them.
            **kwargs: Forwarded to the HTTP client.

        Returns:
            RequestSpec: The rewritten request.
        """
        url = create_final_url(
            path,
            base_url=(
                remove_trailing_slash(base_url)
                if base_url
                else self._options.base_url
            ),
            params=params,
            query_serializer=query_serializer or self._options.query_serializer,
        )

        content = kwargs.pop("content", None)
        json = kwargs.pop("json", None)
        if body is not None:
            if isinstance(body, (str, bytes)):
                content = body
            else:
                json = body

        return RequestSpec(
            method=method.upper(),
            url=url,
            headers={**(headers or {}), **header_params(params)},
            content=content,
            json=json,
            data=kwargs.pop("data", None),
            timeout=kwargs.pop("timeout", USE_CLIENT_DEFAULT),
            extra=kwargs,
        )
