from types import TracebackType
from typing import Any, Optional, Union

from httpx import AsyncClient, Client, Request, Response

from .._config import load_options
from .._utils._query import QuerySerializer
from ._base_service import BaseClient


class OpenapiClient(BaseClient):
    """HTTP client that accepts OpenAPI path templates and parameters.

    Every call is rewritten (path and query parameters serialized into the URL,
    header parameters moved to the headers) and delegated to an ``httpx.Client``.
    Responses are returned as they are.

    Examples:
        ```python
        from openapi_request import OpenapiClient

        with OpenapiClient(base_url="https://petstore.example.com/v1/") as client:
            client.get(
                "/pets/{petId}",
                params={"path": {"petId": 42}, "query": {"fields": ["name", "tag"]}},
            )
        ```

    Args:
        http_client (Optional[Client]): The client requests are delegated to. When
            omitted, one is created from ``client_kwargs`` and closed with this client.
        base_url (Optional[str]): Prepended to every path. Defaults to ``OPENAPI_BASE_URL``.
        query_serializer (Optional[QuerySerializer]): Serializes the query parameters.
    """

    def __init__(
        self,
        http_client: Optional[Client] = None,
        *,
        base_url: Optional[str] = None,
        query_serializer: Optional[QuerySerializer] = None,
        **client_kwargs: Any,
    ) -> None:
        super().__init__(
            load_options(base_url=base_url, query_serializer=query_serializer)
        )
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else Client(**client_kwargs)

    def request(
        self,
        method: Union[str, Request],
        path: Optional[str] = None,
        **options: Any,
    ) -> Response:
        """Send a request.

        A prebuilt ``httpx.Request`` passed on its own is sent unchanged.
        """
        if isinstance(method, Request):
            self._logger.debug(f"Request: {method.method} {method.url}")
            return self._client.send(method)

        if path is None:
            raise TypeError("`path` is required when `method` is a string.")

        spec = self.build_request_spec(method, path, **options)
        self._logger.debug(f"Request: {spec.method} {spec.url}")

        return self._client.request(spec.method, spec.url, **spec.request_kwargs())

    def get(self, path: str, **options: Any) -> Response:
        return self.request("GET", path, **options)

    def delete(self, path: str, **options: Any) -> Response:
        return self.request("DELETE", path, **options)

    def head(self, path: str, **options: Any) -> Response:
        return self.request("HEAD", path, **options)

    def options(self, path: str, **options: Any) -> Response:
        return self.request("OPTIONS", path, **options)

    def patch(self, path: str, body: Optional[Any] = None, **options: Any) -> Response:
        return self.request("PATCH", path, body=body, **options)

    def post(self, path: str, body: Optional[Any] = None, **options: Any) -> Response:
        return self.request("POST", path, body=body, **options)

    def put(self, path: str, body: Optional[Any] = None, **options: Any) -> Response:
        return self.request("PUT", path, body=body, **options)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "OpenapiClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncOpenapiClient(BaseClient):
    """Asynchronous counterpart of :class:`OpenapiClient`, delegating to ``httpx.AsyncClient``."""

    def __init__(
        self,
        http_client: Optional[AsyncClient] = None,
        *,
        base_url: Optional[str] = None,
        query_serializer: Optional[QuerySerializer] = None,
        **client_kwargs: Any,
    ) -> None:
        super().__init__(
            load_options(base_url=base_url, query_serializer=query_serializer)
        )
        self._owns_client = http_client is None
        self._client = (
            http_client if http_client is not None else AsyncClient(**client_kwargs)
        )

    async def request(
        self,
        method: Union[str, Request],
        path: Optional[str] = None,
        **options: Any,
    ) -> Response:
        if isinstance(method, Request):
            self._logger.debug(f"Request: {method.method} {method.url}")
            return await self._client.send(method)

        if path is None:
            raise TypeError("`path` is required when `method` is a string.")

        spec = self.build_request_spec(method, path, **options)
        self._logger.debug(f"Request: {spec.method} {spec.url}")

        return await self._client.request(
            spec.method, spec.url, **spec.request_kwargs()
        )

    async def get(self, path: str, **options: Any) -> Response:
        return await self.request("GET", path, **options)

    async def delete(self, path: str, **options: Any) -> Response:
        return await self.request("DELETE", path, **options)

    async def head(self, path: str, **options: Any) -> Response:
        return await self.request("HEAD", path, **options)

    async def options(self, path: str, **options: Any) -> Response:
        return await self.request("OPTIONS", path, **options)

    async def patch(
        self, path: str, body: Optional[Any] = None, **options: Any
    ) -> Response:
        return await self.request("PATCH", path, body=body, **options)

    async def post(
        self, path: str, body: Optional[Any] = None, **options: Any
    ) -> Response:
        return await self.request("POST", path, body=body, **options)

    async def put(
        self, path: str, body: Optional[Any] = None, **options: Any
    ) -> Response:
        return await self.request("PUT", path, body=body, **options)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncOpenapiClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
