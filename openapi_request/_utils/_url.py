from typing import Optional

from ..models.options import RequestParams
from ._path import default_path_serializer
from ._query import QuerySerializer, default_query_serializer


def remove_trailing_slash(url: str) -> str:
    """Remove a single trailing slash from ``url``.

    >>> remove_trailing_slash("https://api.example.com/")
    'https://api.example.com'
    """
    if url.endswith("/"):
        return url[:-1]

    return url


def create_final_url(
    pathname: str,
    *,
    base_url: str = "",
    params: Optional[RequestParams] = None,
    query_serializer: QuerySerializer = default_query_serializer,
) -> str:
    """Construct the request URL from the base URL, the path template and the parameters.

    ``base_url`` and ``pathname`` are concatenated as they are, so ``base_url``
    should already be free of its trailing slash (see :func:`remove_trailing_slash`)
    and ``pathname`` should start with ``/``.

    Args:
        pathname (str): The path template, e.g. ``/pets/{id}``.
        base_url (str): The base URL of the API.
        params (Optional[RequestParams]): The ``path`` and ``query`` parameters.
        query_serializer (QuerySerializer): Turns the query parameters into a query string.

    Returns:
        str: The final URL.

    Examples:
        >>> create_final_url(
        ...     "/pets/{id}",
        ...     base_url="https://api.test",
        ...     params={"path": {"id": 42}, "query": {"tags": ["a", "b"], "limit": 10}},
        ... )
        'https://api.test/pets/42?tags=a&tags=b&limit=10'
    """
    params = params or {}
    final_url = f"{base_url}{pathname}"

    if params.get("path") is not None:
        final_url = default_path_serializer(final_url, params["path"])

    query = params.get("query")
    search = query_serializer(query if query is not None else {})
    if search.startswith("?"):
        search = search[1:]
    if search:
        final_url += f"?{search}"

    return final_url
