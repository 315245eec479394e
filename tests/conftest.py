import pytest

from openapi_request._utils.constants import ENV_BASE_URL


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clear_base_url(monkeypatch):
    monkeypatch.delenv(ENV_BASE_URL, raising=False)
