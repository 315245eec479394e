from ._base_service import BaseClient
from .api_client import AsyncOpenapiClient, OpenapiClient

__all__ = [
    "AsyncOpenapiClient",
    "BaseClient",
    "OpenapiClient",
]
