"""REST infrastructure package."""

from .api_client import ApiClient
from .http_entity_repository import HttpEntityRepository

__all__ = ["ApiClient", "HttpEntityRepository"]
