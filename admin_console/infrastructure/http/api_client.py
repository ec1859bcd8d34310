"""REST API client for the console backend.

Wraps httpx for JSON requests against ``{api_base_url}{api_prefix}``.
Unwraps the ``{success, data, message}`` envelope (or a bare JSON body) and
turns every failure into a domain ``RepositoryError`` subclass.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from admin_console.application.interfaces import SessionContext
from admin_console.application.schemas import ApiEnvelope
from admin_console.domain.exceptions import (
    ServerError,
    TransportError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

_DEFAULT_ERROR_MESSAGE = "Request failed"


class ApiClient:
    """Infrastructure adapter — talks to the console REST backend.

    An injected ``httpx.AsyncClient`` is reused across calls (and in tests
    carries a mock or ASGI transport); otherwise a client is created and
    closed per request.
    """

    def __init__(
        self,
        base_url: str,
        session: SessionContext | None = None,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        token = self._session.get_token() if self._session else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    # ── Core request ────────────────────────────────────────────────

    async def request(self, method: str, path: str, *, json: Any = None) -> ApiEnvelope:
        """Send one request and return the unwrapped envelope."""
        url = self._url(path)
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.request(
                    method, url, headers=self._get_headers(), json=json
                )
            except httpx.RequestError as exc:
                logger.warning("%s %s failed without response: %s", method, url, exc)
                raise TransportError(f"Network error: {exc}") from exc

            logger.debug("%s %s → %d", method, url, response.status_code)
            return self._unwrap(response)

        finally:
            if should_close:
                await client.aclose()

    def _unwrap(self, response: httpx.Response) -> ApiEnvelope:
        body = self._decode(response)

        if response.status_code == 401:
            if self._session is not None:
                self._session.on_unauthorized()
            raise UnauthorizedError(self._message_from(body) or "Unauthorized")

        if response.status_code >= 400:
            message = (
                self._message_from(body)
                or response.reason_phrase
                or _DEFAULT_ERROR_MESSAGE
            )
            raise ServerError(response.status_code, message)

        envelope = self._to_envelope(body, response.status_code)
        if not envelope.success:
            raise ServerError(response.status_code, envelope.message or _DEFAULT_ERROR_MESSAGE)
        return envelope

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            if response.status_code >= 400:
                return None
            raise ServerError(response.status_code, "Malformed response body")

    @staticmethod
    def _message_from(body: Any) -> str | None:
        if isinstance(body, dict):
            message = body.get("message") or body.get("detail") or body.get("error")
            if isinstance(message, str) and message:
                return message
        return None

    @staticmethod
    def _to_envelope(body: Any, status_code: int) -> ApiEnvelope:
        if isinstance(body, dict) and ("success" in body or "data" in body):
            try:
                return ApiEnvelope.model_validate(body)
            except ValidationError as exc:
                raise ServerError(status_code, "Malformed response envelope") from exc
        # Bare array, bare record or empty body
        return ApiEnvelope(success=True, data=body)

    # ── Shaped helpers ──────────────────────────────────────────────

    async def get_list(self, path: str) -> list[Any]:
        envelope = await self.request("GET", path)
        if isinstance(envelope.data, list):
            return envelope.data
        logger.warning("GET %s returned no list (got %s); treating as empty", path, type(envelope.data).__name__)
        return []

    async def get_record(self, path: str) -> dict[str, Any]:
        return self._record(await self.request("GET", path), path)

    async def post_record(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        return self._record(await self.request("POST", path, json=body), path)

    async def put_record(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        return self._record(await self.request("PUT", path, json=body), path)

    async def delete(self, path: str) -> None:
        await self.request("DELETE", path)

    @staticmethod
    def _record(envelope: ApiEnvelope, path: str) -> dict[str, Any]:
        if isinstance(envelope.data, dict):
            return envelope.data
        raise ServerError(502, f"Response for {path} did not contain a record")

    async def aclose(self) -> None:
        """Close the injected client, if any."""
        if self._http_client is not None:
            await self._http_client.aclose()
