"""
HTTP client for the QuickNotes API.

Every call returns an ``ApiResult`` built from the response envelope, so
callers branch on ``success`` instead of catching exceptions. Only
transport problems (connection failures, timeouts, bodies that are not an
envelope) raise ``TransportError``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..config import get_settings
from ..core.logging import get_logger
from .models import DEFAULT_COLOR, ClientNote

logger = get_logger("client.api")


class TransportError(Exception):
    """The store could not be reached or answered with something unreadable."""


@dataclass
class ApiResult:
    """Decoded response envelope."""

    success: bool
    status_code: int
    message: Optional[str] = None
    data: Any = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class NotesApiClient:
    """
    Async client for the ``/notes`` endpoints.

    Usage:
        async with NotesApiClient() as api:
            result = await api.list_notes()
            if result.success:
                notes = result.data
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.client_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "NotesApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def request(self, method: str, path: str, **kwargs: Any) -> ApiResult:
        """
        Send one request and decode the envelope.

        Raises:
            TransportError: when the store is unreachable or the body is not an envelope
        """
        client = await self._get_client()
        logger.debug("API request", extra={"method": method, "path": path})

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(
                "API request failed",
                extra={"method": method, "path": path, "error": str(e)},
            )
            raise TransportError(f"Cannot reach the notes server at {self.base_url}") from e

        logger.debug(
            "API response",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(f"Unreadable response (HTTP {response.status_code})") from e
        if not isinstance(body, dict) or "success" not in body:
            raise TransportError(f"Unexpected response (HTTP {response.status_code})")

        return ApiResult(
            success=bool(body["success"]),
            status_code=response.status_code,
            message=body.get("message"),
            data=body.get("data"),
            errors=body.get("errors") or {},
        )

    async def list_notes(self) -> ApiResult:
        result = await self.request("GET", "/notes")
        if result.success:
            result.data = self._parse_notes(result.data or [])
        return result

    async def get_note(self, note_id: str) -> ApiResult:
        result = await self.request("GET", f"/notes/{note_id}")
        if result.success:
            result.data = self._parse_note(result.data)
        return result

    async def create_note(
        self,
        title: str,
        content: str,
        color: str = DEFAULT_COLOR,
        order: Optional[int] = None,
    ) -> ApiResult:
        """Create a note; color and order are hints the store ignores."""
        payload: Dict[str, Any] = {"title": title, "content": content, "color": color}
        if order is not None:
            payload["order"] = order
        result = await self.request("POST", "/notes", json=payload)
        if result.success:
            result.data = self._parse_note(result.data)
        return result

    async def update_note(
        self, note_id: str, title: str, content: str, color: str = DEFAULT_COLOR
    ) -> ApiResult:
        payload = {"title": title, "content": content, "color": color}
        result = await self.request("PUT", f"/notes/{note_id}", json=payload)
        if result.success:
            result.data = self._parse_note(result.data)
        return result

    async def delete_note(self, note_id: str) -> ApiResult:
        return await self.request("DELETE", f"/notes/{note_id}")

    @staticmethod
    def _parse_note(data: Any) -> ClientNote:
        try:
            return ClientNote.model_validate(data)
        except ValidationError as e:
            raise TransportError("Unexpected note payload from server") from e

    @classmethod
    def _parse_notes(cls, data: Any) -> List[ClientNote]:
        if not isinstance(data, list):
            raise TransportError("Unexpected note list payload from server")
        return [cls._parse_note(item) for item in data]
