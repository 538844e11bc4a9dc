"""HTTP client for the section CRUD API.

Every call resolves to an ``ApiResult``. Failed requests come back as
``success=False`` with an error message instead of raising.
"""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


@dataclass
class ApiResult:
    """Outcome of one API call in the server's ``{success, data, error, warning}`` shape."""

    success: bool
    data: Any = None
    error: str | None = None
    warning: str | None = None
    status_code: int | None = None


class CrudApiClient:
    """Talks to ``/api/<section>`` endpoints with httpx.

    Uses the injected ``httpx.AsyncClient`` when given (tests pass one with a
    ``MockTransport``); otherwise a short-lived client is opened per request.
    """

    def __init__(
        self,
        base_url: str,
        section: str,
        *,
        authorization: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._section = section.strip("/")
        self._authorization = authorization
        self._http_client = http_client
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/api/{self._section}"

    def _get_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._authorization:
            headers["Authorization"] = self._authorization
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(self, method: str, url: str, payload: Any = None) -> ApiResult:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(
                method,
                url,
                headers=self._get_headers(),
                json=payload,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return ApiResult(success=False, error=f"Network error: {exc}")
        finally:
            if should_close:
                await client.aclose()

        return self._parse(method, url, response)

    @staticmethod
    def _parse(method: str, url: str, response: httpx.Response) -> ApiResult:
        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            if response.is_success:
                return ApiResult(success=True, data=body, status_code=response.status_code)
            return ApiResult(
                success=False,
                error=f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        success = response.is_success and body.get("success", True) is not False
        error = body.get("error")
        if not success and not error:
            error = f"HTTP {response.status_code}"
        if not success:
            logger.info("%s %s returned %d: %s", method, url, response.status_code, error)

        return ApiResult(
            success=success,
            data=body.get("data"),
            error=error if not success else None,
            warning=body.get("warning"),
            status_code=response.status_code,
        )

    # ── CRUD ────────────────────────────────────────────────────────

    async def list_items(self) -> ApiResult:
        return await self._request("GET", self.endpoint)

    def _item_url(self, item_id: str) -> str:
        return f"{self.endpoint}/{quote(item_id, safe='')}"

    async def get_item(self, item_id: str) -> ApiResult:
        return await self._request("GET", self._item_url(item_id))

    async def create_item(self, data: dict[str, Any]) -> ApiResult:
        return await self._request("POST", self.endpoint, data)

    async def update_item(self, item_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._request("PUT", self._item_url(item_id), data)

    async def delete_item(self, item_id: str) -> ApiResult:
        return await self._request("DELETE", self._item_url(item_id))
