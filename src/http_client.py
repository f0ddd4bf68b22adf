# http_client.py
from __future__ import annotations
import sys, uuid
from typing import Any, Optional
import httpx

class HttpClient:
    """
    - Reusable async HTTP client with:
      - base_url
      - optional httpx timeouts (None = wait indefinitely)
      - default query params (e.g. an API key) merged into every request
      - non-2xx fail fast, no retries
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
        *,
        default_params: Optional[dict[str, str]] = None,
        default_headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=read_timeout,
        )
        self.default_params = dict(default_params or {})
        self.default_headers = {"Accept": "application/json", **(default_headers or {})}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.default_headers,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Single round trip. Any non-2xx status raises httpx.HTTPStatusError,
        transport failures propagate as httpx.HTTPError.
        Each request tagged with X-Request-Id for traceability.
        """
        assert self._client is not None, "HttpClient used outside 'async with'"

        req_id = kwargs.pop("req_id", str(uuid.uuid4()))
        headers = kwargs.pop("headers", {})
        headers.setdefault("X-Request-Id", req_id)
        kwargs["headers"] = headers

        params = {**self.default_params, **(kwargs.pop("params", None) or {})}
        if params:
            kwargs["params"] = params

        url = self.base_url + "/" + path.lstrip("/") # for logs

        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            print(f"[req#{req_id}] [fatal] {method} {url} network error: {e!r}", file=sys.stderr)
            raise

        status = resp.status_code
        if not (200 <= status < 300):
            try:
                payload = resp.json()
            except ValueError:
                payload = {"error": (resp.text or "")[:200]}
            detail = payload.get("error", payload) if isinstance(payload, dict) else payload
            print(f"[req#{req_id}] [fatal] {method} {url} returned {status}: {detail}", file=sys.stderr)
            resp.raise_for_status()
        return resp
