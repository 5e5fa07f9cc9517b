import logging

import httpx

from utils.constants import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request that did not complete with a 2xx response.

    `status_code` is None when the request never got a response
    (connection refused, timeout, ...).
    """

    def __init__(self, method: str, path: str, status_code: int | None = None,
                 detail: str = ""):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.detail = detail
        if status_code is None:
            msg = f"{method} {path} failed: {detail or 'no response'}"
        else:
            msg = f"{method} {path} returned HTTP {status_code}"
            if detail:
                msg += f" ({detail})"
        super().__init__(msg)


class ApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float | None = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self._timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    def request(self, method: str, path: str, json: dict | None = None) -> httpx.Response:
        """Send a request; any transport failure or non-2xx becomes ApiError."""
        logger.debug("%s %s", method, path)
        try:
            response = self.get_client().request(method, path, json=json)
        except httpx.HTTPError as e:
            raise ApiError(method, path, detail=str(e)) from e
        if not response.is_success:
            raise ApiError(method, path, status_code=response.status_code)
        return response

    def get_json(self, path: str):
        response = self.request("GET", path)
        try:
            return response.json()
        except ValueError as e:
            raise ApiError("GET", path, response.status_code, detail="invalid JSON body") from e

    def close(self):
        if self._client is not None:
            self._client.close()
            self._client = None
