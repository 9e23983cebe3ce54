"""HTTP transport shared by all network-backed services."""

import asyncio
import threading
from typing import Any, Dict, Optional

import requests

from .env import DEFAULT_API_URL
from .errors import DomainError, TransportError
from .logger import get_logger

logger = get_logger()


def _error_body(resp: requests.Response) -> Optional[Dict[str, Any]]:
    try:
        body = resp.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


class ApiClient:
    """
    Thin wrapper over requests.Session that maps failures onto the
    OperationError taxonomy.

    Args:
        base_url: API root, e.g. http://localhost:3000/api
        timeout: Per-request timeout in seconds
        session: Optional pre-configured requests.Session, shared by every
            call. Without one, each thread uses its own Session.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._shared_session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        if self._shared_session is not None:
            return self._shared_session
        if not hasattr(self._local, "session"):
            self._local.session = requests.Session()
        return self._local.session

    def call(
        self,
        endpoint: str,
        method: str = "GET",
        json: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform one request and return the decoded JSON body.

        Raises:
            TransportError: Network failure, timeout, 5xx or unreadable error body
            DomainError: 4xx with a JSON error body, or 2xx with success=false
        """
        url = f"{self.base_url}{endpoint}"
        logger.record_api_call()
        try:
            resp = self.session.request(
                method, url, json=json, files=files, timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            logger.warning("API request timed out", url=url, method=method)
            raise TransportError("Network error occurred", status=0)
        except requests.exceptions.RequestException as e:
            logger.error("API request error", url=url, method=method, error=str(e))
            raise TransportError("Network error occurred", status=0)

        if not resp.ok:
            body = _error_body(resp)
            message = (body or {}).get("message") or f"HTTP {resp.status_code}"
            code = (body or {}).get("code")
            logger.warning("API request failed", url=url, status=resp.status_code, code=code)
            if body is not None and 400 <= resp.status_code < 500:
                raise DomainError(message, status=resp.status_code, code=code)
            raise TransportError(message, status=resp.status_code, code=code)

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            payload = resp.json()
        except ValueError:
            raise TransportError("Malformed response from server", status=resp.status_code)

        if isinstance(payload, dict) and payload.get("success") is False:
            raise DomainError(
                payload.get("message") or "Request was rejected by the server",
                status=resp.status_code,
                code=payload.get("code"),
            )
        return payload

    def upload_file(self, file, endpoint: str) -> Any:
        """POST a file as multipart form data under the 'file' field."""
        files = {"file": (file.filename, file.content, file.content_type)}
        return self.call(endpoint, method="POST", files=files)

    async def acall(self, endpoint: str, method: str = "GET", json: Optional[Dict[str, Any]] = None) -> Any:
        return await asyncio.to_thread(self.call, endpoint, method, json)

    async def aupload_file(self, file, endpoint: str) -> Any:
        return await asyncio.to_thread(self.upload_file, file, endpoint)
