"""
HTTP Client for Docker Unix Socket
Pure Python implementation using http.client and socket
"""

import http.client
import logging
import socket
from typing import Dict, Optional, Tuple

from .endpoints import APIRequest
from .exceptions import APIError, DockerConnectionError
from .settings import ClientSettings

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = range(200, 205)


class UnixHTTPConnection(http.client.HTTPConnection):
    """HTTP connection over Unix socket"""

    def __init__(self, socket_path: str, host: str = 'localhost',
                 timeout: Optional[float] = None):
        super().__init__(host, timeout=timeout)
        self.socket_path = socket_path

    def connect(self):
        """Connect to Unix socket"""
        self.sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self.sock.settimeout(self.timeout)
        self.sock.connect(self.socket_path)


class DockerHTTPClient:
    """HTTP client for Docker daemon"""

    def __init__(self, settings: Optional[ClientSettings] = None):
        """
        Initialize Docker HTTP client

        Args:
            settings: Socket path, host and timeout (default: /var/run/docker.sock)
        """
        self.settings = settings or ClientSettings()

    def perform(self, path: str, method: str = 'GET',
                headers: Optional[Dict[str, str]] = None,
                body: Optional[bytes] = None) -> Tuple[int, str]:
        """
        Make one HTTP exchange with the Docker daemon

        A fresh connection is opened and closed for every call, and the whole
        response is buffered before returning.

        Args:
            path: API path including the query string
            method: HTTP method (GET, POST, DELETE)
            headers: Extra HTTP headers
            body: JSON request body as UTF-8 bytes

        Returns:
            Tuple of status code and response body text

        Raises:
            DockerConnectionError: If the socket fails or the body is not UTF-8
        """
        logger.debug(f"url = http://{self.settings.host}{path}")

        req_headers = {'Host': self.settings.host}
        if headers:
            req_headers.update(headers)

        if body is not None:
            req_headers['Content-Type'] = 'application/json'
            req_headers['Content-Length'] = str(len(body))
        elif method == 'POST':
            # Action endpoints (start, stop, prune, pull) take an empty body
            req_headers['Content-Length'] = '0'

        conn = UnixHTTPConnection(
            self.settings.socket_path,
            host=self.settings.host,
            timeout=self.settings.timeout
        )
        try:
            conn.request(method, path, body=body, headers=req_headers)
            response = conn.getresponse()
            status = response.status
            raw = response.read()
        except (OSError, http.client.HTTPException) as e:
            raise DockerConnectionError(
                f"Docker socket {self.settings.socket_path} request {method} {path} failed: {e}"
            ) from e
        finally:
            conn.close()

        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DockerConnectionError(f"Docker API response for {path} is not UTF-8: {e}") from e

        return status, text

    def send(self, request: APIRequest) -> str:
        """
        Perform a prepared request and check its status

        Args:
            request: Request built by the endpoints module

        Returns:
            Response body text (may be empty)

        Raises:
            APIError: If the daemon answers outside 200-204
        """
        status, text = self.perform(request.path, method=request.method, body=request.body)
        if status not in SUCCESS_STATUSES:
            logger.warning(f"Docker API call {request.method} {request.path} returned {status}")
            raise APIError(
                f"Docker API call failed: {request.method} {request.path} returned {status}: {text}",
                path=request.path,
                status_code=status,
                body=text
            )
        return text

