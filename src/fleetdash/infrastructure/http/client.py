"""
HTTP client abstraction for separating HTTP concerns from business logic.

The dashboard client decides what to call and how to interpret the answer;
this module only builds URLs, sends requests over a shared session and logs
what went over the wire.
"""

import logging
from typing import Any, Dict, Optional

import requests


class HttpClient:
    """Session-backed HTTP client rooted at a base URL."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ):
        """Initialize HTTP client with configuration.

        Args:
            base_url: Base URL for all requests
            session: Optional existing session to use
            timeout: Default request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.session = session or requests.Session()

    def request(
        self,
        method: str,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Any] = None,
        timeout: Optional[float] = None,
        **kwargs
    ) -> requests.Response:
        """Perform a request and return the raw response.

        Args:
            method: HTTP method
            endpoint: Path appended to base_url (or an absolute URL)
            headers: Request headers
            data: Request body, already encoded
            timeout: Override of the default timeout, in seconds
            **kwargs: Additional arguments passed to requests

        Returns:
            Response object. Transport failures propagate as
            ``requests.RequestException`` subclasses.
        """
        url = self._build_url(endpoint)

        self.logger.debug(f"{method} {url}")

        response = self.session.request(
            method,
            url,
            headers=headers,
            data=data,
            timeout=timeout if timeout is not None else self.timeout,
            **kwargs
        )

        self._log_response(response)
        return response

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint.

        Endpoints are appended verbatim so that a base URL carrying a path
        prefix (``https://host/api``) keeps it.
        """
        if endpoint.startswith(('http://', 'https://')):
            return endpoint
        if not endpoint.startswith('/'):
            endpoint = '/' + endpoint
        return self.base_url + endpoint

    def _log_response(self, response: requests.Response) -> None:
        self.logger.debug(
            f"Response: {response.status_code} - "
            f"{len(response.content)} bytes"
        )

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()


class AuthenticatedHttpClient(HttpClient):
    """HTTP client that adds the auth handler's headers to every request."""

    def __init__(
        self,
        base_url: str,
        auth_handler: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(base_url, **kwargs)
        self.auth_handler = auth_handler

    def get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers if available."""
        if self.auth_handler and hasattr(self.auth_handler, 'get_auth_headers'):
            return self.auth_handler.get_auth_headers()
        return {}

    def request(self, method: str, endpoint: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> requests.Response:
        """Request with auth headers; caller headers win on conflicts."""
        merged = self.get_auth_headers()
        merged.update(headers or {})
        return super().request(method, endpoint, headers=merged, **kwargs)
