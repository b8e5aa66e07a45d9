"""
Connection handle shared by every request of a client.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from urllib.parse import quote, urlsplit

import requests

from .exceptions import UnifiTransportError, UnifiURLError
from .logging import get_logger

logger = get_logger(__name__)

API_KEY_HEADER = "X-API-KEY"


@dataclass(frozen=True)
class UnifiConnection:
    """
    Read-only handle on a configured HTTP session.

    The handle is created by :class:`~unifi_network_api.UnifiClientBuilder`
    and never changes afterwards, so it can be shared between threads.
    :meth:`clone` returns a new handle on the same session.

    Attributes:
        base_url: API root, e.g. ``https://192.168.1.1/proxy/network/integrations``.
        session: Session carrying the ``X-API-KEY`` header and TLS settings.
        timeout: Per-request timeout in seconds, or None to let the transport decide.
    """
    base_url: str
    session: requests.Session = field(repr=False, compare=False)
    timeout: Optional[float] = None

    def url(self, *segments: Union[str, Any]) -> str:
        """
        Build an absolute URL from path segments.

        Each segment is converted with ``str`` and percent-encoded, so opaque
        identifiers can never inject extra path components.

        Raises:
            UnifiURLError: If the resulting URL has no http(s) scheme or no host.
        """
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        url = f"{self.base_url}/{path}"
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise UnifiURLError(f"Invalid URL {url}: {e}") from e
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise UnifiURLError(f"Invalid URL {url}: expected an http(s) URL with a host")
        return url

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json_payload: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """
        Send a single request over the shared session.

        Args:
            method: HTTP method (e.g., 'GET', 'POST').
            url: The full URL for the API endpoint.
            params: Optional query parameters.
            json_payload: Optional dictionary to send as JSON body.

        Returns:
            requests.Response: The response, whatever its status code.

        Raises:
            UnifiURLError: If the transport rejects the URL.
            UnifiTransportError: For connection, TLS and timeout failures.
        """
        request_kwargs = {"timeout": self.timeout}
        if params is not None:
            request_kwargs["params"] = params
        if json_payload is not None:
            request_kwargs["json"] = json_payload

        logger.debug(f"{method} {url} params={params}")
        try:
            response = self.session.request(method, url, **request_kwargs)
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as e:
            raise UnifiURLError(f"Invalid URL {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.debug(f"API {method} request to {url} failed: {e}")
            raise UnifiTransportError(
                f"API {method} request to {url} failed: {e}", original=e) from e

        logger.debug(
            f"API {method} request to {url} returned status {response.status_code}")
        return response

    def clone(self) -> "UnifiConnection":
        """Return a new handle sharing this handle's session."""
        return dataclasses.replace(self)

    def close(self) -> None:
        """Close the underlying session and its pooled connections."""
        self.session.close()
