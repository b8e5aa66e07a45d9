import uuid
from typing import Any, Callable, Dict, Optional, TypeVar, Union

import requests
import urllib3
from requests.exceptions import InvalidHeader
from requests.utils import check_header_validity

from .connection import API_KEY_HEADER, UnifiConnection
from .models.client import ClientOverview
from .models.common import ApplicationInfo, ErrorResponse, Page
from .models.device import DeviceDetails, DeviceOverview
from .models.site import SiteOverview
from .models.statistics import DeviceStatistics
from .logging import get_logger, log_api_response
from .exceptions import (
    UnifiAPIError,
    UnifiConfigurationError,
    UnifiDataError,
)

logger = get_logger(__name__)

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 25

T = TypeVar("T")
ResourceId = Union[uuid.UUID, str]


def _validate_api_key(api_key: Any) -> str:
    """
    Check that an API key can be sent as an HTTP header value.

    Only visible ASCII characters and tabs are accepted, without leading or
    trailing whitespace.

    Raises:
        UnifiConfigurationError: If the key is missing or not encodable.
    """
    if api_key is None or api_key == "":
        raise UnifiConfigurationError("API key is required")
    if not isinstance(api_key, str):
        raise UnifiConfigurationError(
            f"API key must be a string, got {type(api_key).__name__}")
    if any(char != "\t" and not (" " <= char <= "~") for char in api_key):
        raise UnifiConfigurationError(
            "API key contains characters that cannot be sent in an HTTP header")
    if api_key != api_key.strip(" \t"):
        raise UnifiConfigurationError(
            "API key must not start or end with whitespace")
    try:
        check_header_validity((API_KEY_HEADER, api_key))
    except InvalidHeader as e:
        raise UnifiConfigurationError(f"Invalid API key: {e}") from e
    return api_key


class UnifiClientBuilder:
    """
    Fluent builder for :class:`UnifiNetworkClient`.

    Example:
        >>> client = (
        ...     UnifiClientBuilder("https://192.168.1.1/proxy/network/integrations")
        ...     .api_key("your-api-key")
        ...     .verify_ssl(False)
        ...     .build()
        ... )

    The API key is created in the UniFi UI under Control Plane -> Admins & Users
    -> (your admin) -> Create API Key.
    """

    def __init__(self, base_url: str):
        """
        Args:
            base_url: Root of the integration API. A trailing slash is ignored.
        """
        self._base_url = base_url
        self._api_key: Optional[str] = None
        self._verify_ssl: Union[bool, str] = True
        self._timeout: Optional[float] = None

    def api_key(self, api_key: str) -> "UnifiClientBuilder":
        """Set the key sent in the ``X-API-KEY`` header. Required."""
        self._api_key = api_key
        return self

    def verify_ssl(self, verify: Union[bool, str] = True) -> "UnifiClientBuilder":
        """
        Configure TLS certificate verification.

        Args:
            verify: True to verify certificates (default), False to disable
                verification (insecure), or a path to a CA bundle file or
                directory of trusted CA certificates.
        """
        self._verify_ssl = verify
        return self

    def timeout(self, seconds: Optional[float]) -> "UnifiClientBuilder":
        """Set a per-request timeout in seconds. None (default) imposes none."""
        self._timeout = seconds
        return self

    def build(self) -> "UnifiNetworkClient":
        """
        Validate the configuration and create the client.

        No network activity happens here.

        Returns:
            A client holding a new :class:`UnifiConnection`.

        Raises:
            UnifiConfigurationError: If no API key was supplied or it cannot be
                used as a header value.
        """
        api_key = _validate_api_key(self._api_key)

        session = requests.Session()
        session.headers.update({
            API_KEY_HEADER: api_key,
            "Accept": "application/json",
        })
        session.verify = self._verify_ssl

        if self._verify_ssl is False:
            logger.warning(
                "SSL certificate verification is disabled. This is not recommended for production use."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        base_url = self._base_url.rstrip("/") if isinstance(
            self._base_url, str) else self._base_url
        logger.debug(f"Building UniFi Network client for {base_url}")

        connection = UnifiConnection(
            base_url=base_url, session=session, timeout=self._timeout)
        return UnifiNetworkClient(connection)


class UnifiNetworkClient:
    """
    Client for the UniFi Network integration API.

    Every method performs exactly one HTTP request. The client keeps no state
    besides its read-only :class:`UnifiConnection`, so one instance may be used
    from several threads at once.

    All methods raise:
        UnifiAPIError: If the server answers with a non-success status.
        UnifiDataError: If a response body does not match the expected model.
        UnifiTransportError: If the request fails at the network or TLS level.
        UnifiURLError: If the base URL or the request URL is malformed.
    """

    def __init__(self, connection: UnifiConnection):
        self._connection = connection

    @property
    def connection(self) -> UnifiConnection:
        return self._connection

    def clone(self) -> "UnifiNetworkClient":
        """Return a new client sharing this client's session."""
        return UnifiNetworkClient(self._connection.clone())

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> "UnifiNetworkClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _decode_json(self, response: requests.Response, url: str) -> Any:
        try:
            data = response.json()
        except ValueError as e:
            raise UnifiDataError(
                f"Failed to parse API response from {url} (Status: {response.status_code}): {e}"
            ) from e
        log_api_response(logger, url, data, response.status_code)
        return data

    def _send(
        self,
        method: str,
        url: str,
        parse: Optional[Callable[[Any], T]],
        params: Optional[Dict[str, Any]] = None,
        json_payload: Optional[Dict[str, Any]] = None,
    ) -> Optional[T]:
        """
        Send one request and apply the shared response contract.

        On a 2xx status the body is decoded with ``parse`` (or ignored when
        ``parse`` is None). Any other status must carry the JSON error
        envelope, which is turned into :class:`UnifiAPIError`.
        """
        response = self._connection.request(
            method, url, params=params, json_payload=json_payload)

        if 200 <= response.status_code < 300:
            if parse is None:
                return None
            return parse(self._decode_json(response, url))

        error = ErrorResponse.from_api(self._decode_json(response, url))
        logger.debug(
            f"API {method} request to {url} failed with {error.status_code}: {error.message}")
        raise UnifiAPIError(error.status_code, error.message)

    @staticmethod
    def _page_params(offset: Optional[int], limit: Optional[int]) -> Dict[str, int]:
        return {
            "offset": DEFAULT_OFFSET if offset is None else offset,
            "limit": DEFAULT_LIMIT if limit is None else limit,
        }

    def list_sites(
        self, offset: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[SiteOverview]:
        """
        List the sites managed by the Network application.

        Args:
            offset: Index of the first site to return. Defaults to 0.
            limit: Maximum number of sites to return. Defaults to 25.

        Returns:
            Page[SiteOverview]: One page of sites.
        """
        url = self._connection.url("v1", "sites")
        return self._send(
            "GET", url,
            lambda data: Page.from_api(data, SiteOverview),
            params=self._page_params(offset, limit),
        )

    def list_devices(
        self,
        site_id: ResourceId,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Page[DeviceOverview]:
        """
        List the devices of a site.

        Args:
            site_id: Identifier of the site.
            offset: Index of the first device to return. Defaults to 0.
            limit: Maximum number of devices to return. Defaults to 25.

        Returns:
            Page[DeviceOverview]: One page of devices.
        """
        url = self._connection.url("v1", "sites", site_id, "devices")
        return self._send(
            "GET", url,
            lambda data: Page.from_api(data, DeviceOverview),
            params=self._page_params(offset, limit),
        )

    def get_device_details(
        self, site_id: ResourceId, device_id: ResourceId
    ) -> DeviceDetails:
        """
        Get the full description of a device.

        Args:
            site_id: Identifier of the site containing the device.
            device_id: Identifier of the device.

        Returns:
            DeviceDetails: The device, with optional sections left as None
            when the server omits them.
        """
        url = self._connection.url("v1", "sites", site_id, "devices", device_id)
        return self._send("GET", url, DeviceDetails.from_api)

    def get_device_statistics(
        self, site_id: ResourceId, device_id: ResourceId
    ) -> DeviceStatistics:
        """
        Get the latest statistics of a device.

        Args:
            site_id: Identifier of the site containing the device.
            device_id: Identifier of the device.

        Returns:
            DeviceStatistics: The most recent statistics snapshot.
        """
        url = self._connection.url(
            "v1", "sites", site_id, "devices", device_id, "statistics", "latest")
        return self._send("GET", url, DeviceStatistics.from_api)

    def restart_device(self, site_id: ResourceId, device_id: ResourceId) -> None:
        """
        Ask the controller to restart a device.

        The call returns once the controller accepted the action; the restart
        itself happens asynchronously on the device.

        Args:
            site_id: Identifier of the site containing the device.
            device_id: Identifier of the device to restart.
        """
        url = self._connection.url(
            "v1", "sites", site_id, "devices", device_id, "actions")
        logger.info(f"Restarting device {device_id} on site {site_id}")
        self._send("POST", url, None, json_payload={"action": "RESTART"})

    def get_info(self) -> ApplicationInfo:
        """
        Get information about the Network application.

        Returns:
            ApplicationInfo: The application version.
        """
        url = self._connection.url("v1", "info")
        return self._send("GET", url, ApplicationInfo.from_api)

    def list_clients(
        self,
        site_id: ResourceId,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Page[ClientOverview]:
        """
        List the clients connected to a site.

        Args:
            site_id: Identifier of the site.
            offset: Index of the first client to return. Defaults to 0.
            limit: Maximum number of clients to return. Defaults to 25.

        Returns:
            Page[ClientOverview]: One page of clients. Each item is one of
            :class:`WiredClientOverview`, :class:`WirelessClientOverview`,
            :class:`VpnClientOverview` or :class:`TeleportClientOverview`.
        """
        url = self._connection.url("v1", "sites", site_id, "clients")
        return self._send(
            "GET", url,
            lambda data: Page.from_api(data, ClientOverview),
            params=self._page_params(offset, limit),
        )
