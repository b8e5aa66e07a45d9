"""
UniFi Network API client.

This package provides a typed Python interface to the UniFi Network
integration API, giving access to sites, devices, device statistics,
clients and device actions.
"""

from .api_client import UnifiClientBuilder, UnifiNetworkClient
from .connection import UnifiConnection
from .models import (
    ApplicationInfo,
    ClientOverview,
    ClientType,
    DeviceDetails,
    DeviceOverview,
    DeviceState,
    DeviceStatistics,
    FrequencyBand,
    Page,
    SiteOverview,
    TeleportClientOverview,
    VpnClientOverview,
    WiredClientOverview,
    WirelessClientOverview,
)
from .exceptions import (
    UnifiNetworkError,
    UnifiConfigurationError,
    UnifiTransportError,
    UnifiURLError,
    UnifiAPIError,
    UnifiDataError,
)

__version__ = "0.1.0"

__all__ = [
    "UnifiClientBuilder",
    "UnifiNetworkClient",
    "UnifiConnection",
    "ApplicationInfo",
    "ClientOverview",
    "ClientType",
    "DeviceDetails",
    "DeviceOverview",
    "DeviceState",
    "DeviceStatistics",
    "FrequencyBand",
    "Page",
    "SiteOverview",
    "TeleportClientOverview",
    "VpnClientOverview",
    "WiredClientOverview",
    "WirelessClientOverview",
    "UnifiNetworkError",
    "UnifiConfigurationError",
    "UnifiTransportError",
    "UnifiURLError",
    "UnifiAPIError",
    "UnifiDataError",
]
