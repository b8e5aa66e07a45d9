"""
Data models for UniFi Network API responses.

Every model is an immutable dataclass built with ``Model.from_api(payload)``.
Fields the server may omit default to ``None`` (or to an empty collection),
so a missing optional section never makes decoding fail. Fields the server
sends but a model does not declare are kept in the ``_extra_fields``
attribute of the instance.
"""

from .common import (
    ApplicationInfo,
    ConnectorType,
    ErrorResponse,
    FrequencyBand,
    Page,
    PortState,
    WlanStandard,
)
from .site import SiteOverview
from .device import (
    DeviceDetails,
    DeviceFeatures,
    DeviceOverview,
    DevicePhysicalInterfaces,
    DeviceState,
    DeviceUplinkInterface,
    EthernetPortOverview,
    WirelessRadioOverview,
)
from .statistics import (
    DeviceInterfaceStatistics,
    DeviceStatistics,
    DeviceUplinkStatistics,
    WirelessRadioStatistics,
)
from .client import (
    ClientOverview,
    ClientType,
    TeleportClientOverview,
    VpnClientOverview,
    WiredClientOverview,
    WirelessClientOverview,
)

__all__ = [
    "ApplicationInfo",
    "ConnectorType",
    "ErrorResponse",
    "FrequencyBand",
    "Page",
    "PortState",
    "WlanStandard",
    "SiteOverview",
    "DeviceDetails",
    "DeviceFeatures",
    "DeviceOverview",
    "DevicePhysicalInterfaces",
    "DeviceState",
    "DeviceUplinkInterface",
    "EthernetPortOverview",
    "WirelessRadioOverview",
    "DeviceInterfaceStatistics",
    "DeviceStatistics",
    "DeviceUplinkStatistics",
    "WirelessRadioStatistics",
    "ClientOverview",
    "ClientType",
    "TeleportClientOverview",
    "VpnClientOverview",
    "WiredClientOverview",
    "WirelessClientOverview",
]
