"""
Models for UniFi devices and related objects.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from ..utils import (
    as_bool,
    as_datetime,
    as_enum,
    as_int,
    as_mapping,
    as_str,
    as_str_set,
    as_tuple,
    as_uuid,
)
from .base import ApiModel, api_field
from .common import ConnectorType, FrequencyBand, PortState, WlanStandard


class DeviceState(str, Enum):
    """Lifecycle state of a managed device."""

    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    PENDING_ADOPTION = "PENDING_ADOPTION"
    UPDATING = "UPDATING"
    GETTING_READY = "GETTING_READY"
    ADOPTING = "ADOPTING"
    DELETING = "DELETING"
    CONNECTION_INTERRUPTED = "CONNECTION_INTERRUPTED"
    ISOLATED = "ISOLATED"

    @classmethod
    def _missing_(cls, value):
        # Some controller builds send the states without separators.
        if isinstance(value, str):
            for member in cls:
                if member.value.replace("_", "") == value:
                    return member
        return None


@dataclass(frozen=True, kw_only=True)
class DeviceOverview(ApiModel):
    """
    Represents a device as listed in a site's device collection.

    ``features`` holds capability tags such as ``switching`` or
    ``accessPoint``; ``interfaces`` names the interface groups the device
    has (``ports``, ``radios``).
    """
    id: uuid.UUID = api_field("id", as_uuid)
    name: str = api_field("name", as_str)
    model: str = api_field("model", as_str)
    mac_address: str = api_field("macAddress", as_str)
    state: DeviceState = api_field("state", as_enum(DeviceState))
    ip_address: Optional[str] = api_field("ipAddress", as_str, default=None)
    features: FrozenSet[str] = api_field(
        "features", as_str_set, default_factory=frozenset)
    interfaces: FrozenSet[str] = api_field(
        "interfaces", as_str_set, default_factory=frozenset)


@dataclass(frozen=True, kw_only=True)
class EthernetPortOverview(ApiModel):
    """A physical Ethernet port."""
    idx: int = api_field("idx", as_int)
    state: PortState = api_field("state", as_enum(PortState))
    connector: Optional[ConnectorType] = api_field(
        "connector", as_enum(ConnectorType), default=None)
    max_speed_mbps: Optional[int] = api_field(
        "maxSpeedMbps", as_int, default=None)
    speed_mbps: Optional[int] = api_field("speedMbps", as_int, default=None)


@dataclass(frozen=True, kw_only=True)
class WirelessRadioOverview(ApiModel):
    """A wireless radio. Every attribute may be missing depending on hardware."""
    wlan_standard: Optional[WlanStandard] = api_field(
        "wlanStandard", as_enum(WlanStandard), default=None)
    frequency_ghz: Optional[FrequencyBand] = api_field(
        "frequencyGHz", FrequencyBand.from_api, default=None)
    channel_width_mhz: Optional[int] = api_field(
        "channelWidthMHz", as_int, default=None)
    channel: Optional[int] = api_field("channel", as_int, default=None)


@dataclass(frozen=True, kw_only=True)
class DevicePhysicalInterfaces(ApiModel):
    ports: Tuple[EthernetPortOverview, ...] = api_field(
        "ports", as_tuple(EthernetPortOverview.from_api), default=())
    radios: Tuple[WirelessRadioOverview, ...] = api_field(
        "radios", as_tuple(WirelessRadioOverview.from_api), default=())


@dataclass(frozen=True, kw_only=True)
class DeviceUplinkInterface(ApiModel):
    device_id: uuid.UUID = api_field("deviceId", as_uuid)


@dataclass(frozen=True, kw_only=True)
class DeviceFeatures(ApiModel):
    """
    Feature sections of a device.

    The API currently sends empty objects for each feature; presence of a
    section means the device has that capability.
    """
    switching: Optional[Dict[str, Any]] = api_field(
        "switching", as_mapping, default=None)
    access_point: Optional[Dict[str, Any]] = api_field(
        "accessPoint", as_mapping, default=None)

    @property
    def is_switch(self) -> bool:
        return self.switching is not None

    @property
    def is_access_point(self) -> bool:
        return self.access_point is not None


@dataclass(frozen=True, kw_only=True)
class DeviceDetails(ApiModel):
    """
    Represents the full description of a single device.

    Sections such as ``uplink``, ``features`` and ``interfaces`` are only
    present for devices whose hardware and adoption state provide them.
    """
    # Identification
    id: uuid.UUID = api_field("id", as_uuid)
    name: str = api_field("name", as_str)
    model: str = api_field("model", as_str)
    mac_address: str = api_field("macAddress", as_str)
    state: DeviceState = api_field("state", as_enum(DeviceState))
    ip_address: Optional[str] = api_field("ipAddress", as_str, default=None)

    # Firmware and lifecycle
    supported: Optional[bool] = api_field("supported", as_bool, default=None)
    firmware_version: Optional[str] = api_field(
        "firmwareVersion", as_str, default=None)
    firmware_updatable: Optional[bool] = api_field(
        "firmwareUpdatable", as_bool, default=None)
    adopted_at: Optional[datetime] = api_field(
        "adoptedAt", as_datetime, default=None)
    provisioned_at: Optional[datetime] = api_field(
        "provisionedAt", as_datetime, default=None)
    configuration_id: Optional[str] = api_field(
        "configurationId", as_str, default=None)

    # Topology and hardware
    uplink: Optional[DeviceUplinkInterface] = api_field(
        "uplink", DeviceUplinkInterface.from_api, default=None)
    features: Optional[DeviceFeatures] = api_field(
        "features", DeviceFeatures.from_api, default=None)
    interfaces: Optional[DevicePhysicalInterfaces] = api_field(
        "interfaces", DevicePhysicalInterfaces.from_api, default=None)

    @property
    def ports(self) -> Tuple[EthernetPortOverview, ...]:
        return self.interfaces.ports if self.interfaces else ()

    @property
    def radios(self) -> Tuple[WirelessRadioOverview, ...]:
        return self.interfaces.radios if self.interfaces else ()
