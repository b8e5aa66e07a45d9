"""
Models for clients connected to a UniFi site.

Clients are a tagged union keyed by the wire ``type`` field. Decoding through
:meth:`ClientOverview.from_api` returns the matching variant class.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Type

from ..exceptions import UnifiDataError
from ..utils import as_datetime, as_str, as_uuid
from .base import ApiModel, api_field


class ClientType(str, Enum):
    WIRED = "WIRED"
    WIRELESS = "WIRELESS"
    VPN = "VPN"
    TELEPORT = "TELEPORT"


@dataclass(frozen=True, kw_only=True)
class ClientOverview(ApiModel):
    """
    Fields shared by every client variant.

    Attributes:
        id: Unique identifier of the client.
        connected_at: When the client connected.
        name: Display name, if known.
        ip_address: Current IP address, if known.
    """
    client_type: ClassVar[Optional[ClientType]] = None

    id: uuid.UUID = api_field("id", as_uuid)
    connected_at: datetime = api_field("connectedAt", as_datetime)
    name: Optional[str] = api_field("name", as_str, default=None)
    ip_address: Optional[str] = api_field("ipAddress", as_str, default=None)

    @classmethod
    def from_api(cls, data: Any) -> "ClientOverview":
        """
        Decode a client, dispatching on the ``type`` discriminator.

        Called on :class:`ClientOverview` itself the variant is chosen from
        the payload; called on a variant the payload must carry that variant's
        tag or no tag at all.

        Raises:
            UnifiDataError: If the tag is missing, unknown or does not match.
        """
        if not isinstance(data, dict):
            raise UnifiDataError(
                f"{cls.__name__}: expected a JSON object, got {type(data).__name__}")

        tag = data.get("type")
        if cls.client_type is None:
            if tag is None:
                raise UnifiDataError(
                    "ClientOverview: missing required field 'type'")
            if not isinstance(tag, str):
                raise UnifiDataError(
                    f"ClientOverview.type: expected a string, got {type(tag).__name__}")
            variant = CLIENT_VARIANTS.get(tag)
            if variant is None:
                raise UnifiDataError(
                    f"ClientOverview: unknown client type {tag!r}")
            return variant.from_api(data)

        if tag is not None and tag != cls.client_type.value:
            raise UnifiDataError(
                f"{cls.__name__}: expected type '{cls.client_type.value}', got {tag!r}")
        body = {key: value for key, value in data.items() if key != "type"}
        return super().from_api(body)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.client_type is not None:
            result["type"] = self.client_type.value
        return result


@dataclass(frozen=True, kw_only=True)
class WiredClientOverview(ClientOverview):
    """A client attached to a switch port."""
    client_type: ClassVar[Optional[ClientType]] = ClientType.WIRED

    mac_address: str = api_field("macAddress", as_str)
    uplink_device_id: uuid.UUID = api_field("uplinkDeviceId", as_uuid)


@dataclass(frozen=True, kw_only=True)
class WirelessClientOverview(ClientOverview):
    """A client associated with an access point."""
    client_type: ClassVar[Optional[ClientType]] = ClientType.WIRELESS

    mac_address: str = api_field("macAddress", as_str)
    uplink_device_id: uuid.UUID = api_field("uplinkDeviceId", as_uuid)


@dataclass(frozen=True, kw_only=True)
class VpnClientOverview(ClientOverview):
    client_type: ClassVar[Optional[ClientType]] = ClientType.VPN


@dataclass(frozen=True, kw_only=True)
class TeleportClientOverview(ClientOverview):
    client_type: ClassVar[Optional[ClientType]] = ClientType.TELEPORT


CLIENT_VARIANTS: Dict[str, Type[ClientOverview]] = {
    variant.client_type.value: variant
    for variant in (
        WiredClientOverview,
        WirelessClientOverview,
        VpnClientOverview,
        TeleportClientOverview,
    )
}
