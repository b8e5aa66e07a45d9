"""
Models for the latest statistics reported by a device.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..utils import as_datetime, as_float, as_int, as_tuple
from .base import ApiModel, api_field
from .common import FrequencyBand


@dataclass(frozen=True, kw_only=True)
class DeviceUplinkStatistics(ApiModel):
    """Current uplink throughput in bits per second."""
    tx_rate_bps: int = api_field("txRateBps", as_int)
    rx_rate_bps: int = api_field("rxRateBps", as_int)


@dataclass(frozen=True, kw_only=True)
class WirelessRadioStatistics(ApiModel):
    frequency_ghz: Optional[FrequencyBand] = api_field(
        "frequencyGHz", FrequencyBand.from_api, default=None)
    tx_retries_pct: Optional[float] = api_field(
        "txRetriesPct", as_float, default=None)


@dataclass(frozen=True, kw_only=True)
class DeviceInterfaceStatistics(ApiModel):
    radios: Tuple[WirelessRadioStatistics, ...] = api_field(
        "radios", as_tuple(WirelessRadioStatistics.from_api), default=())


@dataclass(frozen=True, kw_only=True)
class DeviceStatistics(ApiModel):
    """
    Latest statistics snapshot of a device.

    Load averages, utilization figures, uplink and radio statistics are only
    reported by devices that support them.
    """
    uptime_sec: int = api_field("uptimeSec", as_int)
    last_heartbeat_at: datetime = api_field("lastHeartbeatAt", as_datetime)
    next_heartbeat_at: datetime = api_field("nextHeartbeatAt", as_datetime)

    load_average_1min: Optional[float] = api_field(
        "loadAverage1Min", as_float, default=None)
    load_average_5min: Optional[float] = api_field(
        "loadAverage5Min", as_float, default=None)
    load_average_15min: Optional[float] = api_field(
        "loadAverage15Min", as_float, default=None)
    cpu_utilization_pct: Optional[float] = api_field(
        "cpuUtilizationPct", as_float, default=None)
    memory_utilization_pct: Optional[float] = api_field(
        "memoryUtilizationPct", as_float, default=None)

    uplink: Optional[DeviceUplinkStatistics] = api_field(
        "uplink", DeviceUplinkStatistics.from_api, default=None)
    interfaces: Optional[DeviceInterfaceStatistics] = api_field(
        "interfaces", DeviceInterfaceStatistics.from_api, default=None)
