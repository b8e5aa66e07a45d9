"""
Models shared across endpoints: pagination, application info, error envelope
and the enumerations used by device and statistics payloads.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterator, Tuple, TypeVar

from ..exceptions import UnifiDataError
from ..utils import as_int, as_str, as_tuple
from .base import ApiModel, api_field

T = TypeVar("T")


class PortState(str, Enum):
    """Link state of an Ethernet port."""

    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


class ConnectorType(str, Enum):
    """Physical connector of an Ethernet port."""

    RJ45 = "RJ45"
    SFP = "SFP"
    SFPPLUS = "SFPPLUS"
    SFP28 = "SFP28"
    QSFP28 = "QSFP28"

    @classmethod
    def _missing_(cls, value):
        if value == "SFP+":
            return cls.SFPPLUS
        return None


class WlanStandard(str, Enum):
    """IEEE 802.11 standard a radio operates on."""

    IEEE_802_11A = "802.11a"
    IEEE_802_11B = "802.11b"
    IEEE_802_11G = "802.11g"
    IEEE_802_11N = "802.11n"
    IEEE_802_11AC = "802.11ac"
    IEEE_802_11AX = "802.11ax"
    IEEE_802_11BE = "802.11be"


class FrequencyBand(str, Enum):
    """
    Wi-Fi frequency band in GHz.

    The API sends the band either as a string (``"2.4"``, ``"5"``) or as a
    number (``5``, ``6``, ``60``); :meth:`from_api` accepts both.
    """

    BAND_2_4_GHZ = "2.4"
    BAND_5_GHZ = "5"
    BAND_6_GHZ = "6"
    BAND_60_GHZ = "60"

    @property
    def ghz(self) -> float:
        return float(self.value)

    @classmethod
    def from_api(cls, value: Any) -> "FrequencyBand":
        """
        Decode a wire value into a band.

        Raises:
            UnifiDataError: If the value is not one of the known bands.
        """
        if isinstance(value, str):
            for band in cls:
                if band.value == value:
                    return band
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            for band in cls:
                if band.ghz == value:
                    return band
        raise UnifiDataError(f"invalid frequency band: {value!r}")


@dataclass(frozen=True, kw_only=True)
class ApplicationInfo(ApiModel):
    """Version information of the Network application."""

    application_version: str = api_field("applicationVersion", as_str)


@dataclass(frozen=True, kw_only=True)
class ErrorResponse(ApiModel):
    """Error envelope returned with non-success status codes."""

    status_code: int = api_field("statusCode", as_int)
    message: str = api_field("message", as_str)


@dataclass(frozen=True, kw_only=True)
class Page(ApiModel, Generic[T]):
    """
    One slice of a paginated collection.

    ``count`` is the number of items in this slice, ``total_count`` the size
    of the whole collection on the server.
    """

    offset: int = api_field("offset", as_int)
    limit: int = api_field("limit", as_int)
    count: int = api_field("count", as_int)
    total_count: int = api_field("totalCount", as_int)
    data: Tuple[T, ...] = api_field("data")

    @classmethod
    def from_api(cls, data: Any, item_model: Any = None) -> "Page":
        """
        Decode a page envelope, decoding each element of ``data`` with ``item_model``.

        Args:
            data: The decoded JSON value.
            item_model: A model class (anything with ``from_api``) or a plain
                converter callable used for each item.
        """
        if item_model is None:
            raise TypeError("Page.from_api requires an item_model")
        decode: Callable[[Any], Any] = getattr(item_model, "from_api", item_model)

        page = super().from_api(data)
        try:
            items = as_tuple(decode)(page.data)
        except (UnifiDataError, TypeError, ValueError) as e:
            raise UnifiDataError(f"Page.data: {e}") from e
        return cls(
            offset=page.offset,
            limit=page.limit,
            count=page.count,
            total_count=page.total_count,
            data=items,
            _extra_fields=page._extra_fields,
        )

    @property
    def items(self) -> Tuple[T, ...]:
        return self.data

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)
