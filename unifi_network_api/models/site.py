"""
Models for UniFi sites.
"""

import uuid
from dataclasses import dataclass
from typing import Optional

from ..utils import as_str, as_uuid
from .base import ApiModel, api_field


@dataclass(frozen=True, kw_only=True)
class SiteOverview(ApiModel):
    """
    Represents a UniFi site.

    A site groups the devices and clients managed by one Network application.
    The server may omit the name.
    """
    id: uuid.UUID = api_field("id", as_uuid)
    name: Optional[str] = api_field("name", as_str, default=None)
