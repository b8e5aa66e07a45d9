"""
Shared fixtures: a built client whose session never touches the network,
canned responses, and payloads shaped like real controller answers.
"""

import json
from unittest.mock import patch

import pytest
import requests

from unifi_network_api import UnifiClientBuilder

BASE_URL = "https://unifi.test/proxy/network/integrations"
SITE_ID = "88f7af54-98f8-306a-a1c7-c9349722b1f6"
DEVICE_ID = "123e4567-e89b-12d3-a456-426614174000"
UPLINK_DEVICE_ID = "123e4567-e89b-12d3-a456-426614174001"


def _make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = "" if body is None else json.dumps(body)
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.url = BASE_URL
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def client():
    with UnifiClientBuilder(BASE_URL).api_key("test-key").build() as unifi:
        yield unifi


@pytest.fixture
def mock_request(client):
    with patch.object(client.connection.session, "request") as mock:
        yield mock


@pytest.fixture
def device_details_payload():
    return {
        "id": DEVICE_ID,
        "name": "Test Device",
        "model": "UHDIW",
        "supported": True,
        "macAddress": "00:11:22:33:44:55",
        "ipAddress": "192.168.1.1",
        "state": "ONLINE",
        "firmwareVersion": "6.6.55",
        "firmwareUpdatable": True,
        "adoptedAt": "2025-01-18T12:00:00Z",
        "provisionedAt": "2025-01-18T12:00:00Z",
        "configurationId": "test123",
        "uplink": {"deviceId": UPLINK_DEVICE_ID},
        "features": {},
        "interfaces": {"ports": [], "radios": []},
    }


@pytest.fixture
def device_statistics_payload():
    return {
        "uptimeSec": 86400,
        "lastHeartbeatAt": "2025-01-18T12:00:00Z",
        "nextHeartbeatAt": "2025-01-18T12:00:10Z",
        "loadAverage1Min": 0.12,
        "loadAverage5Min": 0.2,
        "loadAverage15Min": 0.25,
        "cpuUtilizationPct": 4.5,
        "memoryUtilizationPct": 41,
        "uplink": {"txRateBps": 1200, "rxRateBps": 3400},
        "interfaces": {
            "radios": [
                {"frequencyGHz": "2.4", "txRetriesPct": 1.5},
                {"frequencyGHz": 6},
            ]
        },
    }


@pytest.fixture
def wired_client_payload():
    return {
        "type": "WIRED",
        "id": "0f2b5a1c-8f7e-4d6c-9b3a-1e2d3c4b5a69",
        "name": "Desktop PC",
        "connectedAt": "2025-01-18T12:00:00Z",
        "ipAddress": "192.168.1.100",
        "macAddress": "00:11:22:33:44:55",
        "uplinkDeviceId": UPLINK_DEVICE_ID,
    }


@pytest.fixture
def teleport_client_payload():
    return {
        "type": "TELEPORT",
        "id": "6c1d2e3f-4a5b-4c6d-8e7f-901a2b3c4d5e",
        "connectedAt": "2025-01-18T13:30:00Z",
    }


def page_payload(items, offset=0, limit=25, total_count=None):
    return {
        "offset": offset,
        "limit": limit,
        "count": len(items),
        "totalCount": len(items) if total_count is None else total_count,
        "data": items,
    }


@pytest.fixture
def make_page():
    return page_payload
