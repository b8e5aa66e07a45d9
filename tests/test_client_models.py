"""
Tests for the tagged client union and the frequency band decoder.
"""

import uuid
from datetime import datetime, timezone

import pytest

from unifi_network_api import UnifiDataError
from unifi_network_api.models import (
    ClientOverview,
    ClientType,
    FrequencyBand,
    TeleportClientOverview,
    VpnClientOverview,
    WiredClientOverview,
    WirelessClientOverview,
)


class TestClientOverview:
    def test_wired_variant(self, wired_client_payload):
        client = ClientOverview.from_api(wired_client_payload)
        assert isinstance(client, WiredClientOverview)
        assert client.client_type is ClientType.WIRED
        assert client.id == uuid.UUID("0f2b5a1c-8f7e-4d6c-9b3a-1e2d3c4b5a69")
        assert client.name == "Desktop PC"
        assert client.connected_at == datetime(2025, 1, 18, 12, 0, tzinfo=timezone.utc)
        assert client.ip_address == "192.168.1.100"
        assert client.mac_address == "00:11:22:33:44:55"
        assert client.uplink_device_id == uuid.UUID("123e4567-e89b-12d3-a456-426614174001")

    def test_discriminator_is_not_an_extra_field(self, wired_client_payload):
        client = ClientOverview.from_api(wired_client_payload)
        assert "type" not in client._extra_fields

    def test_wireless_variant(self, wired_client_payload):
        wired_client_payload["type"] = "WIRELESS"
        client = ClientOverview.from_api(wired_client_payload)
        assert isinstance(client, WirelessClientOverview)
        assert client.mac_address == "00:11:22:33:44:55"

    def test_teleport_with_base_fields_only(self, teleport_client_payload):
        client = ClientOverview.from_api(teleport_client_payload)
        assert isinstance(client, TeleportClientOverview)
        assert client.name is None
        assert client.ip_address is None
        assert not hasattr(client, "mac_address")

    def test_vpn_variant(self, teleport_client_payload):
        teleport_client_payload["type"] = "VPN"
        teleport_client_payload["ipAddress"] = "10.8.0.2"
        client = ClientOverview.from_api(teleport_client_payload)
        assert isinstance(client, VpnClientOverview)
        assert client.ip_address == "10.8.0.2"

    def test_wired_requires_mac_address(self, wired_client_payload):
        del wired_client_payload["macAddress"]
        with pytest.raises(UnifiDataError, match="macAddress"):
            ClientOverview.from_api(wired_client_payload)

    def test_wireless_requires_uplink(self, wired_client_payload):
        wired_client_payload["type"] = "WIRELESS"
        del wired_client_payload["uplinkDeviceId"]
        with pytest.raises(UnifiDataError, match="uplinkDeviceId"):
            ClientOverview.from_api(wired_client_payload)

    def test_connected_at_is_required(self, teleport_client_payload):
        del teleport_client_payload["connectedAt"]
        with pytest.raises(UnifiDataError, match="connectedAt"):
            ClientOverview.from_api(teleport_client_payload)

    def test_missing_type(self, wired_client_payload):
        del wired_client_payload["type"]
        with pytest.raises(UnifiDataError, match="'type'"):
            ClientOverview.from_api(wired_client_payload)

    def test_unknown_type(self, wired_client_payload):
        wired_client_payload["type"] = "BLUETOOTH"
        with pytest.raises(UnifiDataError, match="unknown client type"):
            ClientOverview.from_api(wired_client_payload)

    @pytest.mark.parametrize("tag", [["WIRED"], {"kind": "WIRED"}, 1])
    def test_non_string_type(self, wired_client_payload, tag):
        wired_client_payload["type"] = tag
        with pytest.raises(UnifiDataError, match="ClientOverview.type"):
            ClientOverview.from_api(wired_client_payload)

    def test_variant_decodes_untagged_payload(self, wired_client_payload):
        del wired_client_payload["type"]
        client = WiredClientOverview.from_api(wired_client_payload)
        assert isinstance(client, WiredClientOverview)

    def test_variant_rejects_other_tag(self, teleport_client_payload):
        with pytest.raises(UnifiDataError, match="expected type 'VPN'"):
            VpnClientOverview.from_api(teleport_client_payload)

    def test_to_dict_carries_type(self, wired_client_payload):
        result = ClientOverview.from_api(wired_client_payload).to_dict()
        assert result["type"] == "WIRED"
        assert result["mac_address"] == "00:11:22:33:44:55"
        assert result["connected_at"] == "2025-01-18T12:00:00+00:00"

    def test_variants_compare_by_value(self, wired_client_payload):
        assert ClientOverview.from_api(wired_client_payload) == ClientOverview.from_api(
            dict(wired_client_payload))


class TestFrequencyBand:
    @pytest.mark.parametrize("wire, expected", [
        ("2.4", FrequencyBand.BAND_2_4_GHZ),
        ("5", FrequencyBand.BAND_5_GHZ),
        ("6", FrequencyBand.BAND_6_GHZ),
        ("60", FrequencyBand.BAND_60_GHZ),
        (2.4, FrequencyBand.BAND_2_4_GHZ),
        (5, FrequencyBand.BAND_5_GHZ),
        (6, FrequencyBand.BAND_6_GHZ),
        (60, FrequencyBand.BAND_60_GHZ),
        (5.0, FrequencyBand.BAND_5_GHZ),
    ])
    def test_accepted_wire_forms(self, wire, expected):
        assert FrequencyBand.from_api(wire) is expected

    @pytest.mark.parametrize("wire", ["2", "5.0", "2.4GHz", "", 2, 2.5, 24, True, None, [5], {"ghz": 5}])
    def test_rejected_wire_forms(self, wire):
        with pytest.raises(UnifiDataError, match="invalid frequency band"):
            FrequencyBand.from_api(wire)

    def test_string_form_round_trips(self):
        for band in FrequencyBand:
            assert FrequencyBand.from_api(band.value) is band

    def test_ghz(self):
        assert FrequencyBand.BAND_2_4_GHZ.ghz == 2.4
        assert FrequencyBand.BAND_60_GHZ.ghz == 60.0
