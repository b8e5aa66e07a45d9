import logging

from unifi_network_api.logging import get_logger, log_api_response, log_extra_fields
from unifi_network_api.models import SiteOverview


class TestGetLogger:
    def test_root_logger(self):
        assert get_logger().name == "unifi_network_api"

    def test_child_logger(self):
        assert get_logger("tests").name == "unifi_network_api.tests"

    def test_qualified_name_is_kept(self):
        assert get_logger("unifi_network_api.api_client").name == "unifi_network_api.api_client"


class TestLogApiResponse:
    def test_logs_status_and_body(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.DEBUG, logger="unifi_network_api"):
            log_api_response(logger, "https://unifi.test/v1/info", {"applicationVersion": "9.0.108"}, 200)
        assert "Status: 200" in caplog.text
        assert "9.0.108" in caplog.text

    def test_truncates_long_bodies(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.DEBUG, logger="unifi_network_api"):
            log_api_response(logger, "https://unifi.test/v1/sites", {"data": "x" * 2000}, 200, max_length=50)
        assert "... [truncated]" in caplog.text
        assert "x" * 100 not in caplog.text

    def test_silent_above_debug(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.INFO, logger="unifi_network_api"):
            log_api_response(logger, "https://unifi.test/v1/info", {"a": 1}, 200)
        assert caplog.text == ""


class TestLogExtraFields:
    def test_logs_undeclared_fields(self, caplog):
        logger = get_logger("tests")
        with caplog.at_level(logging.DEBUG, logger="unifi_network_api"):
            log_extra_fields(logger, "SiteOverview", "default", {"internalReference": "default"})
        assert "Extra fields for SiteOverview default" in caplog.text
        assert "internalReference" in caplog.text

    def test_decoding_reports_extra_fields(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="unifi_network_api"):
            SiteOverview.from_api({
                "id": "88f7af54-98f8-306a-a1c7-c9349722b1f6",
                "internalReference": {"nested": ["value"]},
            })
        assert "Extra fields for SiteOverview 88f7af54-98f8-306a-a1c7-c9349722b1f6" in caplog.text
