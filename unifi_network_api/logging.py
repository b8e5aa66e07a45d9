"""
Logging helpers for the UniFi Network client.

Every module logs below the ``unifi_network_api`` logger and the library never
installs handlers. Request lines, decoded response bodies and the wire fields a
model does not declare are logged at DEBUG only, so applications opt in with
``logging.getLogger("unifi_network_api").setLevel(logging.DEBUG)``.
"""

import logging
import json
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "unifi_network_api"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger below the package's root logger.

    Module names such as ``unifi_network_api.connection`` are used as given;
    anything else is nested under the root, so ``get_logger("tests")`` yields
    ``unifi_network_api.tests``.

    Args:
        name: Optional logger name. If not provided, the package root logger is returned.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    elif name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _truncate(value: str, max_length: int) -> str:
    if len(value) > max_length:
        return value[:max_length] + "... [truncated]"
    return value


def log_extra_fields(
    logger: logging.Logger,
    obj_name: str,
    obj_id: str,
    extra_fields: Dict[str, Any],
    max_length: int = 300,
):
    """
    Log wire fields that a model does not declare.

    Newer Network application releases add fields before this library models
    them; they are kept in ``_extra_fields`` and reported here so they can be
    spotted without failing the decode. Nested values are serialized to JSON
    and cut at ``max_length``.

    Args:
        logger: Logger to use.
        obj_name: Name of the model, e.g. 'DeviceOverview'.
        obj_id: The object's ``id`` wire value, or an empty string for models without one.
        extra_fields: Undeclared fields keyed by their camelCase wire name.
        max_length: Maximum length for each field value in the log. Default is 300.
    """
    if not logger.isEnabledFor(logging.DEBUG) or not extra_fields:
        return

    truncated_fields = {}
    for key, value in extra_fields.items():
        if isinstance(value, (dict, list)):
            try:
                truncated_fields[key] = _truncate(json.dumps(value), max_length)
            except (TypeError, ValueError):
                truncated_fields[key] = f"<complex structure: {type(value).__name__}>"
        elif isinstance(value, str):
            truncated_fields[key] = _truncate(value, max_length)
        else:
            truncated_fields[key] = value

    logger.debug(
        f"Extra fields for {obj_name} {obj_id}: {json.dumps(truncated_fields, indent=2)}"
    )


def log_api_response(
    logger: logging.Logger,
    url: str,
    response_data: Any,
    status_code: int,
    truncate: bool = True,
    max_length: int = 500,
):
    """
    Log a decoded integration API response.

    Called for success bodies and error envelopes alike, before they are
    turned into models or :class:`~unifi_network_api.UnifiAPIError`.

    Args:
        logger: Logger to use.
        url: The endpoint URL that was called, e.g. ``.../v1/sites``.
        response_data: The decoded JSON body (a page envelope, a single
            resource or a ``{statusCode, message}`` error).
        status_code: HTTP status code.
        truncate: Whether to truncate large response values. Default is True.
        max_length: Maximum length for response in the log if truncated. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    try:
        response_str = json.dumps(response_data)
        if truncate:
            response_str = _truncate(response_str, max_length)

        logger.debug(
            f"API Response from {url} (Status: {status_code}):\n{response_str}"
        )
    except (TypeError, ValueError) as e:
        logger.debug(
            f"API Response from {url} (Status: {status_code}) - Error serializing: {e}"
        )
