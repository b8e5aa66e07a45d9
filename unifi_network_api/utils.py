"""
Utility functions for mapping UniFi Network API payloads onto models.
"""

import dataclasses
import inspect
import re
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Tuple, Type, TypeVar

from .logging import get_logger

logger = get_logger(__name__)

API_FIELD = "unifi_api_field"
CONVERTER = "converter"

E = TypeVar("E", bound=Enum)

_RFC3339 = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})")


def get_api_field_mapping(model_class: Type) -> Dict[str, str]:
    """
    Create a mapping between API field names and model attribute names.

    Examines dataclass fields with metadata to find mappings between
    API field names (like 'macAddress') and Python attribute names (like 'mac_address').

    Args:
        model_class: The dataclass model to examine for field mappings

    Returns:
        Dictionary mapping API field names to Python model attribute names
    """
    if not dataclasses.is_dataclass(model_class):
        return {}

    field_mapping = {}

    for field in dataclasses.fields(model_class):
        if API_FIELD in field.metadata:
            field_mapping[field.metadata[API_FIELD]] = field.name

    return field_mapping


def map_api_data_to_model(
    data: Dict[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Maps API data to model fields, separating model fields from extra fields.

    Only wire names declared through field metadata are mapped. A key that
    merely matches an attribute name (``mac_address``) is an extra field.

    Args:
        data: Input dictionary from API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Dictionary of fields keyed by model attribute name
            - extra_fields: Dictionary of wire fields the model does not declare
    """
    signature = inspect.signature(model_class)
    valid_params = set(signature.parameters.keys())
    valid_params.discard("_extra_fields")

    field_map = get_api_field_mapping(model_class)

    model_fields = {}
    extra_fields = {}

    for api_key, value in data.items():
        mapped_key = field_map.get(api_key)

        if mapped_key in valid_params:
            model_fields[mapped_key] = value
        else:
            extra_fields[api_key] = value

    return model_fields, extra_fields


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {_type_name(value)}")
    return value


def as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {_type_name(value)}")
    return value


def as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {_type_name(value)}")
    return float(value)


def as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {_type_name(value)}")
    return value


def as_uuid(value: Any) -> uuid.UUID:
    return uuid.UUID(as_str(value))


def as_datetime(value: Any) -> datetime:
    """
    Parse an RFC 3339 timestamp into an aware UTC datetime.

    A date, a time and an offset (or 'Z') are all required, so date-only
    values and local times are rejected.
    """
    text = as_str(value)
    if not _RFC3339.fullmatch(text):
        raise ValueError(f"not an RFC 3339 timestamp: {text!r}")
    text = text.upper()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).astimezone(timezone.utc)


def as_mapping(value: Any) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"expected an object, got {_type_name(value)}")
    return dict(value)


def as_str_set(value: Any) -> FrozenSet[str]:
    if not isinstance(value, list):
        raise TypeError(f"expected an array, got {_type_name(value)}")
    return frozenset(as_str(item) for item in value)


def as_enum(enum_class: Type[E]) -> Callable[[Any], E]:
    """Build a converter that decodes a string wire value into `enum_class`."""

    def convert(value: Any) -> E:
        text = as_str(value)
        try:
            return enum_class(text)
        except ValueError:
            raise ValueError(
                f"'{text}' is not a valid {enum_class.__name__}") from None

    return convert


def as_tuple(item_converter: Callable[[Any], Any]) -> Callable[[Any], Tuple[Any, ...]]:
    """Build a converter that decodes a JSON array item by item."""

    def convert(value: Any) -> Tuple[Any, ...]:
        if not isinstance(value, list):
            raise TypeError(f"expected an array, got {_type_name(value)}")
        return tuple(item_converter(item) for item in value)

    return convert
