"""
Shared machinery for UniFi Network API models.
"""

import dataclasses
import uuid
from dataclasses import MISSING, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..exceptions import UnifiDataError
from ..logging import get_logger, log_extra_fields
from ..utils import API_FIELD, CONVERTER, map_api_data_to_model

logger = get_logger(__name__)


def api_field(
    name: str, converter: Optional[Callable[[Any], Any]] = None, **kwargs
) -> Any:
    """
    Declare a model attribute backed by a wire field.

    Args:
        name: Field name as it appears in the JSON payload.
        converter: Callable turning the JSON value into the attribute value.
        **kwargs: Passed to :func:`dataclasses.field` (``default``, ``default_factory``...).
            A field without a default is required on the wire.
    """
    metadata = {API_FIELD: name}
    if converter is not None:
        metadata[CONVERTER] = converter
    return field(metadata=metadata, **kwargs)


def _is_required(model_field: dataclasses.Field) -> bool:
    return model_field.default is MISSING and model_field.default_factory is MISSING


def _to_plain(value: Any) -> Any:
    if isinstance(value, ApiModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, frozenset):
        return sorted(_to_plain(item) for item in value)
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    return value


@dataclass(frozen=True, kw_only=True)
class ApiModel:
    """
    Base class for immutable models decoded from API responses.

    Subclasses declare their attributes with :func:`api_field`. Fields the
    server sends but the model does not declare are kept in ``_extra_fields``.
    """

    _extra_fields: Dict[str, Any] = field(
        default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: Any):
        """
        Decode a JSON object into an instance of this model.

        Args:
            data: The decoded JSON value.

        Returns:
            A new model instance.

        Raises:
            UnifiDataError: If the payload is not an object, a required field is
                missing or null, or a field has the wrong shape.
        """
        if not isinstance(data, dict):
            raise UnifiDataError(
                f"{cls.__name__}: expected a JSON object, got {type(data).__name__}")

        model_fields, extra_fields = map_api_data_to_model(data, cls)

        values = {}
        for model_field in dataclasses.fields(cls):
            if model_field.name == "_extra_fields":
                continue
            api_name = model_field.metadata.get(API_FIELD, model_field.name)
            value = model_fields.get(model_field.name)

            if value is None:
                if _is_required(model_field):
                    raise UnifiDataError(
                        f"{cls.__name__}: missing required field '{api_name}'")
                continue

            converter = model_field.metadata.get(CONVERTER)
            if converter is not None:
                try:
                    value = converter(value)
                except (UnifiDataError, TypeError, ValueError) as e:
                    raise UnifiDataError(
                        f"{cls.__name__}.{api_name}: {e}") from e
            values[model_field.name] = value

        if extra_fields:
            log_extra_fields(logger, cls.__name__,
                             str(data.get("id", "")), extra_fields)

        return cls(**values, _extra_fields=extra_fields)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the model to a plain dictionary.

        Returns:
            Dictionary keyed by attribute name with ``None`` values and
            internal fields left out. Enums, UUIDs and timestamps are
            rendered as strings.
        """
        result = {}
        for model_field in dataclasses.fields(self):
            if model_field.name.startswith("_"):
                continue
            value = _to_plain(getattr(self, model_field.name))
            if value is not None:
                result[model_field.name] = value
        return result
