"""
Structured content mode: the whole event, attributes and data, is one JSON
document in the HTTP body. Batch mode carries a JSON array of such documents.

The body is self-describing, so nothing here looks at the transport
`content-type` beyond the mode selection already made by the caller.
"""
import base64
import binascii
import json
from typing import Any, Dict, List

from .errors import (
    CloudEventDecodeError,
    InvalidJson,
    MalformedBatch,
    MalformedEvent,
    MissingRequiredField,
)
from .models import DEFAULT_SPEC_VERSION, CloudEvent
from .timestamps import parse_rfc3339

_REQUIRED = ("id", "source", "type")
_OPTIONAL = {
    "datacontenttype": "data_content_type",
    "dataschema": "data_schema",
    "subject": "subject",
}
_KNOWN = {*_REQUIRED, *_OPTIONAL, "specversion", "time", "data", "data_base64"}


def parse_json(body: bytes | str | None) -> Any:
    try:
        return json.loads(body if body is not None else "")
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise InvalidJson(f"Invalid JSON in structured CloudEvent body: {e}") from e


def _optional_string(obj: Dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise MalformedEvent(f"CloudEvent attribute '{key}' must be a string, got {type(value).__name__}")
    return value


def _event_data(obj: Dict[str, Any]) -> Any:
    if "data_base64" not in obj:
        return obj.get("data")
    if "data" in obj:
        raise MalformedEvent("CloudEvent cannot carry both 'data' and 'data_base64'")
    encoded = obj["data_base64"]
    if not isinstance(encoded, str):
        raise MalformedEvent("CloudEvent attribute 'data_base64' must be a string")
    try:
        return base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise MalformedEvent(f"Invalid base64 in 'data_base64': {e}") from e


def event_from_object(obj: Dict[str, Any], default_spec_version: str = DEFAULT_SPEC_VERSION) -> CloudEvent:
    """Maps one JSON-format event object onto a `CloudEvent`."""
    required = {}
    for name in _REQUIRED:
        value = obj.get(name)
        if not isinstance(value, str) or not value:
            raise MissingRequiredField(name)
        required[name] = value

    optional = {field: _optional_string(obj, key) for key, field in _OPTIONAL.items()}
    spec_version = _optional_string(obj, "specversion")
    time = obj.get("time")

    return CloudEvent(
        **required,
        **optional,
        spec_version=spec_version or default_spec_version,
        time=parse_rfc3339(time) if time is not None else None,
        data=_event_data(obj),
        extensions={key: value for key, value in obj.items() if key not in _KNOWN},
    )


def decode_structured(
    body: bytes | str | None,
    batch: bool = False,
    default_spec_version: str = DEFAULT_SPEC_VERSION,
) -> List[CloudEvent]:
    root = parse_json(body)

    if not batch:
        if not isinstance(root, dict):
            raise MalformedEvent(f"Structured CloudEvent must be a JSON object, got {type(root).__name__}")
        return [event_from_object(root, default_spec_version)]

    if not isinstance(root, list):
        raise MalformedBatch(f"CloudEvent batch must be a JSON array, got {type(root).__name__}")
    if not root:
        raise MalformedBatch("CloudEvent batch must contain at least one event")
    events = []
    for index, element in enumerate(root):
        if not isinstance(element, dict):
            raise MalformedBatch(f"CloudEvent batch element {index} is not a JSON object")
        try:
            events.append(event_from_object(element, default_spec_version))
        except CloudEventDecodeError as e:
            e.add_note(f"CloudEvent batch element {index}")
            raise
    return events
