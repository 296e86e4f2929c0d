"""
Binary content mode: event attributes travel as `ce-*` headers and the HTTP
body is the event data.
"""
from typing import Dict, Mapping

from .errors import MismatchedContentType, MissingRequiredField
from .models import DEFAULT_SPEC_VERSION, CloudEvent
from .protocols import HttpRequest
from .timestamps import parse_rfc3339

_PREFIX = "ce-"
_REQUIRED = ("id", "source", "type")
_KNOWN = {
    "id", "source", "type", "specversion", "datacontenttype", "dataschema", "subject", "time",
    # Reserved by the JSON format; never extensions.
    "data", "data_base64",
}


def normalize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Lower-cases header names so every lookup is case-insensitive."""
    return {name.lower(): value for name, value in headers.items()}


def has_body(body: bytes | str | None) -> bool:
    return body is not None and len(body) > 0


def decode_binary(request: HttpRequest, default_spec_version: str = DEFAULT_SPEC_VERSION) -> CloudEvent:
    headers = normalize_headers(request.headers)

    required = {}
    for name in _REQUIRED:
        value = headers.get(_PREFIX + name)
        if not value:
            raise MissingRequiredField(name)
        required[name] = value

    time = headers.get("ce-time")
    event_time = parse_rfc3339(time) if time is not None else None

    attribute_type = headers.get("ce-datacontenttype")
    header_type = headers.get("content-type")
    if attribute_type is not None and header_type is not None and attribute_type != header_type:
        raise MismatchedContentType(attribute_value=attribute_type, header_value=header_type)

    extensions = {
        name[len(_PREFIX):]: value
        for name, value in headers.items()
        if name.startswith(_PREFIX) and name[len(_PREFIX):] and name[len(_PREFIX):] not in _KNOWN
    }

    return CloudEvent(
        **required,
        spec_version=headers.get("ce-specversion") or default_spec_version,
        data_content_type=attribute_type if attribute_type is not None else header_type,
        data_schema=headers.get("ce-dataschema"),
        subject=headers.get("ce-subject"),
        time=event_time,
        data=request.body if has_body(request.body) else None,
        extensions=extensions,
    )
