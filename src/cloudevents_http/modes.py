"""
Content-mode selection for the CloudEvents HTTP binding. The transport
`content-type` alone decides whether a request is read from its headers or
from a structured body.
"""
from enum import Enum

_STRUCTURED_PREFIX = "application/cloudevents+"
_BATCH_PREFIX = "application/cloudevents-batch+"


class Mode(str, Enum):
    BINARY = "binary"
    STRUCTURED = "structured"
    BATCH = "batch"


def media_type(content_type: str | None) -> str:
    """The base media type, lower-cased and without parameters."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def select_mode(content_type: str | None) -> Mode:
    base = media_type(content_type)
    if base.startswith(_BATCH_PREFIX) and len(base) > len(_BATCH_PREFIX):
        return Mode.BATCH
    if base.startswith(_STRUCTURED_PREFIX) and len(base) > len(_STRUCTURED_PREFIX):
        return Mode.STRUCTURED
    return Mode.BINARY


def event_format(content_type: str | None) -> str | None:
    """The `<fmt>` of `application/cloudevents[-batch]+<fmt>`, or None for binary mode."""
    mode = select_mode(content_type)
    if mode is Mode.BINARY:
        return None
    return media_type(content_type).split("+", 1)[1]
