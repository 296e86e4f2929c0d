# cloudevents_http package

from .models import DEFAULT_SPEC_VERSION, CloudEvent, SimpleRequest
from .errors import (
    CloudEventDecodeError,
    MissingRequiredField,
    MismatchedContentType,
    InvalidTimestamp,
    InvalidJson,
    MalformedEvent,
    MalformedBatch,
    UnsupportedFormat,
)
from .modes import Mode, select_mode
from .factories import decoder_factory, decode_many, decode_one

__all__ = [
    "DEFAULT_SPEC_VERSION",
    "CloudEvent",
    "SimpleRequest",
    "CloudEventDecodeError",
    "MissingRequiredField",
    "MismatchedContentType",
    "InvalidTimestamp",
    "InvalidJson",
    "MalformedEvent",
    "MalformedBatch",
    "UnsupportedFormat",
    "Mode",
    "select_mode",
    "decoder_factory",
    "decode_many",
    "decode_one",
]
