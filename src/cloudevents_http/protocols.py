"""
This module defines the abstract protocols the decoder works against.

The decoder never depends on a concrete HTTP framework: anything exposing a
header mapping and a body satisfies `HttpRequest`, and `decoder_factory`
returns an object satisfying `Decoder`.
"""
from typing import List, Mapping, Protocol

from .models import CloudEvent


class HttpRequest(Protocol):
    """
    The slice of an inbound HTTP request the decoder reads. Header names may
    arrive in any case; the body is whatever the transport buffered.
    """
    headers: Mapping[str, str]
    body: bytes | str | None


class Decoder(Protocol):
    def decode_many(self, request: HttpRequest) -> List[CloudEvent]:
        ...

    def decode_one(self, request: HttpRequest) -> CloudEvent:
        ...
