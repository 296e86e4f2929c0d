"""
This module implements the factory for creating request decoders.

`decoder_factory` validates a plain config dict once and returns a decoder
bound to it. Decoders keep no per-request state, so one instance can serve
any number of threads or tasks at the same time.
"""
import logging
from typing import Any, Dict, List

from .binary import decode_binary, normalize_headers
from .errors import UnsupportedFormat
from .models import CloudEvent, DecoderConfig
from .modes import Mode, event_format, select_mode
from .protocols import Decoder, HttpRequest
from .structured import decode_structured


class DecoderImpl(Decoder):
    def __init__(self, config: DecoderConfig):
        self.config = config

    def decode_many(self, request: HttpRequest) -> List[CloudEvent]:
        """
        Decodes every event carried by `request`: one for binary and
        structured mode, all of them, in order, for a batch.
        """
        content_type = normalize_headers(request.headers).get("content-type")
        mode = select_mode(content_type)

        if mode is not Mode.BINARY:
            fmt = event_format(content_type)
            if fmt != "json":
                if self.config.unknown_format != "binary":
                    raise UnsupportedFormat(fmt)
                logging.debug(f"No structured decoder for format '{fmt}', falling back to binary mode")
                mode = Mode.BINARY

        logging.debug(f"Decoding CloudEvent request in {mode.value} mode")
        if mode is Mode.BINARY:
            return [decode_binary(request, self.config.default_spec_version)]
        return decode_structured(
            request.body,
            batch=mode is Mode.BATCH,
            default_spec_version=self.config.default_spec_version,
        )

    def decode_one(self, request: HttpRequest) -> CloudEvent:
        """Decodes a request already known to be in binary mode."""
        return decode_binary(request, self.config.default_spec_version)


def decoder_factory(config: Dict[str, Any] | None = None) -> Decoder:
    """
    Returns a decoder for `config`. Recognised keys are `default_spec_version`
    and `unknown_format` ("error" or "binary"); unknown keys are rejected.
    """
    return DecoderImpl(DecoderConfig.model_validate(config or {}))


_default_decoder = decoder_factory()


def decode_many(request: HttpRequest) -> List[CloudEvent]:
    return _default_decoder.decode_many(request)


def decode_one(request: HttpRequest) -> CloudEvent:
    return _default_decoder.decode_one(request)
