"""
This module defines the core data models for the decoder using Pydantic.
`CloudEvent` is the value every decode call produces. It is frozen, so an
event is built once, fully, and handed to the caller as an immutable value.
"""
import base64
from datetime import datetime
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

from .timestamps import format_rfc3339

DEFAULT_SPEC_VERSION = "1.0"

# JSON-format members an extension may not stand in for.
_RESERVED = {
    "specversion", "id", "source", "type", "datacontenttype", "dataschema",
    "subject", "time", "data", "data_base64",
}


class CloudEvent(BaseModel):
    """
    A decoded event. Attributes cannot be reassigned, but the freezing is
    shallow: `extensions` and a dict or list `data` are plain containers, and
    the model is not hashable.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    source: str = Field(min_length=1)
    type: str = Field(min_length=1)
    spec_version: str = DEFAULT_SPEC_VERSION
    data_content_type: str | None = None
    data_schema: str | None = None
    subject: str | None = None
    time: datetime | None = None
    data: Any = None
    # Extension attributes, carried through without validation.
    extensions: Dict[str, Any] = Field(default_factory=dict)

    def to_structured(self) -> Dict[str, Any]:
        """
        Renders the event as a CloudEvents JSON-format object, the shape
        `application/cloudevents+json` bodies carry. Binary data goes into
        `data_base64`.
        """
        out: Dict[str, Any] = {
            name: value for name, value in self.extensions.items() if name not in _RESERVED
        }
        out.update(
            {
                "specversion": self.spec_version,
                "id": self.id,
                "source": self.source,
                "type": self.type,
            }
        )
        if self.data_content_type is not None:
            out["datacontenttype"] = self.data_content_type
        if self.data_schema is not None:
            out["dataschema"] = self.data_schema
        if self.subject is not None:
            out["subject"] = self.subject
        if self.time is not None:
            out["time"] = format_rfc3339(self.time)
        if isinstance(self.data, bytes):
            out["data_base64"] = base64.b64encode(self.data).decode("ascii")
        elif self.data is not None:
            out["data"] = self.data
        return out


class SimpleRequest(BaseModel):
    """A minimal `HttpRequest` for callers without a request type of their own."""
    headers: Dict[str, str] = Field(default_factory=dict)
    body: bytes | str | None = None


class DecoderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_spec_version: str = Field(default=DEFAULT_SPEC_VERSION, min_length=1)
    # What to do with `application/cloudevents+<fmt>` when <fmt> is not json.
    unknown_format: Literal["error", "binary"] = "error"
