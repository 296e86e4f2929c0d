"""
Decode errors. Every failure aborts the decode call and reaches the caller as
one of these; the HTTP layer maps them to a 400-class response.
"""


class CloudEventDecodeError(ValueError):
    pass


class MissingRequiredField(CloudEventDecodeError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required CloudEvent attribute: {field}")


class MismatchedContentType(CloudEventDecodeError):
    def __init__(self, attribute_value: str, header_value: str):
        self.attribute_value = attribute_value
        self.header_value = header_value
        super().__init__(
            f"Mismatched content type: ce-datacontenttype is '{attribute_value}' "
            f"but content-type is '{header_value}'"
        )


class InvalidTimestamp(CloudEventDecodeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid RFC 3339 timestamp: {value!r}")


class InvalidJson(CloudEventDecodeError):
    pass


class MalformedEvent(CloudEventDecodeError):
    pass


class MalformedBatch(CloudEventDecodeError):
    pass


class UnsupportedFormat(CloudEventDecodeError):
    def __init__(self, fmt: str):
        self.format = fmt
        super().__init__(f"Unsupported structured event format: {fmt}. Only 'json' is supported.")
