import pytest
import pydantic_core
from datetime import datetime, timezone

from cloudevents_http import (
    DEFAULT_SPEC_VERSION,
    SimpleRequest,
    MissingRequiredField,
    MismatchedContentType,
    InvalidTimestamp,
)
from cloudevents_http.binary import decode_binary


def make_request(body=None, **extra_headers):
    headers = {
        "ce-type": "com.example.someevent",
        "ce-source": "/mycontext",
        "ce-id": "A234-1234-1234",
    }
    headers.update(extra_headers)
    return SimpleRequest(headers=headers, body=body)


def test_basic():
    ce = decode_binary(make_request())
    assert ce.id == "A234-1234-1234"
    assert ce.source == "/mycontext"
    assert ce.type == "com.example.someevent"
    assert ce.spec_version == DEFAULT_SPEC_VERSION
    assert ce.data_content_type is None
    assert ce.time is None


def test_with_spec_version():
    ce = decode_binary(make_request(**{"ce-specversion": "1.1"}))
    assert ce.spec_version == "1.1"


def test_default_spec_version_override():
    ce = decode_binary(make_request(), default_spec_version="0.3")
    assert ce.spec_version == "0.3"


@pytest.mark.parametrize("field", ["type", "source", "id"])
def test_missing_required_fields(field):
    request = make_request()
    del request.headers[f"ce-{field}"]
    with pytest.raises(MissingRequiredField) as exc_info:
        decode_binary(request)
    assert exc_info.value.field == field


def test_empty_required_field_is_missing():
    with pytest.raises(MissingRequiredField, match="id"):
        decode_binary(make_request(**{"ce-id": ""}))


def test_header_lookup_is_case_insensitive():
    request = SimpleRequest(headers={
        "CE-ID": "A234-1234-1234",
        "Ce-Source": "/mycontext",
        "ce-TYPE": "com.example.someevent",
        "Content-Type": "text/plain",
    })
    ce = decode_binary(request)
    assert ce.id == "A234-1234-1234"
    assert ce.source == "/mycontext"
    assert ce.type == "com.example.someevent"
    assert ce.data_content_type == "text/plain"


def test_with_cloud_event_data_content_type():
    ce = decode_binary(make_request(**{"ce-datacontenttype": "text/plain"}))
    assert ce.data_content_type == "text/plain"


def test_with_content_type():
    ce = decode_binary(make_request(**{"content-type": "text/plain"}))
    assert ce.data_content_type == "text/plain"


def test_matching_content_types():
    ce = decode_binary(make_request(**{"ce-datacontenttype": "text/plain", "content-type": "text/plain"}))
    assert ce.data_content_type == "text/plain"


def test_mismatched_content_types():
    request = make_request(**{"ce-datacontenttype": "text/plain", "content-type": "application/json"})
    with pytest.raises(MismatchedContentType) as exc_info:
        decode_binary(request)
    assert exc_info.value.attribute_value == "text/plain"
    assert exc_info.value.header_value == "application/json"
    assert isinstance(exc_info.value, ValueError)


def test_content_type_comparison_is_case_sensitive():
    request = make_request(**{"ce-datacontenttype": "text/plain", "content-type": "Text/Plain"})
    with pytest.raises(MismatchedContentType):
        decode_binary(request)


def test_with_data_schema():
    ce = decode_binary(make_request(**{"ce-dataschema": "test-dataschema"}))
    assert ce.data_schema == "test-dataschema"


def test_with_subject():
    ce = decode_binary(make_request(**{"ce-subject": "test-subject"}))
    assert ce.subject == "test-subject"


def test_with_time():
    # date -u --date='2018-04-05T17:31:05Z' +%s
    ce = decode_binary(make_request(**{"ce-time": "2018-04-05T17:31:05Z"}))
    assert ce.time.timestamp() == 1522949465
    assert ce.time.tzinfo == timezone.utc


def test_with_time_offset():
    ce = decode_binary(make_request(**{"ce-time": "2018-04-05T19:31:05+02:00"}))
    assert ce.time == datetime(2018, 4, 5, 17, 31, 5, tzinfo=timezone.utc)


def test_with_invalid_time():
    with pytest.raises(InvalidTimestamp):
        decode_binary(make_request(**{"ce-time": "April 5th 2018"}))


def test_with_data():
    ce = decode_binary(make_request(body="Hello World\n"))
    assert ce.data == "Hello World\n"


def test_with_bytes_data():
    ce = decode_binary(make_request(body=b"\x00\x01binary"))
    assert ce.data == b"\x00\x01binary"


def test_without_data():
    ce = decode_binary(make_request())
    assert ce.data is None


def test_empty_body_is_not_data():
    ce = decode_binary(make_request(body=""))
    assert ce.data is None
    ce = decode_binary(make_request(body=b""))
    assert ce.data is None


def test_extension_headers_are_carried():
    ce = decode_binary(make_request(**{"ce-traceparent": "00-abc-def-01", "x-other": "ignored"}))
    assert ce.extensions == {"traceparent": "00-abc-def-01"}


def test_event_is_immutable():
    ce = decode_binary(make_request())
    with pytest.raises(pydantic_core.ValidationError):
        ce.id = "changed"


def test_event_is_not_hashable():
    ce = decode_binary(make_request())
    with pytest.raises(TypeError):
        hash(ce)
