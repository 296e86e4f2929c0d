import json
import logging

from cloudevents_http import (
    CloudEventDecodeError,
    SimpleRequest,
    decode_many,
    decoder_factory,
)


def show(label: str, request: SimpleRequest, decode=decode_many):
    print(f"--- {label} ---")
    try:
        for event in decode(request):
            print(json.dumps(event.to_structured(), default=repr))
    except CloudEventDecodeError as e:
        # An HTTP layer would answer 400 here.
        print(f"rejected: {type(e).__name__}: {e}")


def main():
    logging.basicConfig(level=logging.DEBUG)

    show("binary", SimpleRequest(
        headers={
            "ce-id": "A234-1234-1234",
            "ce-source": "/mycontext",
            "ce-type": "com.example.someevent",
            "ce-time": "2018-04-05T17:31:05Z",
            "Content-Type": "text/plain",
        },
        body="Hello World\n",
    ))

    show("structured", SimpleRequest(
        headers={"Content-Type": "application/cloudevents+json; charset=utf-8"},
        body='{"type": "com.example.someevent", "source": "/mycontext", "id": "A234-1234-1234"}',
    ))

    show("batch", SimpleRequest(
        headers={"Content-Type": "application/cloudevents-batch+json"},
        body=json.dumps([
            {"type": "com.example.someevent", "source": "/mycontext", "id": f"A234-1234-1234-{i}"}
            for i in range(3)
        ]),
    ))

    show("mismatched content type", SimpleRequest(
        headers={
            "ce-id": "1", "ce-source": "/s", "ce-type": "t",
            "ce-datacontenttype": "text/plain",
            "Content-Type": "application/json",
        },
    ))

    # Unknown structured formats are read from the headers with this config.
    lenient = decoder_factory({"unknown_format": "binary"})
    show("avro with binary fallback", SimpleRequest(
        headers={
            "ce-id": "1", "ce-source": "/s", "ce-type": "t",
            "Content-Type": "application/cloudevents+avro",
        },
    ), decode=lenient.decode_many)


if __name__ == "__main__":
    main()
