import argparse
import json
import time
from datetime import datetime, timezone

from cloudevents_http import CloudEvent, SimpleRequest, decode_many


def make_batch_request(num_events: int) -> SimpleRequest:
    events = [
        CloudEvent(
            id=f"bench-{i}",
            source="/benchmark",
            type="com.example.bench",
            time=datetime.now(timezone.utc),
            data={"n": i},
        ).to_structured()
        for i in range(num_events)
    ]
    return SimpleRequest(
        headers={"Content-Type": "application/cloudevents-batch+json; charset=utf-8"},
        body=json.dumps(events).encode("utf-8"),
    )


def run_benchmark(num_events: int, rounds: int):
    request = make_batch_request(num_events)
    print(f"Decoding a batch of {num_events} events ({len(request.body):,} bytes), {rounds} rounds...")

    start_time = time.perf_counter()
    for _ in range(rounds):
        events = decode_many(request)
    duration = time.perf_counter() - start_time

    assert len(events) == num_events
    total = num_events * rounds
    print(f"Total time: {duration:.4f}s")
    print(f"Events per second: {total / duration:,.0f}")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--num-events", type=int, default=1000)
    parser.add_argument("--rounds", type=int, default=10)
    args = parser.parse_args()
    run_benchmark(args.num_events, args.rounds)


if __name__ == "__main__":
    main()
