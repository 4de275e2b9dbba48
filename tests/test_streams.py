"""Tests for the replaying state stream and the broadcast stream."""

import os
import sys
import threading

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from utils.logging import get_log_file
from utils.streams import Broadcast, StateStream


def test_state_stream_replays_current_value():
    stream = StateStream("initial")
    stream.publish("second")

    seen = []
    stream.subscribe(seen.append)

    assert seen == ["second"]
    assert stream.value == "second"


def test_state_stream_delivers_in_order():
    stream = StateStream(0)
    seen = []
    stream.subscribe(seen.append)

    for value in (1, 2, 3):
        stream.publish(value)

    assert seen == [0, 1, 2, 3]


def test_publish_during_replay_arrives_after_replayed_value():
    stream = StateStream("loading")
    seen = []
    publisher = threading.Thread(target=stream.publish, args=("success",))

    def slow_subscriber(value):
        if not seen and not publisher.is_alive():
            # Publish from another thread while the replay is in progress
            publisher.start()
            publisher.join(0.2)
        seen.append(value)

    stream.subscribe(slow_subscriber)
    publisher.join(5)

    assert seen == ["loading", "success"]
    assert seen[-1] == stream.value


def test_broadcast_has_no_replay():
    stream = Broadcast()
    stream.emit("missed")

    seen = []
    stream.subscribe(seen.append)
    stream.emit("delivered")

    assert seen == ["delivered"]


def test_unsubscribe():
    stream = Broadcast()
    seen = []
    subscription = stream.subscribe(seen.append)
    assert stream.subscriber_count == 1

    subscription.unsubscribe()
    subscription.unsubscribe()  # second call is a no-op
    stream.emit("x")

    assert seen == []
    assert stream.subscriber_count == 0


def test_failing_subscriber_does_not_block_others():
    stream = Broadcast()
    seen = []

    def broken(value):
        raise RuntimeError("adapter bug")

    stream.subscribe(broken)
    stream.subscribe(seen.append)
    stream.emit("event")

    assert seen == ["event"]
    with open(get_log_file()) as f:
        assert "adapter bug" in f.read()
