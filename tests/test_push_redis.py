import json
from unittest.mock import MagicMock

from worksphere.notifications.push import RedisPushChannel

def make_channel():
    client = MagicMock()
    pubsub = client.pubsub.return_value
    thread = pubsub.run_in_thread.return_value
    return RedisPushChannel(client, "notifications"), client, pubsub, thread

def test_first_handler_subscribes_once():
    ch, client, pubsub, _ = make_channel()
    ch.on("notification", lambda _: None)
    ch.on("notification", lambda _: None)

    client.pubsub.assert_called_once_with(ignore_subscribe_messages=True)
    pubsub.subscribe.assert_called_once()
    assert "notifications" in pubsub.subscribe.call_args.kwargs
    pubsub.run_in_thread.assert_called_once()

def test_messages_dispatch_by_event():
    ch, _, pubsub, _ = make_channel()
    seen, other = [], []
    ch.on("notification", seen.append)
    ch.on("stats", other.append)
    on_message = pubsub.subscribe.call_args.kwargs["notifications"]

    on_message({"data": json.dumps({"id": 1, "read": False})})
    on_message({"data": json.dumps({"event": "stats", "data": {"unread_notifications": 4}})})
    on_message({"data": "not json"})

    assert seen == [{"id": 1, "read": False}]
    assert other == [{"unread_notifications": 4}]

def test_handler_error_does_not_stop_dispatch():
    ch, _, _, _ = make_channel()
    seen = []

    def broken(_):
        raise RuntimeError("nope")

    ch.on("notification", broken)
    ch.on("notification", seen.append)
    ch.dispatch("notification", {"id": 2})
    assert seen == [{"id": 2}]

def test_last_off_stops_listener_thread():
    ch, _, pubsub, thread = make_channel()
    h1, h2 = (lambda _: None), (lambda _: None)
    ch.on("notification", h1)
    ch.on("notification", h2)

    ch.off("notification", h1)
    thread.stop.assert_not_called()

    ch.off("notification", h2)
    thread.stop.assert_called_once()
    thread.join.assert_called_once_with(timeout=2.0)
    pubsub.close.assert_not_called()

    ch.dispatch("notification", {"id": 3})
