from worksphere.config import Settings
from worksphere.notifications.feed import NotificationFeed
from worksphere.notifications.push import RedisPushChannel

def make_feed(service, scheduler, push=None) -> NotificationFeed:
    return NotificationFeed(service, scheduler, push_channel=push)

def test_mount_fetches_once_and_starts_stats_poll(service, scheduler, remote, push):
    feed = make_feed(service, scheduler, push)
    feed.mount()

    assert remote.calls["fetch_all"] == 1
    assert [n.id for n in feed.items] == [1, 2]
    assert feed.unread_count == 1
    assert feed.badge == "1"
    assert [j.interval for j in scheduler.active] == [20.0]
    assert len(push.handlers["notification"]) == 1

def test_stats_poll_refreshes_badge_only(service, scheduler, remote):
    feed = make_feed(service, scheduler)
    feed.mount()

    remote.items.append({"id": 3, "read": False})
    scheduler.advance(20)
    assert remote.calls["get_stats"] == 1
    assert remote.calls["fetch_all"] == 1
    assert feed.unread_count == 2
    assert len(feed.items) == 2

def test_stats_failure_keeps_count(service, scheduler, remote):
    feed = make_feed(service, scheduler)
    feed.mount()
    remote.fail.add("get_stats")
    scheduler.advance(40)
    assert feed.unread_count == 1

def test_push_prepends_and_increments(service, scheduler, push):
    feed = make_feed(service, scheduler, push)
    feed.mount()

    push.emit("notification", {"id": 9, "type": "task_assigned", "read": False})
    assert feed.items[0].id == 9
    assert feed.unread_count == 2

    push.emit("notification", {"id": 10, "read": True})
    assert feed.items[0].id == 10
    assert feed.unread_count == 2

def test_malformed_push_is_ignored(service, scheduler, push):
    feed = make_feed(service, scheduler, push)
    feed.mount()
    push.emit("notification", {"title": "no id"})
    assert len(feed.items) == 2

def test_unmount_tears_everything_down(service, scheduler, remote, push):
    feed = make_feed(service, scheduler, push)
    feed.mount()
    feed.unmount()

    assert scheduler.active == []
    assert push.handlers["notification"] == []
    scheduler.advance(120)
    assert remote.calls.get("get_stats", 0) == 0

def test_result_after_unmount_is_discarded(service, scheduler, remote):
    feed = make_feed(service, scheduler)
    feed.mount()

    real_fetch = remote.fetch_all

    def slow_fetch(filters=None):
        feed.unmount()
        return [{"id": 42, "read": False}]

    remote.fetch_all = slow_fetch
    feed.load()
    assert [n.id for n in feed.items] == [1, 2]
    assert feed.unread_count == 1
    remote.fetch_all = real_fetch

def test_mount_is_idempotent(service, scheduler, remote, push):
    feed = make_feed(service, scheduler, push)
    feed.mount()
    feed.mount()
    assert remote.calls["fetch_all"] == 1
    assert len(scheduler.active) == 1
    assert len(push.handlers["notification"]) == 1

def test_mark_as_read(service, scheduler):
    feed = make_feed(service, scheduler)
    feed.mount()

    assert feed.mark_as_read(1) is True
    assert all(n.read for n in feed.items)
    assert feed.unread_count == 0

def test_mark_as_read_failure_leaves_state(service, scheduler, remote):
    feed = make_feed(service, scheduler)
    feed.mount()
    remote.fail.add("mark_read")

    assert feed.mark_as_read(1) is False
    assert feed.unread_count == 1
    assert feed.items[0].read is False

def test_mark_all_as_read(service, scheduler):
    feed = make_feed(service, scheduler)
    feed.mount()
    assert feed.mark_all_as_read() is True
    assert feed.unread_count == 0
    assert feed.badge == ""

def test_delete_unread_decrements(service, scheduler):
    feed = make_feed(service, scheduler)
    feed.mount()

    assert feed.delete(2) is True
    assert feed.unread_count == 1
    assert feed.delete(1) is True
    assert feed.items == []
    assert feed.unread_count == 0

def test_from_settings_without_push(service, scheduler):
    s = Settings(push_enabled=False, stats_poll_interval_seconds=7)
    feed = NotificationFeed.from_settings(s, service, scheduler)
    assert feed.push_channel is None
    assert feed.stats_interval == 7

def test_from_settings_wires_redis_push(service, scheduler, monkeypatch):
    fake_redis = object()
    monkeypatch.setattr("worksphere.notifications.feed.make_redis", lambda s: fake_redis)

    s = Settings(push_enabled=True, push_channel="inbox")
    feed = NotificationFeed.from_settings(s, service, scheduler)
    assert isinstance(feed.push_channel, RedisPushChannel)
    assert feed.push_channel.client is fake_redis
    assert feed.push_channel.channel == "inbox"
