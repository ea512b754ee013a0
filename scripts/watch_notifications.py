#!/usr/bin/env python3
from __future__ import annotations

import argparse
import time

from rich import print
from rich.markup import escape

from worksphere.config import settings
from worksphere.log import configure_logging
from worksphere.notifications.client import NotificationsApi
from worksphere.notifications.feed import NotificationFeed
from worksphere.notifications.presentation import format_time_ago, notification_icon
from worksphere.notifications.scheduler import ThreadScheduler
from worksphere.notifications.service import NotificationService

def render(feed: NotificationFeed) -> None:
    print(f"[bold]notifications[/bold] unread={feed.unread_count} badge={feed.badge or '-'}")
    for n in feed.items:
        mark = " " if n.read else "[red]*[/red]"
        ago = format_time_ago(n.created_at) if n.created_at else ""
        print(f" {mark} {escape('[' + notification_icon(n.type) + ']')} {escape(n.title)} [dim]{ago}[/dim]")

def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--every", type=float, default=5.0, help="redraw interval in seconds")
    ap.add_argument("--once", action="store_true", help="render a single snapshot and exit")
    args = ap.parse_args()

    configure_logging(settings.log_level)
    service = NotificationService(NotificationsApi.from_settings(settings))
    feed = NotificationFeed.from_settings(settings, service, ThreadScheduler())

    feed.mount()
    try:
        render(feed)
        while not args.once:
            time.sleep(args.every)
            render(feed)
    except KeyboardInterrupt:
        pass
    finally:
        feed.unmount()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
