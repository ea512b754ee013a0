import threading

from worksphere.notifications.scheduler import ThreadScheduler

def test_thread_scheduler_repeats_until_cancelled():
    hits = []
    twice = threading.Event()

    def tick():
        hits.append(1)
        if len(hits) >= 2:
            twice.set()

    job = ThreadScheduler().call_every(0.01, tick)
    try:
        assert twice.wait(2.0)
    finally:
        job.cancel()

def test_thread_scheduler_survives_failing_job():
    calls = []
    again = threading.Event()

    def tick():
        calls.append(1)
        if len(calls) >= 2:
            again.set()
        raise RuntimeError("poll blew up")

    job = ThreadScheduler().call_every(0.01, tick)
    try:
        assert again.wait(2.0)
    finally:
        job.cancel()

def test_cancel_waits_for_running_tick():
    started, release = threading.Event(), threading.Event()
    finished = []

    def tick():
        started.set()
        release.wait(2.0)
        finished.append(1)

    job = ThreadScheduler().call_every(0.01, tick)
    assert started.wait(2.0)
    release.set()
    job.cancel()
    assert finished
    assert not job._thread.is_alive()
