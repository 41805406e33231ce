from expander.scheduling import ArcadeScheduler, ManualScheduler


def test_manual_scheduler_runs_callbacks_in_due_order():
    scheduler = ManualScheduler()
    calls = []
    scheduler.post_delayed(lambda: calls.append(("late", scheduler.clock())), 30)
    scheduler.post_now(lambda: calls.append(("now", scheduler.clock())))
    scheduler.post_delayed(lambda: calls.append(("soon", scheduler.clock())), 10)

    ran = scheduler.advance(20)

    assert ran == 2
    assert calls == [("now", 0.0), ("soon", 10.0)]
    assert scheduler.clock() == 20.0
    scheduler.advance(10)
    assert calls[-1] == ("late", 30.0)


def test_manual_scheduler_cancel_drops_every_pending_call():
    scheduler = ManualScheduler()
    calls = []

    def tick():
        calls.append(scheduler.clock())

    scheduler.post_now(tick)
    scheduler.post_delayed(tick, 15)
    assert scheduler.is_pending(tick)

    scheduler.cancel(tick)

    assert scheduler.pending() == 0
    assert scheduler.advance(100) == 0
    assert calls == []


def test_manual_scheduler_chains_reposted_callbacks():
    scheduler = ManualScheduler(start_ms=100.0)
    seen = []

    def tick():
        seen.append(scheduler.clock())
        if len(seen) < 4:
            scheduler.post_delayed(tick, 15)

    scheduler.post_now(tick)
    elapsed = scheduler.run_until_idle()

    assert seen == [100.0, 115.0, 130.0, 145.0]
    assert elapsed >= 45.0


class _FakeArcade:
    def __init__(self):
        self.scheduled = []
        self.unscheduled = []

    def schedule_once(self, fn, delay):
        self.scheduled.append((fn, delay))

    def unschedule(self, fn):
        self.unscheduled.append(fn)


def test_arcade_scheduler_converts_to_seconds_and_fires():
    fake = _FakeArcade()
    scheduler = ArcadeScheduler(fake)
    calls = []

    def tick():
        calls.append("tick")

    scheduler.post_delayed(tick, 15)

    callback, delay = fake.scheduled[0]
    assert delay == 0.015
    callback(0.016)
    assert calls == ["tick"]
    # Already fired: nothing left to unschedule.
    scheduler.cancel(tick)
    assert fake.unscheduled == []


def test_arcade_scheduler_keeps_one_pending_call_per_callback():
    fake = _FakeArcade()
    scheduler = ArcadeScheduler(fake)

    def tick():
        pass

    scheduler.post_delayed(tick, 15)
    first_callback = fake.scheduled[0][0]
    scheduler.post_now(tick)

    assert fake.unscheduled == [first_callback]
    assert fake.scheduled[-1][1] == 0.0

    scheduler.cancel(tick)
    assert fake.unscheduled[-1] is fake.scheduled[-1][0]
