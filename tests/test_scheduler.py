def test_zero_interval_task_runs_every_poll(scheduler):
    calls = []
    scheduler.call_every(0, lambda: calls.append(1))
    for _ in range(5):
        scheduler.run_pending()
    assert len(calls) == 5


def test_periodic_task_fires_once_per_period(scheduler, clock):
    calls = []
    scheduler.call_every(1.0, lambda: calls.append(clock()))
    scheduler.run_pending()
    assert calls == []
    clock.advance(0.5)
    scheduler.run_pending()
    clock.advance(0.5)
    scheduler.run_pending()
    clock.advance(1.0)
    scheduler.run_pending()
    assert calls == [1.0, 2.0]


def test_late_poll_does_not_fire_twice(scheduler, clock):
    calls = []
    scheduler.call_every(1.0, lambda: calls.append(1))
    clock.advance(3.5)
    scheduler.run_pending()
    scheduler.run_pending()
    assert len(calls) == 1


def test_call_later_fires_once(scheduler, clock):
    calls = []
    scheduler.call_later(1.0, lambda: calls.append(1))
    clock.advance(2.0)
    scheduler.run_pending()
    clock.advance(2.0)
    scheduler.run_pending()
    assert calls == [1]
    assert scheduler.pending_count() == 0


def test_cancelled_task_never_runs(scheduler, clock):
    calls = []
    task = scheduler.call_every(0, lambda: calls.append(1))
    task.cancel()
    scheduler.run_pending()
    assert calls == []
    assert scheduler.pending_count() == 0


def test_callback_can_cancel_a_later_task(scheduler):
    calls = []
    second = None

    def first():
        calls.append('first')
        second.cancel()

    scheduler.call_every(0, first)
    second = scheduler.call_every(0, lambda: calls.append('second'))
    scheduler.run_pending()
    assert calls == ['first']


def test_cancel_all(scheduler, clock):
    calls = []
    scheduler.call_every(0, lambda: calls.append(1))
    scheduler.call_later(1.0, lambda: calls.append(2))
    scheduler.cancel_all()
    clock.advance(5)
    scheduler.run_pending()
    assert calls == []
