import threading

from sequence_recorder.idle_timer import IdleTimer


def test_restart_schedules_in_seconds(clock):
    timer = IdleTimer(timer_factory=clock.factory)
    fired = []
    timer.restart(1500, lambda: fired.append(True))
    assert timer.pending
    assert clock.live[-1].interval == 1.5
    clock.fire()
    assert fired == [True]
    assert not timer.pending


def test_restart_supersedes_pending_fire(clock):
    timer = IdleTimer(timer_factory=clock.factory)
    fired = []
    timer.restart(1000, lambda: fired.append('first'))
    first = clock.live[-1]
    timer.restart(1000, lambda: fired.append('second'))
    assert first.cancelled
    clock.fire()
    assert fired == ['second']


def test_stale_fire_is_dropped(clock):
    timer = IdleTimer(timer_factory=clock.factory)
    fired = []
    timer.restart(1000, lambda: fired.append('first'))
    stale = clock.live[-1]
    timer.restart(1000, lambda: fired.append('second'))
    # a timer thread that already started running ignores cancel()
    stale.function()
    assert fired == []


def test_cancel(clock):
    timer = IdleTimer(timer_factory=clock.factory)
    fired = []
    timer.restart(1000, lambda: fired.append(True))
    timer.cancel()
    assert not timer.pending
    assert clock.live == []
    assert fired == []


def test_real_timer_fires_once():
    timer = IdleTimer()
    done = threading.Event()
    calls = []

    def on_fire():
        calls.append(True)
        done.set()

    timer.restart(20, on_fire)
    assert done.wait(2.0)
    assert calls == [True]


def test_fire_result_runs_after_lock_is_released(clock):
    lock = threading.Lock()
    timer = IdleTimer(lock=lock, timer_factory=clock.factory)
    held = []

    def on_fire():
        held.append(lock.locked())
        return lambda: held.append(lock.locked())

    timer.restart(1000, on_fire)
    clock.fire()
    assert held == [True, False]
