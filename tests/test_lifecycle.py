import logging

import pytest

from lifecycle_clock import (
    LifecycleClock,
    LifecycleSnapshot,
    millis_between,
    on_destroy,
    on_resume,
)


def test_millis_between_handles_missing_timestamp(clock):
    assert millis_between(None, clock()) == 'unknown'


def test_start_after_create_reports_elapsed(clock):
    lc = LifecycleClock(clock)
    lc.record('create')
    clock.advance(120)
    assert lc.record('start') == 'on_start() called after 120ms'
    clock.advance(30)
    assert lc.record('resume') == 'on_resume() called after 150ms'


def test_start_after_restart_uses_restart_time(clock):
    lc = LifecycleClock(clock)
    lc.record('create')
    clock.advance(1000)
    lc.record('pause')
    lc.record('stop')
    clock.advance(4000)
    lc.record('restart')
    clock.advance(7)
    assert lc.record('start') == 'on_start() called after on_restart() after 7ms'
    clock.advance(3)
    assert lc.record('resume') == 'on_resume() called after on_restart() after 10ms'


def test_create_clears_restart_flag(clock):
    lc = LifecycleClock(clock)
    lc.record('restart')
    lc.record('create')
    assert lc.snapshot.restarted is False


def test_stop_reports_time_since_pause(clock):
    lc = LifecycleClock(clock)
    lc.record('create')
    lc.record('pause')
    clock.advance(250)
    assert lc.record('stop') == 'on_stop() called after 250ms'


def test_resume_after_dialog_clears_flags(clock):
    lc = LifecycleClock(clock)
    lc.record('create')
    lc.mark_showing_dialog(True)
    lc.record('pause')
    clock.advance(500)
    assert lc.record('resume') == 'on_resume() called after on_pause()'
    assert lc.snapshot.paused is False
    assert lc.snapshot.showing_dialog is False


def test_destroy_without_low_memory_uses_stop(clock):
    lc = LifecycleClock(clock)
    lc.record('create')
    clock.advance(5000)
    lc.record('stop')
    assert lc.record('destroy') == 'on_destroy() called after on_stop() after 0ms'


def test_destroy_after_low_memory(clock):
    lc = LifecycleClock(clock)
    lc.record('create')
    lc.record('low_memory')
    clock.advance(40)
    lc.record('stop')
    clock.advance(2)
    assert lc.record('destroy') == 'on_destroy() called after on_low_memory() after 42ms'


def test_handlers_do_not_mutate_snapshot(clock):
    snap = LifecycleSnapshot(paused=True, showing_dialog=True)
    new_snap, _ = on_resume(snap, clock())
    assert snap.paused and snap.showing_dialog
    assert not new_snap.paused
    same, message = on_destroy(snap, clock())
    assert same is snap
    assert message.endswith('after unknown')


def test_configuration_changed_is_logged(clock, caplog):
    lc = LifecycleClock(clock)
    with caplog.at_level(logging.INFO, logger='dessert.lifecycle'):
        lc.record('configuration_changed')
    assert 'on_configuration_changed() called' in caplog.text


def test_unknown_event_raises(clock):
    with pytest.raises(ValueError):
        LifecycleClock(clock).record('teleport')


def test_messages_are_logged_as_arguments(clock, caplog):
    lc = LifecycleClock(clock)
    with caplog.at_level(logging.INFO, logger='dessert.lifecycle'):
        message = lc.record('create')
    record = caplog.records[-1]
    assert record.msg == '%s'
    assert record.args == (message,)
