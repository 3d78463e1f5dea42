"""Timestamps for window lifecycle transitions.

Each transition is a pure handler taking the previous snapshot and the
current time and returning the next snapshot plus the line to log.
``LifecycleClock`` is the thin stateful wrapper the UI calls into.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Callable, Dict, NamedTuple, Optional

logger = logging.getLogger("dessert.lifecycle")

@dataclass(frozen=True)
class LifecycleSnapshot:
    create_time: Optional[datetime] = None
    restart_time: Optional[datetime] = None
    pause_time: Optional[datetime] = None
    stop_time: Optional[datetime] = None
    low_memory_time: Optional[datetime] = None
    restarted: bool = False
    paused: bool = False
    showing_dialog: bool = False

class Transition(NamedTuple):
    snapshot: LifecycleSnapshot
    message: str

def millis_between(then: Optional[datetime], now: datetime) -> str:
    if then is None:
        return "unknown"
    return f"{(now - then) // timedelta(milliseconds=1)}ms"

def on_create(snap: LifecycleSnapshot, now: datetime) -> Transition:
    return Transition(replace(snap, create_time=now, restarted=False), f"on_create() called at {now}")

def on_restart(snap: LifecycleSnapshot, now: datetime) -> Transition:
    return Transition(replace(snap, restart_time=now, restarted=True), f"on_restart() called at {now}")

def on_start(snap: LifecycleSnapshot, now: datetime) -> Transition:
    if snap.restarted:
        return Transition(snap, f"on_start() called after on_restart() after {millis_between(snap.restart_time, now)}")
    return Transition(snap, f"on_start() called after {millis_between(snap.create_time, now)}")

def on_resume(snap: LifecycleSnapshot, now: datetime) -> Transition:
    if snap.paused and snap.showing_dialog:
        return Transition(replace(snap, paused=False, showing_dialog=False), "on_resume() called after on_pause()")
    if snap.restarted:
        return Transition(snap, f"on_resume() called after on_restart() after {millis_between(snap.restart_time, now)}")
    return Transition(snap, f"on_resume() called after {millis_between(snap.create_time, now)}")

def on_pause(snap: LifecycleSnapshot, now: datetime) -> Transition:
    return Transition(replace(snap, paused=True, pause_time=now), f"on_pause() called at {now}")

def on_stop(snap: LifecycleSnapshot, now: datetime) -> Transition:
    return Transition(replace(snap, stop_time=now), f"on_stop() called after {millis_between(snap.pause_time, now)}")

def on_low_memory(snap: LifecycleSnapshot, now: datetime) -> Transition:
    return Transition(replace(snap, low_memory_time=now), f"on_low_memory() called at {now}")

def on_destroy(snap: LifecycleSnapshot, now: datetime) -> Transition:
    if snap.low_memory_time is not None:
        return Transition(
            snap, f"on_destroy() called after on_low_memory() after {millis_between(snap.low_memory_time, now)}"
        )
    return Transition(snap, f"on_destroy() called after on_stop() after {millis_between(snap.stop_time, now)}")

def on_configuration_changed(snap: LifecycleSnapshot, now: datetime) -> Transition:
    return Transition(snap, "on_configuration_changed() called")

HANDLERS: Dict[str, Callable[[LifecycleSnapshot, datetime], Transition]] = {
    "create": on_create,
    "restart": on_restart,
    "start": on_start,
    "resume": on_resume,
    "pause": on_pause,
    "stop": on_stop,
    "low_memory": on_low_memory,
    "destroy": on_destroy,
    "configuration_changed": on_configuration_changed,
}

class LifecycleClock:
    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self.snapshot = LifecycleSnapshot()

    def record(self, event: str) -> str:
        try:
            handler = HANDLERS[event]
        except KeyError:
            raise ValueError(f"unknown lifecycle event: {event}") from None
        self.snapshot, message = handler(self.snapshot, self.clock())
        logger.info("%s", message)
        return message

    def mark_showing_dialog(self, showing: bool) -> None:
        self.snapshot = replace(self.snapshot, showing_dialog=showing)
