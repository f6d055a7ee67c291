from __future__ import annotations

import os
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from queue import Empty, Full, Queue
from typing import Any, Dict, List, Optional

DEFAULT_SCHEMA_VERSION = "1.0"

# Optional global bus so the engines can report diagnostics without extra parameters
_GLOBAL_BUS: Optional["EventBus"] = None


def set_global_bus(bus: Optional["EventBus"]) -> None:
    global _GLOBAL_BUS
    _GLOBAL_BUS = bus


def get_global_bus() -> Optional["EventBus"]:
    return _GLOBAL_BUS


def publish_event(
    *,
    stage: str,
    status: str,
    action_uid: str = "-",
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Publish a diagnostic event to the global bus (if configured).

    Never blocks and never raises; diagnostics must not change the outcome
    of the call that reports them.
    """
    bus = _GLOBAL_BUS
    if bus is None:
        return
    try:
        bus.publish(stage=stage, status=status, action_uid=action_uid, details=details)
    except Exception:
        pass


@dataclass
class DiagnosticEvent:
    """Structured record of a skipped input, separate from debug logging."""

    schema_version: str = DEFAULT_SCHEMA_VERSION
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    seq_no: int = 0
    ts: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    stage: str = "-"  # coerce.input, describe.input
    status: str = "-"  # invalid_literal, unsupported
    action_uid: str = "-"
    details: Optional[Dict[str, Any]] = None


class EventObserver:
    """Observer interface for handling diagnostic events."""

    def handle(self, event: DiagnosticEvent) -> None:  # pragma: no cover
        raise NotImplementedError


class StdoutObserver(EventObserver):
    """One line per event on stdout."""

    def handle(self, event: DiagnosticEvent) -> None:
        msg = f"{event.ts} | action={event.action_uid} | {event.stage} {event.status}"
        if event.details:
            msg += f" | details={event.details}"
        print(msg)


class MemoryObserver(EventObserver):
    """Keeps every event in a list; useful for tests and for request-scoped summaries."""

    def __init__(self) -> None:
        self.events: List[DiagnosticEvent] = []
        self._lock = threading.Lock()

    def handle(self, event: DiagnosticEvent) -> None:
        with self._lock:
            self.events.append(event)

    def by_stage(self, stage: str) -> List[DiagnosticEvent]:
        with self._lock:
            return [e for e in self.events if e.stage == stage]


class EventBus:
    """Event bus with a background dispatcher and a bounded queue.

    Producers never wait: when the queue is full the event is dropped and
    counted.
    """

    def __init__(
        self,
        *,
        observers: Optional[List[EventObserver]] = None,
        queue_size: int = 10_000,
    ) -> None:
        self._observers: List[EventObserver] = observers or []
        self._q: Queue[DiagnosticEvent] = Queue(maxsize=max(1, queue_size))
        self._seq_lock = threading.Lock()
        self._seq_no = 0
        self._running = False
        self._worker: Optional[threading.Thread] = None
        self.dropped = 0

    def _dispatch(self, evt: DiagnosticEvent) -> None:
        for obs in self._observers:
            try:
                obs.handle(evt)
            except Exception:
                # Isolate observer failures
                pass

    def _dispatch_loop(self) -> None:
        while self._running:
            try:
                evt = self._q.get(timeout=0.5)
            except Empty:
                continue
            self._dispatch(evt)

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._worker = threading.Thread(target=self._dispatch_loop, name="diagnostic_event_bus", daemon=True)
        self._worker.start()

    def shutdown(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._worker is not None and self._worker.is_alive():
            self._worker.join(timeout=2.0)
        # Drain whatever the worker did not pick up
        while True:
            try:
                evt = self._q.get_nowait()
            except Empty:
                break
            self._dispatch(evt)
        self._worker = None

    def publish(
        self,
        *,
        stage: str,
        status: str,
        action_uid: str = "-",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        with self._seq_lock:
            self._seq_no += 1
            seq_no = self._seq_no
        evt = DiagnosticEvent(
            seq_no=seq_no,
            stage=stage,
            status=status,
            action_uid=action_uid,
            details=details,
        )
        try:
            self._q.put_nowait(evt)
        except Full:
            self.dropped += 1


def _env_flag(name: str, default: str) -> str:
    val = os.getenv(name)
    return val if val not in (None, "") else default


def build_default_bus() -> Optional[EventBus]:
    """Construct an EventBus from environment variables.

    ACTIONINPUTS_EVENTS_ENABLED: "true" | "false" (default: "false")
    ACTIONINPUTS_EVENTS_TRANSPORTS: comma list of "stdout", "memory" (default: "stdout")
    ACTIONINPUTS_EVENTS_QUEUE_SIZE: int (default: 10000)
    """
    enabled = _env_flag("ACTIONINPUTS_EVENTS_ENABLED", "false").lower() == "true"
    if not enabled:
        return None

    transports = [s.strip() for s in _env_flag("ACTIONINPUTS_EVENTS_TRANSPORTS", "stdout").split(",") if s.strip()]
    try:
        q_size = int(_env_flag("ACTIONINPUTS_EVENTS_QUEUE_SIZE", "10000"))
    except ValueError:
        q_size = 10000

    observers: List[EventObserver] = []
    if "stdout" in transports:
        observers.append(StdoutObserver())
    if "memory" in transports:
        observers.append(MemoryObserver())

    return EventBus(observers=observers, queue_size=q_size)
