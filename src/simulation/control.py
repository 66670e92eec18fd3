from __future__ import annotations

import logging
import os
import queue
import signal
import subprocess
from enum import Enum
from typing import Callable, Dict, List, Optional

from .errors import ControlDeliveryFailure

logger = logging.getLogger(__name__)


class ControlEvent(str, Enum):
    """Out-of-band triggers a running simulation accepts."""

    BREAKDOWN = "breakdown"
    FIRE = "fire"

    @property
    def signum(self) -> int:
        return _EVENT_SIGNALS[self]

    @classmethod
    def from_name(cls, name: str) -> "ControlEvent":
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(
                f"Unknown control event '{name}'. Available: {', '.join(e.value for e in cls)}"
            ) from None


_EVENT_SIGNALS: Dict[ControlEvent, int] = {
    ControlEvent.BREAKDOWN: signal.SIGUSR1,
    ControlEvent.FIRE: signal.SIGUSR2,
}


class ControlChannel:
    """Thread-safe mailbox of control events, drained once per tick.

    ``post`` never blocks, so it is safe to call from signal handlers,
    server tasks or other threads.
    """

    def __init__(self) -> None:
        self._queue: "queue.SimpleQueue[ControlEvent]" = queue.SimpleQueue()

    def post(self, event: ControlEvent) -> None:
        self._queue.put_nowait(event)

    def drain(self) -> List[ControlEvent]:
        events: List[ControlEvent] = []
        while True:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                return events

    def __len__(self) -> int:
        return self._queue.qsize()


def install_signal_handlers(channel: ControlChannel) -> Callable[[], None]:
    """Route SIGUSR1/SIGUSR2 into ``channel``. Returns a callable restoring the old handlers."""

    previous = {}
    for event in ControlEvent:
        previous[event.signum] = signal.signal(
            event.signum, lambda signum, frame, event=event: channel.post(event)
        )

    def restore() -> None:
        for signum, handler in previous.items():
            signal.signal(signum, handler)

    return restore


def _runs_script(argv: List[str], script: str) -> bool:
    """True if ``argv`` executes ``script`` directly or through a Python interpreter."""

    if not argv:
        return False
    if os.path.basename(argv[0]) == script:
        return True
    if not os.path.basename(argv[0]).startswith("python"):
        return False
    for arg in argv[1:]:
        if arg.startswith("-"):
            continue
        return os.path.basename(arg) == script
    return False


def find_pid(process_name: str) -> int:
    """Look up the PID of the one running simulation started as ``process_name``.

    Only processes whose program (or Python script argument) is
    ``process_name`` count; shells, pagers or editors that merely mention the
    name do not. This process and its parent are never candidates.
    """

    try:
        result = subprocess.run(
            ["pgrep", "-af", process_name],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ControlDeliveryFailure("pgrep is not available for process lookup") from exc

    script = os.path.basename(process_name)
    excluded = {os.getpid(), os.getppid()}
    matches: List[int] = []
    for line in result.stdout.splitlines():
        fields = line.split()
        if not fields or not fields[0].isdigit():
            continue
        pid = int(fields[0])
        if pid not in excluded and _runs_script(fields[1:], script):
            matches.append(pid)

    if not matches:
        raise ControlDeliveryFailure(f"{process_name} is not running or doesn't match expected patterns.")
    if len(matches) > 1:
        raise ControlDeliveryFailure(
            f"{process_name} matches {len(matches)} processes ({', '.join(map(str, matches))}); use --pid instead."
        )
    return matches[0]


def deliver(event: ControlEvent, pid: Optional[int] = None, process_name: Optional[str] = None) -> int:
    """Send ``event`` to a running simulation. Returns the PID it was delivered to."""

    if pid is None:
        if not process_name:
            raise ControlDeliveryFailure("Either a PID or a process name must be provided.")
        pid = find_pid(process_name)
    if pid <= 0:
        raise ControlDeliveryFailure(f"Invalid PID provided: {pid}")

    try:
        os.kill(pid, event.signum)
    except (ProcessLookupError, PermissionError) as exc:
        raise ControlDeliveryFailure(f"Failed to send {event.value} signal to PID {pid}: {exc}") from exc

    logger.info("%s signal sent to PID %d", event.value.capitalize(), pid)
    return pid
