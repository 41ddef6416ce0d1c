"""Input and tick events delivered through one queue."""

from __future__ import annotations

import enum
import queue
import sys
import threading
from dataclasses import dataclass, field
from typing import TextIO

from .keys import Key, read_keys


class EventKind(enum.Enum):
    INPUT = "input"
    TICK = "tick"


@dataclass(frozen=True)
class Event:
    """Either a key press or a periodic tick."""

    kind: EventKind
    key: Key | None = None

    @classmethod
    def input(cls, key: Key) -> Event:
        return cls(EventKind.INPUT, key)

    @classmethod
    def tick(cls) -> Event:
        return cls(EventKind.TICK)


@dataclass(frozen=True)
class EventConfig:
    exit_key: Key = field(default_factory=lambda: Key.ctrl("c"))
    tick_rate: float = 0.25


class Events:
    """Reads keys and emits ticks on background threads into a shared queue."""

    def __init__(
        self, config: EventConfig | None = None, stream: TextIO | None = None
    ) -> None:
        self.config = config if config is not None else EventConfig()
        self._stream = stream if stream is not None else sys.stdin
        self._queue: queue.Queue[Event] = queue.Queue()
        self._stopped = threading.Event()
        self._input_thread = threading.Thread(target=self._read_input, daemon=True)
        self._tick_thread = threading.Thread(target=self._tick, daemon=True)
        self._input_thread.start()
        self._tick_thread.start()

    def _read_input(self) -> None:
        try:
            for key in read_keys(self._stream):
                if self._stopped.is_set():
                    return
                self._queue.put(Event.input(key))
                if key == self.config.exit_key:
                    return
        except (OSError, ValueError):
            return

    def _tick(self) -> None:
        while not self._stopped.is_set():
            self._queue.put(Event.tick())
            self._stopped.wait(self.config.tick_rate)

    def next(self, timeout: float | None = None) -> Event:
        """Return the next event, raising TimeoutError if none arrives in time."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no event received") from None

    def close(self) -> None:
        """Stop producing events."""
        self._stopped.set()

    def __enter__(self) -> Events:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()