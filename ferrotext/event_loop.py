"""Event loop for the terminal front end and proxies that feed events into loops."""

from __future__ import annotations

import copy
import queue
import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

WAKE = "wake"
"""Event a CallbackProxy sends to ask for a render."""


class ControlKind(Enum):
    POLL = "poll"
    WAIT = "wait"
    EXIT = "exit"
    WAIT_MAX = "wait_max"


@dataclass(frozen=True)
class ControlFlow:
    """How the loop proceeds after an iteration."""

    kind: ControlKind
    timeout: float | None = None

    @classmethod
    def poll(cls) -> ControlFlow:
        return cls(ControlKind.POLL)

    @classmethod
    def wait(cls) -> ControlFlow:
        return cls(ControlKind.WAIT)

    @classmethod
    def exit(cls) -> ControlFlow:
        return cls(ControlKind.EXIT)

    @classmethod
    def wait_max(cls, timeout: float) -> ControlFlow:
        """Wait for a wake-up, at most ``timeout`` seconds."""
        return cls(ControlKind.WAIT_MAX, timeout)


@dataclass(frozen=True)
class StartOfEvents:
    pass


@dataclass(frozen=True)
class Render:
    pass


@dataclass(frozen=True)
class AppEvent:
    event: Any


@dataclass(frozen=True)
class InputEvent:
    event: Any


LoopEvent = Union[StartOfEvents, Render, AppEvent, InputEvent]


class TuiEventLoopProxy:
    """Sends events into a TuiEventLoop and wakes it."""

    def __init__(self, events: queue.Queue, waker: queue.Queue) -> None:
        self._events = events
        self._waker = waker

    def send(self, event: Any) -> None:
        self._events.put(event)
        self._waker.put(None)

    def request_render(self) -> None:
        self._waker.put(None)

    def dup(self) -> TuiEventLoopProxy:
        return copy.copy(self)


Handler = Callable[[TuiEventLoopProxy, LoopEvent, ControlFlow], Union[ControlFlow, None]]


class TuiEventLoop:
    """Loop that delivers input and app events, then asks for a render.

    Each iteration starts with StartOfEvents, then every pending input event,
    then every pending app event, then Render. The handler returns the new
    ControlFlow, or None to keep the current one.
    """

    def __init__(self) -> None:
        self._events: queue.Queue = queue.Queue()
        self._waker: queue.Queue = queue.Queue()
        self._consumed = False

    def create_proxy(self) -> TuiEventLoopProxy:
        return TuiEventLoopProxy(self._events, self._waker)

    def _read_input(
        self,
        read_input: Callable[[], Any],
        inputs: queue.Queue,
        stop: threading.Event,
    ) -> None:
        while not stop.is_set():
            try:
                event = read_input()
            except EOFError:
                return
            except Exception:
                continue
            inputs.put(event)
            self._waker.put(None)

    def run(self, handler: Handler, read_input: Callable[[], Any] | None = None) -> None:
        """Run until the handler asks to exit.

        ``read_input`` is called repeatedly on a background thread for input
        events; raising EOFError stops reading, other errors are skipped.
        A loop can be run only once.
        """
        if self._consumed:
            raise RuntimeError("event loop has already been run")
        self._consumed = True

        proxy = self.create_proxy()
        inputs: queue.Queue = queue.Queue()
        stop = threading.Event()
        if read_input is not None:
            threading.Thread(
                target=self._read_input, args=(read_input, inputs, stop), daemon=True
            ).start()

        def call(event: LoopEvent, flow: ControlFlow) -> ControlFlow:
            result = handler(proxy, event, flow)
            return flow if result is None else result

        try:
            self._loop(call, inputs)
        finally:
            stop.set()

    def _loop(self, call, inputs: queue.Queue) -> None:
        while True:
            flow = call(StartOfEvents(), ControlFlow.wait())

            for event in _drain(inputs):
                flow = call(InputEvent(event), flow)
                if flow.kind is ControlKind.EXIT:
                    return
            for event in _drain(self._events):
                flow = call(AppEvent(event), flow)
                if flow.kind is ControlKind.EXIT:
                    return
            flow = call(Render(), flow)

            if flow.kind is ControlKind.EXIT:
                return
            try:
                if flow.kind is ControlKind.POLL:
                    self._waker.get_nowait()
                elif flow.kind is ControlKind.WAIT:
                    self._waker.get()
                else:
                    self._waker.get(timeout=flow.timeout)
            except queue.Empty:
                pass


def _drain(source: queue.Queue):
    while True:
        try:
            yield source.get_nowait()
        except queue.Empty:
            return


class CallbackProxy:
    """Proxy that hands events to a callback, such as a window system's event sender."""

    def __init__(self, send_event: Callable[[Any], Any]) -> None:
        self._send_event = send_event

    def send(self, event: Any) -> None:
        """Hand ``event`` to the callback; errors from a closed loop are ignored."""
        try:
            self._send_event(event)
        except Exception:
            pass

    def request_render(self) -> None:
        self.send(WAKE)

    def dup(self) -> CallbackProxy:
        return CallbackProxy(self._send_event)