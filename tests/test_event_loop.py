import threading
import time
from unittest.mock import Mock, call

import pytest

from ferrotext.event_loop import (
    WAKE,
    AppEvent,
    CallbackProxy,
    ControlFlow,
    ControlKind,
    InputEvent,
    Render,
    StartOfEvents,
    TuiEventLoop,
)


def test_control_flow_constructors():
    assert ControlFlow.poll().kind is ControlKind.POLL
    assert ControlFlow.wait().kind is ControlKind.WAIT
    assert ControlFlow.exit().kind is ControlKind.EXIT
    flow = ControlFlow.wait_max(0.5)
    assert (flow.kind, flow.timeout) == (ControlKind.WAIT_MAX, 0.5)


def test_app_event_sent_before_run_is_delivered_in_order():
    loop = TuiEventLoop()
    loop.create_proxy().send("hello")
    seen = []

    def handler(proxy, event, flow):
        seen.append(event)
        if isinstance(event, Render):
            return ControlFlow.exit()
        return None

    loop.run(handler)
    assert seen == [StartOfEvents(), AppEvent("hello"), Render()]


def test_input_events_wake_a_waiting_loop():
    loop = TuiEventLoop()
    pending = ["a"]

    def read_input():
        if pending:
            return pending.pop()
        raise EOFError

    seen = []

    def handler(proxy, event, flow):
        seen.append(event)
        if isinstance(event, InputEvent):
            return ControlFlow.exit()
        return None

    loop.run(handler, read_input)
    assert seen[-1] == InputEvent("a")
    assert Render() in seen


def test_exit_during_app_events_skips_render():
    loop = TuiEventLoop()
    proxy = loop.create_proxy()
    proxy.send(1)
    proxy.send(2)
    seen = []

    def handler(proxy, event, flow):
        seen.append(event)
        if isinstance(event, AppEvent):
            return ControlFlow.exit()
        return None

    loop.run(handler)
    assert seen == [StartOfEvents(), AppEvent(1)]


def test_wait_max_times_out_and_loops():
    loop = TuiEventLoop()
    seen = []

    def handler(proxy, event, flow):
        seen.append(event)
        if isinstance(event, Render):
            if seen.count(Render()) == 3:
                return ControlFlow.exit()
            return ControlFlow.wait_max(0.01)
        return None

    loop.run(handler)
    assert seen == [StartOfEvents(), Render()] * 3


def test_poll_keeps_looping():
    loop = TuiEventLoop()
    seen = []

    def handler(proxy, event, flow):
        seen.append(event)
        if isinstance(event, Render):
            if seen.count(StartOfEvents()) >= 5:
                return ControlFlow.exit()
            return ControlFlow.poll()
        return None

    loop.run(handler)
    assert seen == [StartOfEvents(), Render()] * 5


def test_duplicated_proxy_wakes_waiting_loop_from_other_thread():
    loop = TuiEventLoop()
    proxy = loop.create_proxy().dup()
    seen = []

    def later():
        time.sleep(0.05)
        proxy.send("late")

    threading.Thread(target=later, daemon=True).start()

    def handler(proxy, event, flow):
        if isinstance(event, AppEvent):
            seen.append(event)
            return ControlFlow.exit()
        return None

    loop.run(handler)
    assert seen == [AppEvent("late")]


def test_request_render_starts_another_iteration():
    loop = TuiEventLoop()
    seen = []

    def handler(proxy, event, flow):
        seen.append(event)
        if isinstance(event, Render):
            if seen.count(Render()) == 1:
                proxy.request_render()
                return None
            return ControlFlow.exit()
        return None

    loop.run(handler)
    assert seen == [StartOfEvents(), Render(), StartOfEvents(), Render()]


def test_loop_runs_only_once():
    loop = TuiEventLoop()
    loop.run(lambda proxy, event, flow: ControlFlow.exit())
    with pytest.raises(RuntimeError):
        loop.run(lambda proxy, event, flow: ControlFlow.exit())


def test_callback_proxy_send_and_render():
    received = []
    proxy = CallbackProxy(received.append)
    proxy.send("event")
    proxy.request_render()
    proxy.dup().send("again")
    assert received == ["event", WAKE, "again"]


def test_callback_proxy_ignores_send_errors():
    failing = Mock(side_effect=RuntimeError("closed"))
    proxy = CallbackProxy(failing)
    proxy.send("x")
    proxy.request_render()
    proxy.dup().send("y")
    assert failing.call_args_list == [call("x"), call(WAKE), call("y")]