import random

import pytest

from cubescape.events import (
    BUTTON_PRESS_MASK,
    EXPOSURE_MASK,
    KEY_RELEASE_MASK,
    POINTER_MOTION_MASK,
    Display,
    Event,
    EventType,
    Window,
)


def test_new_windows_are_listed_newest_first():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == (second, first)
    assert second.title == "win2"
    assert (first.width, first.height) == (300, 300)


def test_invalid_window_size_raises():
    display = Display()
    with pytest.raises(ValueError):
        display.new_window(0, 100, "bad")


def test_destroy_unknown_window_raises():
    display = Display()
    with pytest.raises(ValueError):
        display.destroy_window(Window(10, 10, "stray"))


def test_hook_rejects_invalid_event_type():
    window = Window(10, 10, "w")
    with pytest.raises(ValueError):
        window.hook(1, 0, lambda param: None, None)
    with pytest.raises(ValueError):
        window.hook(36, 0, lambda param: None, None)


def test_event_mask_combines_hooks():
    window = Window(10, 10, "w")
    assert window.event_mask() == 0
    window.key_hook(lambda key, param: None, None)
    window.mouse_hook(lambda b, x, y, param: None, None)
    window.expose_hook(lambda param: None, None)
    assert window.event_mask() == KEY_RELEASE_MASK | BUTTON_PRESS_MASK | EXPOSURE_MASK
    assert EventType.KEY_RELEASE in window.hooks
    assert EventType.KEY_PRESS not in window.hooks


def test_key_hook_fires_on_release_only():
    display = Display()
    window = display.new_window(242, 242, "Title1")
    keys = []
    window.key_hook(lambda key, param: keys.append((key, param)), "p")
    display.post_event(Event(EventType.KEY_PRESS, window, key=97))
    display.post_event(Event(EventType.KEY_RELEASE, window, key=0xFF1B))
    display.loop()
    assert keys == [(0xFF1B, "p")]
    assert display.pending == 0


def test_mouse_and_motion_arguments():
    display = Display()
    window = display.new_window(242, 242, "Title1")
    seen = []
    window.mouse_hook(lambda b, x, y, param: seen.append(("button", b, x, y, param)), 1)
    window.hook(
        EventType.MOTION_NOTIFY,
        POINTER_MOTION_MASK,
        lambda x, y, param: seen.append(("motion", x, y, param)),
        2,
    )
    display.post_event(Event(EventType.BUTTON_PRESS, window, button=3, x=10, y=20))
    display.post_event(Event(EventType.MOTION_NOTIFY, window, x=5, y=6))
    display.loop()
    assert seen == [("button", 3, 10, 20, 1), ("motion", 5, 6, 2)]


def test_expose_waits_for_last_of_series():
    display = Display()
    window = display.new_window(100, 100, "w")
    calls = []
    window.expose_hook(lambda param: calls.append(param), "redraw")
    display.post_event(Event(EventType.EXPOSE, window, count=2))
    display.post_event(Event(EventType.EXPOSE, window, count=1))
    display.post_event(Event(EventType.EXPOSE, window, count=0))
    display.loop()
    assert calls == ["redraw"]


def test_generic_event_gets_only_param():
    display = Display()
    window = display.new_window(100, 100, "w")
    calls = []
    window.hook(EventType.FOCUS_IN, 1 << 21, lambda param: calls.append(param), 42)
    display.post_event(Event(EventType.FOCUS_IN, window))
    display.loop()
    assert calls == [42]


def test_close_request_calls_destroy_hook():
    display = Display()
    window = display.new_window(100, 100, "w")

    def on_close(param):
        param.destroy_window(window)

    window.hook(EventType.DESTROY_NOTIFY, 0, on_close, display)
    display.post_event(Event(EventType.CLIENT_MESSAGE, window, close_request=True))
    display.loop()
    assert display.windows == ()


def test_events_for_closed_window_are_ignored():
    display = Display()
    keep = display.new_window(100, 100, "keep")
    gone = display.new_window(100, 100, "gone")
    calls = []
    gone.key_hook(lambda key, param: calls.append(key), None)
    display.destroy_window(gone)
    display.post_event(Event(EventType.KEY_RELEASE, gone, key=1))
    display.loop()
    assert calls == []
    assert display.windows == (keep,)


def test_loop_returns_without_windows():
    display = Display()
    calls = []
    display.loop_hook(lambda param: calls.append(param), None)
    display.loop()
    assert calls == []


def test_loop_end_stops_loop_hook():
    display = Display()
    window = display.new_window(100, 100, "w")
    calls = []

    def tick(param):
        calls.append(param)
        if len(calls) == 5:
            display.loop_end()

    display.loop_hook(tick, "tick")
    display.loop()
    assert calls == ["tick"] * 5
    assert display.windows == (window,)
    assert display.pending == 0


def test_escape_in_window_destroys_it_and_ends_loop():
    display = Display()
    win3 = display.new_window(242, 242, "Title3")

    def key_win3(key, param):
        if key == 0xFF1B:
            display.destroy_window(win3)

    win3.key_hook(key_win3, None)
    ticks = []
    display.loop_hook(lambda param: ticks.append(1), None)
    display.post_event(Event(EventType.KEY_RELEASE, win3, key=0xFF1B))
    display.loop()
    assert display.windows == ()
    assert ticks == [1]


def test_mouse_click_replaces_window():
    rng = random.Random(0)
    display = Display()
    state = {"count": 0}

    def gere_mouse(button, x, y, param):
        state["count"] += 1
        display.destroy_window(state["win1"])
        new = display.new_window(rng.randrange(1, 500), rng.randrange(1, 500), "new win")
        new.mouse_hook(gere_mouse, None)
        state["win1"] = new

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    state["win1"].mouse_hook(gere_mouse, None)
    win2.mouse_hook(gere_mouse, None)

    def tick(param):
        if state["count"] >= 3:
            display.loop_end()
        else:
            display.post_event(Event(EventType.BUTTON_PRESS, state["win1"], button=1))

    display.loop_hook(tick, None)
    display.loop()
    assert state["count"] == 3
    assert len(display.windows) == 2
    assert win2 in display.windows
    assert state["win1"].title == "new win"
    assert EventType.BUTTON_PRESS in state["win1"].hooks