"""Windows, event hooks and the event loop of the display."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum

LAST_EVENT = 36
"""One past the highest event type number."""

NO_EVENT_MASK = 0
KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
ENTER_WINDOW_MASK = 1 << 4
LEAVE_WINDOW_MASK = 1 << 5
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
VISIBILITY_CHANGE_MASK = 1 << 16
STRUCTURE_NOTIFY_MASK = 1 << 17
FOCUS_CHANGE_MASK = 1 << 21


class EventType(IntEnum):
    """Event type numbers, as used by the window system protocol."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


HookFunc = Callable[..., object]


@dataclass
class _Hook:
    mask: int
    func: HookFunc
    param: object


@dataclass(eq=False)
class Window:
    """A window with a title, a fixed size and one hook per event type."""

    width: int
    height: int
    title: str
    hooks: dict[EventType, _Hook] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid window size {self.width}x{self.height}")

    def hook(self, event_type: int, mask: int, func: HookFunc, param: object) -> None:
        """Install func for event_type, selecting the given event mask."""
        try:
            kind = EventType(event_type)
        except ValueError:
            raise ValueError(f"invalid event type: {event_type!r}") from None
        self.hooks[kind] = _Hook(mask, func, param)

    def key_hook(self, func: HookFunc, param: object) -> None:
        """Call func(key, param) when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func, param)

    def mouse_hook(self, func: HookFunc, param: object) -> None:
        """Call func(button, x, y, param) when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func, param)

    def expose_hook(self, func: HookFunc, param: object) -> None:
        """Call func(param) when the window must be redrawn."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        mask = 0
        for installed in self.hooks.values():
            mask |= installed.mask
        return mask


@dataclass(frozen=True)
class Event:
    """An input or window event addressed to a window.

    key is the key symbol of key events; button, x and y describe pointer
    events; count is the number of expose events still to follow; and
    close_request marks a client message asking to close the window.
    """

    type: EventType
    window: Window
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", EventType(self.type))


class Display:
    """A connection holding windows, a queue of pending events and a loop hook."""

    def __init__(self) -> None:
        self._windows: list[Window] = []
        self._pending: deque[Event] = deque()
        self._loop_func: HookFunc | None = None
        self._loop_param: object = None
        self._end_loop = False

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, newest first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of events waiting to be dispatched."""
        return len(self._pending)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window with no hooks and return it."""
        window = Window(width, height, title)
        self._windows.insert(0, window)
        return window

    def destroy_window(self, window: Window) -> None:
        """Close a window; its pending events are then ignored."""
        for index, candidate in enumerate(self._windows):
            if candidate is window:
                del self._windows[index]
                return
        raise ValueError(f"window {window.title!r} is not open on this display")

    def loop_hook(self, func: HookFunc | None, param: object) -> None:
        """Call func(param) once per loop iteration, after pending events."""
        self._loop_func = func
        self._loop_param = param

    def post_event(self, event: Event) -> None:
        """Queue an event for dispatch by the loop."""
        self._pending.append(event)

    def loop_end(self) -> None:
        """Make the loop return at its next check."""
        self._end_loop = True

    def loop(self) -> None:
        """Dispatch events and run the loop hook until no window is left.

        Also returns after loop_end, and when there is no loop hook and no
        pending event, since nothing could then ever arrive.
        """
        while self._windows and not self._end_loop:
            while not self._end_loop and self._pending:
                self._dispatch(self._pending.popleft())
            if self._loop_func is not None:
                self._loop_func(self._loop_param)
            elif not self._pending:
                return

    def _is_open(self, window: Window) -> bool:
        return any(candidate is window for candidate in self._windows)

    def _dispatch(self, event: Event) -> None:
        window = event.window
        if not self._is_open(window):
            return
        if event.type is EventType.CLIENT_MESSAGE and event.close_request:
            on_close = window.hooks.get(EventType.DESTROY_NOTIFY)
            if on_close is not None:
                on_close.func(on_close.param)
            if not self._is_open(window):
                return
        installed = window.hooks.get(event.type)
        if installed is None:
            return
        kind = event.type
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            installed.func(event.key, installed.param)
        elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            installed.func(event.button, event.x, event.y, installed.param)
        elif kind is EventType.MOTION_NOTIFY:
            installed.func(event.x, event.y, installed.param)
        elif kind is EventType.EXPOSE:
            if event.count == 0:
                installed.func(installed.param)
        else:
            installed.func(installed.param)