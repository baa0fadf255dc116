"""An in-memory display: windows, drawing, event hooks and the event loop.

Windows are pixel buffers rather than on-screen windows.  Events are
queued with :meth:`Display.post_event` and delivered to the hooks that a
window has installed when :meth:`Display.loop` runs.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from rasterkit.image import Image
from rasterkit.visual import TrueColorVisual

NO_EVENT_MASK = 0
KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
ENTER_WINDOW_MASK = 1 << 4
LEAVE_WINDOW_MASK = 1 << 5
POINTER_MOTION_MASK = 1 << 6
BUTTON_MOTION_MASK = 1 << 13
KEYMAP_STATE_MASK = 1 << 14
EXPOSURE_MASK = 1 << 15
VISIBILITY_CHANGE_MASK = 1 << 16
STRUCTURE_NOTIFY_MASK = 1 << 17
RESIZE_REDIRECT_MASK = 1 << 18
FOCUS_CHANGE_MASK = 1 << 21
PROPERTY_CHANGE_MASK = 1 << 22
COLORMAP_CHANGE_MASK = 1 << 23
ALL_EVENTS_MASK = 0xFFFFFF


class EventType(IntEnum):
    """Event type numbers, as used to index window hooks."""

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


LAST_EVENT = 36

# Mask a window must select to receive an event type; unlisted types
# are always delivered.
_REQUIRED_MASK: dict[int, int] = {
    EventType.KEY_PRESS: KEY_PRESS_MASK,
    EventType.KEY_RELEASE: KEY_RELEASE_MASK,
    EventType.BUTTON_PRESS: BUTTON_PRESS_MASK,
    EventType.BUTTON_RELEASE: BUTTON_RELEASE_MASK,
    EventType.MOTION_NOTIFY: POINTER_MOTION_MASK | BUTTON_MOTION_MASK,
    EventType.ENTER_NOTIFY: ENTER_WINDOW_MASK,
    EventType.LEAVE_NOTIFY: LEAVE_WINDOW_MASK,
    EventType.FOCUS_IN: FOCUS_CHANGE_MASK,
    EventType.FOCUS_OUT: FOCUS_CHANGE_MASK,
    EventType.KEYMAP_NOTIFY: KEYMAP_STATE_MASK,
    EventType.EXPOSE: EXPOSURE_MASK,
    EventType.VISIBILITY_NOTIFY: VISIBILITY_CHANGE_MASK,
    EventType.DESTROY_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.UNMAP_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.MAP_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.REPARENT_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.CONFIGURE_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.GRAVITY_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.CIRCULATE_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.RESIZE_REQUEST: RESIZE_REDIRECT_MASK,
    EventType.PROPERTY_NOTIFY: PROPERTY_CHANGE_MASK,
    EventType.COLORMAP_NOTIFY: COLORMAP_CHANGE_MASK,
}

HookFunc = Callable[..., Any]


@dataclass(frozen=True)
class Event:
    """An input or window event.

    ``keysym`` is used by key events, ``button`` by button events, ``x``
    and ``y`` by button and motion events, ``count`` by expose events (only
    the last of a series, with count 0, reaches the hook).  A client message
    with ``delete_window`` set is a request to close the window.
    """

    type: int
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_window: bool = False


@dataclass
class _Hook:
    mask: int
    func: HookFunc | None
    param: Any


@dataclass(eq=False)
class Window:
    """A window of fixed size holding one pixel value per position."""

    width: int
    height: int
    title: str = ""
    _pixels: list[int] = field(init=False, repr=False, default_factory=list)
    _hooks: dict[int, _Hook] = field(init=False, repr=False, default_factory=dict)
    _selected_mask: int = field(init=False, repr=False, default=ALL_EVENTS_MASK)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"window size must be positive, got {self.width}x{self.height}"
            )
        self._pixels = [0] * (self.width * self.height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _set(self, x: int, y: int, value: int) -> None:
        if self._contains(x, y):
            self._pixels[y * self.width + x] = value

    def hook(
        self,
        event_type: int,
        mask: int,
        func: HookFunc | None,
        param: Any = None,
    ) -> None:
        """Install ``func`` for ``event_type``, selecting events with ``mask``."""
        if not 0 <= int(event_type) < LAST_EVENT:
            raise ValueError(f"event type must be in [0, {LAST_EVENT}), got {event_type}")
        self._hooks[int(event_type)] = _Hook(mask, func, param)

    def key_hook(self, func: HookFunc | None, param: Any = None) -> None:
        """Call ``func(keysym, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func, param)

    def mouse_hook(self, func: HookFunc | None, param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func, param)

    def expose_hook(self, func: HookFunc | None, param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func, param)

    def event_mask(self) -> int:
        """Union of the masks of all installed hooks."""
        mask = NO_EVENT_MASK
        for entry in self._hooks.values():
            mask |= entry.mask
        return mask

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value at (x, y)."""
        if not self._contains(x, y):
            raise IndexError(
                f"pixel ({x}, {y}) outside window of {self.width}x{self.height}"
            )
        return self._pixels[y * self.width + x]


def _bits_per_pixel(depth: int) -> int:
    if depth > 16:
        return 32
    if depth > 8:
        return 16
    return 8


class Display:
    """A display connection owning windows, an event queue and a loop hook."""

    def __init__(self, visual: TrueColorVisual | None = None) -> None:
        self.visual = visual if visual is not None else TrueColorVisual()
        self._windows: list[Window] = []
        self._queue: deque[tuple[Window, Event]] = deque()
        self._loop_func: HookFunc | None = None
        self._loop_param: Any = None
        self._end_loop = False

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, most recently created first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of events waiting in the queue."""
        return len(self._queue)

    def _check_window(self, window: Window) -> None:
        if not any(w is window for w in self._windows):
            raise ValueError("window does not belong to this display")

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first expose event is already queued."""
        window = Window(width, height, title)
        self._windows.insert(0, window)
        self._queue.append((window, Event(EventType.EXPOSE)))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window``; events still queued for it are dropped."""
        self._check_window(window)
        self._windows = [w for w in self._windows if w is not window]

    def new_image(self, width: int, height: int) -> Image:
        """Create a zero-filled image suited to this display's visual."""
        return Image(width, height, _bits_per_pixel(self.visual.depth), 0)

    def color_value(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to a pixel value of this display."""
        return self.visual.color_value(color)

    def pixel_put(self, window: Window, x: int, y: int, color: int) -> None:
        """Draw one pixel; positions outside the window are ignored."""
        self._check_window(window)
        window._set(x, y, self.color_value(color))

    def put_image_to_window(
        self, window: Window, image: Image, x: int, y: int
    ) -> None:
        """Copy ``image`` with its top-left corner at (x, y), clipped."""
        self._check_window(window)
        for iy in range(image.height):
            wy = y + iy
            if not 0 <= wy < window.height:
                continue
            for ix, value in enumerate(image.row(iy)):
                window._set(x + ix, wy, value)

    def clear_window(self, window: Window) -> None:
        """Fill ``window`` with the background pixel value 0."""
        self._check_window(window)
        window._pixels = [0] * (window.width * window.height)

    def loop_hook(self, func: HookFunc | None, param: Any = None) -> None:
        """Call ``func(param)`` once per loop turn; None removes the hook."""
        self._loop_func = func
        self._loop_param = param

    def post_event(self, window: Window, event: Event) -> bool:
        """Queue ``event`` for ``window`` if the window selects it.

        Returns whether the event was queued.
        """
        self._check_window(window)
        required = _REQUIRED_MASK.get(int(event.type))
        if required is not None and not required & window._selected_mask:
            return False
        self._queue.append((window, event))
        return True

    def loop(self) -> None:
        """Deliver queued events to hooks and run the loop hook.

        Returns when no window is left, after :meth:`loop_end`, or when there
        is no loop hook and no event left to deliver.
        """
        for window in self._windows:
            window._selected_mask = window.event_mask()
        while self._windows and not self._end_loop:
            while not self._end_loop and (self._loop_func is None or self._queue):
                if not self._queue:
                    return
                window, event = self._queue.popleft()
                self._dispatch(window, event)
            if self._loop_func is not None:
                self._loop_func(self._loop_param)

    def loop_end(self) -> None:
        """Make :meth:`loop` return at its next check."""
        self._end_loop = True

    def _is_open(self, window: Window) -> bool:
        return any(w is window for w in self._windows)

    def _dispatch(self, window: Window, event: Event) -> None:
        if not self._is_open(window):
            return
        etype = int(event.type)
        if etype == EventType.CLIENT_MESSAGE and event.delete_window:
            closer = window._hooks.get(EventType.DESTROY_NOTIFY)
            if closer is not None and closer.func is not None:
                closer.func(closer.param)
            if not self._is_open(window):
                return
        if not 0 <= etype < LAST_EVENT:
            return
        entry = window._hooks.get(etype)
        if entry is None or entry.func is None:
            return
        func, param = entry.func, entry.param
        if etype in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            func(event.keysym, param)
        elif etype in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            func(event.button, event.x, event.y, param)
        elif etype == EventType.MOTION_NOTIFY:
            func(event.x, event.y, param)
        elif etype == EventType.EXPOSE:
            if event.count == 0:
                func(param)
        elif etype >= EventType.KEY_PRESS:
            func(param)