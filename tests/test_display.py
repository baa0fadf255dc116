import pytest

from rasterkit.display import (
    BUTTON_PRESS_MASK,
    EXPOSURE_MASK,
    KEY_PRESS_MASK,
    KEY_RELEASE_MASK,
    NO_EVENT_MASK,
    POINTER_MOTION_MASK,
    STRUCTURE_NOTIFY_MASK,
    Display,
    Event,
    EventType,
    Window,
)
from rasterkit.visual import TrueColorVisual

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42
ESCAPE = 0xFF1B


def _gradient(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.fixture
def display():
    return Display()


def test_new_window_starts_black(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    assert (win.width, win.height, win.title) == (242, 242, "Title1")
    assert display.windows == (win,)
    assert win.get_pixel(0, 0) == 0
    assert win.get_pixel(241, 241) == 0


def test_newest_window_listed_first(display):
    first = display.new_window(10, 10, "a")
    second = display.new_window(10, 10, "b")
    assert display.windows == (second, first)


def test_window_size_must_be_positive(display):
    with pytest.raises(ValueError):
        display.new_window(0, 10, "bad")


def test_pixel_put_colour_map(display):
    win = display.new_window(20, 20, "map")
    for x in range(20):
        for y in range(20):
            display.pixel_put(win, x, y, _gradient(x, y, 20, 20))
    assert win.get_pixel(0, 0) == 0xFF0000
    assert win.get_pixel(19, 19) == _gradient(19, 19, 20, 20)
    assert win.get_pixel(10, 5) == _gradient(10, 5, 20, 20)


def test_pixel_put_outside_is_ignored(display):
    win = display.new_window(4, 4, "clip")
    display.pixel_put(win, -1, 0, 0xFFFFFF)
    display.pixel_put(win, 4, 4, 0xFFFFFF)
    assert all(win.get_pixel(x, y) == 0 for x in range(4) for y in range(4))


def test_get_pixel_outside_raises(display):
    win = display.new_window(4, 4, "w")
    with pytest.raises(IndexError):
        win.get_pixel(4, 0)


def test_low_depth_visual_converts_colours():
    display = Display(TrueColorVisual(16, 0xF800, 0x07E0, 0x001F))
    assert display.color_value(0xFFFFFF) == 0xFFFF
    assert display.color_value(0xFF0000) == 0xF800
    win = display.new_window(2, 2, "565")
    display.pixel_put(win, 1, 1, 0xFFFFFF)
    assert win.get_pixel(1, 1) == 0xFFFF


def test_clear_window(display):
    win = display.new_window(3, 3, "w")
    display.pixel_put(win, 1, 1, 0x123456)
    display.clear_window(win)
    assert win.get_pixel(1, 1) == 0


def test_new_image_layout(display):
    image = display.new_image(IM1_SX, IM1_SY)
    assert image.bits_per_pixel == 32
    assert image.size_line == 168
    low = Display(TrueColorVisual(16, 0xF800, 0x07E0, 0x001F))
    assert low.new_image(4, 4).bits_per_pixel == 16


def test_put_image_to_window(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    image = display.new_image(IM1_SX, IM1_SY)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            image.put_pixel(x, y, display.color_value(_gradient(x, y, IM1_SX, IM1_SY)))
    display.put_image_to_window(win, image, 20, 20)
    assert win.get_pixel(20, 20) == image.get_pixel(0, 0)
    assert win.get_pixel(61, 61) == image.get_pixel(41, 41)
    assert win.get_pixel(19, 19) == 0
    assert win.get_pixel(62, 62) == 0


def test_put_image_is_clipped(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    image = display.new_image(WIN1_SX, WIN1_SY)
    image.put_pixel(221, 221, 0xABCDEF)
    display.put_image_to_window(win, image, 20, 20)
    assert win.get_pixel(241, 241) == 0xABCDEF


def test_hooks_build_event_mask(display):
    win = display.new_window(10, 10, "w")
    assert win.event_mask() == NO_EVENT_MASK
    win.expose_hook(lambda p: None)
    win.mouse_hook(lambda b, x, y, p: None)
    win.key_hook(lambda k, p: None)
    assert win.event_mask() == KEY_RELEASE_MASK | BUTTON_PRESS_MASK | EXPOSURE_MASK
    win.hook(EventType.MOTION_NOTIFY, POINTER_MOTION_MASK, lambda x, y, p: None)
    assert win.event_mask() & POINTER_MOTION_MASK


def test_hook_rejects_bad_event_type(display):
    win = display.new_window(10, 10, "w")
    with pytest.raises(ValueError):
        win.hook(36, 0, lambda p: None)


def test_first_expose_reaches_hook(display):
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    image = display.new_image(WIN1_SX, WIN1_SY)
    image.put_pixel(0, 0, 0x00FFFF)
    calls = []

    def expose(param):
        calls.append(param)
        display.put_image_to_window(win, image, 0, 0)

    win.expose_hook(expose, "p")
    display.loop()
    assert calls == ["p"]
    assert win.get_pixel(0, 0) == 0x00FFFF


def test_key_release_dispatch(display):
    win = display.new_window(10, 10, "w")
    keys = []
    win.key_hook(lambda key, param: keys.append((key, param)), 7)
    display.post_event(win, Event(EventType.KEY_PRESS, keysym=ord("a")))
    display.post_event(win, Event(EventType.KEY_RELEASE, keysym=ESCAPE))
    display.loop()
    assert keys == [(ESCAPE, 7)]


def test_mouse_and_motion_dispatch(display):
    win = display.new_window(10, 10, "w")
    seen = []
    win.mouse_hook(lambda b, x, y, p: seen.append(("button", b, x, y, p)))
    win.hook(
        EventType.MOTION_NOTIFY,
        POINTER_MOTION_MASK,
        lambda x, y, p: seen.append(("move", x, y, p)),
    )
    display.post_event(win, Event(EventType.BUTTON_PRESS, button=1, x=3, y=4))
    display.post_event(win, Event(EventType.MOTION_NOTIFY, x=5, y=6))
    display.loop()
    assert seen == [("button", 1, 3, 4, None), ("move", 5, 6, None)]


def test_expose_with_pending_count_is_skipped(display):
    win = display.new_window(10, 10, "w")
    calls = []
    win.expose_hook(lambda p: calls.append(p))
    display.loop()
    display.post_event(win, Event(EventType.EXPOSE, count=2))
    display.loop()
    assert calls == [None]


def test_generic_event_dispatch(display):
    win = display.new_window(10, 10, "w")
    calls = []
    win.hook(EventType.DESTROY_NOTIFY, STRUCTURE_NOTIFY_MASK, calls.append, "gone")
    display.post_event(win, Event(EventType.DESTROY_NOTIFY))
    display.loop()
    assert calls == ["gone"]


def test_close_request_calls_destroy_hook_without_mask(display):
    win = display.new_window(10, 10, "w")
    closed = []
    win.hook(EventType.DESTROY_NOTIFY, 0, closed.append, "bye")
    display.loop()
    assert display.post_event(
        win, Event(EventType.CLIENT_MESSAGE, delete_window=True)
    ) is True
    display.loop()
    assert closed == ["bye"]


def test_unselected_events_are_not_queued_after_loop(display):
    win = display.new_window(10, 10, "w")
    assert display.post_event(win, Event(EventType.KEY_PRESS)) is True
    win.key_hook(lambda k, p: None)
    display.loop()
    assert display.post_event(win, Event(EventType.KEY_PRESS)) is False
    assert display.post_event(win, Event(EventType.KEY_RELEASE)) is True
    assert display.pending == 1


def test_escape_destroys_third_window(display):
    win1 = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    win2 = display.new_window(WIN1_SX, WIN1_SY, "Title2")
    win3 = display.new_window(WIN1_SX, WIN1_SY, "Title3")

    def key_win3(key, param):
        if key == ESCAPE:
            display.destroy_window(win3)

    win3.key_hook(key_win3)
    display.post_event(win3, Event(EventType.KEY_RELEASE, keysym=ord("q")))
    display.loop()
    assert len(display.windows) == 3
    display.post_event(win3, Event(EventType.KEY_RELEASE, keysym=ESCAPE))
    display.loop()
    assert display.windows == (win2, win1)


def test_loop_stops_when_last_window_closes(display):
    win = display.new_window(10, 10, "w")
    turns = []

    def tick(param):
        turns.append(param)
        if len(turns) == 3:
            display.destroy_window(win)

    display.loop_hook(tick, "t")
    display.loop()
    assert turns == ["t", "t", "t"]
    assert display.windows == ()


def test_loop_end_stops_loop_for_good(display):
    win = display.new_window(10, 10, "w")
    turns = []

    def tick(param):
        turns.append(param)
        if len(turns) == 2:
            display.loop_end()

    display.loop_hook(tick)
    display.loop()
    assert len(turns) == 2
    assert display.windows == (win,)
    display.loop()
    assert len(turns) == 2
    assert display.windows == (win,)


def test_mouse_hook_replaces_window(display):
    state = {"win1": display.new_window(300, 300, "win1")}
    win2 = display.new_window(600, 600, "win2")
    clicks = []

    def gere_mouse(button, x, y, param):
        clicks.append(button)
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(123, 45, "new win")
        state["win1"].mouse_hook(gere_mouse)

    old = state["win1"]
    old.mouse_hook(gere_mouse)
    win2.mouse_hook(gere_mouse)
    display.post_event(win2, Event(EventType.BUTTON_PRESS, button=1))
    display.loop()
    assert clicks == [1]
    assert old not in display.windows
    new = state["win1"]
    assert (new.width, new.height, new.title) == (123, 45, "new win")
    assert new.event_mask() == BUTTON_PRESS_MASK


def test_events_for_destroyed_window_are_dropped(display):
    win1 = display.new_window(10, 10, "a")
    win2 = display.new_window(10, 10, "b")
    received = []
    win1.key_hook(lambda k, p: display.destroy_window(win2))
    win2.key_hook(lambda k, p: received.append(k))
    display.post_event(win1, Event(EventType.KEY_RELEASE, keysym=1))
    display.post_event(win2, Event(EventType.KEY_RELEASE, keysym=2))
    display.loop()
    assert received == []
    assert display.windows == (win1,)


def test_unknown_window_is_rejected(display):
    stranger = Window(5, 5, "stranger")
    with pytest.raises(ValueError):
        display.destroy_window(stranger)
    win = display.new_window(5, 5, "w")
    display.destroy_window(win)
    with pytest.raises(ValueError):
        display.post_event(win, Event(EventType.KEY_PRESS, keysym=KEY_PRESS_MASK))


def test_removed_loop_hook_lets_loop_return(display):
    display.new_window(5, 5, "w")
    turns = []
    display.loop_hook(turns.append, 1)
    display.loop_hook(None)
    display.loop()
    assert turns == []
    assert display.pending == 0