# rasterkit

A small toolkit with no dependencies for simple raster programs. It has these modules:

- **`rasterkit.text`**: character classification and bounded string helpers.
  These are `atoi`, `itoa`, `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`, `find_char`, `rfind_char`, `strncmp`,
  `strnstr`, `strlcpy` and `strlcat`.
  - Characters may be one-character strings or integer code points.
  - The search functions return an index or `None`.
- **`rasterkit.memory`**: helpers for `bytearray` buffers. These are `memset`,
  `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove`.
  - Spans that reach past the end of a buffer raise `ValueError`.
- **`rasterkit.transform`**: string transforms. These are `split`, `substr`,
  `strjoin`, `strtrim`, `strmapi` and `striteri`.
- **`rasterkit.output`**: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd`, which write to a text stream.
- **`rasterkit.lines`**: `LineReader` reads a text or binary stream in chunks
  and returns one line at a time.
  - Each line keeps its trailing newline.
  - You can iterate over a `LineReader`.
  - `get_next_line(reader)` returns the next line, or `None` at the end.
- **`rasterkit.wordtab`**: `str_to_wordtab` splits on spaces and tabs.
  `str_str` is a bounded substring search, and `str_str_quoted` is the same
  search but skips text inside double quotes.
- **`rasterkit.visual`**: `TrueColorVisual` converts `0xRRGGBB` colours into
  pixel values for a given depth and set of channel masks.
- **`rasterkit.colors`**: the X11 colour-name table.
  - `lookup_color(name)` returns the value, or `None` if the name is unknown.
  - `parse_color(name, end)` accepts `#hex` or a name. An unknown name gives 0.
  - The name `none` gives -1.
- **`rasterkit.image`**: `Image` is a pixel buffer in memory. It has scanlines
  padded to 32 bits, 0 for least significant byte first or 1 for most
  significant byte first, and the methods `put_pixel`, `get_pixel` and `row`.
- **`rasterkit.xpm`**: loads XPM pixmaps into 32-bit `Image`s.
  - It provides `parse_xpm`, `xpm_to_image`, `xpm_file_to_image` and
    `strip_comments`.
  - Malformed data raises `XpmError`, which is a `ValueError`.
- **`rasterkit.display`**: `Display`, `Window`, `Event` and `EventType`, with
  these parts:
  - Windows with hooks: `hook`, `key_hook`, `mouse_hook` and `expose_hook`.
  - Drawing: `pixel_put`, `put_image_to_window` and `clear_window`.
  - An event queue: `post_event`.
  - A loop: `loop`, `loop_hook` and `loop_end`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Loading an XPM image:

```python
from rasterkit.xpm import xpm_to_image

data = [
    "2 2 2 1",
    "a c #ff0000",
    "b c blue",
    "ab",
    "ba",
]
image = xpm_to_image(data)
print(image.width, image.height)   # 2 2
print(hex(image.get_pixel(0, 0)))  # 0xff0000
```

Driving windows with hooks:

```python
from rasterkit.display import Display, Event, EventType

display = Display()
window = display.new_window(200, 100, "demo")

def on_key(keysym, param):
    if keysym == 0xFF1B:
        display.loop_end()

window.key_hook(on_key, None)
display.post_event(window, Event(EventType.KEY_RELEASE, keysym=0xFF1B))
display.loop()
```

Colours by name:

```python
from rasterkit.colors import lookup_color, parse_color

lookup_color("dodger blue")   # 0x1e90ff
parse_color("#00ff00", None)  # 0x00ff00
```

## What it does not do

`rasterkit.display` does not open windows on a screen. Its windows are pixel
grids in memory. Input never comes from a keyboard or mouse: every event
reaches a hook through `Display.post_event`.

There is no text drawing, no font handling, and no way to save an `Image` to a
file. The package has no command-line program.