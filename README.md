# tideframe

Drawing into an 8-bit indexed framebuffer of the kind found on small retro
machines: one byte per pixel, colours packed as 3 bits red, 3 bits green and
2 bits blue. Alongside the drawing code there are sprite containers, a 5x7
bitmap font, hex dumps, a small random number generator and a checksum
XMODEM receiver. Everything is pure Python with no runtime dependencies.

## Modules

- `tideframe.image` — `Image(width, height, memory=None)` wraps a byte buffer
  (a fresh `bytearray` when none is given; a `ValueError` if the buffer is too
  small or the size is invalid). `draw_pixel(x, y, colour)` ignores points
  outside the image; `pixel(x, y)` reads a colour and raises `IndexError`
  outside it. `rgb(r, g, b)` packs a colour byte.
- `tideframe.circle` — `draw_circle(image, xc, yc, r, colour)` draws a
  midpoint circle outline; `Circle(x, y, r)` is a dataclass with
  `draw(image, colour)`.
- `tideframe.font` — a 5x7 font for characters `' '` to DEL (0x7F).
  `glyph_rows(c)` returns the seven row bitmaps (bit 4 is the leftmost
  column) and raises `ValueError` for characters without a glyph.
  `draw_font_char` and `draw_font_text` draw clipped text, advancing six
  pixels per character.
- `tideframe.rng` — `Random(seed=1)`, a 32-bit linear congruential
  generator. `next()` returns values in 0..32767, `seed(seed)` resets it and
  `random_array(length, modulus, offset)` returns a list of 16-bit values
  `next() % modulus + offset`.
- `tideframe.heap` — `Heap(start_of_ram, end_of_ram, start_of_heap)`, a bump
  allocator over a simulated address space. `malloc(size)` returns an address
  (sizes 0..65535), `free(address)` forgets it without making the space
  reusable, and `allocations` maps live addresses to their sizes. It only
  hands out numbers; it does not own any memory.
- `tideframe.itoa` — `i16toa`, `ui16toa`, `i32toa` and `ui32toa` format
  integers in bases 2 to 36 with upper-case digits. The signed forms put a
  minus sign only in base 10; in other bases negative values are shown as
  their two's complement. Values outside the type's range raise `ValueError`.
- `tideframe.polygon` — `Polygon(num_points)` holds vertex coordinates in the
  signed 16-bit arrays `xs` and `ys`; `kill()` empties it.
- `tideframe.colour_test` — `draw_colour_test(image)` fills a test card of
  two-row bands (`BLOCK_COLOURS` lists them; the image needs at least 200
  rows) and `draw_block_test(image, block, colour)` fills a single band.
- `tideframe.memory_dump` — `byte_hex(value)` gives `"AB "`, `quad_hex(data)`
  formats four bytes, and `dump_memory(image, memory, x, y, count, colour)`
  draws `count` four-byte groups, four per line with a blank line after every
  four lines, and returns the drawn lines as `(y, text)` pairs.
- `tideframe.splatter` — `draw_splatter(image, rng, modulus, offset)` copies
  every pixel to a randomly offset position, trying up to ten offsets to stay
  on the image.
- `tideframe.sprite` — reading sprite containers and drawing sprites (see
  below).
- `tideframe.scenes` — the demo scenes: `MovingCircle` (a circle with a
  velocity that bounces off a 320x200 screen, with `move()` and
  `draw(image)`), `init_circles(rng, count)`, `render_frame(image, background,
  circles)` which restores the background and then draws and moves each
  circle, and `describe_sprites(data)` which returns the text lines listing a
  sprite container.
- `tideframe.xmodem` — the XMODEM receiver (see below).

## Drawing

```python
from tideframe.image import Image, rgb
from tideframe.circle import draw_circle
from tideframe.font import draw_font_text

screen = Image(320, 200)

draw_circle(screen, 160, 100, 40, rgb(7, 7, 3))
draw_font_text(screen, 4, 4, "Hello", 0xFF)

print(screen.pixel(160, 60))
```

Shapes and text may run off any edge; the parts outside are clipped.

## Bouncing circles

```python
from tideframe.image import Image
from tideframe.rng import Random
from tideframe.scenes import init_circles, render_frame

screen = Image(320, 200)
background = bytes(screen.memory)
circles = init_circles(Random(), 7)

for _ in range(100):
    render_frame(screen, background, circles)
```

## Sprites

A sprite container is little-endian binary data. It starts with the type
`SpriteType.CONTAINER` (0xE4EF) and a 16-bit sprite count. Each entry begins
with a 16-bit distance to the next entry, measured from the start of that
field (zero for the last one), followed by a sprite header of type, width and
height. Opaque sprites carry `width * height` pixel bytes; transparent sprites
carry runs of a flags word (bit 15 starts a new row, the low 15 bits are
pixels to skip) and a run length, each followed by that many pixel bytes, and
end at a run whose flags or length is zero.

```python
from tideframe.sprite import sprite_count, iterate_sprites, draw_sprite

with open("sprites.bin", "rb") as fh:
    data = fh.read()

print(sprite_count(data))
for sprite in iterate_sprites(data):
    draw_sprite(screen, 0, 0, sprite)
```

`sprite_count` returns 0 for data that is not a container, and iteration stops
at the first entry that is neither opaque nor transparent. Truncated data
raises `ValueError`.

## Receiving a file over XMODEM

`XmodemReceiver(memory, start_address)` takes bytes one at a time through
`feed(byte)`, which returns the bytes to send back (ACK or NAK). Good
128-byte packets, checked with the one-byte sum, are written into `memory`
from the start address onwards. A transfer that starts at 0xA000 is banked:
whenever the address reaches 0xC000 the next bank number is recorded in
`bank_switches` and writing continues at 0xA000. `tick()` counts down the
timeout and returns a NAK when it expires. Bad packets are counted in
`errors`, and `done` becomes true on EOT.

```python
from tideframe.xmodem import XmodemReceiver

memory = bytearray(0x10000)
receiver = XmodemReceiver(memory, 0x0800)
for byte in incoming_bytes:
    reply = receiver.feed(byte)
    if receiver.done:
        break
```

`receive(data, memory, start_address)` runs a whole transfer from a byte
string and returns everything the receiver sent, including its banner and
final report (built with `acia_print(text, crlf)`). It raises `EOFError` if
the data ends before EOT.

## What it does not do

The package only computes: it draws into byte buffers and returns the bytes a
receiver would send. It does not open a window or show the framebuffer, does
not talk to a serial port, and has no command-line program. Showing images
and moving bytes over a real line are left to the caller.

## Running the tests

The test suite uses pytest, available through the `test` extra.