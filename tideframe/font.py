"""A 5x7 bitmap font covering printable ASCII."""

FIRST_CHAR = 0x20
GLYPH_WIDTH = 5
GLYPH_HEIGHT = 7
CHAR_ADVANCE = 6

# One 7-row glyph per character from space to DEL; bit 4 is the leftmost column.
_GLYPHS = (
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x04, 0x04, 0x04, 0x04, 0x04, 0x00, 0x04),
    (0x09, 0x09, 0x12, 0x00, 0x00, 0x00, 0x00),
    (0x0A, 0x0A, 0x1F, 0x0A, 0x1F, 0x0A, 0x0A),
    (0x04, 0x0F, 0x14, 0x0E, 0x05, 0x1E, 0x04),
    (0x11, 0x01, 0x02, 0x04, 0x08, 0x10, 0x11),
    (0x04, 0x0A, 0x0A, 0x0A, 0x15, 0x12, 0x0D),
    (0x04, 0x04, 0x08, 0x00, 0x00, 0x00, 0x00),
    (0x02, 0x04, 0x08, 0x08, 0x08, 0x04, 0x02),
    (0x08, 0x04, 0x02, 0x02, 0x02, 0x04, 0x08),
    (0x04, 0x15, 0x0E, 0x1F, 0x0E, 0x15, 0x04),
    (0x00, 0x04, 0x04, 0x1F, 0x04, 0x04, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x04, 0x04, 0x08),
    (0x00, 0x00, 0x00, 0x1F, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x04),
    (0x01, 0x01, 0x02, 0x04, 0x08, 0x10, 0x10),
    (0x0E, 0x11, 0x13, 0x15, 0x19, 0x11, 0x0E),
    (0x04, 0x0C, 0x04, 0x04, 0x04, 0x04, 0x0E),
    (0x0E, 0x11, 0x01, 0x02, 0x04, 0x08, 0x1F),
    (0x0E, 0x11, 0x01, 0x06, 0x01, 0x11, 0x0E),
    (0x02, 0x06, 0x0A, 0x12, 0x1F, 0x02, 0x02),
    (0x1F, 0x10, 0x1E, 0x01, 0x01, 0x11, 0x0E),
    (0x06, 0x08, 0x10, 0x1E, 0x11, 0x11, 0x0E),
    (0x1F, 0x01, 0x02, 0x04, 0x08, 0x08, 0x08),
    (0x0E, 0x11, 0x11, 0x0E, 0x11, 0x11, 0x0E),
    (0x0E, 0x11, 0x11, 0x0F, 0x01, 0x02, 0x0C),
    (0x00, 0x00, 0x04, 0x00, 0x04, 0x00, 0x00),
    (0x00, 0x00, 0x04, 0x00, 0x04, 0x04, 0x08),
    (0x02, 0x04, 0x08, 0x10, 0x08, 0x04, 0x02),
    (0x00, 0x00, 0x1F, 0x00, 0x1F, 0x00, 0x00),
    (0x08, 0x04, 0x02, 0x01, 0x02, 0x04, 0x08),
    (0x0E, 0x11, 0x01, 0x02, 0x04, 0x00, 0x04),
    (0x0E, 0x11, 0x17, 0x15, 0x17, 0x10, 0x0F),
    (0x04, 0x0A, 0x11, 0x11, 0x1F, 0x11, 0x11),
    (0x1E, 0x11, 0x11, 0x1E, 0x11, 0x11, 0x1E),
    (0x0E, 0x11, 0x10, 0x10, 0x10, 0x11, 0x0E),
    (0x1E, 0x09, 0x09, 0x09, 0x09, 0x09, 0x1E),
    (0x1F, 0x10, 0x10, 0x1C, 0x10, 0x10, 0x1F),
    (0x1F, 0x10, 0x10, 0x1F, 0x10, 0x10, 0x10),
    (0x0E, 0x11, 0x10, 0x10, 0x13, 0x11, 0x0F),
    (0x11, 0x11, 0x11, 0x1F, 0x11, 0x11, 0x11),
    (0x0E, 0x04, 0x04, 0x04, 0x04, 0x04, 0x0E),
    (0x1F, 0x02, 0x02, 0x02, 0x02, 0x12, 0x0C),
    (0x11, 0x12, 0x14, 0x18, 0x14, 0x12, 0x11),
    (0x10, 0x10, 0x10, 0x10, 0x10, 0x10, 0x1F),
    (0x11, 0x1B, 0x15, 0x11, 0x11, 0x11, 0x11),
    (0x11, 0x11, 0x19, 0x15, 0x13, 0x11, 0x11),
    (0x0E, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),
    (0x1E, 0x11, 0x11, 0x1E, 0x10, 0x10, 0x10),
    (0x0E, 0x11, 0x11, 0x11, 0x15, 0x12, 0x0D),
    (0x1E, 0x11, 0x11, 0x1E, 0x14, 0x12, 0x11),
    (0x0E, 0x11, 0x10, 0x0E, 0x01, 0x11, 0x0E),
    (0x1F, 0x04, 0x04, 0x04, 0x04, 0x04, 0x04),
    (0x11, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),
    (0x11, 0x11, 0x11, 0x11, 0x11, 0x0A, 0x04),
    (0x11, 0x11, 0x11, 0x15, 0x15, 0x1B, 0x11),
    (0x11, 0x11, 0x0A, 0x04, 0x0A, 0x11, 0x11),
    (0x11, 0x11, 0x0A, 0x04, 0x04, 0x04, 0x04),
    (0x1F, 0x01, 0x02, 0x04, 0x08, 0x10, 0x1F),
    (0x0E, 0x08, 0x08, 0x08, 0x08, 0x08, 0x0E),
    (0x10, 0x10, 0x08, 0x04, 0x02, 0x01, 0x01),
    (0x0E, 0x02, 0x02, 0x02, 0x02, 0x02, 0x0E),
    (0x04, 0x0A, 0x11, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x1F),
    (0x04, 0x04, 0x02, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x0E, 0x01, 0x0D, 0x13, 0x13, 0x0D),
    (0x10, 0x10, 0x10, 0x1C, 0x12, 0x12, 0x1C),
    (0x00, 0x00, 0x00, 0x0E, 0x10, 0x10, 0x0E),
    (0x01, 0x01, 0x01, 0x07, 0x09, 0x09, 0x07),
    (0x00, 0x00, 0x0E, 0x11, 0x1F, 0x10, 0x0F),
    (0x06, 0x09, 0x08, 0x1C, 0x08, 0x08, 0x08),
    (0x0E, 0x11, 0x13, 0x0D, 0x01, 0x01, 0x0E),
    (0x10, 0x10, 0x10, 0x16, 0x19, 0x11, 0x11),
    (0x00, 0x04, 0x00, 0x0C, 0x04, 0x04, 0x0E),
    (0x02, 0x00, 0x06, 0x02, 0x02, 0x12, 0x0C),
    (0x10, 0x10, 0x12, 0x14, 0x18, 0x14, 0x12),
    (0x0C, 0x04, 0x04, 0x04, 0x04, 0x04, 0x04),
    (0x00, 0x00, 0x0A, 0x15, 0x15, 0x11, 0x11),
    (0x00, 0x00, 0x16, 0x19, 0x11, 0x11, 0x11),
    (0x00, 0x00, 0x0E, 0x11, 0x11, 0x11, 0x0E),
    (0x00, 0x1C, 0x12, 0x12, 0x1C, 0x10, 0x10),
    (0x00, 0x07, 0x09, 0x09, 0x07, 0x01, 0x01),
    (0x00, 0x00, 0x16, 0x19, 0x10, 0x10, 0x10),
    (0x00, 0x00, 0x0F, 0x10, 0x0E, 0x01, 0x1E),
    (0x08, 0x08, 0x1C, 0x08, 0x08, 0x09, 0x06),
    (0x00, 0x00, 0x11, 0x11, 0x11, 0x13, 0x0D),
    (0x00, 0x00, 0x11, 0x11, 0x11, 0x0A, 0x04),
    (0x00, 0x00, 0x11, 0x11, 0x15, 0x15, 0x0A),
    (0x00, 0x00, 0x11, 0x0A, 0x04, 0x0A, 0x11),
    (0x00, 0x11, 0x11, 0x0F, 0x01, 0x11, 0x0E),
    (0x00, 0x00, 0x1F, 0x02, 0x04, 0x08, 0x1F),
    (0x06, 0x08, 0x08, 0x10, 0x08, 0x08, 0x06),
    (0x04, 0x04, 0x04, 0x00, 0x04, 0x04, 0x04),
    (0x0C, 0x02, 0x02, 0x01, 0x02, 0x02, 0x0C),
    (0x08, 0x15, 0x02, 0x00, 0x00, 0x00, 0x00),
    (0x1F, 0x1F, 0x1F, 0x1F, 0x1F, 0x1F, 0x1F),
)

LAST_CHAR = FIRST_CHAR + len(_GLYPHS) - 1


def glyph_rows(c):
    """Return the seven row bitmaps of character `c`."""
    code = ord(c)
    if not FIRST_CHAR <= code <= LAST_CHAR:
        raise ValueError(f"character {c!r} has no glyph")
    return _GLYPHS[code - FIRST_CHAR]


def draw_font_char(image, x, y, c, colour):
    """Draw one character with its top-left corner at (x, y), clipped."""
    rows = glyph_rows(c)
    if x + GLYPH_WIDTH < 0 or x >= image.width or y + 8 < 0 or y >= image.height:
        return
    for dy, row in enumerate(rows):
        for dx in range(GLYPH_WIDTH):
            if row & (1 << (GLYPH_WIDTH - 1 - dx)):
                image.draw_pixel(x + dx, y + dy, colour)


def draw_font_text(image, x, y, text, colour):
    """Draw a string left to right, six pixels per character."""
    for c in text:
        draw_font_char(image, x, y, c, colour)
        x += CHAR_ADVANCE