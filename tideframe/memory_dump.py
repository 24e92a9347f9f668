"""Hex dumps of memory drawn as text onto an image."""

from .font import draw_font_text

QUADS_PER_LINE = 4
LINES_PER_GROUP = 4
LINE_HEIGHT = 8
_QUAD_SIZE = 4


def byte_hex(value):
    """Format one byte as two upper-case hex digits and a space."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} is not a byte")
    return f"{value:02X} "


def quad_hex(data):
    """Format four bytes as four space-terminated hex pairs."""
    if len(data) != _QUAD_SIZE:
        raise ValueError(f"expected {_QUAD_SIZE} bytes, got {len(data)}")
    return "".join(byte_hex(b) for b in data)


def dump_memory(image, memory, x, y, count, colour):
    """Draw `count` four-byte groups of `memory`, four per line.

    A blank line separates every four lines. Returns the drawn lines as
    (y, text) pairs.
    """
    needed = _QUAD_SIZE * count
    if count < 0 or len(memory) < needed:
        raise ValueError(f"memory holds {len(memory)} bytes, dump needs {needed}")
    view = bytes(memory[:needed])
    line_bytes = _QUAD_SIZE * QUADS_PER_LINE
    lines = []
    row = 0
    for start in range(0, needed, line_bytes):
        chunk = view[start:start + line_bytes]
        quads = [quad_hex(chunk[i:i + _QUAD_SIZE]) for i in range(0, len(chunk), _QUAD_SIZE)]
        if len(quads) == QUADS_PER_LINE:
            text = ": ".join(quads)
        else:
            text = "".join(q + ": " for q in quads)
        draw_font_text(image, x, y, text, colour)
        lines.append((y, text))
        y += LINE_HEIGHT
        row += 1
        if row == LINES_PER_GROUP:
            y += LINE_HEIGHT
            row = 0
    return lines