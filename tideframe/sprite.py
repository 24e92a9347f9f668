"""Sprite containers and opaque or run-length transparent sprites.

All 16-bit fields are little-endian.
"""

import struct
from dataclasses import dataclass
from enum import IntEnum

ROW_START = 0x8000
SKIP_MASK = 0x7FFF

_U16 = struct.Struct("<H")
_CONTAINER = struct.Struct("<HH")
_HEADER = struct.Struct("<HHH")
_RUN = struct.Struct("<HH")


class SpriteType(IntEnum):
    OPAQUE = 0xE457
    TRANSPARENT = 0xE4F9
    CONTAINER = 0xE4EF


_DRAWABLE = (SpriteType.OPAQUE, SpriteType.TRANSPARENT)


@dataclass(frozen=True)
class Sprite:
    """A sprite's header fields and the bytes that follow its header."""

    kind: SpriteType
    width: int
    height: int
    payload: bytes


def _read(fmt, data, offset):
    if offset + fmt.size > len(data):
        raise ValueError("sprite data is truncated")
    return fmt.unpack_from(data, offset)


def sprite_count(data):
    """Return the sprite count of a container, or 0 for anything else."""
    (kind,) = _read(_U16, data, 0)
    if kind != SpriteType.CONTAINER:
        return 0
    return _read(_CONTAINER, data, 0)[1]


def iterate_sprites(data):
    """Yield the sprites of a container until the chain or a known type ends."""
    (kind,) = _read(_U16, data, 0)
    if kind != SpriteType.CONTAINER:
        return
    offset = _CONTAINER.size
    while True:
        (skip,) = _read(_U16, data, offset)
        following = offset + skip if skip else None
        start = offset + _U16.size
        kind, width, height = _read(_HEADER, data, start)
        if kind not in _DRAWABLE:
            return
        end = len(data) if following is None else following
        yield Sprite(SpriteType(kind), width, height, bytes(data[start + _HEADER.size:end]))
        if following is None:
            return
        offset = following


def _draw_opaque(image, x, y, sprite):
    width, height = sprite.width, sprite.height
    if width == 0 or height == 0:
        return
    needed = width * height
    if len(sprite.payload) < needed:
        raise ValueError("opaque sprite data is truncated")
    for row, start in enumerate(range(0, needed, width)):
        for col, colour in enumerate(sprite.payload[start:start + width]):
            image.draw_pixel(x + col, y + row, colour)


def _draw_transparent(image, x, y, sprite):
    payload = sprite.payload
    offset = 0
    start_x = x
    while True:
        flags, run = _read(_RUN, payload, offset)
        offset += _RUN.size
        if flags == 0 or run == 0:
            return
        if flags & ROW_START:
            x = start_x
            y += 1
        x += flags & SKIP_MASK
        pixels = payload[offset:offset + run]
        if len(pixels) < run:
            raise ValueError("transparent sprite data is truncated")
        for colour in pixels:
            image.draw_pixel(x, y, colour)
            x += 1
        offset += run


def draw_sprite(image, x, y, sprite):
    """Draw `sprite` with its origin at (x, y), clipped to the image."""
    if sprite.kind is SpriteType.OPAQUE:
        _draw_opaque(image, x, y, sprite)
    elif sprite.kind is SpriteType.TRANSPARENT:
        _draw_transparent(image, x, y, sprite)