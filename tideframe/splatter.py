"""Scatter every pixel of an image to a nearby random position."""

from itertools import cycle

RETRIES = 10
_MIN_TABLE = 100


def draw_splatter(image, rng, modulus, offset):
    """Copy each pixel, in scan order, to a randomly offset position.

    Offsets come from a table of `rng` values taken modulo `modulus`
    plus `offset`; up to RETRIES offsets are tried to stay on the image.
    """
    width, height = image.width, image.height
    length = ((width * height) // 35) & 0xFFFF
    length = max(length, _MIN_TABLE)
    length = (length + rng.next() % 12) & 0xFFFF
    offsets = cycle(rng.random_array(length, modulus, offset))

    def pick(position, limit):
        for _ in range(RETRIES):
            target = position + next(offsets)
            if 0 <= target < limit:
                break
        return target

    memory = image.memory
    size = width * height
    for y in range(height):
        for x in range(width):
            colour = memory[y * width + x]
            xr = pick(x, width)
            yr = pick(y, height)
            index = yr * width + xr
            if 0 <= index < size:
                memory[index] = colour