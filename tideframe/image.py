"""An 8-bit indexed framebuffer with clipped pixel plotting."""

_MAX_DIMENSION = 0xFFFF


def rgb(r, g, b):
    """Pack red (3 bits), green (3 bits) and blue (2 bits) into one colour byte."""
    return (r & 0x7) | ((g & 0x7) << 3) | ((b & 0x3) << 6)


class Image:
    """A row-major block of one-byte pixels."""

    def __init__(self, width, height, memory=None):
        if not 0 < width <= _MAX_DIMENSION or not 0 < height <= _MAX_DIMENSION:
            raise ValueError(f"invalid image size {width}x{height}")
        size = width * height
        if memory is None:
            memory = bytearray(size)
        elif len(memory) < size:
            raise ValueError(
                f"memory holds {len(memory)} bytes, image needs {size}"
            )
        self.width = width
        self.height = height
        self.memory = memory

    def _contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x, y, colour):
        """Set one pixel; points outside the image are silently ignored."""
        if self._contains(x, y):
            self.memory[y * self.width + x] = colour & 0xFF

    def pixel(self, x, y):
        """Return the colour at (x, y)."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.memory[y * self.width + x]