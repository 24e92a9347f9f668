"""8-bit indexed framebuffer drawing, a 5x7 font, sprites, hex dumps and an XMODEM receiver."""

__version__ = "0.1.0"