"""Midpoint circle outlines."""

from dataclasses import dataclass


def _plot_octants(image, xc, yc, x, y, colour):
    for dx, dy in ((x, y), (y, x)):
        image.draw_pixel(xc + dx, yc + dy, colour)
        image.draw_pixel(xc - dx, yc + dy, colour)
        image.draw_pixel(xc + dx, yc - dy, colour)
        image.draw_pixel(xc - dx, yc - dy, colour)


def draw_circle(image, xc, yc, r, colour):
    """Draw the outline of a circle of radius `r` centred on (xc, yc)."""
    x, y = 0, r
    p = 1 - r
    _plot_octants(image, xc, yc, x, y, colour)
    while x < y:
        x += 1
        if p < 0:
            p += 2 * x + 1
        else:
            y -= 1
            p += 2 * (x - y) + 1
        _plot_octants(image, xc, yc, x, y, colour)


@dataclass
class Circle:
    """A circle by centre and radius."""

    x: int
    y: int
    r: int

    def draw(self, image, colour):
        draw_circle(image, self.x, self.y, self.r, colour)