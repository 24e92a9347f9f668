"""The bouncing-circles and sprite-listing demo scenes."""

from dataclasses import dataclass

from .circle import Circle
from .image import rgb
from .itoa import ui16toa
from .sprite import SpriteType, iterate_sprites, sprite_count

SCREEN_RIGHT = 319
SCREEN_BOTTOM = 199

_LABELS = {
    SpriteType.OPAQUE: "Sprite (Opaque)",
    SpriteType.TRANSPARENT: "Sprite (Transparent)",
}


@dataclass
class MovingCircle:
    """A coloured circle with a velocity that bounces off the screen edges."""

    circle: Circle
    xs: int
    ys: int
    colour: int

    def move(self):
        """Advance one step, reflecting off the screen edges."""
        c = self.circle
        c.x += self.xs
        c.y += self.ys
        if c.x - c.r < 0:
            c.x = c.r
            self.xs = -self.xs
        if c.x + c.r > SCREEN_RIGHT:
            c.x = SCREEN_RIGHT - c.r
            self.xs = -self.xs
        if c.y - c.r < 0:
            c.y = c.r
            self.ys = -self.ys
        if c.y + c.r > SCREEN_BOTTOM:
            c.y = SCREEN_BOTTOM - c.r
            self.ys = -self.ys

    def draw(self, image):
        self.circle.draw(image, self.colour)


def _velocity(rng):
    v = rng.next() % 6 - 3
    return v + 1 if v >= 0 else v


def _random_circle(rng):
    x = 50 + rng.next() % 220
    y = 50 + rng.next() % 100
    r = 2 + rng.next() % 5
    xs = _velocity(rng)
    ys = _velocity(rng)
    red = (rng.next() % 2 + 2) << 1
    green = (rng.next() % 2 + 2) << 1
    blue = rng.next() % 2 + 2
    return MovingCircle(Circle(x, y, r), xs, ys, rgb(red, green, blue))


def init_circles(rng, count):
    """Create `count` circles with random position, size, speed and colour."""
    return [_random_circle(rng) for _ in range(count)]


def render_frame(image, background, circles):
    """Restore the background, then draw and advance every circle."""
    if len(background) > len(image.memory):
        raise ValueError("background is larger than the image")
    image.memory[:len(background)] = background
    for circle in circles:
        circle.draw(image)
        circle.move()


def describe_sprites(data):
    """Return the listing lines shown for a sprite container."""
    count = sprite_count(data)
    if count == 0:
        return []
    lines = [f"Container ({ui16toa(count, 10)})"]
    lines.extend(_LABELS[sprite.kind] for sprite in iterate_sprites(data))
    lines.append("Done!")
    return lines