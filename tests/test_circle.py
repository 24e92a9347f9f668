import math

from tideframe.circle import Circle, draw_circle
from tideframe.image import Image


def lit(image):
    return {
        (i % image.width, i // image.width)
        for i, v in enumerate(image.memory)
        if v
    }


def test_radius_zero_is_single_pixel():
    image = Image(9, 9)
    draw_circle(image, 4, 4, 0, 3)
    assert lit(image) == {(4, 4)}


def test_extreme_points_are_drawn():
    image = Image(40, 40)
    draw_circle(image, 20, 20, 7, 1)
    points = lit(image)
    for p in [(27, 20), (13, 20), (20, 27), (20, 13)]:
        assert p in points


def test_points_lie_near_radius():
    image = Image(64, 64)
    draw_circle(image, 32, 32, 12, 9)
    points = lit(image)
    assert points
    for px, py in points:
        assert abs(math.hypot(px - 32, py - 32) - 12) <= 1
    assert all(image.pixel(px, py) == 9 for px, py in points)


def test_outline_is_symmetric():
    image = Image(50, 50)
    draw_circle(image, 25, 25, 10, 1)
    points = lit(image)
    assert {(50 - x, y) for x, y in points} == points
    assert {(y, x) for x, y in points} == points


def test_clipped_circle_draws_only_inside():
    image = Image(10, 10)
    draw_circle(image, 0, 0, 5, 2)
    points = lit(image)
    assert (5, 0) in points
    assert all(0 <= x < 10 and 0 <= y < 10 for x, y in points)


def test_circle_object_draws_like_function():
    a = Image(30, 30)
    b = Image(30, 30)
    Circle(15, 14, 6).draw(a, 4)
    draw_circle(b, 15, 14, 6, 4)
    assert a.memory == b.memory