import pytest

from tideframe.font import draw_font_char, draw_font_text, glyph_rows
from tideframe.image import Image


def lit(image):
    return {
        (i % image.width, i // image.width)
        for i, v in enumerate(image.memory)
        if v
    }


def test_glyph_for_a():
    assert glyph_rows("A") == (0x04, 0x0A, 0x11, 0x11, 0x1F, 0x11, 0x11)


def test_space_is_blank():
    assert glyph_rows(" ") == (0,) * 7


def test_every_printable_has_seven_rows():
    for code in range(0x20, 0x80):
        rows = glyph_rows(chr(code))
        assert len(rows) == 7
        assert all(0 <= r < 32 for r in rows)


@pytest.mark.parametrize("c", ["\n", "\x1f", "\x80", "é"])
def test_unprintable_raises(c):
    with pytest.raises(ValueError):
        glyph_rows(c)


@pytest.mark.parametrize("c", ["A", "0", "z", "@"])
def test_drawn_char_matches_glyph(c):
    image = Image(20, 20)
    draw_font_char(image, 3, 4, c, 7)
    expected = {
        (3 + dx, 4 + dy)
        for dy, row in enumerate(glyph_rows(c))
        for dx in range(5)
        if row & (16 >> dx)
    }
    assert lit(image) == expected
    assert all(image.pixel(px, py) == 7 for px, py in expected)


def test_partially_clipped_char():
    image = Image(10, 10)
    draw_font_char(image, -2, 0, "A", 1)
    assert image.pixel(0, 0) == 1
    assert all(0 <= x < 10 and 0 <= y < 10 for x, y in lit(image))


def test_fully_offscreen_char_draws_nothing():
    image = Image(10, 10)
    draw_font_char(image, 10, 0, "#", 1)
    draw_font_char(image, 0, -9, "#", 1)
    assert lit(image) == set()


def test_text_advances_six_pixels():
    image = Image(20, 10)
    draw_font_text(image, 0, 0, "!!", 5)
    top = {x for x, y in lit(image) if y == 0}
    assert top == {2, 8}


def test_text_equals_chars_drawn_separately():
    a = Image(40, 10)
    b = Image(40, 10)
    draw_font_text(a, 1, 1, "Hi!", 3)
    for i, c in enumerate("Hi!"):
        draw_font_char(b, 1 + 6 * i, 1, c, 3)
    assert a.memory == b.memory