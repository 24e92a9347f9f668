import pytest

from tideframe.image import Image, rgb


def test_new_image_is_blank():
    image = Image(4, 3)
    assert len(image.memory) == 12
    assert all(v == 0 for v in image.memory)


def test_draw_pixel_then_read_back():
    image = Image(10, 5)
    image.draw_pixel(3, 2, 77)
    assert image.pixel(3, 2) == 77
    assert image.memory[2 * 10 + 3] == 77


def test_draw_pixel_outside_is_ignored():
    image = Image(4, 4)
    for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4), (100, 100)]:
        image.draw_pixel(x, y, 5)
    assert all(v == 0 for v in image.memory)


def test_colour_is_truncated_to_byte():
    image = Image(2, 2)
    image.draw_pixel(1, 1, 0x1FF)
    assert image.pixel(1, 1) == 0xFF


def test_pixel_outside_raises():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_external_memory_is_used():
    memory = bytearray(20)
    image = Image(4, 4, memory)
    image.draw_pixel(0, 1, 9)
    assert memory[4] == 9


def test_memory_too_small_raises():
    with pytest.raises(ValueError):
        Image(4, 4, bytearray(15))


def test_bad_size_raises():
    with pytest.raises(ValueError):
        Image(0, 5)


def test_rgb_white_is_ff():
    assert rgb(7, 7, 3) == 0xFF
    assert rgb(0, 0, 0) == 0


def test_rgb_masks_components():
    assert rgb(8, 0, 0) == rgb(0, 0, 0)
    assert rgb(15, 15, 7) == rgb(7, 7, 3)
    assert rgb(1, 0, 0) == 1