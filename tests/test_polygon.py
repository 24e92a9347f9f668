import pytest

from tideframe.polygon import Polygon


def test_storage_matches_point_count():
    polygon = Polygon(5)
    assert polygon.num_points == 5
    assert list(polygon.xs) == [0] * 5
    assert list(polygon.ys) == [0] * 5


def test_coordinates_are_independent():
    polygon = Polygon(3)
    polygon.xs[1] = -40
    polygon.ys[1] = 17
    assert polygon.xs[1] == -40
    assert polygon.ys[1] == 17
    assert polygon.ys[0] == 0


def test_coordinates_are_16_bit():
    polygon = Polygon(1)
    polygon.xs[0] = 32767
    assert polygon.xs[0] == 32767
    with pytest.raises(OverflowError):
        polygon.xs[0] = 40000
    assert polygon.xs[0] == 32767


def test_kill_clears_points():
    polygon = Polygon(4)
    polygon.kill()
    assert polygon.num_points == 0
    assert len(polygon.xs) == 0
    assert len(polygon.ys) == 0


@pytest.mark.parametrize("count", [-1, 0x10000])
def test_bad_count_raises(count):
    with pytest.raises(ValueError):
        Polygon(count)