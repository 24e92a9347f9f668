import pytest

from tideframe.itoa import i16toa, i32toa, ui16toa, ui32toa


@pytest.mark.parametrize("func", [i16toa, i32toa, ui16toa, ui32toa])
def test_zero(func):
    assert func(0, 10) == "0"
    assert func(0, 16) == "0"


@pytest.mark.parametrize("num", [1, 9, 10, 123, -1, -123, 32767, -32768])
def test_i16_decimal_matches_str(num):
    assert i16toa(num, 10) == str(num)


@pytest.mark.parametrize("num", [-2147483648, 2147483647, -5, 1000000])
def test_i32_decimal_matches_str(num):
    assert i32toa(num, 10) == str(num)


@pytest.mark.parametrize("base", [2, 8, 16, 36])
def test_unsigned_round_trip(base):
    for num in [1, 7, 255, 4096, 0xBEEF, 65535]:
        assert int(ui16toa(num, base), base) == num
    for num in [65536, 0xDEADBEEF, 0xFFFFFFFF]:
        assert int(ui32toa(num, base), base) == num


def test_hex_is_upper_case():
    assert ui16toa(0xBEEF, 16) == "BEEF"


def test_ui32_wraps_negative():
    assert ui32toa(-1, 16) == "FFFFFFFF"
    assert int(ui32toa(-2, 10)) == 0xFFFFFFFF - 1


def test_signed_non_decimal_uses_twos_complement():
    assert int(i32toa(-1, 16), 16) == 0xFFFFFFFF
    assert int(i16toa(-1, 2), 2) == 0xFFFF


@pytest.mark.parametrize(
    "func,num",
    [(i16toa, 32768), (i16toa, -32769), (ui16toa, -1), (ui16toa, 65536),
     (i32toa, 1 << 31), (ui32toa, 1 << 32)],
)
def test_out_of_range_raises(func, num):
    with pytest.raises(ValueError):
        func(num, 10)


@pytest.mark.parametrize("base", [0, 1, 37])
def test_bad_base_raises(base):
    with pytest.raises(ValueError):
        ui16toa(5, base)