"""Integer to text conversion in bases 2 to 36 with fixed-width ranges."""

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _check_base(base):
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base {base}")


def _check_range(num, low, high):
    if not low <= num <= high:
        raise ValueError(f"{num} is outside {low}..{high}")


def _digits(value, base):
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def _signed(num, base, bits):
    _check_base(base)
    _check_range(num, -(1 << (bits - 1)), (1 << (bits - 1)) - 1)
    if num < 0 and base == 10:
        return "-" + _digits(-num, base)
    return _digits(num & ((1 << bits) - 1), base)


def i16toa(num, base):
    """Format a signed 16-bit value; only base 10 carries a minus sign."""
    return _signed(num, base, 16)


def i32toa(num, base):
    """Format a signed 32-bit value; only base 10 carries a minus sign."""
    return _signed(num, base, 32)


def ui16toa(num, base):
    """Format an unsigned 16-bit value."""
    _check_base(base)
    _check_range(num, 0, 0xFFFF)
    return _digits(num, base)


def ui32toa(num, base):
    """Format a 32-bit value as unsigned; negative inputs wrap."""
    _check_base(base)
    _check_range(num, -(1 << 31), 0xFFFFFFFF)
    return _digits(num & 0xFFFFFFFF, base)