"""The linear congruential generator used for scene randomness."""

_MASK32 = 0xFFFFFFFF


def _to_int16(value):
    return ((value + 0x8000) & 0xFFFF) - 0x8000


class Random:
    """A 32-bit LCG yielding values in 0..32767."""

    def __init__(self, seed=1):
        self._state = seed & _MASK32

    def seed(self, seed):
        """Reset the generator state."""
        self._state = seed & _MASK32

    def next(self):
        """Advance and return the next value in 0..32767."""
        self._state = (self._state * 1103515243 + 12345) & _MASK32
        return (self._state // 65536) % 32768

    def random_array(self, length, modulus, offset):
        """Return `length` 16-bit values drawn as next() % modulus + offset."""
        if not 0 <= length <= 0xFFFF:
            raise ValueError(f"invalid length {length}")
        if not 0 < modulus <= 0xFFFF:
            raise ValueError(f"invalid modulus {modulus}")
        return [_to_int16(self.next() % modulus + offset) for _ in range(length)]