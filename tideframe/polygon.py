"""A polygon as parallel arrays of 16-bit vertex coordinates."""

from array import array


class Polygon:
    """Holds `num_points` vertices in `xs` and `ys`."""

    def __init__(self, num_points):
        if not 0 <= num_points <= 0xFFFF:
            raise ValueError(f"invalid point count {num_points}")
        self.num_points = num_points
        self.xs = array("h", bytes(2 * num_points))
        self.ys = array("h", bytes(2 * num_points))

    def kill(self):
        """Release the vertex storage."""
        self.xs = array("h")
        self.ys = array("h")
        self.num_points = 0