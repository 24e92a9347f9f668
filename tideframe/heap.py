"""A bump allocator over a simulated address space."""

HEADER_SIZE = 8
_ADDRESS_MASK = 0xFFFFFFFF


class Heap:
    """Hands out addresses from `start_of_heap` upwards; nothing is reclaimed."""

    def __init__(self, start_of_ram, end_of_ram, start_of_heap):
        self.start_of_ram = start_of_ram
        self.end_of_ram = end_of_ram
        self.start_of_heap = start_of_heap
        self._current = None
        self._allocations = {}

    @property
    def allocations(self):
        """Live allocations as a mapping of address to requested size."""
        return dict(self._allocations)

    def malloc(self, size):
        """Reserve `size` bytes and return the address of the block."""
        if not 0 <= size <= 0xFFFF:
            raise ValueError(f"allocation size {size} out of range")
        block = (size + HEADER_SIZE) & 0xFFFF
        if self._current is None:
            base = self.start_of_heap
            self._current = base
        else:
            base = self._current
            self._current = (base + block) & _ADDRESS_MASK
        address = (base + HEADER_SIZE) & _ADDRESS_MASK
        self._allocations[address] = size
        return address

    def free(self, address):
        """Forget an allocation; the space itself is not reused."""
        self._allocations.pop(address, None)