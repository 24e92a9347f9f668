"""An XMODEM (checksum variant) receiver that writes packets into memory."""

from enum import IntEnum

NAK = 0x15
ACK = 0x06
SOH = 0x01
EOT = 0x04

PACKET_SIZE = 128
BANK_START = 0xA000
BANK_END = 0xC000
TIMER_RELOAD = 0xFFFF
_ADDRESS_MASK = 0xFFFF


class XmodemState(IntEnum):
    WAITING = 0
    RX_SEQ = 1
    RX_NOT_SEQ = 2
    RX_DATA = 3
    RX_CSUM = 4


def acia_print(text, crlf):
    """Return the bytes sent for `text`, followed by CR LF when `crlf` is set."""
    data = text.encode("ascii")
    return data + b"\r\n" if crlf else data


class XmodemReceiver:
    """Receives XMODEM packets byte by byte into `memory` from `start_address`.

    Each good packet is stored at the current address. When the address
    reaches 0xC000 the next memory bank is selected and the address goes
    back to 0xA000. Starting at 0xA000 selects bank 0 first.
    """

    def __init__(self, memory, start_address):
        if not 0 <= start_address <= _ADDRESS_MASK:
            raise ValueError(f"start address {start_address:#x} out of range")
        self.memory = memory
        self.address = start_address
        self.state = XmodemState.WAITING
        self.sequence = 0
        self.errors = 0
        self.timer = TIMER_RELOAD
        self.bank = 0
        self.bank_switches = []
        self.done = False
        self._buffer = bytearray()
        self._checksum = 0
        if start_address == BANK_START:
            self.bank_switches.append(self.bank)

    @property
    def banked(self):
        """True when the transfer started at the banked window."""
        return bool(self.bank_switches)

    def _store_packet(self):
        for value in self._buffer:
            self.memory[self.address] = value
            self.address = (self.address + 1) & _ADDRESS_MASK
        if self.address == BANK_END:
            self.bank = (self.bank + 1) & 0xFF
            self.bank_switches.append(self.bank)
            self.address = BANK_START

    def feed(self, byte):
        """Process one received byte and return the bytes sent in reply."""
        if self.done:
            raise RuntimeError("transfer already complete")
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"{byte} is not a byte")
        reply = b""
        state = self.state
        if state is XmodemState.WAITING:
            if byte == SOH:
                self.state = XmodemState.RX_SEQ
            elif byte == EOT:
                self.done = True
                reply = bytes([ACK])
        elif state is XmodemState.RX_SEQ:
            self.sequence = byte
            self.state = XmodemState.RX_NOT_SEQ
        elif state is XmodemState.RX_NOT_SEQ:
            self.state = XmodemState.RX_DATA
            self._buffer = bytearray()
            self._checksum = 0
        elif state is XmodemState.RX_DATA:
            self._checksum = (self._checksum + byte) & 0xFF
            self._buffer.append(byte)
            if len(self._buffer) >= PACKET_SIZE:
                self.state = XmodemState.RX_CSUM
        else:
            if self._checksum == byte:
                self._store_packet()
                reply = bytes([ACK])
            else:
                reply = bytes([NAK])
                self.errors = (self.errors + 1) & 0xFF
            self.state = XmodemState.WAITING
            self.timer = TIMER_RELOAD
        return reply

    def tick(self):
        """Count down the timeout; on expiry reset the state and return a NAK."""
        self.timer = (self.timer - 1) & 0xFFFF
        if self.timer == 0:
            self.timer = TIMER_RELOAD
            self.state = XmodemState.WAITING
            return bytes([NAK])
        return b""


def receive(data, memory, start_address):
    """Run a whole transfer from the bytes in `data`; return everything sent.

    Raises EOFError if `data` ends before the sender's EOT.
    """
    receiver = XmodemReceiver(memory, start_address)
    sent = bytearray(acia_print("XMODEM", True))
    if receiver.banked:
        sent += acia_print("TO BANK", True)
    for byte in data:
        sent += receiver.feed(byte)
        sent += receiver.tick()
        if receiver.done:
            break
    else:
        raise EOFError("input ended before end of transmission")
    sent += acia_print("ERR PKT ", False)
    sent += acia_print(format(receiver.errors, "x"), True)
    sent += acia_print("TRANSFER COMPLETE ", True)
    return bytes(sent)