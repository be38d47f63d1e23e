"""
Unsigned variable-length integers.

Each byte holds seven bits of the value, least significant group first.
The high bit is set on every byte except the last one:

    0      -> 00
    127    -> 7F
    128    -> 80 01
    300    -> AC 02
"""

from runedeck.deckcode.errors import TruncatedBufferError

CONTINUATION_BIT = 0x80
PAYLOAD_MASK = 0x7F


def encode_varint(value: int) -> bytes:
    """
    Encode a non-negative integer as a varint.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value} as a varint")

    out = bytearray()
    while True:
        byte = value & PAYLOAD_MASK
        value >>= 7
        if value:
            out.append(byte | CONTINUATION_BIT)
        else:
            out.append(byte)
            return bytes(out)


class ByteReader:
    """Sequential reader over a decoded deck code."""

    def __init__(self, data: bytes):
        self._data = data
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def exhausted(self) -> bool:
        """True once every byte has been consumed."""
        return self._offset >= len(self._data)

    def read_byte(self, field: str) -> int:
        """
        Read a single byte.

        Raises:
            TruncatedBufferError: If no bytes are left
        """
        if self.exhausted():
            raise TruncatedBufferError(self._offset, field)
        byte = self._data[self._offset]
        self._offset += 1
        return byte

    def read_varint(self, field: str) -> int:
        """
        Read a varint.

        Raises:
            TruncatedBufferError: If the data ends before the final byte
        """
        value = 0
        shift = 0
        while True:
            byte = self.read_byte(field)
            value |= (byte & PAYLOAD_MASK) << shift
            if not byte & CONTINUATION_BIT:
                return value
            shift += 7
