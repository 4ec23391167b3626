"""Wire format shared by the client and the server.

Every frame is an operation code and a payload size, both 32-bit
little-endian integers, followed by the payload itself. A packet payload
is a sequence of length-prefixed values.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

_INT = struct.Struct("<i")
_HEADER = struct.Struct("<ii")


class OpCode(IntEnum):
    """Kinds of frame understood by the server."""

    MESSAGE = 0
    PACKAGE = 1


def _as_bytes(value: str | bytes) -> bytes:
    """Strings travel as UTF-8 with a terminating NUL byte."""
    if isinstance(value, str):
        return value.encode("utf-8") + b"\0"
    return bytes(value)


def _c_string(data: bytes) -> str:
    """Decode bytes up to the first NUL, as a C string would be read."""
    return bytes(data).split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Packet:
    """A frame under construction: an operation code and its payload."""

    opcode: OpCode = OpCode.PACKAGE
    payload: bytearray = field(default_factory=bytearray)

    def add(self, value: str | bytes) -> None:
        """Append one value, prefixed by its length."""
        data = _as_bytes(value)
        self.payload += _INT.pack(len(data)) + data

    def serialize(self) -> bytes:
        """Return the full frame ready to be sent."""
        return _HEADER.pack(int(self.opcode), len(self.payload)) + bytes(self.payload)


def encode_message(message: str | bytes) -> bytes:
    """Return the frame carrying a single message."""
    return Packet(OpCode.MESSAGE, bytearray(_as_bytes(message))).serialize()


def decode_values(payload: bytes) -> list[str]:
    """Split a packet payload into its values."""
    values: list[str] = []
    offset = 0
    end = len(payload)
    while offset < end:
        if offset + _INT.size > end:
            raise ValueError(f"truncated length prefix at offset {offset}")
        (size,) = _INT.unpack_from(payload, offset)
        offset += _INT.size
        if size < 0 or offset + size > end:
            raise ValueError(f"value of size {size} at offset {offset} exceeds payload")
        values.append(_c_string(payload[offset:offset + size]))
        offset += size
    return values


def decode_message(payload: bytes) -> str:
    """Return the text of a message payload."""
    return _c_string(payload)