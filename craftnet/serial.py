"""Binary field codecs for the wire protocol."""

from __future__ import annotations

import struct
import uuid
from abc import ABC, abstractmethod
from typing import Any, BinaryIO


class ProtocolError(Exception):
    """Raised when protocol data cannot be read, written or mapped."""


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise ProtocolError."""
    if size < 0:
        raise ProtocolError(f"Negative read length {size}")
    data = stream.read(size)
    if data is None or len(data) != size:
        raise ProtocolError(f"Unexpected end of stream: wanted {size} bytes")
    return data


def _to_signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def read_varint(stream: BinaryIO) -> int:
    """Read a 32-bit LEB128 varint."""
    result = 0
    for shift in range(0, 35, 7):
        byte = read_exact(stream, 1)[0]
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return _to_signed32(result)
    raise ProtocolError("VarInt is too big")


def encode_varint(value: int) -> bytes:
    """Encode a 32-bit value as a varint."""
    value &= 0xFFFFFFFF
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def write_varint(stream: BinaryIO, value: int) -> None:
    """Write a 32-bit varint."""
    stream.write(encode_varint(value))


def varint_len(value: int) -> int:
    """Number of bytes ``value`` takes as a varint."""
    return len(encode_varint(value))


def read_varstring(stream: BinaryIO) -> str:
    """Read a varint-length-prefixed UTF-8 string."""
    length = read_varint(stream)
    data = read_exact(stream, length)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ProtocolError(f"Invalid UTF-8 string: {exc}") from exc


def write_varstring(stream: BinaryIO, value: str) -> None:
    """Write a varint-length-prefixed UTF-8 string."""
    data = value.encode("utf-8")
    write_varint(stream, len(data))
    stream.write(data)


class Field(ABC):
    """A codec for one value on the wire."""

    @abstractmethod
    def read(self, stream: BinaryIO, version: int | None = None) -> Any:
        """Read a value from ``stream``."""

    @abstractmethod
    def write(self, stream: BinaryIO, value: Any, version: int | None = None) -> None:
        """Write ``value`` to ``stream``."""


class Primitive(Field):
    """A fixed-size big-endian number described by a struct format character."""

    def __init__(self, fmt: str) -> None:
        self._struct = struct.Struct(">" + fmt)

    def read(self, stream, version=None):
        return self._struct.unpack(read_exact(stream, self._struct.size))[0]

    def write(self, stream, value, version=None):
        try:
            stream.write(self._struct.pack(value))
        except struct.error as exc:
            raise ProtocolError(str(exc)) from exc


class _WideInt(Field):
    """A 128-bit big-endian integer."""

    def __init__(self, signed: bool) -> None:
        self._signed = signed

    def read(self, stream, version=None):
        return int.from_bytes(read_exact(stream, 16), "big", signed=self._signed)

    def write(self, stream, value, version=None):
        try:
            stream.write(int(value).to_bytes(16, "big", signed=self._signed))
        except OverflowError as exc:
            raise ProtocolError(str(exc)) from exc


class BoolField(Field):
    """A single byte; any non-zero value is true."""

    def read(self, stream, version=None):
        return read_exact(stream, 1)[0] != 0

    def write(self, stream, value, version=None):
        stream.write(b"\x01" if value else b"\x00")


class StringField(Field):
    """A varint-length-prefixed UTF-8 string."""

    def read(self, stream, version=None):
        return read_varstring(stream)

    def write(self, stream, value, version=None):
        write_varstring(stream, value)


class UnitField(Field):
    """A field that takes no bytes and carries no value."""

    def read(self, stream, version=None):
        return None

    def write(self, stream, value, version=None):
        return None


class OptionalField(Field):
    """A value that is always read, and written only when it is not None."""

    def __init__(self, inner: Field) -> None:
        self.inner = inner

    def read(self, stream, version=None):
        return self.inner.read(stream, version)

    def write(self, stream, value, version=None):
        if value is not None:
            self.inner.write(stream, value, version)


class ListField(Field):
    """Values read one after another until one fails to read."""

    def __init__(self, inner: Field) -> None:
        self.inner = inner

    def read(self, stream, version=None):
        items = []
        while True:
            try:
                items.append(self.inner.read(stream, version))
            except ProtocolError:
                return items

    def write(self, stream, value, version=None):
        for item in value:
            self.inner.write(stream, item, version)


class UuidField(Field):
    """A 16-byte UUID."""

    def read(self, stream, version=None):
        return uuid.UUID(bytes=read_exact(stream, 16))

    def write(self, stream, value, version=None):
        stream.write(value.bytes)


U8 = Primitive("B")
U16 = Primitive("H")
U32 = Primitive("I")
U64 = Primitive("Q")
U128 = _WideInt(signed=False)
I8 = Primitive("b")
I16 = Primitive("h")
I32 = Primitive("i")
I64 = Primitive("q")
I128 = _WideInt(signed=True)
F32 = Primitive("f")
F64 = Primitive("d")
BOOL = BoolField()
STRING = StringField()
UNIT = UnitField()
UUID = UuidField()