"""Framing of packets as length-prefixed records."""

from __future__ import annotations

import asyncio
import io
from dataclasses import dataclass
from typing import BinaryIO

from .serial import ProtocolError, encode_varint, read_exact, read_varint, varint_len


@dataclass
class RawPacket:
    """A packet id with its undecoded payload."""

    id: int
    data: bytes = b""


def _payload_length(total: int, packet_id: int) -> int:
    size = total - varint_len(packet_id)
    if size < 0:
        raise ProtocolError(f"Packet length {total} is shorter than its id")
    return size


def read_packet(stream: BinaryIO) -> RawPacket:
    """Read one framed packet from a binary stream."""
    total = read_varint(stream)
    packet_id = read_varint(stream)
    data = read_exact(stream, _payload_length(total, packet_id))
    return RawPacket(packet_id, data)


def encode_packet(packet: RawPacket) -> bytes:
    """Return the framed bytes of a packet."""
    body = encode_varint(packet.id) + bytes(packet.data)
    return encode_varint(len(body)) + body


def write_packet(stream: BinaryIO, packet: RawPacket) -> None:
    """Write one framed packet to a binary stream."""
    stream.write(encode_packet(packet))


async def _read_varint_async(reader: asyncio.StreamReader) -> int:
    collected = bytearray()
    for _ in range(5):
        try:
            byte = (await reader.readexactly(1))[0]
        except asyncio.IncompleteReadError as exc:
            raise ProtocolError("Unexpected end of stream") from exc
        collected.append(byte)
        if not byte & 0x80:
            return read_varint(io.BytesIO(bytes(collected)))
    raise ProtocolError("VarInt is too big")


async def read_packet_async(reader: asyncio.StreamReader) -> RawPacket:
    """Read one framed packet from an asyncio stream reader."""
    total = await _read_varint_async(reader)
    packet_id = await _read_varint_async(reader)
    size = _payload_length(total, packet_id)
    try:
        data = await reader.readexactly(size)
    except asyncio.IncompleteReadError as exc:
        raise ProtocolError("Unexpected end of stream") from exc
    return RawPacket(packet_id, data)