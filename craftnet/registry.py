"""Selects the packet-id table for a protocol version and maps raw packets."""

from __future__ import annotations

import functools

from .codec import RawPacket
from .ids_early import early_tables
from .ids_late import late_tables
from .ids_middle import middle_tables
from .protocol import IdTable, ProtocolVersion
from .serial import ProtocolError


@functools.cache
def _all_tables() -> dict[ProtocolVersion, IdTable]:
    return {**early_tables(), **middle_tables(), **late_tables()}


def table_for(protocol) -> IdTable:
    """Return the id table of a protocol version, raising ProtocolError if there is none."""
    try:
        version = ProtocolVersion(protocol)
    except ValueError:
        raise ProtocolError(f"Unknown protocol version {protocol}") from None
    try:
        return _all_tables()[version]
    except KeyError:
        raise ProtocolError(f"No ID mapping found for {version.name}") from None


def packet_name(protocol, raw: RawPacket, state, direction) -> str:
    """Return the name of the packet a raw packet's id stands for."""
    return table_for(protocol).name_for(state, direction, raw.id)


def packet_id(protocol, name: str, state, direction) -> int:
    """Return the id a named packet is sent with."""
    return table_for(protocol).id_for(state, direction, name)


def make_raw_packet(protocol, name: str, payload: bytes, state, direction) -> RawPacket:
    """Return a raw packet carrying ``payload`` under the id of the named packet."""
    return RawPacket(packet_id(protocol, name, state, direction), bytes(payload))