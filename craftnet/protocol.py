"""Connection states, packet directions, protocol versions and packet-id tables."""

from __future__ import annotations

import enum
from collections.abc import Mapping

from .serial import ProtocolError

PROTO_1_7 = 4
PROTO_1_7_6 = 5
PROTO_1_8 = 47
PROTO_1_9 = 107
PROTO_1_9_2 = 109
PROTO_1_9_4 = 110
PROTO_1_10 = 210
PROTO_1_11 = 315
PROTO_1_12 = 335
PROTO_1_12_1 = 338
PROTO_1_12_2 = 340
PROTO_1_13 = 393
PROTO_1_13_1 = 401
PROTO_1_13_2 = 404
PROTO_1_14 = 477
PROTO_1_14_1 = 480
PROTO_1_14_3 = 490
PROTO_1_14_4 = 498
PROTO_1_15 = 573
PROTO_1_15_1 = 575
PROTO_1_15_2 = 578
PROTO_1_16 = 735
PROTO_1_16_1 = 736
PROTO_1_16_2 = 751
PROTO_1_17 = 755
PROTO_1_17_1 = 756
PROTO_1_18 = 757
PROTO_1_18_2 = 758
PROTO_1_19 = 759
PROTO_1_19_2 = 760
PROTO_MAX = PROTO_1_19_2

# Snapshot in which the bit layout of the packed position changed.
PROTO_18W43A = 441


class ConnectionState(enum.IntEnum):
    """State of a protocol connection."""

    HANDSHAKING = 0
    STATUS = 1
    LOGIN = 2
    PLAY = 3


class PacketDirection(enum.Enum):
    """Which side a packet travels to."""

    CLIENT = "client"
    SERVER = "server"


class ProtocolVersion(enum.IntEnum):
    """Protocol versions the client knows about."""

    V1_7 = PROTO_1_7
    V1_7_6 = PROTO_1_7_6
    V1_8 = PROTO_1_8
    V1_9 = PROTO_1_9
    V1_9_2 = PROTO_1_9_2
    V1_9_4 = PROTO_1_9_4
    V1_10 = PROTO_1_10
    V1_11 = PROTO_1_11
    V1_12 = PROTO_1_12
    V1_12_1 = PROTO_1_12_1
    V1_12_2 = PROTO_1_12_2


class IdTable:
    """Maps packet ids to packet names, per state and direction, for one protocol."""

    def __init__(self, version, mapping: Mapping) -> None:
        self.version = int(version)
        self._by_id: dict[tuple[ConnectionState, PacketDirection], dict[int, str]] = {}
        self._by_name: dict[tuple[ConnectionState, PacketDirection], dict[str, int]] = {}
        for (state, direction), ids in mapping.items():
            key = (ConnectionState(state), PacketDirection(direction))
            self._by_id[key] = dict(ids)
            names: dict[str, int] = {}
            for packet_id, name in ids.items():
                names.setdefault(name, packet_id)
            self._by_name[key] = names

    def name_for(self, state, direction, packet_id: int) -> str:
        """Return the packet name for an id, raising ProtocolError if unmapped."""
        state = ConnectionState(state)
        direction = PacketDirection(direction)
        try:
            return self._by_id.get((state, direction), {})[packet_id]
        except KeyError:
            raise ProtocolError(
                f"No mapping found for {direction.value}bound packet "
                f"0x{packet_id:x} in state {state.name}"
            ) from None

    def id_for(self, state, direction, name: str) -> int:
        """Return the packet id for a name, raising ProtocolError if unmapped."""
        state = ConnectionState(state)
        direction = PacketDirection(direction)
        try:
            return self._by_name.get((state, direction), {})[name]
        except KeyError:
            raise ProtocolError(
                f"No mapping found for {direction.value}bound packet "
                f"{name} in state {state.name}"
            ) from None

    def __repr__(self) -> str:
        return f"IdTable(version={self.version})"