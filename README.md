# craftnet

A small toolkit with no dependencies for writing clients that speak the
block-game network protocol. It has packet-ID tables for protocol versions
1.7.6 through 1.12.2.

## What it covers

- **Framing** (`craftnet.codec`): reading and writing length-prefixed packets
  (`RawPacket`, `read_packet`, `write_packet`, `encode_packet`), and an asyncio
  reader (`read_packet_async`) that works on an `asyncio.StreamReader`.
- **Primitives** (`craftnet.serial`): big-endian numbers (`Primitive`),
  booleans, VarInts (`read_varint`, `write_varint`, `varint_len`),
  VarInt-prefixed strings, UUIDs, and optional and repeated fields
  (`OptionalField`, `ListField`). Malformed or truncated input raises
  `ProtocolError`.
- **Protocol constants** (`craftnet.protocol`): `ConnectionState`,
  `PacketDirection`, `ProtocolVersion` and `IdTable`, which maps packet IDs to
  packet names and back for one state and direction.
- **Wire types** (`craftnet.types`): packed block positions (`Position`, whose
  bit layout depends on the version), the three-field position forms,
  inventory slots (`Slot`, with gzip-compressed NBT data read into a `dict`),
  entity metadata (`EntityMeta`), entity properties, block change records,
  fixed-point numbers (`FixedPoint8`, `FixedPoint16`, `FixedPoint32`) and more.
- **Packet IDs** (`craftnet.registry`): `table_for`, `packet_name`,
  `packet_id` and `make_raw_packet` look up a version's table and translate
  between numeric IDs and packet names for a connection state and direction.
- **Physics** (`craftnet.physics`): `next_player_position` moves a player's
  bounding box through a block world and pushes it out of solid blocks;
  `is_solid` tells which block IDs block movement; `Aabb` is the box type.

## Installing

```
pip install craftnet
```

## Examples

Frame and unframe a packet:

```python
import io
from craftnet.codec import RawPacket, encode_packet, read_packet

frame = encode_packet(RawPacket(id=0x00, data=b"\x05"))
packet = read_packet(io.BytesIO(frame))
assert packet.id == 0 and packet.data == b"\x05"
```

Look up packet IDs for a protocol version:

```python
from craftnet.protocol import ConnectionState, PacketDirection, ProtocolVersion
from craftnet.registry import packet_id, packet_name
from craftnet.codec import RawPacket

pid = packet_id(
    ProtocolVersion.V1_8,
    "KeepAlive_47",
    ConnectionState.PLAY,
    PacketDirection.SERVER,
)
assert pid == 0x00

name = packet_name(
    ProtocolVersion.V1_12_2,
    RawPacket(0x1F),
    ConnectionState.PLAY,
    PacketDirection.CLIENT,
)
assert name == "KeepAlive_340"
```

Write and read a packed block position:

```python
import io
from craftnet.types import Position

buffer = io.BytesIO()
Position(10, 64, -5).write(buffer, 340)
buffer.seek(0)
assert Position.read(buffer, 340) == Position(10, 64, -5)
```

Step the player through the world. Any object with a `get_block(x, y, z)`
method that returns a block ID will do as the world:

```python
from craftnet.physics import next_player_position

new_position = next_player_position(world, (0.5, 64.0, 0.5), (0.0, -0.08, 0.0))
```

## What it does not do

- It does not open or manage connections, or track connection state for you.
  You pass the state and direction to each lookup.
- It maps packet IDs to packet *names* only. It does not decode packet bodies
  into per-packet structures. The types in `craftnet.types` are building
  blocks for doing that yourself.
- It has no support for compression or encryption of the packet stream.
- `ProtocolVersion.V1_7` is defined, but no ID table exists for it, so
  `table_for` raises `ProtocolError` for that version.
- `Slot`, `EntityProperty`, `BlockChangeRecord5` and `ObjectData` can only be
  read, not written. Slot-typed entity metadata cannot be written either.

## Running the tests

```
pip install -e ".[test]"
pytest
```