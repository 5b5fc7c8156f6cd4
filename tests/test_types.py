import gzip
import io
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from craftnet.protocol import PROTO_1_12_2, PROTO_18W43A
from craftnet.serial import I16, U8, ProtocolError, write_varstring
from craftnet.types import (
    BlockChangeRecord5,
    BlockChangeRecord47,
    ChunkMetadata,
    ChunkMetadata47,
    EntityMeta,
    EntityModifier,
    EntityProperty,
    EntitySpawnProperty5,
    ExplosionRecord5,
    FixedPoint8,
    FixedPoint16,
    FixedPoint32,
    GameState,
    MetadataField,
    MetadataKind,
    ObjectData,
    Position,
    PositionIBI,
    PositionIII,
    PositionISI,
    PrefixedList,
    Slot,
    StatisticsEntry,
    read_gzip,
)

OLD = PROTO_1_12_2
NEW = PROTO_18W43A
COORD = st.integers(-(2**25), 2**25 - 1)


def _encode(obj, version=None):
    buf = io.BytesIO()
    obj.write(buf, version)
    return buf.getvalue()


def _decode(cls, data, version=None):
    return cls.read(io.BytesIO(data), version)


@given(x=COORD, y=st.integers(0, 4095), z=COORD)
def test_position_old_layout_round_trip(x, y, z):
    pos = Position(x, y, z)
    assert _decode(Position, _encode(pos, OLD), OLD) == pos


@given(x=COORD, y=st.integers(-2048, 2047), z=COORD)
def test_position_new_layout_round_trip(x, y, z):
    pos = Position(x, y, z)
    assert _decode(Position, _encode(pos, NEW), NEW) == pos


def test_position_x_in_high_bits_for_both_layouts():
    expected = b"\x00\x00\x00\x40\x00\x00\x00\x00"
    assert _encode(Position(1, 0, 0), OLD) == expected
    assert _encode(Position(1, 0, 0), NEW) == expected


def test_position_layout_depends_on_version():
    data = _encode(Position(0, 5, 0), NEW)
    assert _decode(Position, data, OLD) == Position(0, 0, 5)


def test_position_truncated_raises():
    with pytest.raises(ProtocolError):
        Position.read(io.BytesIO(b"\x00\x01"), OLD)


def test_position_parts_round_trip_and_convert():
    ibi = PositionIBI(3, 200, -4)
    data = _encode(ibi)
    assert len(data) == 9
    assert _decode(PositionIBI, data) == ibi
    assert ibi.to_position() == Position(3, 200, -4)

    isi = PositionISI(-7, -300, 9)
    assert _decode(PositionISI, _encode(isi)) == isi
    assert isi.to_position() == Position(-7, -300, 9)

    iii = PositionIII(1, -70000, 2)
    assert _decode(PositionIII, _encode(iii)) == iii
    assert iii.to_position() == Position(1, -70000, 2)


def test_game_state_values():
    assert GameState().kind is GameState.Kind.INVALID_BED
    assert GameState(GameState.Kind.CHANGE_GAMEMODE, 1.0).value == 1.0
    with pytest.raises(ValueError):
        GameState(GameState.Kind.CHANGE_GAMEMODE)
    with pytest.raises(ValueError):
        GameState(GameState.Kind.END_RAINING, 2.0)


def test_entity_modifier_round_trip():
    modifier = EntityModifier(uuid=2**127 + 5, amount=0.25, operation=2)
    data = _encode(modifier)
    assert len(data) == 25
    assert _decode(EntityModifier, data) == modifier


def test_entity_property_reads_prefixed_modifiers():
    first = EntityModifier(1, 0.5, 0)
    second = EntityModifier(2, -1.5, 1)
    buf = io.BytesIO()
    write_varstring(buf, "generic.movementSpeed")
    buf.write(struct.pack(">dh", 0.1, 2))
    first.write(buf)
    second.write(buf)
    prop = _decode(EntityProperty, buf.getvalue())
    assert prop.key == "generic.movementSpeed"
    assert prop.value == 0.1
    assert prop.modifiers == [first, second]


def test_prefixed_list_negative_count_is_empty():
    reader = PrefixedList(U8, I16)
    assert reader.read(io.BytesIO(b"\xff\xff\x01")) == []


def test_prefixed_list_reads_count_items():
    reader = PrefixedList(U8, I16)
    assert reader.read(io.BytesIO(b"\x00\x02\x09\x08\x07")) == [9, 8]


@given(
    meta=st.integers(0, 15),
    block_id=st.integers(0, 4095),
    y=st.integers(0, 255),
    z=st.integers(0, 15),
    x=st.integers(0, 15),
)
def test_block_change_record5_unpacks_fields(meta, block_id, y, z, x):
    packed = (x << 28) | (z << 24) | (y << 16) | (block_id << 4) | meta
    record = _decode(BlockChangeRecord5, struct.pack(">I", packed))
    assert record == BlockChangeRecord5(meta, block_id, y, z, x)


def test_block_change_record47_round_trip():
    record = BlockChangeRecord47(pos_horizontal=0x3A, y=64, block_id=300)
    data = _encode(record)
    assert len(data) == 4
    assert _decode(BlockChangeRecord47, data) == record


def test_chunk_metadata_round_trips():
    meta = ChunkMetadata(-3, 7, 0xFFFF, 1)
    assert _decode(ChunkMetadata, _encode(meta)) == meta
    meta47 = ChunkMetadata47(5, -6, 0x00F0)
    data = _encode(meta47)
    assert len(data) == 10
    assert _decode(ChunkMetadata47, data) == meta47


def test_spawn_property_and_statistics_round_trip():
    prop = EntitySpawnProperty5("textures", "value", "signature")
    assert _decode(EntitySpawnProperty5, _encode(prop)) == prop
    entry = StatisticsEntry("stat.jump", 123456)
    assert _decode(StatisticsEntry, _encode(entry)) == entry


def test_explosion_record_round_trip():
    record = ExplosionRecord5(-1, 2, -128)
    data = _encode(record)
    assert len(data) == 3
    assert _decode(ExplosionRecord5, data) == record


def test_empty_slot():
    assert _decode(Slot, b"\xff\xff") == Slot(item_id=-1)


def test_slot_without_nbt():
    slot = _decode(Slot, struct.pack(">hBhh", 276, 1, 10, -1))
    assert slot == Slot(276, 1, 10, None)


def test_slot_with_gzipped_nbt():
    nbt = (
        b"\x0a\x00\x00"
        + b"\x03\x00\x01n"
        + struct.pack(">i", 7)
        + b"\x08\x00\x04name\x00\x03abc"
        + b"\x00"
    )
    compressed = gzip.compress(nbt)
    data = struct.pack(">hBhh", 1, 2, 0, len(compressed)) + compressed
    slot = Slot.read(io.BytesIO(data))
    assert slot.item_count == 2
    assert slot.data == {"n": 7, "name": "abc"}


def test_read_gzip_applies_reader():
    assert read_gzip(io.BytesIO(gzip.compress(b"\x05")), U8.read) == 5


def test_read_gzip_rejects_bad_data():
    with pytest.raises(ProtocolError):
        read_gzip(io.BytesIO(b"not gzip data"), U8.read)


def test_entity_meta_empty():
    assert _decode(EntityMeta, b"\x7f") == EntityMeta({})


def test_entity_meta_single_byte_wire_form():
    meta = EntityMeta({0: MetadataField(MetadataKind.BYTE, 1)})
    assert _encode(meta) == b"\x00\x01\x7f"


def test_entity_meta_reads_header_index_and_kind():
    data = bytes([(MetadataKind.SHORT << 5) | 3]) + b"\x00\x07\x7f"
    assert _decode(EntityMeta, data).meta == {3: MetadataField(MetadataKind.SHORT, 7)}


def test_entity_meta_round_trip():
    meta = EntityMeta(
        {
            0: MetadataField(MetadataKind.BYTE, 1),
            1: MetadataField(MetadataKind.SHORT, -2),
            2: MetadataField(MetadataKind.INT, 70000),
            3: MetadataField(MetadataKind.FLOAT, 1.5),
            4: MetadataField(MetadataKind.STRING, "hi"),
        }
    )
    assert _decode(EntityMeta, _encode(meta)) == meta


def test_entity_meta_reads_slot():
    data = bytes([(MetadataKind.SLOT << 5) | 1]) + b"\xff\xff\x7f"
    meta = _decode(EntityMeta, data)
    assert meta.meta == {1: MetadataField(MetadataKind.SLOT, Slot(item_id=-1))}


def test_entity_meta_invalid_kind():
    with pytest.raises(ProtocolError):
        EntityMeta.read(io.BytesIO(b"\xe0"))


def test_metadata_field_invalid_kind():
    with pytest.raises(ProtocolError):
        MetadataField.read(9, io.BytesIO(b"\x00"))


def test_slot_metadata_cannot_be_written():
    with pytest.raises(ProtocolError):
        _encode(MetadataField(MetadataKind.SLOT, Slot(item_id=-1)))


def test_object_data_without_velocity():
    assert _decode(ObjectData, b"\x00\x00\x00\x00\x11") == ObjectData(0, None)


def test_object_data_with_velocity():
    data = struct.pack(">ihhh", 3, 1, -2, 3)
    assert _decode(ObjectData, data) == ObjectData(3, (1, -2, 3))


@given(st.integers(-(2**20), 2**20))
def test_fixed_point32_round_trip(n):
    value = FixedPoint32(n / 32.0)
    assert _decode(FixedPoint32, _encode(value)) == value


def test_fixed_point8_saturates():
    assert _encode(FixedPoint8(100.0)) == b"\x7f"
    assert _encode(FixedPoint8(-100.0)) == b"\x80"
    assert _decode(FixedPoint8, _encode(FixedPoint8(1.5))) == FixedPoint8(1.5)


def test_fixed_point16_reads_byte_writes_short():
    assert _encode(FixedPoint16(1.0)) == struct.pack(">h", 32)
    assert _decode(FixedPoint16, bytes([32])) == FixedPoint16(1.0)