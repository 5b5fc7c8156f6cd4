"""Compound values carried inside packets."""

from __future__ import annotations

import enum
import gzip
import io
import math
import zlib
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Callable

from .protocol import PROTO_18W43A
from .serial import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    STRING,
    U8,
    U16,
    U32,
    U128,
    Field,
    ProtocolError,
    read_exact,
    read_varint,
    write_varint,
)


def _sign_extend(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value & (1 << (bits - 1)):
        value -= 1 << bits
    return value


def _saturate(value: float, bits: int) -> int:
    """Convert a float to a signed integer of ``bits`` bits, clamping at the limits."""
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return high if value > 0 else low
    return max(low, min(high, int(value)))


class _VarIntField(Field):
    def read(self, stream, version=None):
        return read_varint(stream)

    def write(self, stream, value, version=None):
        write_varint(stream, value)


_VARINT = _VarIntField()


def _read_fields(cls, stream: BinaryIO, version: int | None):
    """Read the fields named in ``cls._layout`` one after another."""
    return cls(**{name: codec.read(stream, version) for name, codec in cls._layout})


def _write_fields(obj, stream: BinaryIO, version: int | None) -> None:
    """Write the fields named in ``obj._layout`` one after another."""
    for name, codec in obj._layout:
        codec.write(stream, getattr(obj, name), version)


@dataclass
class Position:
    """A block position packed into a single 64-bit integer."""

    x: int = 0
    y: int = 0
    z: int = 0

    @classmethod
    def read(cls, stream: BinaryIO, version: int) -> Position:
        packed = I64.read(stream)
        if version < PROTO_18W43A:
            return cls(packed >> 38, (packed >> 26) & 0xFFF, _sign_extend(packed, 26))
        return cls(packed >> 38, _sign_extend(packed, 12), _sign_extend(packed >> 12, 26))

    def write(self, stream: BinaryIO, version: int) -> None:
        if version < PROTO_18W43A:
            packed = (
                ((self.x & 0x3FFFFFF) << 38)
                | ((self.y & 0xFFF) << 26)
                | (self.z & 0x3FFFFFF)
            )
        else:
            packed = (
                ((self.x & 0x3FFFFFF) << 38)
                | ((self.z & 0x3FFFFFF) << 12)
                | (self.y & 0xFFF)
            )
        I64.write(stream, _sign_extend(packed, 64))


@dataclass
class PositionIBI:
    """Position as int x, unsigned byte y, int z."""

    x: int = 0
    y: int = 0
    z: int = 0
    _layout = (("x", I32), ("y", U8), ("z", I32))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> PositionIBI:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)

    def to_position(self) -> Position:
        """Return the general position with the same coordinates."""
        return Position(self.x, self.y, self.z)


@dataclass
class PositionISI:
    """Position as int x, short y, int z."""

    x: int = 0
    y: int = 0
    z: int = 0
    _layout = (("x", I32), ("y", I16), ("z", I32))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> PositionISI:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)

    def to_position(self) -> Position:
        """Return the general position with the same coordinates."""
        return Position(self.x, self.y, self.z)


@dataclass
class PositionIII:
    """Position as three ints."""

    x: int = 0
    y: int = 0
    z: int = 0
    _layout = (("x", I32), ("y", I32), ("z", I32))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> PositionIII:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)

    def to_position(self) -> Position:
        """Return the general position with the same coordinates."""
        return Position(self.x, self.y, self.z)


@dataclass(frozen=True)
class GameState:
    """A game state change; some kinds carry a float value."""

    class Kind(enum.Enum):
        INVALID_BED = "invalid_bed"
        END_RAINING = "end_raining"
        BEGIN_RAINING = "begin_raining"
        CHANGE_GAMEMODE = "change_gamemode"
        ENTER_CREDITS = "enter_credits"
        DEMO_MESSAGES = "demo_messages"
        ARROW_HITTING_PLAYER = "arrow_hitting_player"
        FADE_VALUE = "fade_value"
        FADE_TIME = "fade_time"

    kind: GameState.Kind = Kind.INVALID_BED
    value: float | None = None

    def __post_init__(self) -> None:
        needs_value = self.kind in _VALUED_GAME_STATES
        if needs_value and self.value is None:
            raise ValueError(f"{self.kind.name} needs a value")
        if not needs_value and self.value is not None:
            raise ValueError(f"{self.kind.name} takes no value")


_VALUED_GAME_STATES = frozenset(
    {
        GameState.Kind.CHANGE_GAMEMODE,
        GameState.Kind.DEMO_MESSAGES,
        GameState.Kind.FADE_VALUE,
        GameState.Kind.FADE_TIME,
    }
)


class EntityAnimation(enum.IntEnum):
    """Animation played by an entity."""

    SWING_ARM = 0
    DAMAGE_ANIMATION = 1
    LEAVE_BED = 2
    EAT_FOOD = 3
    CRITICAL_EFFECT = 4
    MAGIC_CRITICAL_EFFECT = 5
    UNKNOWN = 102
    CROUCH = 104
    UNCROUCH = 105


@dataclass
class EntityModifier:
    """A modifier applied to an entity property."""

    uuid: int = 0
    amount: float = 0.0
    operation: int = 0
    _layout = (("uuid", U128), ("amount", F64), ("operation", U8))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> EntityModifier:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)


class PrefixedList:
    """A list of items preceded by a count read with its own codec."""

    def __init__(self, item, count) -> None:
        self.item = item
        self.count = count

    def read(self, stream: BinaryIO, version: int | None = None) -> list:
        total = self.count.read(stream, version)
        return [self.item.read(stream, version) for _ in range(total)]


@dataclass
class EntityProperty:
    """An entity attribute with its modifiers."""

    key: str = ""
    value: float = 0.0
    modifiers: list = field(default_factory=list)
    _layout = (
        ("key", STRING),
        ("value", F64),
        ("modifiers", PrefixedList(EntityModifier, I16)),
    )

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> EntityProperty:
        return _read_fields(cls, stream, version)


@dataclass
class ChunkMetadata:
    """Chunk column header of a bulk chunk packet."""

    chunk_x: int = 0
    chunk_z: int = 0
    primary_bitmap: int = 0
    add_bitmap: int = 0
    _layout = (
        ("chunk_x", I32),
        ("chunk_z", I32),
        ("primary_bitmap", U16),
        ("add_bitmap", U16),
    )

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> ChunkMetadata:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)


@dataclass
class ChunkMetadata47:
    """Chunk column header of a bulk chunk packet without the add bitmap."""

    chunk_x: int = 0
    chunk_z: int = 0
    bitmap: int = 0
    _layout = (("chunk_x", I32), ("chunk_z", I32), ("bitmap", U16))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> ChunkMetadata47:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)


@dataclass
class BlockChangeRecord5:
    """One block change packed into a 32-bit integer."""

    block_meta: int = 0
    block_id: int = 0
    y: int = 0
    z: int = 0
    x: int = 0

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> BlockChangeRecord5:
        packed = U32.read(stream)
        return cls(
            block_meta=packed & 0x0F,
            block_id=(packed >> 4) & 0x0FFF,
            y=(packed >> 16) & 0xFF,
            z=(packed >> 24) & 0x0F,
            x=(packed >> 28) & 0x0F,
        )


@dataclass
class BlockChangeRecord47:
    """One block change with a varint block id."""

    pos_horizontal: int = 0
    y: int = 0
    block_id: int = 0
    _layout = (("pos_horizontal", U8), ("y", U8), ("block_id", _VARINT))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> BlockChangeRecord47:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)


@dataclass
class EntitySpawnProperty5:
    """A named, signed property sent when a player spawns."""

    name: str = ""
    value: str = ""
    signature: str = ""
    _layout = (("name", STRING), ("value", STRING), ("signature", STRING))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> EntitySpawnProperty5:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)


_NBT_SCALARS = {1: I8, 2: I16, 3: I32, 4: I64, 5: F32, 6: F64}
_NBT_ARRAYS = {7: I8, 11: I32, 12: I64}


def _read_nbt_string(stream: BinaryIO) -> str:
    data = read_exact(stream, U16.read(stream))
    try:
        text = data.replace(b"\xc0\x80", b"\x00").decode("utf-8", "surrogatepass")
        return text.encode("utf-16", "surrogatepass").decode("utf-16")
    except UnicodeError as exc:
        raise ProtocolError(f"Invalid NBT string: {exc}") from exc


def _read_nbt_length(stream: BinaryIO) -> int:
    length = I32.read(stream)
    if length < 0:
        raise ProtocolError(f"Negative NBT length {length}")
    return length


def _read_nbt_payload(tag: int, stream: BinaryIO) -> Any:
    if tag in _NBT_SCALARS:
        return _NBT_SCALARS[tag].read(stream)
    if tag in _NBT_ARRAYS:
        codec = _NBT_ARRAYS[tag]
        return [codec.read(stream) for _ in range(_read_nbt_length(stream))]
    if tag == 8:
        return _read_nbt_string(stream)
    if tag == 9:
        element = U8.read(stream)
        return [_read_nbt_payload(element, stream) for _ in range(_read_nbt_length(stream))]
    if tag == 10:
        compound = {}
        while (child := U8.read(stream)) != 0:
            name = _read_nbt_string(stream)
            compound[name] = _read_nbt_payload(child, stream)
        return compound
    raise ProtocolError(f"Invalid NBT tag {tag}")


def _read_nbt_blob(stream: BinaryIO, version: int | None = None) -> dict:
    if U8.read(stream) != 10:
        raise ProtocolError("NBT root must be a compound")
    _read_nbt_string(stream)
    return _read_nbt_payload(10, stream)


def read_gzip(
    stream: BinaryIO,
    reader: Callable[[BinaryIO, int | None], Any],
    version: int | None = None,
) -> Any:
    """Decompress gzip data from ``stream`` and read a value from it with ``reader``."""
    try:
        with gzip.GzipFile(fileobj=stream, mode="rb") as unpacked:
            return reader(unpacked, version)
    except (OSError, EOFError, zlib.error) as exc:
        raise ProtocolError(f"Invalid gzip data: {exc}") from exc


@dataclass
class Slot:
    """An inventory slot; ``item_id`` -1 means empty."""

    item_id: int = 0
    item_count: int | None = None
    item_damage: int | None = None
    data: dict | None = None

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> Slot:
        slot = cls(item_id=I16.read(stream))
        if slot.item_id != -1:
            slot.item_count = U8.read(stream)
            slot.item_damage = I16.read(stream)
            nbt_length = I16.read(stream)
            if nbt_length != -1:
                raw = read_exact(stream, nbt_length)
                slot.data = read_gzip(io.BytesIO(raw), _read_nbt_blob, version)
        return slot


class MetadataKind(enum.IntEnum):
    """Type code of an entity metadata value."""

    BYTE = 0
    SHORT = 1
    INT = 2
    FLOAT = 3
    STRING = 4
    SLOT = 5


_METADATA_CODECS = {
    MetadataKind.BYTE: U8,
    MetadataKind.SHORT: I16,
    MetadataKind.INT: I32,
    MetadataKind.FLOAT: F32,
    MetadataKind.STRING: STRING,
    MetadataKind.SLOT: Slot,
}


@dataclass
class MetadataField:
    """A typed entity metadata value."""

    kind: MetadataKind
    value: Any

    @classmethod
    def read(cls, kind, stream: BinaryIO, version: int | None = None) -> MetadataField:
        try:
            kind = MetadataKind(kind)
        except ValueError:
            raise ProtocolError(f"Invalid metadata type {kind}") from None
        return cls(kind, _METADATA_CODECS[kind].read(stream, version))

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        if self.kind is MetadataKind.SLOT:
            raise ProtocolError("Slot metadata cannot be written")
        _METADATA_CODECS[self.kind].write(stream, self.value, version)


@dataclass
class EntityMeta:
    """Entity metadata: values keyed by index, terminated by 0x7f."""

    meta: dict[int, MetadataField] = field(default_factory=dict)

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> EntityMeta:
        meta: dict[int, MetadataField] = {}
        for _ in range(256):
            header = U8.read(stream)
            if header == 0x7F:
                break
            meta[header & 0x1F] = MetadataField.read((header >> 5) & 0x07, stream, version)
        return cls(meta)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        for index, entry in self.meta.items():
            U8.write(stream, (index | (int(entry.kind) << 5)) & 0xFF)
            entry.write(stream, version)
        U8.write(stream, 0x7F)


@dataclass
class ExplosionRecord5:
    """Offset of one block destroyed by an explosion."""

    x: int = 0
    y: int = 0
    z: int = 0
    _layout = (("x", I8), ("y", I8), ("z", I8))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> ExplosionRecord5:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)


@dataclass
class StatisticsEntry:
    """A named statistic and its value."""

    name: str = ""
    value: int = 0
    _layout = (("name", STRING), ("value", _VARINT))

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> StatisticsEntry:
        return _read_fields(cls, stream, version)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        _write_fields(self, stream, version)


@dataclass
class ObjectData:
    """Object spawn data; a velocity follows when the data is non-zero."""

    data: int = 0
    velocity: tuple[int, int, int] | None = None

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> ObjectData:
        data = I32.read(stream)
        velocity = None
        if data != 0:
            velocity = (I16.read(stream), I16.read(stream), I16.read(stream))
        return cls(data, velocity)


@dataclass
class FixedPoint32:
    """A number sent as an int holding 32 times its value."""

    value: float = 0.0

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> FixedPoint32:
        return cls(I32.read(stream) / 32.0)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        I32.write(stream, _saturate(self.value * 32.0, 32))


@dataclass
class FixedPoint8:
    """A number sent as a signed byte holding 32 times its value."""

    value: float = 0.0

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> FixedPoint8:
        return cls(I8.read(stream) / 32.0)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        I8.write(stream, _saturate(self.value * 32.0, 8))


@dataclass
class FixedPoint16:
    """A fixed-point number read from a signed byte and written as a short."""

    value: float = 0.0

    @classmethod
    def read(cls, stream: BinaryIO, version: int | None = None) -> FixedPoint16:
        return cls(I8.read(stream) / 32.0)

    def write(self, stream: BinaryIO, version: int | None = None) -> None:
        I16.write(stream, _saturate(self.value * 32.0, 16))