import pytest

from craftnet.protocol import (
    PROTO_18W43A,
    PROTO_MAX,
    ConnectionState,
    IdTable,
    PacketDirection,
    ProtocolVersion,
)
from craftnet.serial import ProtocolError


def _table():
    return IdTable(
        47,
        {
            (ConnectionState.STATUS, PacketDirection.CLIENT): {0x00: "ServerInfo_5", 0x01: "Ping_5"},
            (ConnectionState.STATUS, PacketDirection.SERVER): {0x00: "PingStart_5", 0x01: "Ping_5"},
            (ConnectionState.PLAY, PacketDirection.CLIENT): {0x10: "Dup", 0x20: "Dup"},
        },
    )


def test_connection_state_values():
    assert [s.value for s in ConnectionState] == [0, 1, 2, 3]
    assert ConnectionState(3) is ConnectionState.PLAY


def test_protocol_version_values():
    assert ProtocolVersion(5) is ProtocolVersion.V1_7_6
    assert ProtocolVersion(47) is ProtocolVersion.V1_8
    assert ProtocolVersion(340) is ProtocolVersion.V1_12_2
    assert IdTable(PROTO_MAX, {}).version == 760
    assert IdTable(PROTO_18W43A, {}).version == 441


def test_protocol_versions_ascending():
    versions = list(ProtocolVersion)
    assert [ProtocolVersion(v.value) for v in versions] == versions
    values = [v.value for v in versions]
    assert values == sorted(values)


def test_name_for_lookup():
    table = _table()
    assert table.version == 47
    assert table.name_for(ConnectionState.STATUS, PacketDirection.CLIENT, 0x01) == "Ping_5"
    assert table.name_for(ConnectionState.STATUS, PacketDirection.SERVER, 0x00) == "PingStart_5"


def test_id_for_lookup_and_roundtrip():
    table = _table()
    for pid in (0x00, 0x01):
        name = table.name_for(ConnectionState.STATUS, PacketDirection.SERVER, pid)
        assert table.id_for(ConnectionState.STATUS, PacketDirection.SERVER, name) == pid


def test_id_for_prefers_first_entry():
    table = _table()
    assert table.id_for(ConnectionState.PLAY, PacketDirection.CLIENT, "Dup") == 0x10


def test_unknown_id_raises():
    with pytest.raises(ProtocolError, match="0x7"):
        _table().name_for(ConnectionState.STATUS, PacketDirection.CLIENT, 0x07)


def test_unknown_state_raises():
    with pytest.raises(ProtocolError):
        _table().name_for(ConnectionState.LOGIN, PacketDirection.CLIENT, 0x00)


def test_unknown_name_raises():
    with pytest.raises(ProtocolError):
        _table().id_for(ConnectionState.STATUS, PacketDirection.CLIENT, "PingStart_5")