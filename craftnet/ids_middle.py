"""Packet-id tables for protocols 1.9.2, 1.9.4, 1.10 and 1.11."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .protocol import ConnectionState, IdTable, PacketDirection, ProtocolVersion

_HANDSHAKE_SERVER = {0x00: "SetProtocol_5", 0xFE: "LegacyServerListPing_5"}
_STATUS_CLIENT = ("ServerInfo_5", "Ping_5")
_STATUS_SERVER = ("PingStart_5", "Ping_5")
_LOGIN_CLIENT = ("Disconnect_5", "EncryptionBegin_47", "Success_5", "Compress_47")
_LOGIN_SERVER = ("LoginStart_5", "EncryptionBegin_47")

_PLAY_CLIENT_1_9_2 = (
    # 0x00
    "SpawnEntity_107", "SpawnEntityExperienceOrb_107", "SpawnEntityWeather_107", "SpawnEntityLiving_107",
    "SpawnEntityPainting_107", "NamedEntitySpawn_107", "Animation_5", "Statistics_5",
    # 0x08
    "BlockBreakAnimation_47", "TileEntityData_47", "BlockAction_47", "BlockChange_47",
    "BossBar_107", "Difficulty_47", "TabComplete_5", "Chat_47",
    # 0x10
    "MultiBlockChange_47", "Transaction_47", "CloseWindow_5", "OpenWindow_47",
    "WindowItems_5", "CraftProgressBar_5", "SetSlot_5", "SetCooldown_107",
    # 0x18
    "CustomPayload_47", "NamedSoundEffect_107", "KickDisconnect_5", "EntityStatus_5",
    "Explosion_5", "UnloadChunk_107", "GameStateChange_5", "KeepAlive_47",
    # 0x20
    "MapChunk_107", "WorldEvent_47", "WorldParticles_47", "Login_109",
    "Map_107", "RelEntityMove_107", "EntityMoveLook_107", "EntityLook_47",
    # 0x28
    "Entity_47", "VehicleMove_107", "OpenSignEntity_47", "Abilities_5",
    "CombatEvent_47", "PlayerInfo_47", "Position_107", "Bed_47",
    # 0x30
    "EntityDestroy_47", "RemoveEntityEffect_47", "ResourcePackSend_47", "Respawn_5",
    "EntityHeadRotation_47", "WorldBorder_47", "Camera_47", "HeldItemSlot_5",
    # 0x38
    "ScoreboardDisplayObjective_5", "EntityMetadata_47", "AttachEntity_107", "EntityVelocity_47",
    "EntityEquipment_107", "Experience_47", "UpdateHealth_47", "ScoreboardObjective_47",
    # 0x40
    "SetPassengers_107", "Teams_107", "ScoreboardScore_47", "SpawnPosition_47",
    "UpdateTime_5", "Title_47", "UpdateSign_47", "SoundEffect_107",
    # 0x48
    "PlayerlistHeader_47", "Collect_47", "EntityTeleport_107", "EntityUpdateAttributes_107",
    "EntityEffect_107",
)

_PLAY_CLIENT_1_9_4 = (
    # 0x00
    "SpawnEntity_107", "SpawnEntityExperienceOrb_107", "SpawnEntityWeather_107", "SpawnEntityLiving_107",
    "SpawnEntityPainting_107", "NamedEntitySpawn_107", "Animation_5", "Statistics_5",
    # 0x08
    "BlockBreakAnimation_47", "TileEntityData_47", "BlockAction_47", "BlockChange_47",
    "BossBar_107", "Difficulty_47", "TabComplete_5", "Chat_47",
    # 0x10
    "MultiBlockChange_47", "Transaction_47", "CloseWindow_5", "OpenWindow_47",
    "WindowItems_5", "CraftProgressBar_5", "SetSlot_5", "SetCooldown_107",
    # 0x18
    "CustomPayload_47", "NamedSoundEffect_107", "KickDisconnect_5", "EntityStatus_5",
    "Explosion_5", "UnloadChunk_107", "GameStateChange_5", "KeepAlive_47",
    # 0x20
    "MapChunk_110", "WorldEvent_47", "WorldParticles_47", "Login_109",
    "Map_107", "RelEntityMove_107", "EntityMoveLook_107", "EntityLook_47",
    # 0x28
    "Entity_47", "VehicleMove_107", "OpenSignEntity_47", "Abilities_5",
    "CombatEvent_47", "PlayerInfo_47", "Position_107", "Bed_47",
    # 0x30
    "EntityDestroy_47", "RemoveEntityEffect_47", "ResourcePackSend_47", "Respawn_5",
    "EntityHeadRotation_47", "WorldBorder_47", "Camera_47", "HeldItemSlot_5",
    # 0x38
    "ScoreboardDisplayObjective_5", "EntityMetadata_47", "AttachEntity_107", "EntityVelocity_47",
    "EntityEquipment_107", "Experience_47", "UpdateHealth_47", "ScoreboardObjective_47",
    # 0x40
    "SetPassengers_107", "Teams_107", "ScoreboardScore_47", "SpawnPosition_47",
    "UpdateTime_5", "Title_47", "SoundEffect_107", "PlayerlistHeader_47",
    # 0x48
    "Collect_47", "EntityTeleport_107", "EntityUpdateAttributes_107", "EntityEffect_107",
)

_PLAY_SERVER_1_9 = (
    # 0x00
    "TeleportConfirm_107", "TabComplete_107", "Chat_5", "ClientCommand_107",
    "Settings_107", "Transaction_5", "EnchantItem_5", "WindowClick_47",
    # 0x08
    "CloseWindow_5", "CustomPayload_47", "UseEntity_107", "KeepAlive_47",
    "Position_47", "PositionLook_47", "Look_5", "Flying_5",
    # 0x10
    "VehicleMove_107", "SteerBoat_107", "Abilities_5", "BlockDig_47",
    "EntityAction_47", "SteerVehicle_47", "ResourcePackReceive_47", "HeldItemSlot_5",
    # 0x18
    "SetCreativeSlot_5", "UpdateSign_47", "ArmAnimation_107", "Spectate_47",
    "BlockPlace_107", "UseItem_107",
)


def _patched(base: Sequence[str], changes: Mapping[int, str]) -> tuple[str, ...]:
    """Return ``base`` with the names at the given ids replaced."""
    return tuple(changes.get(packet_id, name) for packet_id, name in enumerate(base))


_PLAY_CLIENT_1_10 = _patched(
    _PLAY_CLIENT_1_9_4,
    {0x19: "NamedSoundEffect_210", 0x46: "SoundEffect_210"},
)

_PLAY_CLIENT_1_11 = _patched(
    _PLAY_CLIENT_1_10,
    {0x03: "SpawnEntityLiving_315", 0x45: "Title_315", 0x48: "Collect_315"},
)

_PLAY_SERVER_1_10 = _patched(_PLAY_SERVER_1_9, {0x16: "ResourcePackReceive_210"})

_PLAY_SERVER_1_11 = _patched(_PLAY_SERVER_1_10, {0x1C: "BlockPlace_315"})


def _build(
    version: ProtocolVersion,
    play_client: Sequence[str],
    play_server: Sequence[str],
) -> IdTable:
    client, server = PacketDirection.CLIENT, PacketDirection.SERVER
    mapping = {
        (ConnectionState.HANDSHAKING, client): {},
        (ConnectionState.HANDSHAKING, server): dict(_HANDSHAKE_SERVER),
        (ConnectionState.STATUS, client): dict(enumerate(_STATUS_CLIENT)),
        (ConnectionState.STATUS, server): dict(enumerate(_STATUS_SERVER)),
        (ConnectionState.LOGIN, client): dict(enumerate(_LOGIN_CLIENT)),
        (ConnectionState.LOGIN, server): dict(enumerate(_LOGIN_SERVER)),
        (ConnectionState.PLAY, client): dict(enumerate(play_client)),
        (ConnectionState.PLAY, server): dict(enumerate(play_server)),
    }
    return IdTable(version, mapping)


def middle_tables() -> dict[ProtocolVersion, IdTable]:
    """Return the id tables of protocols 1.9.2, 1.9.4, 1.10 and 1.11, keyed by version."""
    return {
        ProtocolVersion.V1_9_2: _build(
            ProtocolVersion.V1_9_2, _PLAY_CLIENT_1_9_2, _PLAY_SERVER_1_9
        ),
        ProtocolVersion.V1_9_4: _build(
            ProtocolVersion.V1_9_4, _PLAY_CLIENT_1_9_4, _PLAY_SERVER_1_9
        ),
        ProtocolVersion.V1_10: _build(
            ProtocolVersion.V1_10, _PLAY_CLIENT_1_10, _PLAY_SERVER_1_10
        ),
        ProtocolVersion.V1_11: _build(
            ProtocolVersion.V1_11, _PLAY_CLIENT_1_11, _PLAY_SERVER_1_11
        ),
    }