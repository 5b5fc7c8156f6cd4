"""Packet-id tables for protocols 1.12, 1.12.1 and 1.12.2."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .protocol import ConnectionState, IdTable, PacketDirection, ProtocolVersion

_HANDSHAKE_SERVER = {0x00: "SetProtocol_5", 0xFE: "LegacyServerListPing_5"}
_STATUS_CLIENT = ("ServerInfo_5", "Ping_5")
_STATUS_SERVER = ("PingStart_5", "Ping_5")
_LOGIN_CLIENT = ("Disconnect_5", "EncryptionBegin_47", "Success_5", "Compress_47")
_LOGIN_SERVER = ("LoginStart_5", "EncryptionBegin_47")

_PLAY_CLIENT_1_12 = (
    # 0x00
    "SpawnEntity_107", "SpawnEntityExperienceOrb_107", "SpawnEntityWeather_107", "SpawnEntityLiving_315",
    "SpawnEntityPainting_107", "NamedEntitySpawn_107", "Animation_5", "Statistics_5",
    # 0x08
    "BlockBreakAnimation_47", "TileEntityData_47", "BlockAction_47", "BlockChange_47",
    "BossBar_107", "Difficulty_47", "TabComplete_5", "Chat_47",
    # 0x10
    "MultiBlockChange_47", "Transaction_47", "CloseWindow_5", "OpenWindow_47",
    "WindowItems_5", "CraftProgressBar_5", "SetSlot_5", "SetCooldown_107",
    # 0x18
    "CustomPayload_47", "NamedSoundEffect_210", "KickDisconnect_5", "EntityStatus_5",
    "Explosion_5", "UnloadChunk_107", "GameStateChange_5", "KeepAlive_47",
    # 0x20
    "MapChunk_110", "WorldEvent_47", "WorldParticles_47", "Login_109",
    "Map_107", "Entity_47", "RelEntityMove_107", "EntityMoveLook_107",
    # 0x28
    "EntityLook_47", "VehicleMove_107", "OpenSignEntity_47", "Abilities_5",
    "CombatEvent_47", "PlayerInfo_47", "Position_107", "Bed_47",
    # 0x30
    "UnlockRecipes_335", "EntityDestroy_47", "RemoveEntityEffect_47", "ResourcePackSend_47",
    "Respawn_5", "EntityHeadRotation_47", "SelectAdvancementTab_335", "WorldBorder_47",
    # 0x38
    "Camera_47", "HeldItemSlot_5", "ScoreboardDisplayObjective_5", "EntityMetadata_47",
    "AttachEntity_107", "EntityVelocity_47", "EntityEquipment_107", "Experience_47",
    # 0x40
    "UpdateHealth_47", "ScoreboardObjective_47", "SetPassengers_107", "Teams_107",
    "ScoreboardScore_47", "SpawnPosition_47", "UpdateTime_5", "Title_315",
    # 0x48
    "SoundEffect_210", "PlayerlistHeader_47", "Collect_315", "EntityTeleport_107",
    "Advancements_335", "EntityUpdateAttributes_107", "EntityEffect_107",
)

_PLAY_SERVER_1_12 = (
    # 0x00
    "TeleportConfirm_107", "PrepareCraftingGrid_335", "TabComplete_107", "Chat_5",
    "ClientCommand_107", "Settings_107", "Transaction_5", "EnchantItem_5",
    # 0x08
    "WindowClick_47", "CloseWindow_5", "CustomPayload_47", "UseEntity_107",
    "KeepAlive_47", "Flying_5", "Position_47", "PositionLook_47",
    # 0x10
    "Look_5", "VehicleMove_107", "SteerBoat_107", "Abilities_5",
    "BlockDig_47", "EntityAction_47", "SteerVehicle_47", "CraftingBookData_335",
    # 0x18
    "ResourcePackReceive_210", "AdvancementTab_335", "HeldItemSlot_5", "SetCreativeSlot_5",
    "UpdateSign_47", "ArmAnimation_107", "Spectate_47", "BlockPlace_315",
    # 0x20
    "UseItem_107",
)

# 1.12.1 inserts the crafting recipe response at 0x2b and shifts the rest up by one.
_PLAY_CLIENT_1_12_1 = (
    _PLAY_CLIENT_1_12[:0x2B] + ("CraftRecipeResponse_338",) + _PLAY_CLIENT_1_12[0x2B:]
)

_PLAY_SERVER_1_12_1 = (
    # 0x00
    "TeleportConfirm_107", "TabComplete_107", "Chat_5", "ClientCommand_107",
    "Settings_107", "Transaction_5", "EnchantItem_5", "WindowClick_47",
    # 0x08
    "CloseWindow_5", "CustomPayload_47", "UseEntity_107", "KeepAlive_47",
    "Flying_5", "Position_47", "PositionLook_47", "Look_5",
    # 0x10
    "VehicleMove_107", "SteerBoat_107", "CraftRecipeRequest_338", "Abilities_5",
    "BlockDig_47", "EntityAction_47", "SteerVehicle_47", "CraftingBookData_338",
    # 0x18
    "ResourcePackReceive_210", "AdvancementTab_335", "HeldItemSlot_5", "SetCreativeSlot_5",
    "UpdateSign_47", "ArmAnimation_107", "Spectate_47", "BlockPlace_315",
    # 0x20
    "UseItem_107",
)


def _patched(base: Sequence[str], changes: Mapping[int, str]) -> tuple[str, ...]:
    """Return ``base`` with the names at the given ids replaced."""
    return tuple(changes.get(packet_id, name) for packet_id, name in enumerate(base))


_PLAY_CLIENT_1_12_2 = _patched(_PLAY_CLIENT_1_12_1, {0x1F: "KeepAlive_340"})

_PLAY_SERVER_1_12_2 = _patched(
    _PLAY_SERVER_1_12_1,
    {0x0B: "KeepAlive_340", 0x17: "CraftingBookData_340"},
)


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


def late_tables() -> dict[ProtocolVersion, IdTable]:
    """Return the id tables of protocols 1.12, 1.12.1 and 1.12.2, keyed by version."""
    return {
        ProtocolVersion.V1_12: _build(
            ProtocolVersion.V1_12, _PLAY_CLIENT_1_12, _PLAY_SERVER_1_12
        ),
        ProtocolVersion.V1_12_1: _build(
            ProtocolVersion.V1_12_1, _PLAY_CLIENT_1_12_1, _PLAY_SERVER_1_12_1
        ),
        ProtocolVersion.V1_12_2: _build(
            ProtocolVersion.V1_12_2, _PLAY_CLIENT_1_12_2, _PLAY_SERVER_1_12_2
        ),
    }