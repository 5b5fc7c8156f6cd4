"""Packet-id tables for protocols 1.7.6, 1.8 and 1.9."""

from __future__ import annotations

from collections.abc import Sequence

from .protocol import ConnectionState, IdTable, PacketDirection, ProtocolVersion

_HANDSHAKE_SERVER = {0x00: "SetProtocol_5", 0xFE: "LegacyServerListPing_5"}
_STATUS_CLIENT = ("ServerInfo_5", "Ping_5")
_STATUS_SERVER = ("PingStart_5", "Ping_5")

_LOGIN_CLIENT_5 = ("Disconnect_5", "EncryptionBegin_5", "Success_5")
_LOGIN_SERVER_5 = ("LoginStart_5", "EncryptionBegin_5")
_LOGIN_CLIENT_47 = ("Disconnect_5", "EncryptionBegin_47", "Success_5", "Compress_47")
_LOGIN_SERVER_47 = ("LoginStart_5", "EncryptionBegin_47")

_PLAY_CLIENT_1_7_6 = (
    # 0x00
    "KeepAlive_5", "Login_5", "Chat_5", "UpdateTime_5",
    "EntityEquipment_5", "SpawnPosition_5", "UpdateHealth_5", "Respawn_5",
    # 0x08
    "Position_5", "HeldItemSlot_5", "Bed_5", "Animation_5",
    "NamedEntitySpawn_5", "Collect_5", "SpawnEntity_5", "SpawnEntityLiving_5",
    # 0x10
    "SpawnEntityPainting_5", "SpawnEntityExperienceOrb_5", "EntityVelocity_5", "EntityDestroy_5",
    "Entity_5", "RelEntityMove_5", "EntityLook_5", "EntityMoveLook_5",
    # 0x18
    "EntityTeleport_5", "EntityHeadRotation_5", "EntityStatus_5", "AttachEntity_5",
    "EntityMetadata_5", "EntityEffect_5", "RemoveEntityEffect_5", "Experience_5",
    # 0x20
    "UpdateAttributes_5", "MapChunk_5", "MultiBlockChange_5", "BlockChange_5",
    "BlockAction_5", "BlockBreakAnimation_5", "MapChunkBulk_5", "Explosion_5",
    # 0x28
    "WorldEvent_5", "NamedSoundEffect_5", "WorldParticles_5", "GameStateChange_5",
    "SpawnEntityWeather_5", "OpenWindow_5", "CloseWindow_5", "SetSlot_5",
    # 0x30
    "WindowItems_5", "CraftProgressBar_5", "Transaction_5", "UpdateSign_5",
    "Map_5", "TileEntityData_5", "OpenSignEntity_5", "Statistics_5",
    # 0x38
    "PlayerInfo_5", "Abilities_5", "TabComplete_5", "ScoreboardObjective_5",
    "ScoreboardScore_5", "ScoreboardDisplayObjective_5", "ScoreboardTeam_5", "CustomPayload_5",
    # 0x40
    "KickDisconnect_5",
)

_PLAY_SERVER_1_7_6 = (
    # 0x00
    "KeepAlive_5", "ChatServerbound_5", "UseEntity_5", "Flying_5",
    "Position_5", "Look_5", "PositionLook_5", "BlockDig_5",
    # 0x08
    "BlockPlace_5", "HeldItemSlot_5", "ArmAnimation_5", "EntityAction_5",
    "SteerVehicle_5", "CloseWindow_5", "WindowClick_5", "Transaction_5",
    # 0x10
    "SetCreativeSlot_5", "EnchantItem_5", "UpdateSign_5", "Abilities_5",
    "TabComplete_5", "Settings_5", "ClientCommand_5", "CustomPayload_5",
)

_PLAY_CLIENT_1_8 = (
    # 0x00
    "KeepAlive_47", "Login_47", "Chat_47", "UpdateTime_5",
    "EntityEquipment_47", "SpawnPosition_47", "UpdateHealth_47", "Respawn_5",
    # 0x08
    "Position_47", "HeldItemSlot_5", "Bed_47", "Animation_5",
    "NamedEntitySpawn_47", "Collect_47", "SpawnEntity_5", "SpawnEntityLiving_5",
    # 0x10
    "SpawnEntityPainting_47", "SpawnEntityExperienceOrb_5", "EntityVelocity_47", "EntityDestroy_47",
    "Entity_47", "RelEntityMove_47", "EntityLook_47", "EntityMoveLook_47",
    # 0x18
    "EntityTeleport_47", "EntityHeadRotation_47", "EntityStatus_5", "AttachEntity_5",
    "EntityMetadata_47", "EntityEffect_47", "RemoveEntityEffect_47", "Experience_47",
    # 0x20
    "UpdateAttributes_47", "MapChunk_47", "MultiBlockChange_47", "BlockChange_47",
    "BlockAction_47", "BlockBreakAnimation_47", "MapChunkBulk_47", "Explosion_5",
    # 0x28
    "WorldEvent_47", "NamedSoundEffect_5", "WorldParticles_47", "GameStateChange_5",
    "SpawnEntityWeather_5", "OpenWindow_47", "CloseWindow_5", "SetSlot_5",
    # 0x30
    "WindowItems_5", "CraftProgressBar_5", "Transaction_47", "UpdateSign_47",
    "Map_47", "TileEntityData_47", "OpenSignEntity_47", "Statistics_5",
    # 0x38
    "PlayerInfo_47", "Abilities_5", "TabComplete_5", "ScoreboardObjective_47",
    "ScoreboardScore_47", "ScoreboardDisplayObjective_5", "ScoreboardTeam_47", "CustomPayload_47",
    # 0x40
    "KickDisconnect_5", "Difficulty_47", "CombatEvent_47", "Camera_47",
    "WorldBorder_47", "Title_47", "SetCompression_47", "PlayerlistHeader_47",
    # 0x48
    "ResourcePackSend_47", "UpdateEntityNbt_47",
)

_PLAY_SERVER_1_8 = (
    # 0x00
    "KeepAlive_47", "ChatServerbound_5", "UseEntity_47", "Flying_5",
    "Position_47", "Look_5", "PositionLook_47", "BlockDig_47",
    # 0x08
    "BlockPlace_47", "HeldItemSlot_5", "ArmAnimation_47", "EntityAction_47",
    "SteerVehicle_47", "CloseWindow_5", "WindowClick_47", "Transaction_5",
    # 0x10
    "SetCreativeSlot_5", "EnchantItem_5", "UpdateSign_47", "Abilities_5",
    "TabCompleteServerbound_47", "Settings_47", "ClientCommand_47", "CustomPayload_47",
    # 0x18
    "Spectate_47", "ResourcePackReceive_47",
)

_PLAY_CLIENT_1_9 = (
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
    "MapChunk_107", "WorldEvent_47", "WorldParticles_47", "Login_47",
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


def _build(
    version: ProtocolVersion,
    login_client: Sequence[str],
    login_server: Sequence[str],
    play_client: Sequence[str],
    play_server: Sequence[str],
) -> IdTable:
    client, server = PacketDirection.CLIENT, PacketDirection.SERVER
    mapping = {
        (ConnectionState.HANDSHAKING, client): {},
        (ConnectionState.HANDSHAKING, server): dict(_HANDSHAKE_SERVER),
        (ConnectionState.STATUS, client): dict(enumerate(_STATUS_CLIENT)),
        (ConnectionState.STATUS, server): dict(enumerate(_STATUS_SERVER)),
        (ConnectionState.LOGIN, client): dict(enumerate(login_client)),
        (ConnectionState.LOGIN, server): dict(enumerate(login_server)),
        (ConnectionState.PLAY, client): dict(enumerate(play_client)),
        (ConnectionState.PLAY, server): dict(enumerate(play_server)),
    }
    return IdTable(version, mapping)


def early_tables() -> dict[ProtocolVersion, IdTable]:
    """Return the id tables of protocols 1.7.6, 1.8 and 1.9, keyed by version."""
    return {
        ProtocolVersion.V1_7_6: _build(
            ProtocolVersion.V1_7_6,
            _LOGIN_CLIENT_5,
            _LOGIN_SERVER_5,
            _PLAY_CLIENT_1_7_6,
            _PLAY_SERVER_1_7_6,
        ),
        ProtocolVersion.V1_8: _build(
            ProtocolVersion.V1_8,
            _LOGIN_CLIENT_47,
            _LOGIN_SERVER_47,
            _PLAY_CLIENT_1_8,
            _PLAY_SERVER_1_8,
        ),
        ProtocolVersion.V1_9: _build(
            ProtocolVersion.V1_9,
            _LOGIN_CLIENT_47,
            _LOGIN_SERVER_47,
            _PLAY_CLIENT_1_9,
            _PLAY_SERVER_1_9,
        ),
    }