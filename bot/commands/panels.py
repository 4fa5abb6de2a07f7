"""
Module: bot/commands/panels.py

Builds the nickname-prefix panel posted by `/닉네임`. Pure functions: the
same channel always yields the same payload.
"""
from nextcord import ButtonStyle

from interaction import ControlAction, Control, Panel, ReplyPayload, encode_control_id

SPECTATOR_EMOJI = "👁️"
WAIT_EMOJI = "⏳"
RESET_EMOJI = "🔄"

NICKNAME_PANEL_TITLE = "🏷️ 관전, 대기 달기"
NICKNAME_PANEL_DESCRIPTION = (
    "아래 버튼을 클릭하여 닉네임 접두사를 변경할 수 있습니다.\n\n"
    "📋 **사용 가능한 접두사**\n"
    "• **관전** - [관전] [닉네임] 형태로 변경\n"
    "• **대기** - [대기] [닉네임] 형태로 변경\n"
    "• **초기화** - 원래 닉네임으로 복원"
)
NICKNAME_PANEL_COLOR = 0x5865F2


def nickname_controls(channel_id):
    """Spectate, wait and reset buttons targeting `channel_id`."""
    return (
        Control(
            custom_id=encode_control_id(ControlAction.SPECTATE, channel_id),
            label=f"{SPECTATOR_EMOJI} 관전",
            style=ButtonStyle.secondary,
        ),
        Control(
            custom_id=encode_control_id(ControlAction.WAIT, channel_id),
            label=f"{WAIT_EMOJI} 대기",
            style=ButtonStyle.success,
        ),
        Control(
            custom_id=encode_control_id(ControlAction.RESET, channel_id),
            label=f"{RESET_EMOJI} 초기화",
            style=ButtonStyle.primary,
        ),
    )


def build_nickname_panel(channel_name, channel_id) -> ReplyPayload:
    """
    Build the public panel message for the channel `channel_name`.

    The buttons carry `channel_id` so a later press can find the channel
    again without any stored state.
    """
    return ReplyPayload(
        panel=Panel(
            title=NICKNAME_PANEL_TITLE,
            description=NICKNAME_PANEL_DESCRIPTION,
            color=NICKNAME_PANEL_COLOR,
            footer=f"📍 {channel_name}",
        ),
        controls=nickname_controls(channel_id),
        ephemeral=False,
    )
