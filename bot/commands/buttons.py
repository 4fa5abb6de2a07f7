"""
Module: bot/commands/buttons.py

Handles presses on the nickname-prefix panel. The custom id of a button
says which mode to apply and which voice channel the panel belongs to;
the nickname change itself is done by the voice channel manager.
"""
import nextcord

from commands import messages
from commands.pipeline import CommandSpec, PermissionCheck, run_command
from commands.resources import resolve_channel, invoking_member
from interaction import (
    AckMode, ControlAction, UnroutableControl, decode_control_id,
    DelegateFailure, InvalidResource, text,
)
from utils import log_message

NAME = "nickname_button"

VOICE_CHANNEL_TYPES = (nextcord.VoiceChannel, nextcord.StageChannel)

MODE_KEYS = {
    ControlAction.SPECTATE: "spectate",
    ControlAction.WAIT: "wait",
    ControlAction.RESET: "reset",
}


def _mode_operation(manager, action):
    return {
        ControlAction.SPECTATE: manager.set_spectator_mode,
        ControlAction.WAIT: manager.set_waiting_mode,
        ControlAction.RESET: manager.restore_normal_mode,
    }[action]


def format_mode_result(action, result, channel_name):
    """Turn a ModeChangeResult into the reply text for `action`."""
    key = MODE_KEYS[action]
    if result.success:
        return (
            f"{messages.MODE_SET[key]}\n"
            f"🔊 음성 채널: **{channel_name}**\n"
            f"📝 닉네임: \"{result.new_nickname}\""
        )
    if result.unchanged:
        return messages.MODE_UNCHANGED[key]
    content = f"{messages.NICKNAME_CHANGE_FAILED}\n🔊 음성 채널: **{channel_name}**"
    if result.new_nickname:
        content += "\n" + messages.MANUAL_CHANGE_HINT.format(nickname=result.new_nickname)
    return content


def build(services) -> CommandSpec:
    manager = services.voice_channel_manager
    forum = services.voice_forum_service

    def has_permission(interaction):
        return bool(forum.has_recruitment_permission(interaction.user, invoking_member(interaction)))

    async def toggle_prefix(ctx, options):
        interaction = ctx.interaction
        action = options["action"]

        member = invoking_member(interaction)
        if interaction.guild is None or member is None:
            raise InvalidResource(messages.MEMBER_REQUIRED)

        channel = await resolve_channel(interaction, options["channel_id"], messages.VOICE_CHANNEL_NOT_FOUND)
        if not isinstance(channel, VOICE_CHANNEL_TYPES):
            raise InvalidResource(messages.VOICE_CHANNEL_NOT_FOUND)

        try:
            result = await _mode_operation(manager, action)(member)
        except Exception as e:
            raise DelegateFailure(messages.NICKNAME_CHANGE_FAILED) from e

        log_message(
            f"User {member.name} ({member.id}) pressed {MODE_KEYS[action]} for #{channel.name}: "
            f"success={result.success} unchanged={result.unchanged}",
            "info"
        )
        return text(format_mode_result(action, result, channel.name))

    return CommandSpec(
        name=NAME,
        handler=toggle_prefix,
        ack=AckMode.DEFER,
        ephemeral=True,
        checks=(PermissionCheck(has_permission, messages.FEATURE_DENIED),),
    )


async def route_control(spec: CommandSpec, interaction: nextcord.Interaction) -> bool:
    """
    Run `spec` for a component interaction whose custom id is a registered control.

    Returns False, without touching the interaction, for any other
    interaction so other component handlers can answer it.
    """
    if interaction.type != nextcord.InteractionType.component:
        return False
    custom_id = (interaction.data or {}).get("custom_id", "")
    try:
        action, channel_id = decode_control_id(custom_id)
    except UnroutableControl as e:
        log_message(f"Ignoring component {custom_id!r}: {e}", "debug")
        return False

    log_message(f"Control pressed: {custom_id} | User: {interaction.user.name} ({interaction.user.id})", "info")
    await run_command(spec, interaction, {"action": action, "channel_id": channel_id})
    return True
