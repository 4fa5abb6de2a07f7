"""
Module: bot/commands/nickname.py

Defines the `/닉네임` slash command, which posts the nickname-prefix button
panel (spectate / wait / reset) into a channel given by id.
"""
import nextcord

from commands import messages
from commands.panels import build_nickname_panel
from commands.pipeline import CommandSpec
from commands.resources import resolve_channel, bot_member
from interaction import AckMode, InvalidResource, PermissionDenied, DelegateFailure, text
from utils import log_message

NAME = "닉네임"
DESCRIPTION = "지정한 채널에 닉네임 변경 버튼을 설정합니다."


def build(services) -> CommandSpec:
    """
    Build the `/닉네임` command.

    Options:
    - channel (str): Id of the channel that receives the panel.
    """
    async def post_nickname_panel(ctx, options):
        interaction = ctx.interaction
        channel = await resolve_channel(interaction, options.get("channel", ""), messages.INVALID_CHANNEL)
        if not hasattr(channel, "send"):
            raise InvalidResource(messages.INVALID_CHANNEL)

        me = await bot_member(interaction, channel.guild)
        if not channel.permissions_for(me).send_messages:
            raise PermissionDenied(messages.CHANNEL_PERMISSION_MISSING.format(channel=channel.name))

        panel = build_nickname_panel(channel.name, channel.id)
        try:
            await channel.send(**panel.channel_kwargs())
        except nextcord.HTTPException as e:
            raise DelegateFailure() from e

        log_message(
            f"User {interaction.user.name} ({interaction.user.id}) set up nickname buttons in #{channel.name} ({channel.id})",
            "info"
        )
        return text(messages.NICKNAME_SETUP_DONE.format(channel=channel.name))

    return CommandSpec(name=NAME, handler=post_nickname_panel, ack=AckMode.DEFER)
