"""
Module: bot/bot_context.py

Creates the Discord bot and registers the slash commands (`/닉네임`, `/구직`,
`/gap_save`) and the nickname-button router. Everything a command needs is
carried in a BotContext passed in by the caller.
"""
from dataclasses import dataclass, field

import nextcord
from nextcord.ext import commands

from commands import activity_save, buttons, nickname, recruitment
from commands.buttons import route_control
from commands.pipeline import PermissionCheck, run_command
from commands.recruitment import TYPE_CHOICES
from commands.resources import invoking_member
from permissions import CommandPolicy
from services import Services
from utils import log_message


@dataclass(frozen=True)
class BotContext:
    """
    Attributes:
        services (Services): External collaborators for the commands.
        policy (CommandPolicy): Role policy applied to every slash command.
        guild_ids (list[int]): Guilds to register commands in; empty for global.
    """
    services: Services
    policy: CommandPolicy = field(default_factory=CommandPolicy)
    guild_ids: list = field(default_factory=list)

    def policy_check(self, command_name) -> PermissionCheck:
        """Authorization check enforcing the role policy for `command_name`."""
        def allowed(interaction):
            return self.policy.allows(invoking_member(interaction), command_name, interaction.user.id)
        return PermissionCheck(allowed, self.policy.denied_message(command_name))

    def build_command(self, module):
        """Build a slash command spec from `module` with the role policy in front."""
        return module.build(self.services).with_checks(self.policy_check(module.NAME))


def create_bot():
    intents = nextcord.Intents.default()
    return commands.Bot(intents=intents)


def install(bot: commands.Bot, context: BotContext):
    """
    Register the slash commands and the control router on `bot`.
    """
    guild_ids = context.guild_ids or None
    nickname_spec = context.build_command(nickname)
    recruitment_spec = context.build_command(recruitment)
    activity_save_spec = context.build_command(activity_save)
    button_spec = buttons.build(context.services)

    @bot.slash_command(name=nickname.NAME, description=nickname.DESCRIPTION, guild_ids=guild_ids)
    async def nickname_command(
        interaction: nextcord.Interaction,
        channel: str = nextcord.SlashOption(
            name="channel", description="닉네임 변경 버튼을 설정할 채널 ID", required=True
        )
    ):
        """Handle `/닉네임`."""
        await run_command(nickname_spec, interaction, {"channel": channel})

    @bot.slash_command(name=recruitment.NAME, description=recruitment.DESCRIPTION, guild_ids=guild_ids)
    async def recruitment_command(
        interaction: nextcord.Interaction,
        recruitment_type: int = nextcord.SlashOption(
            name="type", description="구인구직 유형", required=False, choices=TYPE_CHOICES, default=None
        )
    ):
        """Handle `/구직`."""
        await run_command(recruitment_spec, interaction, {"type": recruitment_type})

    @bot.slash_command(name=activity_save.NAME, description=activity_save.DESCRIPTION, guild_ids=guild_ids)
    async def activity_save_command(interaction: nextcord.Interaction):
        """Handle `/gap_save`."""
        await run_command(activity_save_spec, interaction)

    @bot.listen("on_interaction")
    async def on_control_interaction(interaction: nextcord.Interaction):
        """Route nickname-panel button presses; other interactions are left alone."""
        await route_control(button_spec, interaction)

    log_message(
        f"Registered commands: /{nickname.NAME}, /{recruitment.NAME}, /{activity_save.NAME} "
        f"({'guild mode' if guild_ids else 'global'})",
        "debug"
    )
    return nickname_command, recruitment_command, activity_save_command
