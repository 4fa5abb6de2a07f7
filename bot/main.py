"""
Module: bot/main.py

Entry point for the bot.
Loads the configured services, registers commands, and defines event handlers
for bot lifecycle, guild membership, command errors, and command logging.
"""
import traceback

import nextcord
from colorama import Fore, Style

from config import (
    DISCORD_BOT_TOKEN, DISCORD_APPLICATION_ID, GUILD_IDS, GUILD_MODE,
    SERVICE_FACTORY, COMMAND_POLICY,
)
from bot_context import BotContext, create_bot, install
from commands import messages
from services import load_services
from utils import log_message, format_command

COMMAND_NAMES = set()


async def sync_guild_commands(bot, guild_id):
    """
    Sync slash commands to one guild, logging the outcome.
    """
    guild = bot.get_guild(guild_id)
    guild_name = guild.name if guild else str(guild_id)
    try:
        synced = await bot.sync_application_commands(guild_id=guild_id)
        count = len(synced) if synced is not None else None
        if count is not None:
            log_message(f"Synced {count} commands to guild {guild_name} ({guild_id})", "info")
        else:
            log_message(f"Synced commands to guild {guild_name} ({guild_id})", "info")
    except nextcord.errors.Forbidden:
        log_message(
            f"Failed to sync commands for guild {guild_name} ({guild_id}): Missing Access", "warning"
        )
    except nextcord.HTTPException as e:
        log_message(
            f"Error syncing commands for guild {guild_name} ({guild_id}): {e}", "error"
        )


def register_events(bot):
    @bot.event
    async def on_ready():
        """
        Handler for the bot's ready event.

        Logs bot identity, syncs slash commands in guild mode and prints the invite URL.
        """
        log_message(f'Logged in as {bot.user.name} ({bot.user.id})', "info")

        if GUILD_MODE:
            for guild_id in GUILD_IDS:
                await sync_guild_commands(bot, guild_id)

        perms = nextcord.Permissions()
        perms.send_messages = True
        perms.view_channel = True
        perms.embed_links = True
        perms.manage_nicknames = True

        invite_url = nextcord.utils.oauth_url(
            client_id=DISCORD_APPLICATION_ID,
            permissions=perms,
            scopes=["bot", "applications.commands"]
        )
        print(f"{Fore.CYAN}Bot invite URL: {Fore.YELLOW}{invite_url}{Style.RESET_ALL}")

    @bot.event
    async def on_application_command_error(interaction, error):
        """
        Handler for errors that escape a slash command.

        Logs the error and notifies the user unless the interaction was already answered.
        """
        log_message(f"Slash command error: {error}", "error")
        if interaction.response.is_done():
            return
        try:
            await interaction.response.send_message(messages.DISPATCH_ERROR, ephemeral=True)
        except nextcord.HTTPException as e:
            log_message(f"Failed to send error notice: {e}", "error")

    @bot.event
    async def on_error(event_method, *args, **kwargs):
        """
        Catch-all handler for unhandled errors in any event.

        Logs the event method name and full traceback when an error occurs.
        """
        tb = traceback.format_exc()
        log_message(f"Unhandled error in event {event_method}: {tb}", "error")

    @bot.event
    async def on_guild_join(guild):
        """
        Handler for when the bot joins a new guild.

        Logs the guild information and, in guild mode, syncs commands to it
        if it is one of the configured guilds.
        """
        log_message(f"Joined new guild: {guild.name} ({guild.id})", "info")
        if not GUILD_MODE or guild.id in GUILD_IDS:
            await sync_guild_commands(bot, guild.id)

    @bot.event
    async def on_guild_remove(guild):
        """
        Handler for when the bot is removed from a guild.
        """
        log_message(f"Removed from guild: {guild.name} ({guild.id})", "warning")

    # Log raw slash commands for easy replay
    @bot.listen()
    async def on_interaction(interaction: nextcord.Interaction):
        """
        Listener for this bot's slash command interactions.

        Reconstructs the raw command with argument names and values and logs it
        along with guild, channel, and user context.
        """
        try:
            if interaction.type != nextcord.InteractionType.application_command:
                return
            data = interaction.data or {}
            if data.get('name') not in COMMAND_NAMES:
                return
            guild = f"{interaction.guild.name} ({interaction.guild.id})" if interaction.guild else "DM"
            channel = getattr(interaction.channel, 'name', None) or "?"
            log_message(
                f"Slash command invoked: {format_command(data)} | Guild: {guild} | Channel: #{channel} ({interaction.channel_id}) | User: {interaction.user.name} ({interaction.user.id})",
                "info"
            )
        except (AttributeError, KeyError, TypeError) as e:
            log_message(f"Error in on_interaction: {e}", "error")


def main():
    log_message("Bot is starting up...")
    bot = create_bot()
    services = load_services(SERVICE_FACTORY, bot)
    context = BotContext(services=services, policy=COMMAND_POLICY, guild_ids=GUILD_IDS)
    for command in install(bot, context):
        COMMAND_NAMES.add(command.name)
    register_events(bot)
    bot.run(DISCORD_BOT_TOKEN)


if __name__ == "__main__":
    main()
