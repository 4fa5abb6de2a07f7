"""
Module: bot/commands/resources.py

Resolves channel ids given by users or carried in button ids. Resolution
fails closed: every lookup problem becomes an InvalidResource with a fixed
message.
"""
import nextcord

from interaction import InvalidResource
from utils import log_message

LOOKUP_ERRORS = (nextcord.HTTPException, nextcord.InvalidData)


async def resolve_channel(interaction: nextcord.Interaction, raw_id, message: str):
    """
    Resolve `raw_id` to a channel in the interaction's guild.

    Tries the client cache first, then the API. A malformed id, a failed
    fetch, or a channel from another guild all raise InvalidResource(message).
    """
    raw = str(raw_id).strip()
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidResource(message)
    channel_id = int(raw)

    client = interaction.client
    channel = client.get_channel(channel_id)
    if channel is None:
        try:
            channel = await client.fetch_channel(channel_id)
        except LOOKUP_ERRORS as e:
            log_message(f"Channel lookup failed for {channel_id}: {e}", "debug")
            raise InvalidResource(message) from e
    if channel is None:
        raise InvalidResource(message)

    channel_guild = getattr(channel, "guild", None)
    if channel_guild is None or channel_guild.id != interaction.guild_id:
        raise InvalidResource(message)
    return channel


async def bot_member(interaction: nextcord.Interaction, guild):
    """Return the bot's own member object in `guild`, fetching it if not cached."""
    me = guild.me
    if me is None:
        me = await guild.fetch_member(interaction.client.user.id)
    return me


def invoking_member(interaction: nextcord.Interaction):
    """The invoking user as a guild Member, or None outside a guild."""
    user = interaction.user
    return user if isinstance(user, nextcord.Member) else None
