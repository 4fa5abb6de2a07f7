# Fakes for nextcord interactions, channels and members.
# Commands only touch a small surface of these objects, so plain mocks are enough.
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import nextcord
import pytest

from services import ModeChangeResult, Services

GUILD_ID = 1000


class FakeResponse:
    """Mimics nextcord.InteractionResponse, tracking whether it was used."""

    def __init__(self):
        self._done = False
        self.defer = AsyncMock(side_effect=self._mark_done)
        self.send_message = AsyncMock(side_effect=self._mark_done)
        self.send_modal = AsyncMock(side_effect=self._mark_done)

    def _mark_done(self, *args, **kwargs):
        self._done = True

    def is_done(self):
        return self._done


def make_member(user_id=42, name="tester", roles=()):
    member = MagicMock(spec=nextcord.Member)
    member.id = user_id
    member.name = name
    member.roles = [SimpleNamespace(name=role) for role in roles]
    return member


def make_channel(channel_id=123, name="general", guild_id=GUILD_ID, can_send=True, kind=None):
    """A guild channel; `kind` (e.g. nextcord.VoiceChannel) makes isinstance checks pass."""
    bot_member = SimpleNamespace(id=1)
    channel = MagicMock(spec=kind) if kind else MagicMock()
    channel.id = channel_id
    channel.name = name
    channel.guild = SimpleNamespace(id=guild_id, me=bot_member, fetch_member=AsyncMock(return_value=bot_member))
    channel.permissions_for = MagicMock(return_value=SimpleNamespace(send_messages=can_send))
    if kind is None or hasattr(kind, "send"):
        channel.send = AsyncMock()
    return channel


def make_interaction(user=None, channels=None, guild=True, type=nextcord.InteractionType.application_command, data=None):
    """
    Build a fake interaction.

    `channels` maps channel ids to fake channels; any other id fails to fetch
    with NotFound, like the real API.
    """
    channels = channels or {}
    interaction = MagicMock()
    interaction.id = 555
    interaction.type = type
    interaction.data = data or {}
    interaction.user = user if user is not None else make_member()
    interaction.guild = SimpleNamespace(id=GUILD_ID, name="guild") if guild else None
    interaction.guild_id = GUILD_ID if guild else None
    interaction.response = FakeResponse()
    interaction.edit_original_message = AsyncMock()
    interaction.followup = MagicMock()
    interaction.followup.send = AsyncMock()

    async def fetch_channel(channel_id):
        if channel_id in channels:
            return channels[channel_id]
        raise not_found()

    interaction.client.get_channel = MagicMock(return_value=None)
    interaction.client.fetch_channel = AsyncMock(side_effect=fetch_channel)
    return interaction


def not_found(message="Unknown"):
    return nextcord.NotFound(MagicMock(status=404, reason="Not Found"), message)


def sent_contents(interaction):
    """Every text the invoking user was shown, in order of the API used."""
    calls = (
        interaction.response.send_message.await_args_list
        + interaction.edit_original_message.await_args_list
        + interaction.followup.send.await_args_list
    )
    return [call.kwargs.get("content") for call in calls]


@pytest.fixture
def services():
    forum = MagicMock()
    forum.has_recruitment_permission = MagicMock(return_value=True)
    forum.show_standalone_recruitment_modal = AsyncMock()
    forum.recruitment_service.handle_special_recruitment_button = AsyncMock()

    tracker = MagicMock()
    tracker.save_activity_data = AsyncMock()
    tracker.clear_and_reinitialize_activity_data = AsyncMock()

    manager = MagicMock()
    manager.set_spectator_mode = AsyncMock(return_value=ModeChangeResult(True, "[관전] tester"))
    manager.set_waiting_mode = AsyncMock(return_value=ModeChangeResult(True, "[대기] tester"))
    manager.restore_normal_mode = AsyncMock(return_value=ModeChangeResult(True, "tester"))

    return Services(voice_forum_service=forum, activity_tracker=tracker, voice_channel_manager=manager)
