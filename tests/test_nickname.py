import nextcord
import pytest
from unittest.mock import MagicMock

from bot_context import BotContext
from commands import messages, nickname
from commands.pipeline import run_command
from permissions import CommandPolicy
from conftest import make_channel, make_interaction, make_member, sent_contents

ADMIN = make_member(roles=("관리자",))


def nickname_spec(services, policy=None):
    return BotContext(services=services, policy=policy or CommandPolicy()).build_command(nickname)


@pytest.mark.asyncio
async def test_posts_panel_and_confirms(services):
    channel = make_channel(123, "general")
    interaction = make_interaction(user=ADMIN, channels={123: channel})

    await run_command(nickname_spec(services), interaction, {"channel": "123"})

    interaction.response.defer.assert_awaited_once_with(ephemeral=True)
    channel.send.assert_awaited_once()
    sent = channel.send.await_args.kwargs
    assert [item.custom_id for item in sent["view"].children] == [
        "voice_spectate_123", "voice_wait_123", "voice_reset_123",
    ]
    assert "general" in sent["embed"].footer.text
    assert sent_contents(interaction) == [messages.NICKNAME_SETUP_DONE.format(channel="general")]


@pytest.mark.asyncio
async def test_cached_channel_is_not_fetched(services):
    channel = make_channel(123, "general")
    interaction = make_interaction(user=ADMIN)
    interaction.client.get_channel.return_value = channel

    await run_command(nickname_spec(services), interaction, {"channel": "123"})

    interaction.client.fetch_channel.assert_not_awaited()
    channel.send.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["abc", "", "12 34", "-5", "999"])
async def test_invalid_channel_id(services, raw):
    channel = make_channel(123)
    interaction = make_interaction(user=ADMIN, channels={123: channel})

    await run_command(nickname_spec(services), interaction, {"channel": raw})

    channel.send.assert_not_awaited()
    assert sent_contents(interaction) == [messages.INVALID_CHANNEL]


@pytest.mark.asyncio
async def test_channel_from_another_guild_is_invalid(services):
    channel = make_channel(123, guild_id=1)
    interaction = make_interaction(user=ADMIN, channels={123: channel})

    await run_command(nickname_spec(services), interaction, {"channel": "123"})

    channel.send.assert_not_awaited()
    assert sent_contents(interaction) == [messages.INVALID_CHANNEL]


@pytest.mark.asyncio
async def test_bot_cannot_send_in_channel(services):
    channel = make_channel(123, "general", can_send=False)
    interaction = make_interaction(user=ADMIN, channels={123: channel})

    await run_command(nickname_spec(services), interaction, {"channel": "123"})

    channel.send.assert_not_awaited()
    assert sent_contents(interaction) == [messages.CHANNEL_PERMISSION_MISSING.format(channel="general")]


@pytest.mark.asyncio
async def test_send_failure_reports_generic_error(services):
    channel = make_channel(123, "general")
    channel.send.side_effect = nextcord.HTTPException(MagicMock(status=500, reason="Server Error"), "down")
    interaction = make_interaction(user=ADMIN, channels={123: channel})

    await run_command(nickname_spec(services), interaction, {"channel": "123"})

    assert sent_contents(interaction) == [messages.GENERIC_ERROR]


@pytest.mark.asyncio
async def test_denied_member_never_resolves_channel(services):
    channel = make_channel(123)
    interaction = make_interaction(user=make_member(roles=("멤버",)), channels={123: channel})
    policy = CommandPolicy()

    await run_command(nickname_spec(services, policy), interaction, {"channel": "abc"})

    interaction.client.get_channel.assert_not_called()
    interaction.client.fetch_channel.assert_not_awaited()
    assert sent_contents(interaction) == [policy.denied_message(nickname.NAME)]


@pytest.mark.asyncio
async def test_command_role_is_enough(services):
    channel = make_channel(123)
    interaction = make_interaction(user=make_member(roles=("서버관리자",)), channels={123: channel})

    await run_command(nickname_spec(services), interaction, {"channel": "123"})

    channel.send.assert_awaited_once()


@pytest.mark.asyncio
async def test_channel_without_messages_is_invalid(services):
    channel = make_channel(123, "lobby", kind=nextcord.CategoryChannel)
    interaction = make_interaction(user=ADMIN, channels={123: channel})

    await run_command(nickname_spec(services), interaction, {"channel": "123"})

    assert sent_contents(interaction) == [messages.INVALID_CHANNEL]


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    nextcord.Forbidden(MagicMock(status=403, reason="Forbidden"), "Missing Access"),
    nextcord.HTTPException(MagicMock(status=500, reason="Server Error"), "down"),
])
async def test_failed_fetch_is_invalid_channel(services, error):
    interaction = make_interaction(user=ADMIN)
    interaction.client.fetch_channel.side_effect = error

    await run_command(nickname_spec(services), interaction, {"channel": "123"})

    assert sent_contents(interaction) == [messages.INVALID_CHANNEL]
