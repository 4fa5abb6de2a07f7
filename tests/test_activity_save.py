from unittest.mock import MagicMock

import nextcord
import pytest

from bot_context import BotContext
from commands import activity_save, messages
from commands.pipeline import run_command
from conftest import make_interaction, make_member, sent_contents

ADMIN = make_member(roles=("봇관리자",))


def save_spec(services):
    return BotContext(services=services).build_command(activity_save)


@pytest.mark.asyncio
async def test_saves_then_reinitializes(services):
    interaction = make_interaction(user=ADMIN)
    tracker = services.activity_tracker

    await run_command(save_spec(services), interaction)

    interaction.response.defer.assert_awaited_once()
    tracker.save_activity_data.assert_awaited_once()
    tracker.clear_and_reinitialize_activity_data.assert_awaited_once()
    interaction.followup.send.assert_awaited_once_with(content=messages.ACTIVITY_SAVED, ephemeral=True)
    interaction.edit_original_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_save_failure_reports_once(services):
    interaction = make_interaction(user=ADMIN)
    tracker = services.activity_tracker
    tracker.save_activity_data.side_effect = OSError("disk full")

    await run_command(save_spec(services), interaction)

    tracker.clear_and_reinitialize_activity_data.assert_not_awaited()
    assert sent_contents(interaction) == [messages.ACTIVITY_SAVE_FAILED]
    assert messages.ACTIVITY_SAVED not in sent_contents(interaction)


@pytest.mark.asyncio
async def test_reinitialize_failure_reports_once(services):
    interaction = make_interaction(user=ADMIN)
    services.activity_tracker.clear_and_reinitialize_activity_data.side_effect = RuntimeError

    await run_command(save_spec(services), interaction)

    assert sent_contents(interaction) == [messages.ACTIVITY_SAVE_FAILED]


@pytest.mark.asyncio
async def test_regular_member_is_denied(services):
    interaction = make_interaction(user=make_member(roles=()))

    await run_command(save_spec(services), interaction)

    services.activity_tracker.save_activity_data.assert_not_awaited()
    assert len(sent_contents(interaction)) == 1


@pytest.mark.asyncio
async def test_undelivered_confirmation_is_not_reported_as_failure(services):
    interaction = make_interaction(user=ADMIN)
    interaction.followup.send.side_effect = nextcord.HTTPException(
        MagicMock(status=500, reason="Server Error"), "down"
    )
    tracker = services.activity_tracker

    await run_command(save_spec(services), interaction)

    tracker.save_activity_data.assert_awaited_once()
    tracker.clear_and_reinitialize_activity_data.assert_awaited_once()
    interaction.followup.send.assert_awaited_once()
    interaction.edit_original_message.assert_not_awaited()
    assert messages.ACTIVITY_SAVE_FAILED not in sent_contents(interaction)
