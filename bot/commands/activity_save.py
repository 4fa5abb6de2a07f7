"""
Module: bot/commands/activity_save.py

Defines the `/gap_save` slash command: persists the tracked activity data
and reinitializes the tracker.
"""
import nextcord

from commands import messages
from commands.pipeline import CommandSpec
from interaction import AckMode, DelegateFailure, text
from utils import log_message

NAME = "gap_save"
DESCRIPTION = "활동 데이터를 저장합니다."


def build(services) -> CommandSpec:
    tracker = services.activity_tracker

    async def save_activity(ctx, options):
        try:
            await tracker.save_activity_data()
            await tracker.clear_and_reinitialize_activity_data()
        except Exception as e:
            raise DelegateFailure(messages.ACTIVITY_SAVE_FAILED) from e

        log_message(f"User {ctx.interaction.user.name} ({ctx.interaction.user.id}) saved activity data", "info")
        try:
            await ctx.respond_additional(text(messages.ACTIVITY_SAVED))
        except nextcord.HTTPException as e:
            log_message(f"Activity data saved, but the confirmation was not delivered: {e}", "error")
        return None

    return CommandSpec(
        name=NAME,
        handler=save_activity,
        ack=AckMode.DEFER,
        error_message=messages.ACTIVITY_SAVE_FAILED,
    )
