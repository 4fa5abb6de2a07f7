"""
Module: bot/commands/recruitment.py

Defines the `/구직` slash command. Without a type it opens the general
recruitment modal; with a type it starts the long-term or scrimmage flow.
Both flows answer the interaction themselves (with a modal), so this
command never defers.
"""
from enum import IntEnum

from commands import messages
from commands.pipeline import CommandSpec, PermissionCheck
from commands.resources import invoking_member
from interaction import AckMode, DelegateFailure, InvalidResource
from utils import log_message

NAME = "구직"
DESCRIPTION = "구인구직 게시글을 작성합니다."


class RecruitmentType(IntEnum):
    LONG_TERM = 1
    SCRIMMAGE = 2

    @property
    def kind(self) -> str:
        return {RecruitmentType.LONG_TERM: "long_term", RecruitmentType.SCRIMMAGE: "scrimmage"}[self]


TYPE_CHOICES = {"장기": RecruitmentType.LONG_TERM.value, "내전": RecruitmentType.SCRIMMAGE.value}


def parse_recruitment_type(value):
    """
    Map the `type` option to a RecruitmentType, or None for the general flow.

    Raises:
        InvalidResource: For any other value.
    """
    if value is None:
        return None
    try:
        return RecruitmentType(value)
    except ValueError as e:
        raise InvalidResource(messages.UNKNOWN_RECRUITMENT_TYPE) from e


def build(services) -> CommandSpec:
    """
    Build the `/구직` command.

    Options:
    - type (int, optional): 1 = long-term, 2 = scrimmage.
    """
    forum = services.voice_forum_service

    def has_permission(interaction):
        return bool(forum.has_recruitment_permission(interaction.user, invoking_member(interaction)))

    async def start_recruitment(ctx, options):
        interaction = ctx.interaction
        recruitment_type = parse_recruitment_type(options.get("type"))
        try:
            if recruitment_type is None:
                await forum.show_standalone_recruitment_modal(interaction)
            else:
                await forum.recruitment_service.handle_special_recruitment_button(interaction, recruitment_type.kind)
        except Exception as e:
            raise DelegateFailure() from e

        log_message(
            f"User {interaction.user.name} ({interaction.user.id}) started recruitment: "
            f"{recruitment_type.kind if recruitment_type else 'general'}",
            "info"
        )
        return None

    return CommandSpec(
        name=NAME,
        handler=start_recruitment,
        ack=AckMode.NONE,
        checks=(PermissionCheck(has_permission, messages.RECRUITMENT_DENIED),),
    )
