"""
Module: bot/interaction/errors.py

Error taxonomy for command handling. Every error here is caught at the
pipeline boundary and turned into a single user-facing message.
"""


class CommandError(Exception):
    """
    Base class for errors that end a command with a user-visible message.

    Attributes:
        user_message (str): Text shown to the invoking user.
    """
    default_message = "명령어 실행 중 오류가 발생했습니다."

    def __init__(self, user_message=None):
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)


class InvalidResource(CommandError):
    """A referenced resource (channel, option value) does not resolve."""
    default_message = "❌ **유효하지 않은 채널 ID입니다.**\n올바른 채널 ID를 입력해주세요."


class PermissionDenied(CommandError):
    """The user, or the bot on a target resource, lacks permission."""
    default_message = "❌ 이 기능을 사용할 권한이 없습니다."


class DelegateFailure(CommandError):
    """An external service raised; the cause is logged, never shown."""


class ProtocolError(Exception):
    """Acknowledgment misuse, e.g. deferring an interaction twice."""


class InteractionExpired(ProtocolError):
    """The platform no longer accepts responses for this interaction."""
