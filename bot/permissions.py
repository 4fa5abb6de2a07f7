"""
Module: bot/permissions.py

Role-based command policy: decides whether a guild member may run a
slash command, and what to tell them when they may not.
"""
from dataclasses import dataclass, field

DEFAULT_SUPER_ADMIN_ROLES = ("관리자", "봇관리자")
DEFAULT_PUBLIC_COMMANDS = ("구직",)
DEFAULT_ROLE_PERMISSIONS = {
    "gap_save": ("서버관리자",),
    "닉네임": ("서버관리자",),
}


@dataclass(frozen=True)
class CommandPolicy:
    """
    Attributes:
        super_admin_roles: Role names allowed to run every command.
        public_commands: Commands anyone may run.
        role_permissions: Command name -> role names allowed to run it.
        dev_user_id: User id that bypasses the policy entirely.
    """
    super_admin_roles: tuple = DEFAULT_SUPER_ADMIN_ROLES
    public_commands: tuple = DEFAULT_PUBLIC_COMMANDS
    role_permissions: dict = field(default_factory=lambda: dict(DEFAULT_ROLE_PERMISSIONS))
    dev_user_id: int | None = None

    def allows(self, member, command_name, user_id=None):
        """
        Check whether `member` may run `command_name`.

        Order: developer, super-admin role, public command, command roles.
        Commands missing from every list are denied. A missing member
        (direct message) is denied unless it is the developer.
        """
        if self.dev_user_id is not None and user_id == self.dev_user_id:
            return True
        if member is None:
            return False

        role_names = {role.name for role in getattr(member, "roles", [])}
        if role_names.intersection(self.super_admin_roles):
            return True
        if command_name in self.public_commands:
            return True

        allowed = self.role_permissions.get(command_name)
        if allowed:
            return bool(role_names.intersection(allowed))
        return False

    def denied_message(self, command_name):
        allowed = self.role_permissions.get(command_name)
        if not allowed:
            return "❌ 이 명령어를 사용할 권한이 없습니다."
        role_list = ", ".join([*self.super_admin_roles, *allowed])
        return f"❌ 이 명령어는 다음 역할이 필요합니다: {role_list}"
