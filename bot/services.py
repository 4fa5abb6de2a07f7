"""
Module: bot/services.py

Interfaces of the external services the commands delegate to, the bundle
that carries them into every handler, and the loader that builds the
bundle from a configured factory.
"""
import importlib
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class ModeChangeResult:
    """
    Outcome of a nickname prefix change.

    Attributes:
        success (bool): The nickname was changed.
        new_nickname (str or None): The nickname that was (or should be) set.
        unchanged (bool): The member was already in the requested mode.
    """
    success: bool
    new_nickname: str | None = None
    unchanged: bool = False


class RecruitmentService(Protocol):
    async def handle_special_recruitment_button(self, interaction, kind: str) -> None: ...


class VoiceForumService(Protocol):
    recruitment_service: RecruitmentService

    def has_recruitment_permission(self, user, member) -> bool: ...

    async def show_standalone_recruitment_modal(self, interaction) -> None: ...


class ActivityTracker(Protocol):
    async def save_activity_data(self) -> None: ...

    async def clear_and_reinitialize_activity_data(self) -> None: ...


class VoiceChannelManager(Protocol):
    async def set_spectator_mode(self, member) -> ModeChangeResult: ...

    async def set_waiting_mode(self, member) -> ModeChangeResult: ...

    async def restore_normal_mode(self, member) -> ModeChangeResult: ...


@dataclass(frozen=True)
class Services:
    """Every external collaborator a command may need."""
    voice_forum_service: VoiceForumService
    activity_tracker: ActivityTracker
    voice_channel_manager: VoiceChannelManager


def load_services(factory_path: str, *args: Any, **kwargs: Any) -> Services:
    """
    Import and call a `module:callable` factory that returns a Services bundle.

    Raises:
        ValueError: If the path is malformed.
        TypeError: If the factory does not return a Services instance.
    """
    module_name, sep, attr = (factory_path or "").partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"SERVICE_FACTORY must look like 'module:callable', got {factory_path!r}")
    factory = getattr(importlib.import_module(module_name), attr)
    services = factory(*args, **kwargs)
    if not isinstance(services, Services):
        raise TypeError(f"{factory_path} returned {type(services).__name__}, expected Services")
    return services
