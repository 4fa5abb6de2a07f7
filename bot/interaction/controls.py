"""
Module: bot/interaction/controls.py

Encodes and decodes button custom ids. A custom id is a registered action
prefix followed by the id of the resource the button acts on, so a later
button press can be routed without any session state on the bot side.
"""
from enum import Enum


class ControlAction(Enum):
    """Registered action prefixes for nickname-prefix buttons."""
    SPECTATE = "voice_spectate_"
    WAIT = "voice_wait_"
    RESET = "voice_reset_"

    @property
    def prefix(self) -> str:
        return self.value


class UnroutableControl(ValueError):
    """Raised when a custom id does not match any registered action."""


def encode_control_id(action: ControlAction, resource_id) -> str:
    """
    Build a custom id for `action` targeting `resource_id`.

    Raises:
        ValueError: If `resource_id` is not a positive integer id.
    """
    resource = str(resource_id)
    if not (resource.isascii() and resource.isdigit()):
        raise ValueError(f"Resource id must be numeric, got {resource_id!r}")
    return f"{action.prefix}{resource}"


def decode_control_id(custom_id: str) -> tuple[ControlAction, int]:
    """
    Split a custom id into its action and resource id.

    Raises:
        UnroutableControl: If no registered prefix matches or the suffix is
        not a numeric id.
    """
    if not custom_id:
        raise UnroutableControl("Empty custom id")
    for action in ControlAction:
        if custom_id.startswith(action.prefix):
            suffix = custom_id[len(action.prefix):]
            if not (suffix.isascii() and suffix.isdigit()):
                raise UnroutableControl(f"Bad resource id in custom id: {custom_id}")
            return action, int(suffix)
    raise UnroutableControl(f"Unknown control prefix: {custom_id}")
