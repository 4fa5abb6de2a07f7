"""
Module: bot/commands/pipeline.py

The shared command pipeline. A command is a CommandSpec value; run_command
executes it in a fixed order:

    acknowledge -> authorize -> handler (validate, delegate) -> respond

Any failure ends in exactly one user-visible message and a log line
carrying the command name.
"""
import inspect
import traceback
from dataclasses import dataclass, replace
from typing import Awaitable, Callable

import nextcord

from interaction import (
    AckMode, SafeInteraction, ReplyPayload, text,
    CommandError, DelegateFailure, PermissionDenied, ProtocolError,
)
from commands import messages
from utils import log_message

Handler = Callable[[SafeInteraction, dict], Awaitable[ReplyPayload | None]]


@dataclass(frozen=True)
class PermissionCheck:
    """
    An authorization predicate and the message shown when it fails.

    The predicate receives the raw nextcord interaction and may be sync or async.
    """
    predicate: Callable
    message: str


@dataclass(frozen=True)
class CommandSpec:
    """
    Configuration of one command.

    Attributes:
        name (str): Command name, used for logging and the role policy.
        handler (Handler): Validates, delegates and returns the final payload
            (or None when it already answered through the SafeInteraction).
        ack (AckMode): DEFER when the handler may outlast the reply window.
        ephemeral (bool): Visibility of the deferred state and error replies.
        checks (tuple[PermissionCheck, ...]): Run in order before the handler.
        error_message (str): Reply for unexpected errors.
    """
    name: str
    handler: Handler
    ack: AckMode = AckMode.DEFER
    ephemeral: bool = True
    checks: tuple = ()
    error_message: str = messages.GENERIC_ERROR

    def with_checks(self, *checks):
        """Return a copy with `checks` running before the existing ones."""
        return replace(self, checks=(*checks, *self.checks))


async def _authorize(spec, interaction):
    for check in spec.checks:
        allowed = check.predicate(interaction)
        if inspect.isawaitable(allowed):
            allowed = await allowed
        if not allowed:
            raise PermissionDenied(check.message)


async def _deliver(ctx, spec, payload):
    try:
        await ctx.respond(payload)
    except ProtocolError as e:
        log_message(f"[{spec.name}] Could not deliver reply: {e}", "warning")
    except nextcord.HTTPException as e:
        log_message(f"[{spec.name}] Failed to send reply: {e}", "error")


async def _reply_failure(ctx, spec, message):
    ctx.refresh_state()
    await _deliver(ctx, spec, text(message, ephemeral=spec.ephemeral))


async def run_command(spec: CommandSpec, interaction: nextcord.Interaction, options: dict | None = None):
    """
    Execute `spec` for `interaction`.

    Never raises: command errors become their own message, protocol errors
    are logged, anything else becomes `spec.error_message`. Once the handler
    has succeeded, a failed delivery of its reply is only logged.
    """
    ctx = SafeInteraction(interaction, ephemeral=spec.ephemeral)
    options = options or {}
    try:
        await ctx.acknowledge(spec.ack)
        await _authorize(spec, interaction)
        result = await spec.handler(ctx, options)
        ctx.refresh_state()
    except DelegateFailure as e:
        log_message(f"[{spec.name}] Delegate failed:\n{traceback.format_exc()}", "error")
        await _reply_failure(ctx, spec, e.user_message)
    except CommandError as e:
        log_message(f"[{spec.name}] {type(e).__name__} for user {interaction.user.id}", "info")
        await _reply_failure(ctx, spec, e.user_message)
    except ProtocolError as e:
        log_message(f"[{spec.name}] Interaction protocol error: {e}", "error")
    except Exception:
        log_message(f"[{spec.name}] Unhandled error:\n{traceback.format_exc()}", "error")
        await _reply_failure(ctx, spec, spec.error_message)
    else:
        if result is not None:
            await _deliver(ctx, spec, result)
