"""
Module: bot/interaction/protocol.py

Defines SafeInteraction, the acknowledgment state machine wrapped around a
nextcord interaction. Every handler answers through it so that each
interaction gets exactly one terminal response:

    unacknowledged -> deferred -> responded
    unacknowledged -> responded

A second terminal response is a logged no-op, never a second message.
"""
from enum import Enum

import nextcord

from interaction.errors import ProtocolError, InteractionExpired
from interaction.payload import ReplyPayload
from utils import log_message


class AckState(Enum):
    UNACKNOWLEDGED = "unacknowledged"
    DEFERRED = "deferred"
    RESPONDED = "responded"


class AckMode(Enum):
    DEFER = "defer"
    NONE = "none"


class SafeInteraction:
    """
    Tracks the acknowledgment state of one interaction and picks the right
    nextcord call for every reply.

    Attributes:
        interaction (nextcord.Interaction): The wrapped interaction.
        ephemeral (bool): Visibility used when deferring.
        state (AckState): Current acknowledgment state.
    """
    def __init__(self, interaction: nextcord.Interaction, *, ephemeral: bool = True):
        self.interaction = interaction
        self.ephemeral = ephemeral
        self.state = AckState.RESPONDED if interaction.response.is_done() else AckState.UNACKNOWLEDGED

    @property
    def answered(self) -> bool:
        return self.state is AckState.RESPONDED

    async def acknowledge(self, mode: AckMode):
        """
        Acknowledge the interaction before doing slow work.

        `AckMode.DEFER` shows the "thinking" state and extends the reply window;
        `AckMode.NONE` only asserts that nothing has been sent yet.

        Raises:
            ProtocolError: If the interaction was already acknowledged.
            InteractionExpired: If the platform rejected the defer.
        """
        if self.state is not AckState.UNACKNOWLEDGED:
            raise ProtocolError(f"Cannot acknowledge interaction in state {self.state.value}")
        if mode is AckMode.NONE:
            return
        try:
            await self.interaction.response.defer(ephemeral=self.ephemeral)
        except nextcord.NotFound as e:
            raise InteractionExpired(f"Interaction {self.interaction.id} expired before defer") from e
        self.state = AckState.DEFERRED

    async def respond(self, payload: ReplyPayload) -> bool:
        """
        Send the terminal response.

        Edits the deferred response, or sends the initial one. Once the
        interaction is answered, further calls are ignored.

        Returns:
            bool: True if a message was sent.

        Raises:
            InteractionExpired: If the platform no longer accepts a response.
        """
        if self.state is AckState.RESPONDED:
            log_message(
                f"Ignoring second response to interaction {self.interaction.id}",
                "warning"
            )
            return False
        try:
            if self.state is AckState.DEFERRED:
                await self.interaction.edit_original_message(**payload.edit_kwargs())
            else:
                await self.interaction.response.send_message(**payload.response_kwargs())
        except nextcord.NotFound as e:
            raise InteractionExpired(f"Interaction {self.interaction.id} expired before response") from e
        self.state = AckState.RESPONDED
        return True

    async def respond_additional(self, payload: ReplyPayload):
        """
        Send a follow-up message.

        On a deferred interaction the first follow-up replaces the "thinking"
        placeholder, so it also counts as the terminal response.

        Raises:
            ProtocolError: If the interaction was never acknowledged.
            InteractionExpired: If the follow-up webhook is gone.
        """
        if self.state is AckState.UNACKNOWLEDGED:
            raise ProtocolError("Cannot follow up an unacknowledged interaction")
        try:
            await self.interaction.followup.send(**payload.response_kwargs())
        except nextcord.NotFound as e:
            raise InteractionExpired(f"Interaction {self.interaction.id} expired before follow-up") from e
        self.state = AckState.RESPONDED

    def refresh_state(self):
        """Pick up a response sent directly by a delegate (e.g. a modal)."""
        if self.state is AckState.UNACKNOWLEDGED and self.interaction.response.is_done():
            self.state = AckState.RESPONDED
