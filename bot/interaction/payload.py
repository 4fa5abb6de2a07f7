"""
Module: bot/interaction/payload.py

Immutable reply payloads and their conversion into nextcord keyword
arguments for the different send paths (initial response, edit of a
deferred response, follow-up, plain channel message).
"""
from dataclasses import dataclass, field

import nextcord
from nextcord import ui, ButtonStyle


@dataclass(frozen=True)
class Panel:
    """Informational embed: title, description and color."""
    title: str
    description: str
    color: int = 0x5865F2
    footer: str | None = None

    def to_embed(self) -> nextcord.Embed:
        embed = nextcord.Embed(title=self.title, description=self.description, color=self.color)
        if self.footer:
            embed.set_footer(text=self.footer)
        return embed


@dataclass(frozen=True)
class Control:
    """A button carrying a routable custom id."""
    custom_id: str
    label: str
    style: ButtonStyle = ButtonStyle.secondary


@dataclass(frozen=True)
class ReplyPayload:
    """
    Everything needed to send one message.

    Attributes:
        content (str or None): Message text.
        panel (Panel or None): Optional embed.
        controls (tuple[Control, ...]): Buttons, rendered in one row.
        ephemeral (bool): Only visible to the invoking user.
    """
    content: str | None = None
    panel: Panel | None = None
    controls: tuple[Control, ...] = field(default_factory=tuple)
    ephemeral: bool = True

    def build_view(self) -> ui.View | None:
        if not self.controls:
            return None
        view = ui.View(timeout=None)
        for control in self.controls:
            view.add_item(ui.Button(label=control.label, style=control.style, custom_id=control.custom_id))
        return view

    def _base_kwargs(self) -> dict:
        kwargs = {}
        if self.content is not None:
            kwargs["content"] = self.content
        if self.panel is not None:
            kwargs["embed"] = self.panel.to_embed()
        view = self.build_view()
        if view is not None:
            kwargs["view"] = view
        return kwargs

    def channel_kwargs(self) -> dict:
        """Arguments for `channel.send`, which has no ephemeral mode."""
        return self._base_kwargs()

    def response_kwargs(self) -> dict:
        """Arguments for `interaction.response.send_message` and `followup.send`."""
        kwargs = self._base_kwargs()
        kwargs["ephemeral"] = self.ephemeral
        return kwargs

    def edit_kwargs(self) -> dict:
        """Arguments for `interaction.edit_original_message`; visibility was fixed at defer time."""
        return self._base_kwargs()


def text(content: str, *, ephemeral: bool = True) -> ReplyPayload:
    """Shorthand for a plain text payload."""
    return ReplyPayload(content=content, ephemeral=ephemeral)
