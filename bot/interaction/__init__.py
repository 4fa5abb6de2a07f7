"""
Package: bot/interaction

Provides the interaction acknowledgment protocol, reply payloads, control
id encoding and the command error taxonomy.
"""
from .errors import (
    CommandError, InvalidResource, PermissionDenied, DelegateFailure,
    ProtocolError, InteractionExpired,
)
from .controls import ControlAction, UnroutableControl, encode_control_id, decode_control_id
from .payload import Panel, Control, ReplyPayload, text
from .protocol import AckMode, AckState, SafeInteraction
