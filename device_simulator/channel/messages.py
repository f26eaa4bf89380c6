"""
Channel Message Model

Messages exchanged over the echo channel and the fixed reply rules:
- text "ping:<anything>" -> text "pong"
- text "<command>:<value>" -> text "I've received your '<command>' message"
- binary payload -> the same bytes back

Text messages are split on ":" and only the first two segments are
kept, so a value containing ":" is truncated at its first colon.
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

PING_COMMAND = "ping"
PONG_REPLY = "pong"
ACK_TEMPLATE = "I've received your '{command}' message"


class MessageKind(str, Enum):
    """Frame kinds carried by the channel."""
    TEXT = "text"
    BINARY = "binary"


class ChannelMessage(BaseModel):
    """One text or binary message, alive for a single handler call."""
    model_config = ConfigDict(frozen=True)
    
    kind: MessageKind
    payload: str | bytes
    
    @classmethod
    def text(cls, payload: str) -> "ChannelMessage":
        return cls(kind=MessageKind.TEXT, payload=payload)
    
    @classmethod
    def binary(cls, payload: bytes) -> "ChannelMessage":
        return cls(kind=MessageKind.BINARY, payload=payload)


class TextCommand(BaseModel):
    """A "<command>:<value>" text record."""
    model_config = ConfigDict(frozen=True)
    
    command: str
    value: str | None = None
    
    @classmethod
    def parse(cls, text: str) -> "TextCommand":
        segments = text.split(":")
        value = segments[1] if len(segments) > 1 else None
        return cls(command=segments[0], value=value)


def reply_for(message: ChannelMessage) -> ChannelMessage:
    """
    Compute the reply to a received message.
    
    Stateless: the reply depends on this message alone.
    """
    if message.kind == MessageKind.BINARY:
        logger.info(f"Received Binary Message of {len(message.payload)} bytes")
        return ChannelMessage.binary(message.payload)
    
    record = TextCommand.parse(message.payload)
    logger.info(f' msg="{record.command}"  value="{record.value}"')
    
    if record.command == PING_COMMAND:
        return ChannelMessage.text(PONG_REPLY)
    return ChannelMessage.text(ACK_TEMPLATE.format(command=record.command))
