# Echo Channel
# WebSocket ping/echo channel sharing the HTTP listening socket

from .messages import (
    ChannelMessage,
    MessageKind,
    TextCommand,
    reply_for,
    PING_COMMAND,
    PONG_REPLY,
    ACK_TEMPLATE,
)
from .handler import Channel, EchoChannelHandler, CONNECTED_MARKER

__all__ = [
    "ChannelMessage",
    "MessageKind",
    "TextCommand",
    "reply_for",
    "PING_COMMAND",
    "PONG_REPLY",
    "ACK_TEMPLATE",
    "Channel",
    "EchoChannelHandler",
    "CONNECTED_MARKER",
]
