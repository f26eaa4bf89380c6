"""
Echo Channel Handler

Runs one WebSocket connection: accept, then receive a message, send its
reply, repeat until the peer goes away. Every connection runs in its own
task, so channels never see each other's traffic and messages on one
channel are answered in arrival order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from fastapi import WebSocket, WebSocketDisconnect

from device_simulator.channel.messages import (
    ChannelMessage,
    MessageKind,
    reply_for,
)

logger = logging.getLogger(__name__)

CONNECTED_MARKER = "+++ Websocket client connected!"

# Close code sent when the handler itself fails
INTERNAL_ERROR_CLOSE_CODE = 1011


@dataclass(frozen=True)
class Channel:
    """Identity of an accepted connection."""
    remote_address: str
    channel_id: UUID = field(default_factory=uuid4)


def remote_address(websocket: WebSocket) -> str:
    client = websocket.client
    return client.host if client else "unknown"


class EchoChannelHandler:
    """
    Handles echo channel connections.
    
    Holds no per-connection state between messages; one instance serves
    every connection.
    """
    
    async def handle_connection(self, websocket: WebSocket) -> None:
        """
        Handle a WebSocket connection lifecycle.
        
        Args:
            websocket: The WebSocket connection (not yet accepted)
        """
        await websocket.accept()
        channel = Channel(remote_address=remote_address(websocket))
        logger.info(CONNECTED_MARKER)
        logger.debug(f"Channel {channel.channel_id} from {channel.remote_address}")
        
        try:
            while True:
                message = await self._receive_message(websocket)
                if message is None:
                    break
                
                await self._send_message(websocket, reply_for(message))
        
        except WebSocketDisconnect:
            pass
        
        except Exception as e:
            logger.error(f"WebSocket error on channel {channel.channel_id}: {e}")
            await self._close(websocket, INTERNAL_ERROR_CLOSE_CODE)
        
        finally:
            logger.info(f"{datetime.now()} Peer {channel.remote_address} disconnected.")
    
    async def _receive_message(self, websocket: WebSocket) -> ChannelMessage | None:
        """
        Receive the next text or binary message.
        
        Returns:
            The message, or None once the peer has disconnected
        """
        while True:
            data = await websocket.receive()
            if data["type"] == "websocket.disconnect":
                return None
            
            if data.get("text") is not None:
                return ChannelMessage.text(data["text"])
            if data.get("bytes") is not None:
                return ChannelMessage.binary(data["bytes"])
            
            logger.warning(f"Ignoring frame without payload: {data['type']}")
    
    async def _send_message(self, websocket: WebSocket, message: ChannelMessage) -> None:
        if message.kind == MessageKind.BINARY:
            await websocket.send_bytes(message.payload)
        else:
            await websocket.send_text(message.payload)
    
    async def _close(self, websocket: WebSocket, code: int) -> None:
        try:
            await websocket.close(code=code)
        except RuntimeError as e:
            # Already closed by the transport
            logger.debug(f"Close skipped: {e}")
