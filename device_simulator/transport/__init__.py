# Transport Layer
# ASGI application wiring HTTP asset serving and the echo channel onto one socket

from device_simulator.transport.app import create_app

__all__ = ["create_app"]
