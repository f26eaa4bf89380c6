#!/usr/bin/env python3
"""
Echo Channel Probe

Connects to a running device simulator and exercises the echo channel:
1. Sends "ping:" and expects "pong"
2. Sends a "<command>:<value>" record and prints the acknowledgement
3. Sends a binary blob and checks it comes back unchanged

Usage:
    python -m device_simulator --root ./data &
    python scripts/probe_channel.py [ws://localhost:8080/]
"""

import asyncio
import os
import sys

import websockets

SIMULATOR_URL = "ws://localhost:8080/"


async def main(url: str) -> int:
    print("=" * 70)
    print(f"Probing echo channel at {url}")
    print("=" * 70)
    
    failures = 0
    async with websockets.connect(url) as ws:
        await ws.send("ping:")
        reply = await ws.recv()
        print(f"ping:        -> {reply!r}")
        if reply != "pong":
            failures += 1
        
        await ws.send("led:on")
        reply = await ws.recv()
        print(f"led:on       -> {reply!r}")
        if reply != "I've received your 'led' message":
            failures += 1
        
        blob = os.urandom(64)
        await ws.send(blob)
        reply = await ws.recv()
        print(f"64 bytes     -> {len(reply)} bytes, identical={reply == blob}")
        if reply != blob:
            failures += 1
    
    print("=" * 70)
    print("OK" if failures == 0 else f"{failures} unexpected replies")
    return 1 if failures else 0


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else SIMULATOR_URL
    try:
        sys.exit(asyncio.run(main(target)))
    except OSError as e:
        print(f"Could not connect to {target}: {e}")
        print("Start the simulator first:")
        print("   python -m device_simulator --root ./data")
        sys.exit(1)
