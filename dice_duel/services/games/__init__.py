"""Game domain services: seating, turns, dice and results.

This package holds the authoritative game logic. It is imported by the
socket handlers and HTTP routes but does not import Flask or Socket.IO
itself; delivery goes through a Broadcaster.
"""

from .broadcast import Broadcaster, RecordingBroadcaster, SocketIOBroadcaster
from .coordinator import GameCoordinator

__all__ = ['Broadcaster', 'RecordingBroadcaster', 'SocketIOBroadcaster', 'GameCoordinator']
