from typing import Any, List, Optional, Tuple

BROADCAST = '*'


class Broadcaster:
    """Delivery side of the coordinator: everyone, or one session."""

    def broadcast(self, event: str, payload: Optional[dict] = None) -> None:
        raise NotImplementedError

    def send(self, session_id: str, event: str, payload: Optional[dict] = None) -> None:
        raise NotImplementedError


class SocketIOBroadcaster(Broadcaster):
    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def _emit(self, event, payload, to=None):
        args = () if payload is None else (payload,)
        if to is None:
            self.socketio.emit(event, *args, namespace=self.namespace)
        else:
            self.socketio.emit(event, *args, to=to, namespace=self.namespace)

    def broadcast(self, event, payload=None):
        self._emit(event, payload)

    def send(self, session_id, event, payload=None):
        self._emit(event, payload, to=session_id)


class RecordingBroadcaster(Broadcaster):
    """Keeps every delivery as ``(target, event, payload)``; ``BROADCAST`` marks fan-out."""

    def __init__(self):
        self.events: List[Tuple[str, str, Any]] = []

    def broadcast(self, event, payload=None):
        self.events.append((BROADCAST, event, payload))

    def send(self, session_id, event, payload=None):
        self.events.append((session_id, event, payload))

    def names(self, target: Optional[str] = None) -> List[str]:
        return [e for t, e, _ in self.events if target is None or t == target]

    def last(self, event: str):
        for _, name, payload in reversed(self.events):
            if name == event:
                return payload
        return None

    def clear(self) -> None:
        self.events = []
