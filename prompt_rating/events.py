"""
Event bus shared by the rating engine, the config store, and any
front-end that wants to react to assessments.

Channels are created lazily on first use.  Each channel is a QObject
carrying a single ``dict`` signal, so subscribers always receive one
plain mapping.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from PyQt6.QtCore import QObject, pyqtSignal

# Event names published inside this package.
CONFIG_CHANGED = "config_changed"
RATING_ASSESSED = "rating_assessed"
LOG_ENTRY = "log_entry"

Handler = Callable[[Dict[str, Any]], None]


class _Channel(QObject):
    fired = pyqtSignal(dict)


class EventBus(QObject):
    """
    Publish/subscribe hub.

    Usage
    -----
    bus = EventBus()
    bus.subscribe(RATING_ASSESSED, lambda d: print(d["rating"]))
    engine = ContentRatingEngine(event_bus=bus)
    """

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._channels: Dict[str, _Channel] = {}

    def _channel(self, event: str) -> _Channel:
        channel = self._channels.get(event)
        if channel is None:
            channel = self._channels[event] = _Channel(self)
        return channel

    def subscribe(self, event: str, callback: Handler) -> None:
        self._channel(event).fired.connect(callback)

    def unsubscribe(self, event: str, callback: Handler) -> None:
        channel = self._channels.get(event)
        if channel is None:
            return
        try:
            channel.fired.disconnect(callback)
        except TypeError:
            # never connected
            pass

    def publish(self, event: str, data: Dict[str, Any] | None = None) -> None:
        self._channel(event).fired.emit(data if data is not None else {})
