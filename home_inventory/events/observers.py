"""Polling observer for state-change events.

EventLog subscribes to a session's EventBus and keeps a lightweight in-memory
ring buffer of recent events that pull-based clients (the HTTP adapter's
/api/events endpoint) can query without holding a live subscription.

Design:
  * Each event is stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * Stored entries are JSON-safe summaries (counts, state names, messages);
    clients fetch full snapshots through the regular endpoints.
  * Thread-safety ensured with a simple Lock.
  * A max_events cap prevents unbounded memory growth.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime

from .Event_Bus import EventBus, ALL_EVENTS, APP_ERROR, SHOPPING_CHANGED, SETTINGS_CHANGED

DEFAULT_MAX_EVENTS = 300


class EventLog:
    def __init__(self, max_events: int = DEFAULT_MAX_EVENTS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._buses: List[EventBus] = []

    def attach(self, bus: EventBus) -> "EventLog":
        """Idempotent: subscribe to every known event on the bus once."""
        if any(b is bus for b in self._buses):
            return self
        for event_name in ALL_EVENTS:
            bus.subscribe(event_name, self.record)
        self._buses.append(bus)
        return self

    def detach(self, bus: EventBus) -> None:
        for event_name in ALL_EVENTS:
            bus.unsubscribe(event_name, self.record)
        self._buses = [b for b in self._buses if b is not bus]

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        evt: Dict[str, Any] = {'type': event_name, 'ts': datetime.now().isoformat()}
        if isinstance(payload, dict):
            for key in ('items', 'notes'):
                if key in payload:
                    evt['count'] = len(payload[key])
            if event_name == SHOPPING_CHANGED and payload.get('state') is not None:
                evt['state'] = getattr(payload['state'], 'value', str(payload['state']))
            if event_name == SETTINGS_CHANGED and payload.get('settings') is not None:
                evt['state'] = payload['settings'].shopping_state.value
            if event_name == APP_ERROR:
                evt['operation'] = payload.get('operation', '')
                evt['message'] = payload.get('message', '')
        with self._lock:
            evt['id'] = self._next_id
            self._next_id += 1
            self._events.append(evt)
            # Trim buffer
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns every buffered event. Response includes
        next_cursor (largest id) so clients can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventLog', 'DEFAULT_MAX_EVENTS']
