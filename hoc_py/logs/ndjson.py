"""NDJSON lifecycle logging for mounted component trees.

One JSON object per line for every lifecycle event a host drives:
- mount / update / skip / unmount of each instance
- subscribe / unsubscribe of instance-owned subscriptions
- leak when an instance unmounts still holding subscriptions
- error when a lifecycle hook raises

Events go to a stream, an optional file, or both. A running summary keeps
per-type counts so tests can check that subscriptions are balanced.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union


class EventType(str, Enum):
    """Lifecycle event types."""
    MOUNT = "mount"
    UPDATE = "update"
    SKIP = "skip"
    UNMOUNT = "unmount"
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"
    LEAK = "leak"
    ERROR = "error"


@dataclass
class LogEvent:
    """A single lifecycle event."""
    timestamp: str
    event_type: str
    component: str
    payload: Dict[str, Any]
    seq: int = 0

    def to_ndjson(self) -> str:
        data = {
            "ts": self.timestamp,
            "seq": self.seq,
            "type": self.event_type,
            "component": self.component,
        }
        if self.payload:
            data["payload"] = self.payload
        return json.dumps(data, separators=(',', ':'))


@dataclass
class LogSummary:
    """Counts for everything logged so far."""
    total_events: int = 0
    event_counts: Dict[str, int] = field(default_factory=dict)
    first_timestamp: Optional[str] = None
    last_timestamp: Optional[str] = None

    def count(self, event_type: Union[EventType, str]) -> int:
        return self.event_counts.get(_type_value(event_type), 0)

    @property
    def balanced(self) -> bool:
        """True when every subscribe has a matching unsubscribe."""
        return self.count(EventType.SUBSCRIBE) == self.count(EventType.UNSUBSCRIBE)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_events": self.total_events,
            "event_counts": self.event_counts,
            "first_timestamp": self.first_timestamp,
            "last_timestamp": self.last_timestamp,
        }


def _type_value(event_type: Union[EventType, str]) -> str:
    return event_type.value if isinstance(event_type, EventType) else str(event_type)


class NDJSONLogger:
    """NDJSON event logger for a host.

    Args:
        stream: Text stream receiving each line
        path: File to append lines to (parent directories are created)
    """

    def __init__(self, stream: Optional[TextIO] = None, path: Optional[Union[str, Path]] = None):
        self.stream = stream
        self.path = Path(path) if path is not None else None
        self.summary = LogSummary()
        self._file: Optional[TextIO] = None

    def _open_file(self) -> Optional[TextIO]:
        if self.path is None:
            return None
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.path, 'a', encoding='utf-8')
        return self._file

    def log(self, event_type: Union[EventType, str], component: str, **payload: Any) -> LogEvent:
        """Log an event and return it."""
        event = LogEvent(
            timestamp=datetime.now(timezone.utc).isoformat(),
            event_type=_type_value(event_type),
            component=component,
            payload={k: self._safe_serialize(v) for k, v in payload.items()},
            seq=self.summary.total_events + 1,
        )
        self._update_summary(event)

        line = event.to_ndjson() + "\n"
        if self.stream:
            self.stream.write(line)
            self.stream.flush()
        f = self._open_file()
        if f:
            f.write(line)
            f.flush()
        return event

    def _update_summary(self, event: LogEvent) -> None:
        self.summary.total_events += 1
        self.summary.event_counts[event.event_type] = (
            self.summary.event_counts.get(event.event_type, 0) + 1
        )
        if self.summary.first_timestamp is None:
            self.summary.first_timestamp = event.timestamp
        self.summary.last_timestamp = event.timestamp

    def _safe_serialize(self, value: Any) -> Any:
        try:
            json.dumps(value)
            return value
        except (TypeError, ValueError):
            return repr(value)

    def close(self) -> None:
        if self._file:
            self._file.close()
            self._file = None

    def __enter__(self) -> "NDJSONLogger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def create_logger(stream: Optional[TextIO] = None, path: Optional[Union[str, Path]] = None) -> NDJSONLogger:
    """Create a lifecycle logger."""
    return NDJSONLogger(stream=stream, path=path)


__all__ = ["EventType", "LogEvent", "LogSummary", "NDJSONLogger", "create_logger"]
