from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
import uuid

from .record import utc_timestamp


class HistoryEventType(Enum):
    CONNECT = "connect"
    DISCONNECT = "disconnect"


@dataclass
class TrafficStats:
    bytes_in: int = 0
    bytes_out: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"bytesIn": self.bytes_in, "bytesOut": self.bytes_out}


@dataclass
class Connection:
    connected: bool = False
    server_id: Optional[str] = None
    server_name: Optional[str] = None
    connected_at: Optional[str] = None
    stats: TrafficStats = field(default_factory=TrafficStats)

    @classmethod
    def disconnected(cls) -> "Connection":
        return cls()

    @classmethod
    def established(cls, server_id: Any, server_name: Optional[str]) -> "Connection":
        return cls(
            connected=True,
            server_id=server_id,
            server_name=server_name,
            connected_at=utc_timestamp(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "connected": self.connected,
            "serverId": self.server_id,
            "serverName": self.server_name,
            "connectedAt": self.connected_at,
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    type: HistoryEventType
    server: Optional[str]
    timestamp: str

    @classmethod
    def record(cls, event_type: HistoryEventType, server: Optional[str]) -> "HistoryEntry":
        return cls(
            id=str(uuid.uuid4()),
            type=event_type,
            server=server,
            timestamp=utc_timestamp(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "server": self.server,
            "timestamp": self.timestamp,
        }
