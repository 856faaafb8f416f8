from enum import Enum
from dataclasses import dataclass
from typing import Optional
import uuid

from .record import Record


class ServerStatus(Enum):
    ONLINE = "online"


@dataclass
class VPNServer(Record):
    # Protocol and status are free-form strings
    id: Optional[str] = None
    name: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    protocol: Optional[str] = None
    country: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def create(cls, body: dict) -> "VPNServer":
        return cls.from_dict(body, id=str(uuid.uuid4()), status=ServerStatus.ONLINE.value)

    def is_online(self) -> bool:
        return self.status == ServerStatus.ONLINE.value
