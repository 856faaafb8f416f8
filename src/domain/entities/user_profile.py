from dataclasses import dataclass, field
from typing import Optional

from .record import Record, alias


@dataclass
class ConnectionProfile(Record):
    """Named bundle of default connection preferences. Read-only over the API."""
    id: Optional[str] = None
    name: Optional[str] = None
    default_server: Optional[str] = field(default=None, metadata=alias("defaultServer"))
    kill_switch: bool = field(default=False, metadata=alias("killSwitch"))
    dns: Optional[str] = None
