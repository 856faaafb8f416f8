from dataclasses import dataclass, field
from typing import Optional
import uuid

from .record import Record, alias


@dataclass
class RoutingRule(Record):
    id: Optional[str] = None
    name: Optional[str] = None
    pattern: Optional[str] = None
    server_id: Optional[str] = field(default=None, metadata=alias("serverId"))
    priority: Optional[int] = None
    enabled: bool = True

    @classmethod
    def create(cls, body: dict) -> "RoutingRule":
        rule = cls.from_dict(body, id=str(uuid.uuid4()))
        # New rules always start enabled, whatever the body says.
        rule.enabled = True
        return rule

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled
