from typing import Any, Dict
import logging

from ..entities.connection import Connection, HistoryEntry, HistoryEventType
from ..exceptions import NotFoundError
from ..repositories.history_repository import HistoryRepository
from ..repositories.profile_repository import ProfileRepository
from ..repositories.rule_repository import RuleRepository
from ..repositories.server_repository import ServerRepository

logger = logging.getLogger(__name__)

class VPNService:
    """Owns the mock connection state machine and the status snapshot.

    The connection has two states, disconnected (initial) and connected.
    ``connect`` while connected replaces the record without logging a
    disconnect first.
    """

    def __init__(self, store, server_repository: ServerRepository,
                 rule_repository: RuleRepository, profile_repository: ProfileRepository,
                 history_repository: HistoryRepository):
        self.store = store
        self.server_repository = server_repository
        self.rule_repository = rule_repository
        self.profile_repository = profile_repository
        self.history_repository = history_repository
    
    def get_connection(self) -> Connection:
        with self.store.lock:
            return self.store.connection
    
    def connect(self, server_id: Any) -> Connection:
        with self.store.lock:
            server = self.server_repository.find_by_id(server_id)
            if not server:
                raise NotFoundError("Server not found")
            
            self.store.connection = Connection.established(server.id, server.name)
            self.history_repository.prepend(
                HistoryEntry.record(HistoryEventType.CONNECT, server.name)
            )
            logger.info(f"Connected to {server.name} ({server.id})")
            return self.store.connection
    
    def disconnect(self) -> Connection:
        with self.store.lock:
            previous = self.store.connection
            if previous.connected:
                self.history_repository.prepend(
                    HistoryEntry.record(HistoryEventType.DISCONNECT, previous.server_name)
                )
                logger.info(f"Disconnected from {previous.server_name}")
            
            self.store.connection = Connection.disconnected()
            return self.store.connection
    
    def get_status(self) -> Dict[str, Any]:
        with self.store.lock:
            servers = self.server_repository.find_all()
            rules = self.rule_repository.find_all()
            return {
                "connection": self.store.connection.to_dict(),
                "servers": [s.to_dict() for s in servers],
                "rules": [r.to_dict() for r in rules],
                "profiles": [p.to_dict() for p in self.profile_repository.find_all()],
                "stats": {
                    "totalServers": len(servers),
                    "activeRules": len(self.rule_repository.find_enabled()),
                    "historyCount": self.history_repository.count(),
                },
            }
