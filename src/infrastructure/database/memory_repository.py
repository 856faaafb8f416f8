import threading
from typing import List, Optional

from ...domain.entities.connection import Connection, HistoryEntry
from ...domain.entities.routing_rule import RoutingRule
from ...domain.entities.user_profile import ConnectionProfile
from ...domain.entities.vpn_server import VPNServer
from ...domain.repositories.history_repository import HistoryRepository
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.repositories.rule_repository import RuleRepository
from ...domain.repositories.server_repository import ServerRepository

SEED_SERVERS = [
    {"id": "1", "name": "US Server 1", "host": "us1.vpn.com", "port": 1194, "protocol": "OpenVPN", "country": "US", "status": "online"},
    {"id": "2", "name": "UK Server 1", "host": "uk1.vpn.com", "port": 51820, "protocol": "WireGuard", "country": "UK", "status": "online"},
    {"id": "3", "name": "Japan Server 1", "host": "jp1.vpn.com", "port": 500, "protocol": "IKEv2", "country": "JP", "status": "online"},
    {"id": "4", "name": "Germany Server 1", "host": "de1.vpn.com", "port": 1194, "protocol": "OpenVPN", "country": "DE", "status": "online"},
]

SEED_RULES = [
    {"id": "1", "name": "Netflix US", "pattern": "*.netflix.com", "serverId": "1", "priority": 100, "enabled": True},
    {"id": "2", "name": "BBC UK", "pattern": "*.bbc.co.uk", "serverId": "2", "priority": 90, "enabled": True},
]

SEED_PROFILES = [
    {"id": "default", "name": "Default", "defaultServer": "1", "killSwitch": False, "dns": "1.1.1.1"},
]


class InMemoryStore:
    """Process-lifetime state shared by every repository.

    All read-modify-write spans must hold ``lock``. It is re-entrant so a
    use case can hold it across several repository calls.
    """

    def __init__(self, seed: bool = True):
        self.lock = threading.RLock()
        self.servers: List[VPNServer] = []
        self.rules: List[RoutingRule] = []
        self.profiles: List[ConnectionProfile] = []
        self.connection = Connection.disconnected()
        self.history: List[HistoryEntry] = []
        if seed:
            self.reset()

    def reset(self):
        with self.lock:
            self.servers = [VPNServer.from_dict(row) for row in SEED_SERVERS]
            self.rules = [RoutingRule.from_dict(row) for row in SEED_RULES]
            self.profiles = [ConnectionProfile.from_dict(row) for row in SEED_PROFILES]
            self.connection = Connection.disconnected()
            self.history = []


class InMemoryServerRepository(ServerRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store
    
    def save(self, server: VPNServer) -> VPNServer:
        with self.store.lock:
            self.store.servers.append(server)
        return server
    
    def find_by_id(self, server_id: str) -> Optional[VPNServer]:
        with self.store.lock:
            return next((s for s in self.store.servers if s.id == server_id), None)
    
    def find_all(self) -> List[VPNServer]:
        with self.store.lock:
            return list(self.store.servers)
    
    def delete(self, server_id: str) -> bool:
        with self.store.lock:
            before = len(self.store.servers)
            self.store.servers = [s for s in self.store.servers if s.id != server_id]
            return len(self.store.servers) != before
    
    def count(self) -> int:
        with self.store.lock:
            return len(self.store.servers)


class InMemoryRuleRepository(RuleRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store
    
    def save(self, rule: RoutingRule) -> RoutingRule:
        with self.store.lock:
            self.store.rules.append(rule)
        return rule
    
    def find_by_id(self, rule_id: str) -> Optional[RoutingRule]:
        with self.store.lock:
            return next((r for r in self.store.rules if r.id == rule_id), None)
    
    def find_enabled(self) -> List[RoutingRule]:
        with self.store.lock:
            return [r for r in self.store.rules if r.enabled]
    
    def find_all(self) -> List[RoutingRule]:
        with self.store.lock:
            return list(self.store.rules)
    
    def delete(self, rule_id: str) -> bool:
        with self.store.lock:
            before = len(self.store.rules)
            self.store.rules = [r for r in self.store.rules if r.id != rule_id]
            return len(self.store.rules) != before


class InMemoryProfileRepository(ProfileRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store
    
    def find_all(self) -> List[ConnectionProfile]:
        with self.store.lock:
            return list(self.store.profiles)
    
    def find_first(self) -> Optional[ConnectionProfile]:
        with self.store.lock:
            return self.store.profiles[0] if self.store.profiles else None


class InMemoryHistoryRepository(HistoryRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store
    
    def prepend(self, entry: HistoryEntry) -> None:
        with self.store.lock:
            self.store.history.insert(0, entry)
    
    def find_recent(self, limit: int) -> List[HistoryEntry]:
        # Negative limits drop entries from the oldest end, same as list slicing.
        with self.store.lock:
            return self.store.history[:limit]
    
    def clear(self) -> int:
        with self.store.lock:
            removed = len(self.store.history)
            self.store.history = []
            return removed
    
    def count(self) -> int:
        with self.store.lock:
            return len(self.store.history)
