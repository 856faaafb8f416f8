import pytest

from src.domain.entities.connection import Connection, HistoryEntry, HistoryEventType
from src.domain.entities.routing_rule import RoutingRule
from src.domain.entities.user_profile import ConnectionProfile
from src.domain.entities.vpn_server import VPNServer

class TestVPNServer:
    def test_create_generates_id_and_online_status(self):
        """Test server creation defaults"""
        server = VPNServer.create({"name": "NL Server 1", "port": 1194})
        
        assert server.id
        assert server.status == "online"
        assert server.name == "NL Server 1"
        assert server.is_online()
    
    def test_create_ids_are_unique(self):
        ids = {VPNServer.create({}).id for _ in range(200)}
        assert len(ids) == 200
    
    def test_create_body_wins_over_defaults(self):
        """Test that a body can override id and status"""
        server = VPNServer.create({"id": "custom", "status": "offline"})
        
        assert server.id == "custom"
        assert server.status == "offline"
    
    def test_merge_keeps_unknown_fields(self):
        server = VPNServer.create({"name": "A", "load": 42})
        
        data = server.to_dict()
        assert data["load"] == 42
        assert data["name"] == "A"
    
    def test_merge_is_shallow_and_unvalidated(self):
        server = VPNServer.from_dict({"id": "1", "name": "US", "port": 1194})
        server.merge({"port": "not-a-port", "meta": {"a": 1}})
        
        assert server.port == "not-a-port"
        assert server.name == "US"
        assert server.to_dict()["meta"] == {"a": 1}

class TestRoutingRule:
    def test_create_forces_enabled(self):
        rule = RoutingRule.create({"name": "Hulu", "enabled": False, "serverId": "1"})
        
        assert rule.enabled is True
        assert rule.server_id == "1"
    
    def test_to_dict_uses_wire_names(self):
        rule = RoutingRule.create({"pattern": "*.hulu.com", "serverId": "3", "priority": 50})
        data = rule.to_dict()
        
        assert data["serverId"] == "3"
        assert "server_id" not in data
        assert data["priority"] == 50
    
    def test_toggle_twice_restores_state(self):
        rule = RoutingRule.create({})
        
        assert rule.toggle() is False
        assert rule.toggle() is True

class TestConnectionProfile:
    def test_aliases_round_trip(self):
        profile = ConnectionProfile.from_dict(
            {"id": "p", "name": "P", "defaultServer": "2", "killSwitch": True, "dns": "9.9.9.9"}
        )
        
        assert profile.default_server == "2"
        assert profile.kill_switch is True
        assert profile.to_dict() == {
            "id": "p", "name": "P", "defaultServer": "2", "killSwitch": True, "dns": "9.9.9.9"
        }

class TestConnection:
    def test_disconnected_record(self):
        assert Connection.disconnected().to_dict() == {
            "connected": False,
            "serverId": None,
            "serverName": None,
            "connectedAt": None,
            "stats": {"bytesIn": 0, "bytesOut": 0},
        }
    
    def test_established_record(self):
        data = Connection.established("1", "US Server 1").to_dict()
        
        assert data["connected"] is True
        assert data["serverId"] == "1"
        assert data["serverName"] == "US Server 1"
        assert data["connectedAt"].endswith("Z")
        assert data["stats"] == {"bytesIn": 0, "bytesOut": 0}

    def test_history_entry_is_immutable(self):
        entry = HistoryEntry.record(HistoryEventType.CONNECT, "US Server 1")
        
        assert entry.to_dict()["type"] == "connect"
        with pytest.raises(AttributeError):
            entry.server = "other"
