import logging
import json

import pytest

from src.infrastructure.config.settings import Settings
from src.infrastructure.security.audit_logger import AuditLogger

class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ["HOST", "PORT", "LOG_LEVEL", "LOG_FILE", "CORS_ORIGINS", "HISTORY_DEFAULT_LIMIT"]:
            monkeypatch.delenv(name, raising=False)
        
        settings = Settings.from_env()
        
        assert settings.port == 3001
        assert settings.host == "0.0.0.0"
        assert settings.cors_origins == ["*"]
        assert settings.history_default_limit == 20
        assert settings.log_file is None
    
    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
        
        settings = Settings.from_env()
        
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
    
    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ValueError):
            Settings.from_env()

class TestAuditLogger:
    def test_emits_json_line(self, caplog):
        caplog.set_level(logging.INFO, logger="audit_logger")
        
        AuditLogger().log_resource_creation("server", "abc", {"name": "X"})
        
        record = [r for r in caplog.records if r.name == "audit_logger"][-1]
        payload = json.loads(record.getMessage())
        assert payload["type"] == "audit_event"
        assert payload["data"]["action"] == "create"
        assert payload["data"]["resource_type"] == "server"
        assert payload["data"]["resource_id"] == "abc"
        assert payload["data"]["details"] == {"name": "X"}
