import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict, field

@dataclass
class AuditEvent:
    timestamp: datetime
    action: str
    resource_type: str
    resource_id: Optional[str]
    details: Dict[str, Any] = field(default_factory=dict)

class AuditLogger:
    """Writes one JSON line per state mutation to the ``audit_logger`` logger."""

    def __init__(self, log_file: Optional[str] = None):
        self.log_file = log_file
        self.logger = self._setup_logger()
    
    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('audit_logger')
        logger.setLevel(logging.INFO)
        
        if self.log_file and not any(
            isinstance(h, logging.FileHandler) and h.baseFilename == self.log_file
            for h in logger.handlers
        ):
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            logger.addHandler(file_handler)
        
        return logger
    
    def log_event(self, event: AuditEvent):
        try:
            event_dict = asdict(event)
            event_dict['timestamp'] = event.timestamp.isoformat()
            
            log_entry = {
                'type': 'audit_event',
                'data': event_dict
            }
            
            self.logger.info(json.dumps(log_entry, default=str))
        except (TypeError, ValueError) as e:
            # Unserializable details must not fail the request that caused them
            logging.error(f"Failed to log audit event: {e}")
    
    def _log(self, action: str, resource_type: str, resource_id: Optional[str],
             details: Optional[Dict[str, Any]] = None):
        self.log_event(AuditEvent(
            timestamp=datetime.now(timezone.utc),
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            details=details or {}
        ))
    
    def log_resource_creation(self, resource_type: str, resource_id: Optional[str],
                              details: Dict[str, Any] = None):
        self._log("create", resource_type, resource_id, details)
    
    def log_resource_update(self, resource_type: str, resource_id: Optional[str],
                            details: Dict[str, Any] = None):
        self._log("update", resource_type, resource_id, details)
    
    def log_resource_deletion(self, resource_type: str, resource_id: Optional[str],
                              details: Dict[str, Any] = None):
        self._log("delete", resource_type, resource_id, details)
    
    def log_connection_change(self, action: str, server_id: Optional[str], server_name: Optional[str]):
        """Log a connect or disconnect transition"""
        self._log(action, "connection", server_id, {"server": server_name})
    
    def log_history_cleared(self, removed: int):
        self._log("clear", "history", None, {"removed": removed})
