import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    log_file: Optional[str] = None
    audit_log_file: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    history_default_limit: int = 20

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
            audit_log_file=os.getenv("AUDIT_LOG_FILE") or None,
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            history_default_limit=int(os.getenv("HISTORY_DEFAULT_LIMIT", "20")),
        )


def configure_logging(settings: Settings):
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))
    
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        handlers=handlers
    )
