import re
from typing import List, Optional
from ...domain.entities.connection import HistoryEntry
from ...domain.repositories.history_repository import HistoryRepository

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

def parse_limit(raw: Optional[str], default: int) -> int:
    """Parse a ``limit`` query value leniently.

    A leading integer is used (``"5abc"`` gives 5). Missing, non-numeric and
    zero values fall back to ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    return int(match.group(1)) or default

class ListHistoryUseCase:
    def __init__(self, history_repository: HistoryRepository, default_limit: int = 20):
        self.history_repository = history_repository
        self.default_limit = default_limit
    
    def execute(self, limit: Optional[str] = None) -> List[HistoryEntry]:
        return self.history_repository.find_recent(parse_limit(limit, self.default_limit))

class ClearHistoryUseCase:
    def __init__(self, history_repository: HistoryRepository):
        self.history_repository = history_repository
    
    def execute(self) -> int:
        return self.history_repository.clear()
