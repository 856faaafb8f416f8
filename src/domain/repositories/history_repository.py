from abc import ABC, abstractmethod
from typing import List
from ..entities.connection import HistoryEntry

class HistoryRepository(ABC):
    @abstractmethod
    def prepend(self, entry: HistoryEntry) -> None:
        pass
    
    @abstractmethod
    def find_recent(self, limit: int) -> List[HistoryEntry]:
        pass
    
    @abstractmethod
    def clear(self) -> int:
        pass
    
    @abstractmethod
    def count(self) -> int:
        pass
