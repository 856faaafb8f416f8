from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.user_profile import ConnectionProfile

class ProfileRepository(ABC):
    @abstractmethod
    def find_all(self) -> List[ConnectionProfile]:
        pass
    
    @abstractmethod
    def find_first(self) -> Optional[ConnectionProfile]:
        pass
