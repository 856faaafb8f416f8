from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.routing_rule import RoutingRule

class RuleRepository(ABC):
    @abstractmethod
    def save(self, rule: RoutingRule) -> RoutingRule:
        pass
    
    @abstractmethod
    def find_by_id(self, rule_id: str) -> Optional[RoutingRule]:
        pass
    
    @abstractmethod
    def find_enabled(self) -> List[RoutingRule]:
        pass
    
    @abstractmethod
    def find_all(self) -> List[RoutingRule]:
        pass
    
    @abstractmethod
    def delete(self, rule_id: str) -> bool:
        pass
