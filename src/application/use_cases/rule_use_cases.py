from typing import Any, Dict, List
from ...domain.entities.routing_rule import RoutingRule
from ...domain.exceptions import NotFoundError
from ...domain.repositories.rule_repository import RuleRepository
from ...infrastructure.database.memory_repository import InMemoryStore

class CreateRuleUseCase:
    def __init__(self, rule_repository: RuleRepository):
        self.rule_repository = rule_repository
    
    def execute(self, body: Dict[str, Any]) -> RoutingRule:
        return self.rule_repository.save(RoutingRule.create(body))

class ListRulesUseCase:
    def __init__(self, rule_repository: RuleRepository):
        self.rule_repository = rule_repository
    
    def execute(self) -> List[RoutingRule]:
        return self.rule_repository.find_all()

class DeleteRuleUseCase:
    def __init__(self, rule_repository: RuleRepository):
        self.rule_repository = rule_repository
    
    def execute(self, rule_id: str) -> bool:
        return self.rule_repository.delete(rule_id)

class ToggleRuleUseCase:
    def __init__(self, rule_repository: RuleRepository, store: InMemoryStore):
        self.rule_repository = rule_repository
        self.store = store
    
    def execute(self, rule_id: str) -> RoutingRule:
        with self.store.lock:
            rule = self.rule_repository.find_by_id(rule_id)
            if not rule:
                raise NotFoundError("Rule not found")
            rule.toggle()
            return rule
