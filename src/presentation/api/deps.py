from dataclasses import dataclass
from fastapi import Request

from ...application.use_cases.history_use_cases import ClearHistoryUseCase, ListHistoryUseCase
from ...application.use_cases.profile_use_cases import GetActiveProfileUseCase, ListProfilesUseCase
from ...application.use_cases.rule_use_cases import (
    CreateRuleUseCase,
    DeleteRuleUseCase,
    ListRulesUseCase,
    ToggleRuleUseCase
)
from ...application.use_cases.server_use_cases import (
    CreateServerUseCase,
    DeleteServerUseCase,
    GetServerUseCase,
    ListServersUseCase,
    UpdateServerUseCase
)
from ...domain.services.vpn_service import VPNService
from ...infrastructure.database.memory_repository import (
    InMemoryHistoryRepository,
    InMemoryProfileRepository,
    InMemoryRuleRepository,
    InMemoryServerRepository,
    InMemoryStore
)
from ...infrastructure.security.audit_logger import AuditLogger


@dataclass
class ServiceContainer:
    """Everything the routers need, bound to one store instance."""
    store: InMemoryStore
    audit_logger: AuditLogger
    vpn_service: VPNService
    list_servers: ListServersUseCase
    get_server: GetServerUseCase
    create_server: CreateServerUseCase
    update_server: UpdateServerUseCase
    delete_server: DeleteServerUseCase
    list_rules: ListRulesUseCase
    create_rule: CreateRuleUseCase
    delete_rule: DeleteRuleUseCase
    toggle_rule: ToggleRuleUseCase
    list_profiles: ListProfilesUseCase
    get_active_profile: GetActiveProfileUseCase
    list_history: ListHistoryUseCase
    clear_history: ClearHistoryUseCase

    @classmethod
    def build(cls, store: InMemoryStore, audit_logger: AuditLogger,
              history_default_limit: int = 20) -> "ServiceContainer":
        server_repository = InMemoryServerRepository(store)
        rule_repository = InMemoryRuleRepository(store)
        profile_repository = InMemoryProfileRepository(store)
        history_repository = InMemoryHistoryRepository(store)

        return cls(
            store=store,
            audit_logger=audit_logger,
            vpn_service=VPNService(
                store, server_repository, rule_repository, profile_repository, history_repository
            ),
            list_servers=ListServersUseCase(server_repository),
            get_server=GetServerUseCase(server_repository),
            create_server=CreateServerUseCase(server_repository),
            update_server=UpdateServerUseCase(server_repository, store),
            delete_server=DeleteServerUseCase(server_repository),
            list_rules=ListRulesUseCase(rule_repository),
            create_rule=CreateRuleUseCase(rule_repository),
            delete_rule=DeleteRuleUseCase(rule_repository),
            toggle_rule=ToggleRuleUseCase(rule_repository, store),
            list_profiles=ListProfilesUseCase(profile_repository),
            get_active_profile=GetActiveProfileUseCase(profile_repository),
            list_history=ListHistoryUseCase(history_repository, history_default_limit),
            clear_history=ClearHistoryUseCase(history_repository),
        )


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def success(data=None, include_data: bool = True) -> dict:
    """Build the ``{success, data}`` envelope used by every endpoint."""
    if not include_data:
        return {"success": True}
    return {"success": True, "data": data}
