from typing import Any, Dict, List
from ...domain.entities.vpn_server import VPNServer
from ...domain.exceptions import NotFoundError
from ...domain.repositories.server_repository import ServerRepository
from ...infrastructure.database.memory_repository import InMemoryStore

SERVER_NOT_FOUND = "Server not found"

class CreateServerUseCase:
    def __init__(self, server_repository: ServerRepository):
        self.server_repository = server_repository
    
    def execute(self, body: Dict[str, Any]) -> VPNServer:
        return self.server_repository.save(VPNServer.create(body))

class UpdateServerUseCase:
    def __init__(self, server_repository: ServerRepository, store: InMemoryStore):
        self.server_repository = server_repository
        self.store = store
    
    def execute(self, server_id: str, body: Dict[str, Any]) -> VPNServer:
        with self.store.lock:
            server = self.server_repository.find_by_id(server_id)
            if not server:
                raise NotFoundError(SERVER_NOT_FOUND)
            server.merge(body)
            return server

class GetServerUseCase:
    def __init__(self, server_repository: ServerRepository):
        self.server_repository = server_repository
    
    def execute(self, server_id: str) -> VPNServer:
        server = self.server_repository.find_by_id(server_id)
        if not server:
            raise NotFoundError(SERVER_NOT_FOUND)
        return server

class ListServersUseCase:
    def __init__(self, server_repository: ServerRepository):
        self.server_repository = server_repository
    
    def execute(self) -> List[VPNServer]:
        return self.server_repository.find_all()

class DeleteServerUseCase:
    def __init__(self, server_repository: ServerRepository):
        self.server_repository = server_repository
    
    def execute(self, server_id: str) -> bool:
        """Returns whether a record was removed; callers treat both as success."""
        return self.server_repository.delete(server_id)
