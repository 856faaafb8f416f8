from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.vpn_server import VPNServer

class ServerRepository(ABC):
    @abstractmethod
    def save(self, server: VPNServer) -> VPNServer:
        pass
    
    @abstractmethod
    def find_by_id(self, server_id: str) -> Optional[VPNServer]:
        pass
    
    @abstractmethod
    def find_all(self) -> List[VPNServer]:
        pass
    
    @abstractmethod
    def delete(self, server_id: str) -> bool:
        pass
    
    @abstractmethod
    def count(self) -> int:
        pass
