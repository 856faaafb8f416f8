from typing import List, Optional
from ...domain.entities.user_profile import ConnectionProfile
from ...domain.repositories.profile_repository import ProfileRepository

class ListProfilesUseCase:
    def __init__(self, profile_repository: ProfileRepository):
        self.profile_repository = profile_repository
    
    def execute(self) -> List[ConnectionProfile]:
        return self.profile_repository.find_all()

class GetActiveProfileUseCase:
    """The active profile is simply the first one; there is no activation step."""

    def __init__(self, profile_repository: ProfileRepository):
        self.profile_repository = profile_repository
    
    def execute(self) -> Optional[ConnectionProfile]:
        return self.profile_repository.find_first()
