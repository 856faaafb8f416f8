from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class ErrorResponse(BaseModel):
    success: bool = False
    error: str

class ConnectRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Any JSON value is accepted and matched against server ids by equality,
    # so 1 and "1" are different ids and non-string values never match
    server_id: Optional[Any] = Field(default=None, alias="serverId")

class HealthResponse(BaseModel):
    status: str
    timestamp: str
