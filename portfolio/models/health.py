from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., description="Always 'healthy' while the process serves requests")
    timestamp: datetime = Field(..., description="Current server time (UTC)")
    uptime: float = Field(..., description="Seconds since the process started")
