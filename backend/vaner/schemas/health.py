"""Health check schema."""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    scheduler: bool
