from datetime import datetime

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class HealthResponse(MessageResponse):
    timestamp: datetime


class SeedResponse(MessageResponse):
    created: int
