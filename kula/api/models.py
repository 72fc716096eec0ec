from typing import Optional
from pydantic import BaseModel


class InteractRequest(BaseModel):
    message: Optional[str] = None


class InteractResponse(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
