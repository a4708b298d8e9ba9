# seerai/models/api_models.py
from typing import Dict

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str


class RootResponse(BaseModel):
    message: str
    version: str
    endpoints: Dict[str, str]
