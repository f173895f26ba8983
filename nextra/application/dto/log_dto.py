from typing import Optional

from pydantic import BaseModel


class LogCreateRequest(BaseModel):
    """DTO for a detection log submitted by the frontend"""
    name: Optional[str] = None
    gait: Optional[str] = None  # e.g. "93.12%"
    auth: Optional[str] = None  # e.g. "81.40%"
    status: Optional[str] = None
    time: Optional[str] = None  # client-side timestamp string


class LogResponse(BaseModel):
    """DTO for a stored detection log"""
    name: str
    gait: Optional[str] = None
    auth: Optional[str] = None
    status: Optional[str] = None
    time: str


class LogSavedResponse(BaseModel):
    """DTO returned after a log is appended"""
    message: str
    log: LogResponse
