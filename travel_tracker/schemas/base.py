from datetime import datetime, timezone
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional, Generic, TypeVar

T = TypeVar('T')


class Envelope(BaseModel, Generic[T]):
    status: str
    data: Optional[T] = None
    error: Optional[str] = None


class ErrorEnvelope(BaseModel):
    """Envelope returned for every failed request"""
    status: str = "error"
    data: None = None
    error: str
    error_code: str
    details: Optional[Dict[str, Any]] = None
    request_id: str = "unknown"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
