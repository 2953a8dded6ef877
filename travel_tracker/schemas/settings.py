"""
User settings schemas
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel


class GreenCardDateUpdate(BaseModel):
    green_card_date: date


class GreenCardDateRead(BaseModel):
    green_card_date: Optional[date] = None
