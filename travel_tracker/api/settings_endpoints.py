"""
User settings endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from travel_tracker.core.db import get_db
from travel_tracker.core.dependencies import get_current_user
from travel_tracker.models.user import User
from travel_tracker.schemas.base import Envelope
from travel_tracker.schemas.settings import GreenCardDateRead, GreenCardDateUpdate
from travel_tracker.services.settings_service import SettingsService

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/green-card-date", response_model=Envelope[GreenCardDateRead])
def get_green_card_date(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    value = SettingsService(db).get_green_card_date(current_user.id)
    return Envelope(status="ok", data=GreenCardDateRead(green_card_date=value))


@router.put("/green-card-date", response_model=Envelope[GreenCardDateRead])
def set_green_card_date(
    payload: GreenCardDateUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Set or overwrite the green card date. It cannot be cleared."""
    SettingsService(db).set_green_card_date(current_user.id, payload.green_card_date)
    return Envelope(
        status="ok",
        data=GreenCardDateRead(green_card_date=payload.green_card_date),
    )
