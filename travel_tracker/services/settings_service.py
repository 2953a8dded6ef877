"""
Settings Service - per-user key/value settings
"""
import logging
from datetime import date
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from travel_tracker.models.setting import UserSetting, GREEN_CARD_DATE_KEY

logger = logging.getLogger(__name__)


class SettingsService:
    """Reads and upserts user settings"""

    def __init__(self, db: Session):
        self.db = db

    def _get_row(self, user_id: int, key: str) -> Optional[UserSetting]:
        stmt = select(UserSetting).where(
            UserSetting.user_id == user_id,
            UserSetting.key == key,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_setting(self, user_id: int, key: str) -> Optional[str]:
        row = self._get_row(user_id, key)
        return row.value if row else None

    def set_setting(self, user_id: int, key: str, value: str) -> None:
        """Insert the setting or overwrite its current value"""
        row = self._get_row(user_id, key)
        if row:
            row.value = value
        else:
            self.db.add(UserSetting(user_id=user_id, key=key, value=value))
        self.db.commit()
        logger.info(
            f"Saved setting {key} for user {user_id}",
            extra={"user_id": user_id, "setting": key},
        )

    def get_green_card_date(self, user_id: int) -> Optional[date]:
        value = self.get_setting(user_id, GREEN_CARD_DATE_KEY)
        return date.fromisoformat(value) if value else None

    def set_green_card_date(self, user_id: int, green_card_date: date) -> None:
        self.set_setting(user_id, GREEN_CARD_DATE_KEY, green_card_date.isoformat())
