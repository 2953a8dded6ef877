"""
Unit tests for per-user settings
"""
from datetime import date

from travel_tracker.models.setting import UserSetting
from travel_tracker.services.settings_service import SettingsService


def test_green_card_date_absent_until_set(db_session, test_user):
    assert SettingsService(db_session).get_green_card_date(test_user.id) is None


def test_set_and_overwrite_green_card_date(db_session, test_user):
    service = SettingsService(db_session)

    service.set_green_card_date(test_user.id, date(2023, 8, 13))
    assert service.get_green_card_date(test_user.id) == date(2023, 8, 13)

    service.set_green_card_date(test_user.id, date(2022, 1, 5))
    assert service.get_green_card_date(test_user.id) == date(2022, 1, 5)

    rows = db_session.query(UserSetting).filter(UserSetting.user_id == test_user.id).all()
    assert len(rows) == 1
    assert rows[0].value == "2022-01-05"


def test_settings_are_per_user(db_session, test_user, other_user):
    service = SettingsService(db_session)
    service.set_green_card_date(test_user.id, date(2023, 8, 13))

    assert service.get_green_card_date(other_user.id) is None


def test_generic_settings(db_session, test_user):
    service = SettingsService(db_session)
    assert service.get_setting(test_user.id, "theme") is None

    service.set_setting(test_user.id, "theme", "dark")
    assert service.get_setting(test_user.id, "theme") == "dark"
