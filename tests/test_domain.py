"""
Unit tests for profile and conference domain models and keys.
"""
from datetime import date

import pytest

from conference_central.modules.conferences.domain import (
    Conference,
    ConferenceKey,
    Profile,
    ProfileKey,
    TeeShirtSize,
    default_profile,
    extract_default_display_name,
)
from conference_central.modules.conferences.exceptions import InvalidConferenceKeyError


def test_default_display_name_is_email_local_part():
    assert extract_default_display_name("lemoncake@example.com") == "lemoncake"
    assert extract_default_display_name("a@b@example.com") == "a"
    assert extract_default_display_name("no-at-sign") == "no-at-sign"
    assert extract_default_display_name(None) is None


def test_default_profile_is_pure():
    first = default_profile("u1", "u1@example.com")
    second = default_profile("u1", "u1@example.com")

    assert first == second
    assert first is not second
    assert first.key == ProfileKey("u1")
    assert first.display_name == "u1"
    assert first.main_email == "u1@example.com"
    assert first.tee_shirt_size is TeeShirtSize.NOT_SPECIFIED
    assert first.conference_keys_to_attend == []


def test_profile_update_only_touches_supplied_fields():
    profile = Profile("u1", "Alice", "u1@example.com", TeeShirtSize.S)

    profile.update(None, TeeShirtSize.XL)
    assert profile.display_name == "Alice"
    assert profile.tee_shirt_size is TeeShirtSize.XL

    profile.update("Ally", None)
    assert profile.display_name == "Ally"
    assert profile.tee_shirt_size is TeeShirtSize.XL
    assert profile.main_email == "u1@example.com"


def test_profile_from_dict_defaults_size():
    profile = Profile.from_dict({"user_id": "u1", "tee_shirt_size": None})
    assert profile.tee_shirt_size is TeeShirtSize.NOT_SPECIFIED
    assert profile.conference_keys_to_attend == []


def test_conference_from_form_copies_fields_and_derives_month_and_seats():
    form = {
        "name": "PyCon",
        "description": "Python",
        "topics": ["python", "web"],
        "city": "Lisbon",
        "start_date": "2026-05-14",
        "end_date": date(2026, 5, 16),
        "max_attendees": 300,
        "unexpected": "ignored",
    }
    conference = Conference.from_form(42, "u1", form)

    assert conference.id == 42
    assert conference.organizer_user_id == "u1"
    assert conference.name == "PyCon"
    assert conference.topics == ["python", "web"]
    assert conference.start_date == date(2026, 5, 14)
    assert conference.month == 5
    assert conference.end_date == date(2026, 5, 16)
    assert conference.seats_available == 300
    assert conference.key == ConferenceKey(ProfileKey("u1"), 42)


def test_conference_from_form_without_optional_fields():
    conference = Conference.from_form(1, "u1", {"name": "Bare"})

    assert conference.month == 0
    assert conference.max_attendees == 0
    assert conference.seats_available == 0
    assert conference.topics == []
    assert conference.start_date is None


def test_conference_key_parent_is_organizer_profile():
    conference = Conference.from_form(7, "organizer-1", {"name": "X"})
    assert conference.key.parent == ProfileKey(conference.organizer_user_id)


def test_conference_key_urlsafe_round_trip():
    key = ConferenceKey(ProfileKey("user/with:odd chars"), 12345)
    websafe = key.urlsafe()

    assert "=" not in websafe
    assert ConferenceKey.from_urlsafe(websafe) == key


@pytest.mark.parametrize("websafe", [
    "not base64 !!",
    "",
    ConferenceKey(ProfileKey("u1"), 1).urlsafe()[:-3],
    # valid base64 of JSON that is not a conference key
    "WyJQcm9maWxlIiwgInUxIl0",
    # same bytes as a real key once characters outside the alphabet are dropped
    "!!!!" + ConferenceKey(ProfileKey("u1"), 1).urlsafe(),
    ConferenceKey(ProfileKey("u1"), 1).urlsafe() + "==",
])
def test_conference_key_rejects_malformed_values(websafe):
    with pytest.raises(InvalidConferenceKeyError):
        ConferenceKey.from_urlsafe(websafe)


def test_conference_key_has_one_websafe_form():
    websafe = ConferenceKey(ProfileKey("u1"), 1).urlsafe()
    noisy = websafe[:8] + "*.*." + websafe[8:]

    with pytest.raises(InvalidConferenceKeyError):
        ConferenceKey.from_urlsafe(noisy)
