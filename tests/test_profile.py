"""
Profile form validation and routes.
"""

from datetime import timezone

import pytest

from storeadmin.core import Profile, db
from storeadmin.core.database import utcnow
from storeadmin.modules.profile.forms import ProfileInput
from storeadmin.modules.profile.routes import submit_profile, load_profiles


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_input_is_trimmed():
    profile_input = ProfileInput.from_form({"name": "  Ann  ", "age": " 30 "})
    assert profile_input.name == "Ann"
    assert profile_input.age == "30"
    assert profile_input.age_value == 30


def test_missing_fields_become_empty_strings():
    profile_input = ProfileInput.from_form({})
    assert profile_input.values() == {"name": "", "age": ""}
    assert profile_input.validate() == {
        "name": "Name is required",
        "age": "Age is required",
    }


def test_blank_name_is_rejected():
    errors = ProfileInput.from_form({"name": "", "age": "30"}).validate()
    assert errors == {"name": "Name is required"}


@pytest.mark.parametrize("age", ["-1", "abc", "ten", ".5", "\u0663\u0660", "99999999999999999999"])
def test_invalid_age_is_rejected(age):
    errors = ProfileInput.from_form({"name": "Ann", "age": age}).validate()
    assert errors == {"age": "Age must be a valid non-negative number"}


@pytest.mark.parametrize("age,expected", [
    ("30", 30),
    ("30abc", 30),
    ("3.5", 3),
    ("1_000", 1),
    ("+7", 7),
    ("2147483647", 2147483647),
])
def test_age_uses_leading_integer(age, expected):
    profile_input = ProfileInput.from_form({"name": "Ann", "age": age})
    assert profile_input.validate() == {}
    assert profile_input.age_value == expected


def test_zero_age_is_valid():
    assert ProfileInput.from_form({"name": "Ann", "age": "0"}).validate() == {}


# ---------------------------------------------------------------------------
# Action / loader
# ---------------------------------------------------------------------------

def test_submit_profile_persists_valid_input(app):
    with app.app_context():
        result = submit_profile(ProfileInput.from_form({"name": "Ann", "age": "30"}))

        assert result.ok
        assert result.profile.id is not None
        saved = Profile.query.one()
        assert (saved.name, saved.age) == ("Ann", 30)


def test_submit_profile_does_not_persist_invalid_input(app):
    with app.app_context():
        result = submit_profile(ProfileInput.from_form({"name": "", "age": "30"}))

        assert not result.ok
        assert result.errors == {"name": "Name is required"}
        assert result.values == {"name": "", "age": "30"}
        assert Profile.query.count() == 0


def test_load_profiles_newest_first(app):
    with app.app_context():
        for name in ("First", "Second", "Third"):
            db.session.add(Profile(name=name, age=20))
            db.session.commit()

        names = [p.name for p in load_profiles()]

    assert names == ["Third", "Second", "First"]


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

def test_profile_page_empty_state(client):
    response = client.get("/app/profile")

    assert response.status_code == 200
    assert b"No profiles yet." in response.data


def test_post_valid_profile_redirects(app, client):
    response = client.post("/app/profile", data={"name": "Ann", "age": "30"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/app/profile")

    page = client.get("/app/profile").get_data(as_text=True)
    assert "Ann" in page
    assert "Age: 30" in page


def test_post_invalid_profile_rerenders_form(app, client):
    response = client.post("/app/profile", data={"name": "  Bob ", "age": "-1"})

    assert response.status_code == 400
    body = response.get_data(as_text=True)
    assert 'error="Age must be a valid non-negative number"' in body
    assert 'value="Bob"' in body

    with app.app_context():
        assert Profile.query.count() == 0


def test_post_invalid_profile_as_json(client):
    response = client.post("/app/profile", data={"name": "", "age": "30"},
                           headers={"Accept": "application/json"})

    assert response.status_code == 400
    assert response.get_json() == {
        "errors": {"name": "Name is required"},
        "values": {"name": "", "age": "30"},
    }


def test_post_oversized_age_rerenders_form(app, client):
    response = client.post("/app/profile", data={"name": "Ann", "age": "99999999999999999999"})

    assert response.status_code == 400
    assert 'error="Age must be a valid non-negative number"' in response.get_data(as_text=True)

    with app.app_context():
        assert Profile.query.count() == 0


def test_post_age_with_trailing_text_stores_leading_number(app, client):
    response = client.post("/app/profile", data={"name": "Ann", "age": "30abc"})

    assert response.status_code == 302
    with app.app_context():
        assert Profile.query.one().age == 30


def test_created_at_default_is_timezone_aware_utc(app):
    assert utcnow().tzinfo is timezone.utc

    with app.app_context():
        result = submit_profile(ProfileInput.from_form({"name": "Ann", "age": "30"}))
        assert result.profile.created_at is not None
