"""
Tests for party code lookup and RSVP submission
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from rsvp.core.db import Base
from rsvp.models import Party, Guest
from rsvp.schemas.guest import GuestDto
from rsvp.services.repositories import PartyRepo
from rsvp.services.rsvp_service import RsvpService

@pytest.fixture
def db_session(tmp_path):
    """Create test database session"""
    engine = create_engine(f"sqlite:///{tmp_path / 'rsvp.db'}", connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()

@pytest.fixture
def parties(db_session):
    """Two parties, one with a guest who already answered"""
    solo = Party(code="SOLO01", guests=[
        Guest(full_name="John Doe", attending_saturday=True, meal_preference="fish"),
    ])
    family = Party(code="FAM002", guests=[
        Guest(full_name="Jane Smith"),
        Guest(full_name="Bob Smith"),
    ])
    db_session.add_all([solo, family])
    db_session.commit()
    return {"solo": solo, "family": family}

def reload_guest(db_session, guest_id):
    db_session.expire_all()
    return db_session.get(Guest, guest_id)

def test_verify_code_returns_roster_in_creation_order(db_session, parties):
    guests = RsvpService.verify_code("FAM002", db=db_session)

    assert guests is not None
    assert [g.full_name for g in guests] == ["Jane Smith", "Bob Smith"]
    assert guests[0].id < guests[1].id
    assert guests[0].attending_friday is None
    assert guests[0].music_suggestions is None

def test_verify_code_is_case_sensitive(db_session, parties):
    assert RsvpService.verify_code("solo01", db=db_session) is None

def test_verify_code_unknown(db_session, parties):
    assert RsvpService.verify_code("NOPE000", db=db_session) is None

def test_verify_code_duplicate_codes_first_party_wins(db_session, parties):
    db_session.add(Party(code="SOLO01", guests=[Guest(full_name="Late Duplicate")]))
    db_session.commit()

    guests = RsvpService.verify_code("SOLO01", db=db_session)

    assert [g.full_name for g in guests] == ["John Doe"]

def test_submit_overwrites_all_answer_fields(db_session, parties):
    john = parties["solo"].guests[0]

    found = RsvpService.submit_rsvp(
        "SOLO01",
        [GuestDto(id=john.id, attending_friday=True, meal_preference="vegetarian",
                  music_suggestions="ABBA")],
        db=db_session
    )

    assert found
    john = reload_guest(db_session, john.id)
    assert john.attending_friday is True
    # Omitted in the submission, so cleared
    assert john.attending_saturday is None
    assert john.meal_preference == "vegetarian"
    assert john.music_suggestions == "ABBA"
    assert john.full_name == "John Doe"

def test_submit_ignores_full_name(db_session, parties):
    jane = parties["family"].guests[0]

    RsvpService.submit_rsvp(
        "FAM002",
        [GuestDto(id=jane.id, full_name="Someone Else", attending_friday=False)],
        db=db_session
    )

    jane = reload_guest(db_session, jane.id)
    assert jane.full_name == "Jane Smith"
    assert jane.attending_friday is False

def test_submit_skips_guest_from_other_party(db_session, parties):
    john = parties["solo"].guests[0]
    bob = parties["family"].guests[1]

    found = RsvpService.submit_rsvp(
        "FAM002",
        [
            GuestDto(id=john.id, attending_friday=False, meal_preference="beef"),
            GuestDto(id=bob.id, attending_saturday=True),
        ],
        db=db_session
    )

    assert found
    john = reload_guest(db_session, john.id)
    assert john.attending_friday is None
    assert john.attending_saturday is True
    assert john.meal_preference == "fish"
    assert reload_guest(db_session, bob.id).attending_saturday is True

def test_submit_unknown_guest_id_is_noop(db_session, parties):
    found = RsvpService.submit_rsvp(
        "SOLO01",
        [GuestDto(id=9999, attending_friday=True)],
        db=db_session
    )

    assert found
    john = reload_guest(db_session, parties["solo"].guests[0].id)
    assert john.attending_friday is None
    assert john.attending_saturday is True

def test_submit_unknown_code(db_session, parties):
    john = parties["solo"].guests[0]

    found = RsvpService.submit_rsvp(
        "NOPE000",
        [GuestDto(id=john.id, attending_friday=True)],
        db=db_session
    )

    assert not found
    assert reload_guest(db_session, john.id).attending_friday is None

def test_submit_failed_commit_changes_nothing(db_session, parties, monkeypatch):
    jane, bob = parties["family"].guests

    def failing_commit(self):
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(Session, "commit", failing_commit)

    with pytest.raises(OperationalError):
        RsvpService.submit_rsvp(
            "FAM002",
            [
                GuestDto(id=jane.id, attending_friday=True, meal_preference="pasta"),
                GuestDto(id=bob.id, attending_friday=True),
            ],
            db=db_session
        )

    monkeypatch.undo()
    for guest_id in (jane.id, bob.id):
        guest = reload_guest(db_session, guest_id)
        assert guest.attending_friday is None
        assert guest.meal_preference is None

def test_save_adds_party_to_session(db_session):
    party = Party(code="NEW001", guests=[Guest(full_name="Ann Lee")])

    PartyRepo.save(db_session, party)

    db_session.expire_all()
    stored = RsvpService.verify_code("NEW001", db=db_session)
    assert [g.full_name for g in stored] == ["Ann Lee"]
