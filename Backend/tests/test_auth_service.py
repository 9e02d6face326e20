"""
Tests for the signup state machine and login at the service level.
"""
from datetime import timedelta

import pytest

from gestion_entretiens.errors import (
    CodeExpired,
    Conflict,
    InvalidCredentials,
    InvalidOrUsedCode,
    TransientError,
    ValidationError,
)
from gestion_entretiens.models.manager_model import Manager
from gestion_entretiens.models.verification_code_model import VerificationCode
from gestion_entretiens.security import decode_access_token, hash_password
from gestion_entretiens.services import auth_service
from gestion_entretiens.utils import utc_now

EMAIL = "nouveau.manager@entreprise.com"


def _request(db, mailer, email=EMAIL, password="motdepasse", departement="Finance"):
    return auth_service.request_code(db, mailer, "Nouveau Manager", email, password, departement)


def test_request_then_verify_creates_exactly_one_manager(db_session, fake_mailer):
    _request(db_session, fake_mailer)
    code = fake_mailer.codes[EMAIL]

    token, manager = auth_service.verify_code(db_session, fake_mailer, EMAIL, code)

    assert db_session.query(Manager).filter(Manager.email == EMAIL).count() == 1
    assert db_session.query(VerificationCode).count() == 0
    assert manager.departement == "Finance"
    assert decode_access_token(token)["id"] == manager.id
    assert fake_mailer.welcomed == [(EMAIL, "Nouveau Manager")]


def test_code_is_six_digits_and_expires_in_ten_minutes(db_session, fake_mailer):
    before = utc_now()
    record = _request(db_session, fake_mailer)

    assert record.code.isdigit() and len(record.code) == 6
    assert 100000 <= int(record.code) <= 999999
    assert timedelta(minutes=9) < record.expires_at - before <= timedelta(minutes=10, seconds=5)
    assert record.verified is False


def test_password_is_stored_hashed(db_session, fake_mailer):
    record = _request(db_session, fake_mailer)
    assert record.mot_de_passe_hash != "motdepasse"
    assert record.mot_de_passe_hash == hash_password("motdepasse", record.mot_de_passe_salt)[0]


def test_wrong_code_is_rejected(db_session, fake_mailer):
    _request(db_session, fake_mailer)
    wrong = "000000" if fake_mailer.codes[EMAIL] != "000000" else "111111"

    with pytest.raises(InvalidOrUsedCode):
        auth_service.verify_code(db_session, fake_mailer, EMAIL, wrong)
    assert db_session.query(Manager).count() == 0


def test_code_cannot_be_used_twice(db_session, fake_mailer):
    _request(db_session, fake_mailer)
    code = fake_mailer.codes[EMAIL]
    auth_service.verify_code(db_session, fake_mailer, EMAIL, code)

    with pytest.raises(InvalidOrUsedCode):
        auth_service.verify_code(db_session, fake_mailer, EMAIL, code)


def test_expired_code_is_deleted(db_session, fake_mailer):
    record = _request(db_session, fake_mailer)
    record.expires_at = utc_now() - timedelta(seconds=1)
    db_session.commit()

    with pytest.raises(CodeExpired):
        auth_service.verify_code(db_session, fake_mailer, EMAIL, fake_mailer.codes[EMAIL])

    assert db_session.query(VerificationCode).count() == 0
    assert db_session.query(Manager).count() == 0


def test_resend_supersedes_previous_code(db_session, fake_mailer):
    first = _request(db_session, fake_mailer).code
    second = _request(db_session, fake_mailer).code

    rows = db_session.query(VerificationCode).filter(VerificationCode.email == EMAIL).all()
    assert len(rows) == 1
    assert rows[0].code == second

    if first != second:
        with pytest.raises(InvalidOrUsedCode):
            auth_service.verify_code(db_session, fake_mailer, EMAIL, first)


@pytest.mark.parametrize("email,password", [
    ("pas-un-email", "motdepasse"),
    ("nom@domaine", "motdepasse"),
    (EMAIL, "court"),
])
def test_request_code_rejects_bad_input(db_session, fake_mailer, email, password):
    with pytest.raises(ValidationError):
        _request(db_session, fake_mailer, email=email, password=password)
    assert db_session.query(VerificationCode).count() == 0


def test_request_code_rejects_existing_manager(db_session, fake_mailer):
    pwd_hash, salt = hash_password("motdepasse")
    db_session.add(Manager(nom="Existant", email=EMAIL, mot_de_passe_hash=pwd_hash, mot_de_passe_salt=salt))
    db_session.commit()

    with pytest.raises(Conflict):
        _request(db_session, fake_mailer)


def test_email_failure_is_reported_but_record_kept(db_session, fake_mailer):
    fake_mailer.fail_codes = True
    with pytest.raises(TransientError):
        _request(db_session, fake_mailer)
    assert db_session.query(VerificationCode).filter(VerificationCode.email == EMAIL).count() == 1

    # the next request purges the stale record
    fake_mailer.fail_codes = False
    _request(db_session, fake_mailer)
    assert db_session.query(VerificationCode).filter(VerificationCode.email == EMAIL).count() == 1


def test_welcome_failure_does_not_undo_signup(db_session, fake_mailer):
    _request(db_session, fake_mailer)
    fake_mailer.fail_welcome = True

    token, manager = auth_service.verify_code(db_session, fake_mailer, EMAIL, fake_mailer.codes[EMAIL])

    assert token
    assert db_session.query(Manager).filter(Manager.email == EMAIL).count() == 1


def test_signup_race_on_email_is_a_conflict_and_rolls_back(db_session, fake_mailer):
    _request(db_session, fake_mailer)
    # another signup for the same email completed in between
    pwd_hash, salt = hash_password("motdepasse")
    db_session.add(Manager(nom="Rapide", email=EMAIL, mot_de_passe_hash=pwd_hash, mot_de_passe_salt=salt))
    db_session.commit()

    with pytest.raises(Conflict):
        auth_service.verify_code(db_session, fake_mailer, EMAIL, fake_mailer.codes[EMAIL])

    assert db_session.query(Manager).filter(Manager.email == EMAIL).count() == 1
    # the pending record survives the rolled back unit of work
    assert db_session.query(VerificationCode).filter(VerificationCode.email == EMAIL).count() == 1


def test_login_is_undifferentiated(db_session):
    pwd_hash, salt = hash_password("motdepasse")
    db_session.add(Manager(nom="Claire", email=EMAIL, mot_de_passe_hash=pwd_hash, mot_de_passe_salt=salt))
    db_session.commit()

    with pytest.raises(InvalidCredentials) as unknown:
        auth_service.login(db_session, "inconnu@entreprise.com", "motdepasse")
    with pytest.raises(InvalidCredentials) as wrong:
        auth_service.login(db_session, EMAIL, "mauvais-mdp")
    assert unknown.value.message == wrong.value.message

    token, manager = auth_service.login(db_session, EMAIL, "motdepasse")
    assert decode_access_token(token)["email"] == EMAIL
