"""
Manager authentication and the two-step email-verified signup.

Signup states: no request -> code requested -> verified (manager created).
A pending record past its expiry is deleted the next time it is touched;
a new request for the same email supersedes any previous unverified code.
"""
import logging
import re
from datetime import timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from gestion_entretiens import config
from gestion_entretiens.errors import (
    CodeExpired,
    Conflict,
    InvalidCredentials,
    InvalidOrUsedCode,
    NotFound,
    TransientError,
    ValidationError,
)
from gestion_entretiens.models.manager_model import Manager
from gestion_entretiens.models.verification_code_model import VerificationCode
from gestion_entretiens.security import create_access_token, hash_password, verify_password
from gestion_entretiens.services.email_service import Mailer, generate_verification_code
from gestion_entretiens.utils import utc_now

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def login(db: Session, email: str, mot_de_passe: str):
    """Returns (token, manager). Unknown email and wrong password fail identically."""
    manager = db.query(Manager).filter(Manager.email == email).first()
    if manager is None:
        raise InvalidCredentials()
    if not verify_password(mot_de_passe, manager.mot_de_passe_hash, manager.mot_de_passe_salt):
        raise InvalidCredentials()
    return create_access_token(manager), manager


def get_profile(db: Session, manager_id: int) -> Manager:
    manager = db.get(Manager, manager_id)
    if manager is None:
        raise NotFound("Manager non trouvé")
    return manager


def request_code(
    db: Session,
    mailer: Mailer,
    nom: str,
    email: str,
    mot_de_passe: str,
    departement: Optional[str] = None,
) -> VerificationCode:
    if not nom or not email or not mot_de_passe:
        raise ValidationError("Tous les champs sont requis")
    if not EMAIL_RE.match(email):
        raise ValidationError("Format d'email invalide")
    if len(mot_de_passe) < config.PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Le mot de passe doit contenir au moins {config.PASSWORD_MIN_LENGTH} caractères"
        )
    if db.query(Manager.id).filter(Manager.email == email).first() is not None:
        raise Conflict()

    code = generate_verification_code()
    pwd_hash, salt = hash_password(mot_de_passe)

    try:
        # only one live request per email
        db.query(VerificationCode).filter(
            VerificationCode.email == email,
            VerificationCode.verified.is_(False),
        ).delete(synchronize_session=False)

        record = VerificationCode(
            email=email,
            code=code,
            nom=nom,
            mot_de_passe_hash=pwd_hash,
            mot_de_passe_salt=salt,
            departement=departement or None,
            expires_at=utc_now() + timedelta(minutes=config.VERIFICATION_CODE_TTL_MINUTES),
            verified=False,
        )
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Could not store verification code for {email}", exc_info=True)
        raise TransientError()

    # The record stays when dispatch fails; the next request for this email purges it.
    if not mailer.send_verification_code(email, code):
        raise TransientError("Erreur lors de l'envoi de l'email")

    return record


def verify_code(db: Session, mailer: Mailer, email: str, code: str):
    """Returns (token, manager) for the newly created account."""
    if not email or not code:
        raise ValidationError("Email et code requis")

    record = (
        db.query(VerificationCode)
        .filter(
            VerificationCode.email == email,
            VerificationCode.code == code,
            VerificationCode.verified.is_(False),
        )
        .first()
    )
    if record is None:
        raise InvalidOrUsedCode()

    if utc_now() > record.expires_at:
        db.delete(record)
        db.commit()
        raise CodeExpired()

    # Manager creation and pending-record removal commit or roll back together.
    manager = Manager(
        nom=record.nom,
        email=record.email,
        mot_de_passe_hash=record.mot_de_passe_hash,
        mot_de_passe_salt=record.mot_de_passe_salt,
        departement=record.departement,
    )
    try:
        db.add(manager)
        record.verified = True
        db.flush()
        db.delete(record)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Signup for {email} lost a race on the unique email constraint")
        raise Conflict()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Could not create manager for {email}", exc_info=True)
        raise TransientError()
    db.refresh(manager)

    # best effort: account creation stands even if this fails
    mailer.send_welcome_email(manager.email, manager.nom)

    return create_access_token(manager), manager
