import binascii
import hashlib
import hmac
import logging
import os
from datetime import timedelta
from typing import Optional

import jwt
from fastapi import Header

from gestion_entretiens import config
from gestion_entretiens.errors import AuthError, InvalidToken
from gestion_entretiens.utils import utc_now

logger = logging.getLogger(__name__)

if config.JWT_SECRET == "change_this_in_production":
    logger.warning("JWT_SECRET is not set; using the development placeholder secret.")


def hash_password(password: str, salt: Optional[str] = None):
    """
    PBKDF2-HMAC-SHA256 password hashing with salt.
    Returns (hash, salt).
    """
    if salt is None:
        salt = binascii.hexlify(os.urandom(16)).decode()
    # PBKDF2-HMAC-SHA256 with 100k iterations
    dk = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), 100_000)
    return binascii.hexlify(dk).decode(), salt


def verify_password(password: str, expected_hash: Optional[str], salt: Optional[str]) -> bool:
    if not expected_hash or not salt:
        return False
    pwd_hash, _ = hash_password(password, salt)
    return hmac.compare_digest(pwd_hash, expected_hash)


def create_access_token(manager, expires_delta: Optional[timedelta] = None) -> str:
    """Sign {id, email, nom} for the given manager (8h validity by default)."""
    if expires_delta is None:
        expires_delta = timedelta(hours=config.JWT_EXP_HOURS)
    now = utc_now()
    payload = {
        "id": manager.id,
        "email": manager.email,
        "nom": manager.nom,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise InvalidToken("Token expiré")
    except jwt.InvalidTokenError:
        raise InvalidToken()

    if not isinstance(payload.get("id"), int):
        raise InvalidToken()
    return payload


def _token_from_header(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def get_current_manager(authorization: Optional[str] = Header(None, alias="Authorization")) -> dict:
    """
    Dependency gating protected endpoints.
    No bearer token -> 401, bad signature / expired token -> 403.
    Returns the token claims; claims["id"] scopes every query.
    """
    token = _token_from_header(authorization)
    if not token:
        raise AuthError()
    return decode_access_token(token)
