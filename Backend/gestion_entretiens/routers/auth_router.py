# auth_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gestion_entretiens.database import get_db
from gestion_entretiens.schemas.auth import (
    CodeRequestedResponse,
    LoginRequest,
    ManagerProfile,
    RequestCodeRequest,
    SignupResponse,
    TokenResponse,
    VerifyCodeRequest,
)
from gestion_entretiens.security import get_current_manager
from gestion_entretiens.services import auth_service
from gestion_entretiens.services.email_service import Mailer, get_mailer

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login_manager(body: LoginRequest, db: Session = Depends(get_db)):
    token, manager = auth_service.login(db, body.email, body.mot_de_passe)
    return {"token": token, "manager": manager}


@router.post("/request-code", response_model=CodeRequestedResponse)
def request_code(
    body: RequestCodeRequest,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
):
    """Start signup: store a pending account and email it a 6-digit code."""
    auth_service.request_code(db, mailer, body.nom, body.email, body.mot_de_passe, body.departement)
    return {"message": "Code de vérification envoyé par email", "email": body.email}


@router.post("/verify-code", response_model=SignupResponse, status_code=201)
def verify_code(
    body: VerifyCodeRequest,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
):
    token, manager = auth_service.verify_code(db, mailer, body.email, body.code)
    return {"message": "Compte créé avec succès !", "token": token, "manager": manager}


@router.get("/me", response_model=ManagerProfile)
def me(current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return auth_service.get_profile(db, current["id"])
