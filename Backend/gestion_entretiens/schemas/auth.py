from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class LoginRequest(BaseModel):
    # malformed addresses fall through to the credential check
    email: str = Field(..., min_length=1)
    mot_de_passe: str = Field(..., min_length=1)


class RequestCodeRequest(BaseModel):
    nom: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    mot_de_passe: str = Field(..., min_length=1)
    departement: Optional[str] = Field(None, max_length=100)


class VerifyCodeRequest(BaseModel):
    email: EmailStr
    code: str = Field(..., min_length=1)


class ManagerProfile(BaseModel):
    id: int
    nom: str
    email: str
    departement: Optional[str] = None

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    token: str
    manager: ManagerProfile


class SignupResponse(TokenResponse):
    message: str


class CodeRequestedResponse(BaseModel):
    message: str
    email: str
