from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class EmployeeCreate(BaseModel):
    nom: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    poste: str = Field(..., min_length=1, max_length=100)
    date_embauche: date


class EmployeeUpdate(BaseModel):
    nom: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    poste: Optional[str] = Field(None, min_length=1, max_length=100)
    date_embauche: Optional[date] = None


class EmployeeResponse(BaseModel):
    id: int
    nom: str
    email: str
    poste: str
    date_embauche: date
    manager_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EmployeeSummary(BaseModel):
    id: int
    nom: str
    email: str
    poste: str

    class Config:
        from_attributes = True
