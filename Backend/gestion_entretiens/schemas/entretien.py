from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from gestion_entretiens.models.enums import StatutEntretien, TypeEntretien, TypeNote
from gestion_entretiens.schemas.employee import EmployeeSummary
from gestion_entretiens.schemas.template import TemplateSummary


# ---------------------------------------------------------
# Entretiens
# ---------------------------------------------------------
class EntretienCreate(BaseModel):
    employee_id: int
    template_id: Optional[int] = None
    type: TypeEntretien
    date_prevue: datetime
    titre: str = Field(..., min_length=1, max_length=200)
    objectifs: Optional[str] = None


class EntretienUpdate(BaseModel):
    statut: Optional[StatutEntretien] = None
    titre: Optional[str] = Field(None, min_length=1, max_length=200)
    objectifs: Optional[str] = None
    date_prevue: Optional[datetime] = None
    date_realise: Optional[datetime] = None


class EntretienResponse(BaseModel):
    id: int
    employee_id: int
    manager_id: int
    template_id: Optional[int] = None
    type: TypeEntretien
    date_prevue: datetime
    date_realise: Optional[datetime] = None
    statut: StatutEntretien
    titre: str
    objectifs: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    employee: Optional[EmployeeSummary] = None
    template: Optional[TemplateSummary] = None

    class Config:
        from_attributes = True


class EntretienSummary(BaseModel):
    id: int
    titre: str
    date_prevue: datetime
    type: TypeEntretien

    class Config:
        from_attributes = True


# ---------------------------------------------------------
# Notes
# ---------------------------------------------------------
class NoteCreate(BaseModel):
    section: str = Field(..., min_length=1, max_length=100)
    contenu: str = Field(..., min_length=1)
    type: TypeNote = TypeNote.PREPARATION


class NoteUpdate(BaseModel):
    contenu: Optional[str] = Field(None, min_length=1)
    section: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[TypeNote] = None


class NoteResponse(BaseModel):
    id: int
    entretien_id: int
    section: str
    contenu: str
    type: TypeNote
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
