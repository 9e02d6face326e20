from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from gestion_entretiens.models.enums import CategorieObjectif, PrioriteObjectif, StatutObjectif
from gestion_entretiens.schemas.employee import EmployeeSummary
from gestion_entretiens.schemas.entretien import EntretienSummary


# ---------------------------------------------------------
# Shared goal library
# ---------------------------------------------------------
class ObjectifTemplateCreate(BaseModel):
    titre: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    categorie: CategorieObjectif


class ObjectifTemplateUpdate(BaseModel):
    titre: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    categorie: Optional[CategorieObjectif] = None
    est_actif: Optional[bool] = None


class ObjectifTemplateResponse(BaseModel):
    id: int
    titre: str
    description: Optional[str] = None
    categorie: CategorieObjectif
    est_actif: bool

    class Config:
        from_attributes = True


# ---------------------------------------------------------
# Goals assigned to employees
# ---------------------------------------------------------
class ObjectifAssigneCreate(BaseModel):
    objectif_template_id: int
    employee_id: int
    entretien_id: Optional[int] = None
    priorite: PrioriteObjectif = PrioriteObjectif.MOYENNE
    date_echeance: Optional[date] = None
    notes: Optional[str] = None


class ObjectifAssigneUpdate(BaseModel):
    priorite: Optional[PrioriteObjectif] = None
    date_echeance: Optional[date] = None
    statut: Optional[StatutObjectif] = None
    # clamped into [0, 100] and rounded when applied
    progres: Optional[float] = None
    notes: Optional[str] = None


class ObjectifAssigneResponse(BaseModel):
    id: int
    objectif_template_id: int
    employee_id: int
    entretien_id: Optional[int] = None
    priorite: PrioriteObjectif
    date_assignation: datetime
    date_echeance: Optional[date] = None
    statut: StatutObjectif
    progres: int
    notes: Optional[str] = None
    objectif_template: Optional[ObjectifTemplateResponse] = Field(None, serialization_alias="objectifTemplate")
    employee: Optional[EmployeeSummary] = None
    entretien: Optional[EntretienSummary] = None

    class Config:
        from_attributes = True
