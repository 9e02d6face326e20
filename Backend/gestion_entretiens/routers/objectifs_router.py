"""
Goal endpoints.

The template library is shared by all managers (no manager_id); goal
assignments are scoped through the owning employee.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gestion_entretiens.database import get_db
from gestion_entretiens.errors import NotFound, ValidationError
from gestion_entretiens.models.employee_model import Employee
from gestion_entretiens.models.objectif_assigne_model import ObjectifAssigne, clamp_progres
from gestion_entretiens.models.objectif_template_model import ObjectifTemplate
from gestion_entretiens.models.enums import StatutObjectif
from gestion_entretiens.schemas.objectif import (
    ObjectifAssigneCreate,
    ObjectifAssigneResponse,
    ObjectifAssigneUpdate,
    ObjectifTemplateCreate,
    ObjectifTemplateResponse,
    ObjectifTemplateUpdate,
)
from gestion_entretiens.security import get_current_manager
from gestion_entretiens.services.scoping import owned_assignation, owned_employee, owned_entretien
from gestion_entretiens.utils import message_resp, utc_now

logger = logging.getLogger(__name__)

templates_router = APIRouter(prefix="/api/objectifs-templates", tags=["objectifs"])
assignes_router = APIRouter(prefix="/api/objectifs-assignes", tags=["objectifs"])


def _active_template(db: Session, template_id: int) -> ObjectifTemplate:
    objectif = (
        db.query(ObjectifTemplate)
        .filter(ObjectifTemplate.id == template_id, ObjectifTemplate.est_actif.is_(True))
        .first()
    )
    if objectif is None:
        raise NotFound("Objectif non trouvé")
    return objectif


# ----------------------------
# TEMPLATES (shared library)
# ----------------------------
@templates_router.get("", response_model=List[ObjectifTemplateResponse])
def list_objectifs_templates(current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return (
        db.query(ObjectifTemplate)
        .filter(ObjectifTemplate.est_actif.is_(True))
        .order_by(ObjectifTemplate.categorie.asc(), ObjectifTemplate.titre.asc())
        .all()
    )


@templates_router.get("/{objectif_id}", response_model=ObjectifTemplateResponse)
def get_objectif_template(objectif_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return _active_template(db, objectif_id)


@templates_router.post("", response_model=ObjectifTemplateResponse, status_code=201)
def create_objectif_template(
    body: ObjectifTemplateCreate,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    objectif = ObjectifTemplate(
        titre=body.titre,
        description=body.description,
        categorie=body.categorie,
        est_actif=True,
    )
    db.add(objectif)
    db.commit()
    db.refresh(objectif)
    return objectif


@templates_router.put("/{objectif_id}", response_model=ObjectifTemplateResponse)
def update_objectif_template(
    objectif_id: int,
    body: ObjectifTemplateUpdate,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    # inactive entries stay editable so they can be re-activated
    objectif = db.get(ObjectifTemplate, objectif_id)
    if objectif is None:
        raise NotFound("Objectif non trouvé")
    updates = body.model_dump(exclude_unset=True)
    for field in ("titre", "categorie", "est_actif"):
        if updates.get(field, ...) is None:
            updates.pop(field)
    for field, value in updates.items():
        setattr(objectif, field, value)
    db.commit()
    db.refresh(objectif)
    return objectif


@templates_router.delete("/{objectif_id}")
def delete_objectif_template(objectif_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    """Soft delete: the entry disappears from listings, existing assignments keep it."""
    objectif = db.get(ObjectifTemplate, objectif_id)
    if objectif is None:
        raise NotFound("Objectif non trouvé")
    objectif.est_actif = False
    db.commit()
    return message_resp("Objectif désactivé avec succès")


# ----------------------------
# ASSIGNMENTS
# ----------------------------
@assignes_router.get("", response_model=List[ObjectifAssigneResponse])
def list_objectifs_assignes(current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return (
        db.query(ObjectifAssigne)
        .join(Employee, ObjectifAssigne.employee_id == Employee.id)
        .filter(Employee.manager_id == current["id"])
        .order_by(ObjectifAssigne.date_assignation.desc(), ObjectifAssigne.id.desc())
        .all()
    )


@assignes_router.get("/{assignation_id}", response_model=ObjectifAssigneResponse)
def get_objectif_assigne(assignation_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return owned_assignation(db, current["id"], assignation_id)


@assignes_router.post("", response_model=ObjectifAssigneResponse, status_code=201)
def assign_objectif(
    body: ObjectifAssigneCreate,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    _active_template(db, body.objectif_template_id)
    owned_employee(db, current["id"], body.employee_id)
    if body.entretien_id is not None:
        entretien = owned_entretien(db, current["id"], body.entretien_id)
        if entretien.employee_id != body.employee_id:
            raise ValidationError("L'entretien ne concerne pas cet employé")

    assignation = ObjectifAssigne(
        objectif_template_id=body.objectif_template_id,
        employee_id=body.employee_id,
        entretien_id=body.entretien_id,
        priorite=body.priorite,
        date_assignation=utc_now(),
        date_echeance=body.date_echeance,
        statut=StatutObjectif.EN_COURS,
        progres=0,
        notes=body.notes,
    )
    db.add(assignation)
    db.commit()
    db.refresh(assignation)
    logger.info(f"Manager {current['id']} assigned objectif {body.objectif_template_id} to employee {body.employee_id}")
    return assignation


@assignes_router.put("/{assignation_id}", response_model=ObjectifAssigneResponse)
def update_objectif_assigne(
    assignation_id: int,
    body: ObjectifAssigneUpdate,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    assignation = owned_assignation(db, current["id"], assignation_id)
    updates = body.model_dump(exclude_unset=True)
    for field in ("priorite", "statut", "progres"):
        if updates.get(field, ...) is None:
            updates.pop(field)
    if "progres" in updates:
        updates["progres"] = clamp_progres(updates["progres"])
    for field, value in updates.items():
        setattr(assignation, field, value)
    db.commit()
    db.refresh(assignation)
    return assignation


@assignes_router.delete("/{assignation_id}")
def delete_objectif_assigne(assignation_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    assignation = owned_assignation(db, current["id"], assignation_id)
    db.delete(assignation)
    db.commit()
    return message_resp("Assignation supprimée avec succès")
