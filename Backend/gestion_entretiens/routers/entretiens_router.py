import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from gestion_entretiens.database import get_db
from gestion_entretiens.errors import NotFound
from gestion_entretiens.models.entretien_model import Entretien
from gestion_entretiens.models.enums import StatutEntretien
from gestion_entretiens.models.note_model import Note
from gestion_entretiens.models.objectif_assigne_model import ObjectifAssigne
from gestion_entretiens.models.template_model import Template
from gestion_entretiens.schemas.entretien import (
    EntretienCreate,
    EntretienResponse,
    EntretienUpdate,
    NoteCreate,
    NoteResponse,
)
from gestion_entretiens.schemas.objectif import ObjectifAssigneResponse
from gestion_entretiens.security import get_current_manager
from gestion_entretiens.services.export_service import entretiens_workbook
from gestion_entretiens.services.scoping import delete_entretien_cascade, owned_employee, owned_entretien
from gestion_entretiens.utils import message_resp, utc_now

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/entretiens", tags=["entretiens"])


def _scoped_query(db: Session, manager_id: int):
    return db.query(Entretien).filter(Entretien.manager_id == manager_id)


# ----------------------------
# LIST / EXPORT
# ----------------------------
@router.get("", response_model=List[EntretienResponse])
def list_entretiens(
    statut: Optional[StatutEntretien] = Query(None),
    employee_id: Optional[int] = Query(None),
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    q = _scoped_query(db, current["id"])
    if statut is not None:
        q = q.filter(Entretien.statut == statut)
    if employee_id is not None:
        q = q.filter(Entretien.employee_id == employee_id)
    return q.order_by(Entretien.date_prevue.desc()).all()


@router.get("/export")
def export_entretiens(current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    """Download the caller's interviews as an Excel workbook."""
    entretiens = _scoped_query(db, current["id"]).order_by(Entretien.date_prevue.desc()).all()
    output = entretiens_workbook(entretiens)
    filename = f"entretiens_{utc_now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# ----------------------------
# CRUD
# ----------------------------
@router.get("/{entretien_id}", response_model=EntretienResponse)
def get_entretien(entretien_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return owned_entretien(db, current["id"], entretien_id)


@router.post("", response_model=EntretienResponse, status_code=201)
def create_entretien(body: EntretienCreate, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    # the interviewed employee must be one of the caller's
    owned_employee(db, current["id"], body.employee_id)
    if body.template_id is not None and db.get(Template, body.template_id) is None:
        raise NotFound("Template non trouvé")

    entretien = Entretien(
        employee_id=body.employee_id,
        manager_id=current["id"],
        template_id=body.template_id,
        type=body.type,
        date_prevue=body.date_prevue,
        titre=body.titre,
        objectifs=body.objectifs,
        statut=StatutEntretien.PLANIFIE,
    )
    db.add(entretien)
    db.commit()
    db.refresh(entretien)
    logger.info(f"Manager {current['id']} planned entretien {entretien.id}")
    return entretien


@router.put("/{entretien_id}", response_model=EntretienResponse)
def update_entretien(
    entretien_id: int,
    body: EntretienUpdate,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    entretien = owned_entretien(db, current["id"], entretien_id)
    updates = body.model_dump(exclude_unset=True)
    for field in ("statut", "titre", "date_prevue"):
        # non-nullable columns: an explicit null means "leave unchanged"
        if updates.get(field, ...) is None:
            updates.pop(field)
    for field, value in updates.items():
        setattr(entretien, field, value)
    db.commit()
    db.refresh(entretien)
    return entretien


@router.delete("/{entretien_id}")
def delete_entretien(entretien_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    entretien = owned_entretien(db, current["id"], entretien_id)
    delete_entretien_cascade(db, entretien)
    db.commit()
    logger.info(f"Manager {current['id']} deleted entretien {entretien_id}")
    return message_resp("Entretien supprimé avec succès")


# ----------------------------
# NOTES / GOALS OF ONE ENTRETIEN
# ----------------------------
@router.get("/{entretien_id}/notes", response_model=List[NoteResponse])
def list_notes(entretien_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    owned_entretien(db, current["id"], entretien_id)
    return db.query(Note).filter(Note.entretien_id == entretien_id).order_by(Note.id.asc()).all()


@router.post("/{entretien_id}/notes", response_model=NoteResponse, status_code=201)
def create_note(
    entretien_id: int,
    body: NoteCreate,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    owned_entretien(db, current["id"], entretien_id)
    note = Note(entretien_id=entretien_id, section=body.section, contenu=body.contenu, type=body.type)
    db.add(note)
    db.commit()
    db.refresh(note)
    return note


@router.get("/{entretien_id}/objectifs-assignes", response_model=List[ObjectifAssigneResponse])
def list_entretien_objectifs(
    entretien_id: int,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    owned_entretien(db, current["id"], entretien_id)
    return (
        db.query(ObjectifAssigne)
        .filter(ObjectifAssigne.entretien_id == entretien_id)
        .order_by(ObjectifAssigne.date_assignation.desc(), ObjectifAssigne.id.desc())
        .all()
    )
