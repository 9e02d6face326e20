from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gestion_entretiens.database import get_db
from gestion_entretiens.schemas.entretien import NoteResponse, NoteUpdate
from gestion_entretiens.security import get_current_manager
from gestion_entretiens.services.scoping import owned_note
from gestion_entretiens.utils import message_resp

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(
    note_id: int,
    body: NoteUpdate,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    note = owned_note(db, current["id"], note_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(note, field, value)
    db.commit()
    db.refresh(note)
    return note


@router.delete("/{note_id}")
def delete_note(note_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    note = owned_note(db, current["id"], note_id)
    db.delete(note)
    db.commit()
    return message_resp("Note supprimée avec succès")
