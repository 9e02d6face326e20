from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gestion_entretiens.database import get_db
from gestion_entretiens.models.template_model import Template
from gestion_entretiens.schemas.template import TemplateResponse
from gestion_entretiens.security import get_current_manager

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", response_model=List[TemplateResponse])
def list_templates(current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return db.query(Template).order_by(Template.type.asc(), Template.nom.asc()).all()
