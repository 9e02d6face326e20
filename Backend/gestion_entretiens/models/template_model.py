from sqlalchemy import Column, Integer, String, JSON, DateTime, func

from gestion_entretiens.database import Base
from gestion_entretiens.models.enums import TypeEntretien, db_enum


class Template(Base):
    """Interview template; structure is {"sections": [{"nom": ..., "questions": [...]}]}."""
    __tablename__ = "templates"

    id = Column(Integer, primary_key=True, index=True)
    nom = Column(String(100), nullable=False)
    type = Column(db_enum(TypeEntretien), nullable=False)
    structure = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
