from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from gestion_entretiens.database import Base
from gestion_entretiens.models.enums import TypeNote, db_enum


class Note(Base):
    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    entretien_id = Column(Integer, ForeignKey("entretiens.id"), nullable=False, index=True)
    # template section label, e.g. "Objectifs futurs"
    section = Column(String(100), nullable=False)
    contenu = Column(Text, nullable=False)
    type = Column(db_enum(TypeNote), nullable=False, default=TypeNote.PREPARATION)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    entretien = relationship("Entretien", back_populates="notes")
