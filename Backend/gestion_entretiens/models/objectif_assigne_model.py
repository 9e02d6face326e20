from sqlalchemy import Column, Integer, Text, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from gestion_entretiens.database import Base
from gestion_entretiens.models.enums import PrioriteObjectif, StatutObjectif, db_enum

PROGRES_MIN = 0
PROGRES_MAX = 100


def clamp_progres(value) -> int:
    return int(round(min(PROGRES_MAX, max(PROGRES_MIN, value))))


class ObjectifAssigne(Base):
    __tablename__ = "objectifs_assignes"

    id = Column(Integer, primary_key=True, index=True)
    objectif_template_id = Column(Integer, ForeignKey("objectifs_templates.id"), nullable=False)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    # interview during which the goal was set, if any
    entretien_id = Column(Integer, ForeignKey("entretiens.id"), nullable=True, index=True)

    priorite = Column(db_enum(PrioriteObjectif), nullable=False, default=PrioriteObjectif.MOYENNE)
    date_assignation = Column(DateTime, nullable=False, default=func.now())
    date_echeance = Column(Date, nullable=True)
    statut = Column(db_enum(StatutObjectif), nullable=False, default=StatutObjectif.EN_COURS)
    progres = Column(Integer, nullable=False, default=0)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    objectif_template = relationship("ObjectifTemplate")
    employee = relationship("Employee", back_populates="objectifs")
    entretien = relationship("Entretien")
