from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from gestion_entretiens.database import Base
from gestion_entretiens.models.enums import TypeEntretien, StatutEntretien, db_enum


class Entretien(Base):
    __tablename__ = "entretiens"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    manager_id = Column(Integer, ForeignKey("managers.id"), nullable=False, index=True)
    template_id = Column(Integer, ForeignKey("templates.id"), nullable=True)

    type = Column(db_enum(TypeEntretien), nullable=False)
    date_prevue = Column(DateTime, nullable=False)
    date_realise = Column(DateTime, nullable=True)
    statut = Column(db_enum(StatutEntretien), nullable=False, default=StatutEntretien.PLANIFIE)
    titre = Column(String(200), nullable=False)
    objectifs = Column(Text, nullable=True)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    employee = relationship("Employee", back_populates="entretiens")
    manager = relationship("Manager", back_populates="entretiens")
    template = relationship("Template")
    notes = relationship("Note", back_populates="entretien", order_by="Note.id")
