from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from gestion_entretiens.database import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    nom = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False)
    poste = Column(String(100), nullable=False)
    date_embauche = Column(Date, nullable=False)
    manager_id = Column(Integer, ForeignKey("managers.id"), nullable=False, index=True)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    manager = relationship("Manager", back_populates="employees")
    entretiens = relationship("Entretien", back_populates="employee")
    objectifs = relationship("ObjectifAssigne", back_populates="employee")
