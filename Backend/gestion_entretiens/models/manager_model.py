from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship

from gestion_entretiens.database import Base


class Manager(Base):
    __tablename__ = "managers"

    id = Column(Integer, primary_key=True, index=True)
    nom = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)

    # Stored credentials
    mot_de_passe_hash = Column(String(255), nullable=False)
    mot_de_passe_salt = Column(String(64), nullable=False)

    departement = Column(String(100), nullable=True)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    employees = relationship("Employee", back_populates="manager")
    entretiens = relationship("Entretien", back_populates="manager")
