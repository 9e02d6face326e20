from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, func

from gestion_entretiens.database import Base
from gestion_entretiens.models.enums import CategorieObjectif, db_enum


class ObjectifTemplate(Base):
    """Shared goal catalog entry; est_actif=False is a soft delete."""
    __tablename__ = "objectifs_templates"

    id = Column(Integer, primary_key=True, index=True)
    titre = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    categorie = Column(db_enum(CategorieObjectif), nullable=False)
    est_actif = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
