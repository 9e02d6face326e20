from sqlalchemy import Column, Integer, String, Boolean, DateTime, func

from gestion_entretiens.database import Base


class VerificationCode(Base):
    """Pending signup: holds the candidate account until its code is verified."""
    __tablename__ = "verification_codes"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(100), nullable=False, index=True)
    code = Column(String(6), nullable=False)
    nom = Column(String(100), nullable=False)
    mot_de_passe_hash = Column(String(255), nullable=False)
    mot_de_passe_salt = Column(String(64), nullable=False)
    departement = Column(String(100), nullable=True)
    expires_at = Column(DateTime, nullable=False)
    verified = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=func.now())
