import enum

from sqlalchemy import Enum


class TypeEntretien(str, enum.Enum):
    ANNUEL = "annuel"
    BIMESTRIEL = "bimestriel"


class StatutEntretien(str, enum.Enum):
    PLANIFIE = "planifie"
    EN_PREPARATION = "en_preparation"
    REALISE = "realise"
    REPORTE = "reporte"


class TypeNote(str, enum.Enum):
    PREPARATION = "preparation"
    TEMPS_REEL = "temps_reel"
    CONCLUSION = "conclusion"


class CategorieObjectif(str, enum.Enum):
    COMPETENCES = "competences"
    PERFORMANCE = "performance"
    DEVELOPPEMENT = "developpement"
    PROJETS = "projets"
    COMPORTEMENTAL = "comportemental"
    AUTRE = "autre"


class PrioriteObjectif(str, enum.Enum):
    BASSE = "basse"
    MOYENNE = "moyenne"
    HAUTE = "haute"


class StatutObjectif(str, enum.Enum):
    EN_COURS = "en_cours"
    ATTEINT = "atteint"
    NON_ATTEINT = "non_atteint"
    REPORTE = "reporte"
    ABANDONNE = "abandonne"


def db_enum(enum_cls):
    """Column type storing the enum *value* (e.g. 'planifie') as VARCHAR."""
    return Enum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        length=20,
        validate_strings=True,
    )
