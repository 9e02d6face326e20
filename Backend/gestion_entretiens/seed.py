import logging
from datetime import date

from sqlalchemy.orm import Session

from gestion_entretiens.models.employee_model import Employee
from gestion_entretiens.models.enums import CategorieObjectif, TypeEntretien
from gestion_entretiens.models.manager_model import Manager
from gestion_entretiens.models.objectif_template_model import ObjectifTemplate
from gestion_entretiens.models.template_model import Template
from gestion_entretiens.security import hash_password

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"

SAMPLE_MANAGERS = [
    ("Marie Dubois", "marie.dubois@entreprise.com", "Développement"),
    ("Pierre Martin", "pierre.martin@entreprise.com", "Marketing"),
    ("Sophie Bernard", "sophie.bernard@entreprise.com", "RH"),
]

# (nom, email, poste, date_embauche, index into SAMPLE_MANAGERS)
SAMPLE_EMPLOYEES = [
    ("Jean Dupont", "jean.dupont@entreprise.com", "Développeur Senior", date(2020, 3, 15), 0),
    ("Alice Johnson", "alice.johnson@entreprise.com", "Développeur Junior", date(2022, 1, 10), 0),
    ("Bob Wilson", "bob.wilson@entreprise.com", "Chef de projet Marketing", date(2019, 6, 20), 1),
    ("Emma Davis", "emma.davis@entreprise.com", "Assistante Marketing", date(2021, 11, 5), 1),
    ("Lucas Brown", "lucas.brown@entreprise.com", "Chargé de recrutement", date(2020, 9, 12), 2),
]

SAMPLE_TEMPLATES = [
    {
        "nom": "Entretien Annuel Standard",
        "type": TypeEntretien.ANNUEL,
        "structure": {
            "sections": [
                {"nom": "Bilan de l'année", "questions": [
                    "Quels sont vos principaux accomplissements ?",
                    "Quelles difficultés avez-vous rencontrées ?",
                ]},
                {"nom": "Objectifs futurs", "questions": [
                    "Quels sont vos objectifs pour l'année prochaine ?",
                    "Quelles formations souhaitez-vous suivre ?",
                ]},
                {"nom": "Évaluation", "questions": ["Auto-évaluation", "Points forts", "Axes d'amélioration"]},
            ]
        },
    },
    {
        "nom": "Entretien Bimestriel",
        "type": TypeEntretien.BIMESTRIEL,
        "structure": {
            "sections": [
                {"nom": "Suivi des objectifs", "questions": [
                    "Avancement des projets en cours",
                    "Difficultés rencontrées",
                ]},
                {"nom": "Besoins et support", "questions": [
                    "De quoi avez-vous besoin ?",
                    "Comment puis-je vous aider ?",
                ]},
            ]
        },
    },
]

SAMPLE_OBJECTIFS = [
    ("Améliorer les compétences techniques",
     "Développer et renforcer les compétences techniques dans son domaine", CategorieObjectif.COMPETENCES),
    ("Augmenter la productivité",
     "Optimiser l'organisation et augmenter l'efficacité au travail", CategorieObjectif.PERFORMANCE),
    ("Suivre une formation certifiante",
     "Obtenir une certification professionnelle reconnue", CategorieObjectif.DEVELOPPEMENT),
    ("Mener un projet stratégique",
     "Prendre en charge et finaliser un projet important", CategorieObjectif.PROJETS),
    ("Améliorer la communication",
     "Renforcer les compétences de communication interpersonnelle", CategorieObjectif.COMPORTEMENTAL),
    ("Mentorat d'un junior",
     "Accompagner et former un collaborateur junior", CategorieObjectif.DEVELOPPEMENT),
    ("Optimiser les processus",
     "Identifier et améliorer les processus de travail", CategorieObjectif.PERFORMANCE),
    ("Développer l'autonomie",
     "Gagner en autonomie dans la prise de décision", CategorieObjectif.COMPORTEMENTAL),
]


def create_sample_data(db: Session) -> bool:
    """Seed demo data once; returns False when managers already exist."""
    if db.query(Manager).count() > 0:
        return False

    pwd_hash, salt = hash_password(SAMPLE_PASSWORD)
    managers = [
        Manager(nom=nom, email=email, mot_de_passe_hash=pwd_hash, mot_de_passe_salt=salt, departement=dept)
        for nom, email, dept in SAMPLE_MANAGERS
    ]
    db.add_all(managers)
    db.flush()

    db.add_all([
        Employee(nom=nom, email=email, poste=poste, date_embauche=embauche, manager_id=managers[idx].id)
        for nom, email, poste, embauche, idx in SAMPLE_EMPLOYEES
    ])
    db.add_all([Template(**t) for t in SAMPLE_TEMPLATES])
    db.add_all([
        ObjectifTemplate(titre=titre, description=description, categorie=categorie, est_actif=True)
        for titre, description, categorie in SAMPLE_OBJECTIFS
    ])
    db.commit()

    logger.info(
        f"Sample data created: {len(managers)} managers, {len(SAMPLE_EMPLOYEES)} employees, "
        f"{len(SAMPLE_OBJECTIFS)} objectifs templates (password: {SAMPLE_PASSWORD})"
    )
    return True
