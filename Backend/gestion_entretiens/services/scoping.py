"""
Lookups re-scoped to the calling manager.

Every helper filters on manager_id (directly, or through the owning
employee / interview) and raises NotFound when nothing matches, whether the
row is missing or belongs to someone else.
"""
from sqlalchemy.orm import Session

from gestion_entretiens.errors import NotFound
from gestion_entretiens.models.employee_model import Employee
from gestion_entretiens.models.entretien_model import Entretien
from gestion_entretiens.models.note_model import Note
from gestion_entretiens.models.objectif_assigne_model import ObjectifAssigne


def owned_employee(db: Session, manager_id: int, employee_id: int) -> Employee:
    employee = (
        db.query(Employee)
        .filter(Employee.id == employee_id, Employee.manager_id == manager_id)
        .first()
    )
    if employee is None:
        raise NotFound("Employé non trouvé")
    return employee


def owned_entretien(db: Session, manager_id: int, entretien_id: int) -> Entretien:
    entretien = (
        db.query(Entretien)
        .filter(Entretien.id == entretien_id, Entretien.manager_id == manager_id)
        .first()
    )
    if entretien is None:
        raise NotFound("Entretien non trouvé")
    return entretien


def owned_note(db: Session, manager_id: int, note_id: int) -> Note:
    note = (
        db.query(Note)
        .join(Entretien, Note.entretien_id == Entretien.id)
        .filter(Note.id == note_id, Entretien.manager_id == manager_id)
        .first()
    )
    if note is None:
        raise NotFound("Note non trouvée")
    return note


def owned_assignation(db: Session, manager_id: int, assignation_id: int) -> ObjectifAssigne:
    assignation = (
        db.query(ObjectifAssigne)
        .join(Employee, ObjectifAssigne.employee_id == Employee.id)
        .filter(ObjectifAssigne.id == assignation_id, Employee.manager_id == manager_id)
        .first()
    )
    if assignation is None:
        raise NotFound("Assignation non trouvée")
    return assignation


def delete_entretien_cascade(db: Session, entretien: Entretien):
    """Notes go with the interview; goals set during it stay with the employee, detached."""
    db.query(Note).filter(Note.entretien_id == entretien.id).delete(synchronize_session=False)
    db.query(ObjectifAssigne).filter(ObjectifAssigne.entretien_id == entretien.id).update(
        {ObjectifAssigne.entretien_id: None}, synchronize_session=False
    )
    db.delete(entretien)


def delete_employee_cascade(db: Session, employee: Employee):
    """Removes the employee's goal assignments and interviews (with their notes)."""
    db.query(ObjectifAssigne).filter(ObjectifAssigne.employee_id == employee.id).delete(
        synchronize_session=False
    )
    entretiens = db.query(Entretien).filter(Entretien.employee_id == employee.id).all()
    for entretien in entretiens:
        delete_entretien_cascade(db, entretien)
    db.flush()
    db.delete(employee)
