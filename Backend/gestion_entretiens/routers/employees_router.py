import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gestion_entretiens.database import get_db
from gestion_entretiens.models.employee_model import Employee
from gestion_entretiens.models.objectif_assigne_model import ObjectifAssigne
from gestion_entretiens.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from gestion_entretiens.schemas.objectif import ObjectifAssigneResponse
from gestion_entretiens.security import get_current_manager
from gestion_entretiens.services.scoping import delete_employee_cascade, owned_employee
from gestion_entretiens.utils import message_resp

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=List[EmployeeResponse])
def list_employees(current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return (
        db.query(Employee)
        .filter(Employee.manager_id == current["id"])
        .order_by(Employee.nom.asc())
        .all()
    )


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    return owned_employee(db, current["id"], employee_id)


@router.post("", response_model=EmployeeResponse, status_code=201)
def create_employee(body: EmployeeCreate, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    employee = Employee(**body.model_dump(), manager_id=current["id"])
    db.add(employee)
    db.commit()
    db.refresh(employee)
    logger.info(f"Manager {current['id']} created employee {employee.id}")
    return employee


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    body: EmployeeUpdate,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    employee = owned_employee(db, current["id"], employee_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(employee, field, value)
    db.commit()
    db.refresh(employee)
    return employee


@router.delete("/{employee_id}")
def delete_employee(employee_id: int, current: dict = Depends(get_current_manager), db: Session = Depends(get_db)):
    employee = owned_employee(db, current["id"], employee_id)
    delete_employee_cascade(db, employee)
    db.commit()
    logger.info(f"Manager {current['id']} deleted employee {employee_id}")
    return message_resp("Employé supprimé avec succès")


@router.get("/{employee_id}/objectifs", response_model=List[ObjectifAssigneResponse])
def list_employee_objectifs(
    employee_id: int,
    current: dict = Depends(get_current_manager),
    db: Session = Depends(get_db),
):
    owned_employee(db, current["id"], employee_id)
    return (
        db.query(ObjectifAssigne)
        .filter(ObjectifAssigne.employee_id == employee_id)
        .order_by(ObjectifAssigne.date_assignation.desc(), ObjectifAssigne.id.desc())
        .all()
    )
