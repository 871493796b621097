from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from travel_admin.database import get_db
from travel_admin.dependencies import get_current_actor, valid_bank_id
from travel_admin.models.actor import Actor
from travel_admin.services.bank_service import BankService
from travel_admin.schemas.common import ErrorResponse, MessageResponse
from travel_admin.schemas.bank_schemas import (
    BankCreate,
    BankUpdate,
    BankEnvelope,
    BankListEnvelope,
)

router = APIRouter()

_errors = {
    400: {"model": ErrorResponse, "description": "Invalid bank ID or payload"},
    401: {"model": ErrorResponse, "description": "Unauthorized user"},
    500: {"model": ErrorResponse, "description": "Store failure"},
}
_errors_with_404 = {**_errors, 404: {"model": ErrorResponse, "description": "Bank not found"}}


@router.get("/get-all-banks", response_model=BankListEnvelope, responses=_errors)
def list_banks(
    is_deleted: bool | None = Query(
        None,
        alias="isDeleted",
        description="true returns only deleted banks; omitted returns only active ones",
    ),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """Retrieve all banks for the business (super admin sees all businesses)"""
    service = BankService(db)
    return {"banks": service.list_records(actor, deleted=is_deleted)}


@router.get("/get-bank/{bank_id}", response_model=BankEnvelope, responses=_errors_with_404)
def get_bank(
    bank_id: str = Depends(valid_bank_id),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """Retrieve a specific active bank by ID"""
    service = BankService(db)
    return {"bank": service.get(bank_id, actor)}


@router.post(
    "/create-bank",
    response_model=BankEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
)
def create_bank(
    data: BankCreate, actor: Actor = Depends(get_current_actor), db: Session = Depends(get_db)
):
    """
    Create a new bank account for the caller's business.

    - businessId is always taken from the authenticated user, never the body
    """
    service = BankService(db)
    return {"bank": service.create(data, actor)}


@router.put("/update-bank/{bank_id}", response_model=BankEnvelope, responses=_errors_with_404)
def update_bank(
    bank_id: str = Depends(valid_bank_id),
    data: BankUpdate = Body(...),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """Update an existing bank by ID (businessId cannot be changed)"""
    service = BankService(db)
    return {"bank": service.update(bank_id, data, actor)}


@router.delete("/delete-bank/{bank_id}", response_model=MessageResponse, responses=_errors_with_404)
def delete_bank(
    bank_id: str = Depends(valid_bank_id),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """Soft delete a bank by ID"""
    service = BankService(db)
    service.soft_delete(bank_id, actor)
    return {"message": "Bank deleted"}
