from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from travel_admin.database import get_db
from travel_admin.dependencies import get_current_actor, valid_traveller_id
from travel_admin.models.actor import Actor
from travel_admin.services.traveller_service import TravellerService
from travel_admin.schemas.common import ErrorResponse
from travel_admin.schemas.traveller_schemas import (
    TravellerCreate,
    TravellerUpdate,
    TravellerEnvelope,
    TravellerMutationEnvelope,
    TravellerListEnvelope,
    TravellerDeleteEnvelope,
)

router = APIRouter()

_errors = {
    400: {"model": ErrorResponse, "description": "Invalid traveller ID or payload"},
    401: {"model": ErrorResponse, "description": "Unauthorized user"},
    500: {"model": ErrorResponse, "description": "Store failure"},
}
_errors_with_404 = {**_errors, 404: {"model": ErrorResponse, "description": "Traveller not found"}}


@router.get("/get-all-travellers", response_model=TravellerListEnvelope, responses=_errors)
def list_travellers(
    is_deleted: bool | None = Query(
        None,
        alias="isDeleted",
        description="true returns only deleted travellers; omitted returns only active ones",
    ),
    owner_id: str | None = Query(None, alias="ownerId", description="Filter by owner reference"),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """
    Get all travellers.

    - Business users see their own business only
    - Super admin sees travellers across all businesses
    - Newest first
    """
    service = TravellerService(db)
    travellers = service.list_records(actor, deleted=is_deleted, owner_id=owner_id)
    return {"success": True, "count": len(travellers), "travellers": travellers}


@router.get(
    "/get-traveller/{traveller_id}", response_model=TravellerEnvelope, responses=_errors_with_404
)
def get_traveller(
    traveller_id: str = Depends(valid_traveller_id),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """Get an active traveller by ID"""
    service = TravellerService(db)
    return {"success": True, "traveller": service.get(traveller_id, actor)}


@router.post(
    "/create-traveller",
    response_model=TravellerMutationEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
)
def create_traveller(
    data: TravellerCreate, actor: Actor = Depends(get_current_actor), db: Session = Depends(get_db)
):
    """
    Create a new traveller.

    - name is required
    - businessId is always taken from the authenticated user, never the body
    """
    service = TravellerService(db)
    traveller = service.create(data, actor)
    return {"success": True, "message": "Traveller created successfully", "traveller": traveller}


@router.put(
    "/update-traveller/{traveller_id}",
    response_model=TravellerMutationEnvelope,
    responses=_errors_with_404,
)
def update_traveller(
    traveller_id: str = Depends(valid_traveller_id),
    data: TravellerUpdate = Body(...),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """Update an active traveller (businessId cannot be changed)"""
    service = TravellerService(db)
    traveller = service.update(traveller_id, data, actor)
    return {"success": True, "message": "Traveller updated successfully", "traveller": traveller}


@router.delete(
    "/delete-traveller/{traveller_id}",
    response_model=TravellerDeleteEnvelope,
    responses=_errors_with_404,
)
def delete_traveller(
    traveller_id: str = Depends(valid_traveller_id),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """Soft delete a traveller (sets isDeleted to true)"""
    service = TravellerService(db)
    traveller = service.soft_delete(traveller_id, actor)
    return {
        "success": True,
        "message": "Traveller deleted successfully",
        "traveller": {"id": traveller.id, "name": traveller.name, "is_deleted": traveller.is_deleted},
    }


@router.patch(
    "/restore-traveller/{traveller_id}",
    response_model=TravellerMutationEnvelope,
    responses=_errors_with_404,
)
def restore_traveller(
    traveller_id: str = Depends(valid_traveller_id),
    actor: Actor = Depends(get_current_actor),
    db: Session = Depends(get_db),
):
    """Restore a soft-deleted traveller (sets isDeleted to false)"""
    service = TravellerService(db)
    traveller = service.restore(traveller_id, actor)
    return {"success": True, "message": "Traveller restored successfully", "traveller": traveller}
