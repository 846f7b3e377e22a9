from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import List, Optional

from ...schemas.automobile_schema import (
    Automobile,
    AutomobileCreate,
    AutomobileUpdate,
    DeleteConfirmation,
    ErrorResponse,
)
from ...services.automobile_service import (
    AutomobileService,
    get_automobile_service,
    store_error_message,
)

router = APIRouter(responses={500: {"model": ErrorResponse, "description": "Store error"}})


def error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": store_error_message(exc)})


@router.get("", response_model=List[Automobile], summary="Get all automobiles")
def list_automobiles(service: AutomobileService = Depends(get_automobile_service)):
    """Return every automobile in the store. The list is not paginated."""
    try:
        return service.list_all()
    except Exception as e:
        return error_response(e)


@router.get("/{automobile_id}", response_model=Optional[Automobile], summary="Get an automobile by ID")
def read_automobile(automobile_id: int, service: AutomobileService = Depends(get_automobile_service)):
    """Return one automobile, or null when the id does not exist"""
    try:
        return service.get_by_id(automobile_id)
    except Exception as e:
        return error_response(e)


@router.post("", response_model=Automobile, status_code=201, summary="Add a new automobile")
def create_automobile(
    automobile: AutomobileCreate,
    service: AutomobileService = Depends(get_automobile_service)
):
    try:
        return service.create(**automobile.model_dump())
    except Exception as e:
        return error_response(e)


@router.put("/{automobile_id}", response_model=Optional[Automobile], summary="Update an existing automobile")
def update_automobile(
    automobile_id: int,
    automobile: AutomobileUpdate,
    service: AutomobileService = Depends(get_automobile_service)
):
    """
    Replace all fields of an automobile. Fields left out of the body are
    stored as null. Returns null when the id does not exist.
    """
    try:
        return service.update(automobile_id, **automobile.model_dump())
    except Exception as e:
        return error_response(e)


@router.delete("/{automobile_id}", response_model=DeleteConfirmation, summary="Delete an automobile")
def delete_automobile(automobile_id: int, service: AutomobileService = Depends(get_automobile_service)):
    """Delete an automobile. Succeeds whether or not the id exists."""
    try:
        return {"message": service.delete_by_id(automobile_id)}
    except Exception as e:
        return error_response(e)
