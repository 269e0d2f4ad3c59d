from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from car_rental import schemas
from car_rental.api import dependencies
from car_rental.db.session import get_db
from car_rental.services.vehicle_service import vehicle_service
from car_rental.core.cache_decorator import cache_vehicle, invalidate_vehicle_cache

router = APIRouter()

@router.get("/", response_model=List[schemas.vehicle_schemas.VehicleRead])
async def get_available_vehicles(
    *,
    db: Session = Depends(get_db),
):
    """
    List every vehicle that is currently available to rent.
    """
    return vehicle_service.get_all_available_vehicles(db)

@router.get("/vendor/me", response_model=List[schemas.vehicle_schemas.VehicleRead])
async def get_my_vehicles(
    *,
    db: Session = Depends(get_db),
    caller_email: str = Depends(dependencies.get_active_caller_email),
):
    """
    List the calling vendor's own vehicles, whatever their status.
    """
    return vehicle_service.get_vendor_vehicles(db, caller_email)

@router.get("/{vehicle_id}", response_model=schemas.vehicle_schemas.VehicleRead)
@cache_vehicle()
async def get_vehicle_by_id(
    *,
    db: Session = Depends(get_db),
    vehicle_id: int,
):
    """
    Get a specific vehicle by ID.
    """
    return vehicle_service.get_vehicle_by_id(db, vehicle_id)

@router.post("/", response_model=schemas.vehicle_schemas.VehicleRead, status_code=status.HTTP_201_CREATED)
async def add_vehicle(
    *,
    db: Session = Depends(get_db),
    caller_email: str = Depends(dependencies.get_active_caller_email),
    vehicle_in: schemas.vehicle_schemas.VehicleCreate,
):
    """
    Add a vehicle to the calling vendor's fleet. New vehicles start AVAILABLE.
    """
    return vehicle_service.add_vehicle(db, caller_email, vehicle_in)

@router.put("/{vehicle_id}", response_model=schemas.vehicle_schemas.VehicleRead)
async def update_vehicle(
    *,
    db: Session = Depends(get_db),
    caller_email: str = Depends(dependencies.get_active_caller_email),
    vehicle_id: int,
    vehicle_update: schemas.vehicle_schemas.VehicleUpdate,
):
    """
    Replace the descriptive fields of one of the caller's vehicles.
    """
    updated_vehicle = vehicle_service.update_vehicle(db, caller_email, vehicle_id, vehicle_update)
    await invalidate_vehicle_cache(vehicle_id)
    return updated_vehicle

@router.patch("/{vehicle_id}/status", response_model=schemas.vehicle_schemas.VehicleRead)
async def update_vehicle_status(
    *,
    db: Session = Depends(get_db),
    caller_email: str = Depends(dependencies.get_active_caller_email),
    vehicle_id: int,
    status_update: schemas.vehicle_schemas.VehicleStatusUpdate,
):
    """
    Change the status of one of the caller's vehicles.
    """
    updated_vehicle = vehicle_service.update_vehicle_status(db, caller_email, vehicle_id, status_update.status)
    await invalidate_vehicle_cache(vehicle_id)
    return updated_vehicle

@router.delete("/{vehicle_id}", response_model=schemas.vehicle_schemas.VehicleDeleteResponse)
async def delete_vehicle(
    *,
    db: Session = Depends(get_db),
    caller_email: str = Depends(dependencies.get_active_caller_email),
    vehicle_id: int,
):
    """
    Delete a vehicle. Vendors may delete their own vehicles, admins any vehicle.
    """
    deleted = vehicle_service.delete_vehicle(db, caller_email, vehicle_id)
    await invalidate_vehicle_cache(vehicle_id)
    return {"message": "Vehicle deleted successfully", "deleted": deleted}
