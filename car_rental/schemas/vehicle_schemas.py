from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from datetime import datetime

from car_rental.models import VehicleStatus

# --- Vehicle Schemas ---

class VehicleCreate(BaseModel):
    """Schema for adding a Vehicle. Updates send the full set of fields too."""
    make: str = Field(..., min_length=1, max_length=50)
    model: str = Field(..., min_length=1, max_length=50)
    year: int = Field(..., ge=1900, le=2100)
    color: Optional[str] = Field(None, max_length=30)
    license_plate: str = Field(..., min_length=1, max_length=20)
    vin: str = Field(..., min_length=1, max_length=17)
    price_per_day: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    fuel_type: Optional[str] = Field(None, max_length=30)
    transmission: Optional[str] = Field(None, max_length=30)
    seating_capacity: Optional[int] = Field(None, ge=1)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=512)

class VehicleUpdate(VehicleCreate):
    """Schema for updating Vehicle. Status is changed through VehicleStatusUpdate."""
    pass

class VehicleStatusUpdate(BaseModel):
    """Free-text status, matched case-insensitively against VehicleStatus."""
    status: str

class VehicleRead(BaseModel):
    """Flat projection of a Vehicle and its owning vendor."""
    id: int
    make: str
    model: str
    year: int
    color: Optional[str]
    license_plate: str
    vin: str
    price_per_day: float
    status: VehicleStatus
    fuel_type: Optional[str]
    transmission: Optional[str]
    seating_capacity: Optional[int]
    description: Optional[str]
    image_url: Optional[str]
    vendor_id: int
    vendor_name: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True

class VehicleDeleteResponse(BaseModel):
    message: str
    deleted: bool
