import logging
from typing import List

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from car_rental.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from car_rental.data_access import user_repo, vehicle_repo
from car_rental.data_access.user_repository import UserRepository
from car_rental.data_access.vehicle_repository import VehicleRepository
from car_rental.models import User, UserRole, Vehicle, VehicleStatus
from car_rental.schemas.vehicle_schemas import VehicleCreate, VehicleRead, VehicleUpdate

logger = logging.getLogger(__name__)

# Descriptive fields copied from a request onto the entity. Status and owner are
# never taken from the request.
MUTABLE_FIELDS = (
    "make",
    "model",
    "year",
    "color",
    "license_plate",
    "vin",
    "price_per_day",
    "fuel_type",
    "transmission",
    "seating_capacity",
    "description",
    "image_url",
)


def to_vehicle_response(vehicle: Vehicle) -> VehicleRead:
    """Project a Vehicle entity onto the flat response shape."""
    return VehicleRead(
        id=vehicle.id,
        make=vehicle.make,
        model=vehicle.model,
        year=vehicle.year,
        color=vehicle.color,
        license_plate=vehicle.license_plate,
        vin=vehicle.vin,
        price_per_day=float(vehicle.price_per_day),
        status=vehicle.status,
        fuel_type=vehicle.fuel_type,
        transmission=vehicle.transmission,
        seating_capacity=vehicle.seating_capacity,
        description=vehicle.description,
        image_url=vehicle.image_url,
        vendor_id=vehicle.vendor.id,
        vendor_name=vehicle.vendor.name,
        created_at=vehicle.created_at,
        updated_at=vehicle.updated_at,
    )


def parse_vehicle_status(value: str) -> VehicleStatus:
    """Case-insensitive lookup of a VehicleStatus by name."""
    try:
        return VehicleStatus[value.upper()]
    except KeyError:
        raise InvalidArgumentError(f"Invalid vehicle status: {value}")


class VehicleService:
    """
    Vehicle management for vendors and admins, and browsing for renters.
    Holds no state of its own; the stores are injected.
    """

    def __init__(
        self,
        users: UserRepository = user_repo,
        vehicles: VehicleRepository = vehicle_repo,
    ):
        self.users = users
        self.vehicles = vehicles

    # --- Guards ---

    def _resolve_caller(self, db: Session, email: str, not_found: str) -> User:
        user = self.users.get_by_email(db, email=email)
        if user is None:
            raise NotFoundError(not_found)
        return user

    def _require_role(self, user: User, roles: tuple[UserRole, ...], message: str) -> None:
        if user.role not in roles:
            logger.warning(f"Rejected {user.email} ({user.role.value}): {message}")
            raise ForbiddenError(message)

    def _require_owner(self, user: User, vehicle: Vehicle, message: str) -> None:
        if vehicle.vendor_id != user.id:
            logger.warning(f"Rejected {user.email} on vehicle {vehicle.id}: {message}")
            raise ForbiddenError(message)

    def _get_vehicle(self, db: Session, vehicle_id: int) -> Vehicle:
        vehicle = self.vehicles.get(db, id=vehicle_id)
        if vehicle is None:
            raise NotFoundError("Vehicle not found")
        return vehicle

    def _check_unique(self, db: Session, vehicle_in: VehicleCreate, current: Vehicle | None = None) -> None:
        """Reject a plate or VIN already held by a vehicle other than ``current``."""
        if current is None or current.license_plate != vehicle_in.license_plate:
            existing = self.vehicles.get_by_license_plate(db, license_plate=vehicle_in.license_plate)
            if existing is not None and (current is None or existing.id != current.id):
                raise ConflictError("License plate already exists")

        if current is None or current.vin != vehicle_in.vin:
            existing = self.vehicles.get_by_vin(db, vin=vehicle_in.vin)
            if existing is not None and (current is None or existing.id != current.id):
                raise ConflictError("VIN already exists")

    def _save(self, db: Session, vehicle: Vehicle) -> Vehicle:
        # The unique constraints are authoritative when two writers race past _check_unique
        try:
            return self.vehicles.save(db, vehicle)
        except IntegrityError:
            raise ConflictError("License plate or VIN already exists")

    # --- Operations ---

    def add_vehicle(self, db: Session, caller_email: str, vehicle_in: VehicleCreate) -> VehicleRead:
        vendor = self._resolve_caller(db, caller_email, "Vendor not found")
        self._require_role(vendor, (UserRole.VENDOR,), "Only vendors can add vehicles")
        self._check_unique(db, vehicle_in)

        vehicle = Vehicle(**{field: getattr(vehicle_in, field) for field in MUTABLE_FIELDS})
        vehicle.vendor = vendor
        vehicle.status = VehicleStatus.AVAILABLE

        vehicle = self._save(db, vehicle)
        logger.info(f"Vehicle {vehicle.id} ({vehicle.license_plate}) added by {caller_email}")
        return to_vehicle_response(vehicle)

    def update_vehicle(
        self, db: Session, caller_email: str, vehicle_id: int, vehicle_in: VehicleUpdate
    ) -> VehicleRead:
        vendor = self._resolve_caller(db, caller_email, "Vendor not found")
        self._require_role(vendor, (UserRole.VENDOR,), "Only vendors can update vehicles")
        vehicle = self._get_vehicle(db, vehicle_id)
        self._require_owner(vendor, vehicle, "You can only update your own vehicles")
        self._check_unique(db, vehicle_in, current=vehicle)

        for field in MUTABLE_FIELDS:
            setattr(vehicle, field, getattr(vehicle_in, field))

        vehicle = self._save(db, vehicle)
        logger.info(f"Vehicle {vehicle.id} updated by {caller_email}")
        return to_vehicle_response(vehicle)

    def delete_vehicle(self, db: Session, caller_email: str, vehicle_id: int) -> bool:
        user = self._resolve_caller(db, caller_email, "User not found")
        self._require_role(
            user, (UserRole.VENDOR, UserRole.ADMIN), "Only vendors or admins can delete vehicles"
        )
        vehicle = self._get_vehicle(db, vehicle_id)
        # Admins may delete any vehicle
        if user.role == UserRole.VENDOR:
            self._require_owner(user, vehicle, "You can only delete your own vehicles")

        self.vehicles.delete(db, vehicle)
        logger.info(f"Vehicle {vehicle_id} deleted by {caller_email} ({user.role.value})")
        return True

    def get_all_available_vehicles(self, db: Session) -> List[VehicleRead]:
        vehicles = self.vehicles.get_by_status(db, status=VehicleStatus.AVAILABLE)
        return [to_vehicle_response(vehicle) for vehicle in vehicles]

    def get_vehicle_by_id(self, db: Session, vehicle_id: int) -> VehicleRead:
        return to_vehicle_response(self._get_vehicle(db, vehicle_id))

    def get_vendor_vehicles(self, db: Session, caller_email: str) -> List[VehicleRead]:
        vendor = self._resolve_caller(db, caller_email, "Vendor not found")
        self._require_role(vendor, (UserRole.VENDOR,), "Only vendors can view their vehicles")
        vehicles = self.vehicles.get_by_vendor_id(db, vendor_id=vendor.id)
        return [to_vehicle_response(vehicle) for vehicle in vehicles]

    def update_vehicle_status(
        self, db: Session, caller_email: str, vehicle_id: int, new_status: str
    ) -> VehicleRead:
        vendor = self._resolve_caller(db, caller_email, "Vendor not found")
        self._require_role(vendor, (UserRole.VENDOR,), "Only vendors can update vehicle status")
        vehicle = self._get_vehicle(db, vehicle_id)
        self._require_owner(vendor, vehicle, "You can only update status of your own vehicles")

        # Any transition is allowed
        vehicle.status = parse_vehicle_status(new_status)

        vehicle = self._save(db, vehicle)
        logger.info(f"Vehicle {vehicle.id} status set to {vehicle.status.value} by {caller_email}")
        return to_vehicle_response(vehicle)


vehicle_service = VehicleService()
