from sqlalchemy.orm import Session

from car_rental.models import Vehicle, VehicleStatus
from .base_repository import BaseRepository

class VehicleRepository(BaseRepository[Vehicle]):
    def get_by_license_plate(self, db: Session, *, license_plate: str) -> Vehicle | None:
        return db.query(Vehicle).filter(Vehicle.license_plate == license_plate).first()

    def get_by_vin(self, db: Session, *, vin: str) -> Vehicle | None:
        return db.query(Vehicle).filter(Vehicle.vin == vin).first()

    def get_by_status(self, db: Session, *, status: VehicleStatus) -> list[Vehicle]:
        return db.query(Vehicle).filter(Vehicle.status == status).order_by(Vehicle.id).all()

    def get_by_vendor_id(self, db: Session, *, vendor_id: int) -> list[Vehicle]:
        return db.query(Vehicle).filter(Vehicle.vendor_id == vendor_id).order_by(Vehicle.id).all()

vehicle_repo = VehicleRepository(Vehicle)
