import pytest

from car_rental.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    VehicleServiceError,
)
from car_rental.data_access.vehicle_repository import VehicleRepository
from car_rental.models import Vehicle, VehicleStatus
from car_rental.services.vehicle_service import VehicleService, parse_vehicle_status, vehicle_service

from conftest import vehicle_in


def test_add_vehicle_creates_available_vehicle_owned_by_vendor(db, vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    assert created.id is not None
    assert created.status == VehicleStatus.AVAILABLE
    assert created.vendor_id == vendor.id
    assert created.vendor_name == "Victor Vendor"
    assert created.license_plate == "ABC-123"
    assert created.vin == "1HGCM82633A004352"
    assert created.created_at is not None


def test_add_vehicle_unknown_email_is_not_found(db):
    with pytest.raises(NotFoundError, match="Vendor not found"):
        vehicle_service.add_vehicle(db, "ghost@example.com", vehicle_in())


@pytest.mark.parametrize("role_fixture", ["renter", "admin"])
def test_add_vehicle_requires_vendor_role(db, request, role_fixture):
    user = request.getfixturevalue(role_fixture)

    with pytest.raises(ForbiddenError, match="Only vendors can add vehicles"):
        vehicle_service.add_vehicle(db, user.email, vehicle_in())

    assert db.query(Vehicle).count() == 0


def test_add_vehicle_duplicate_plate_conflicts(db, vendor):
    vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ConflictError, match="License plate already exists"):
        vehicle_service.add_vehicle(db, vendor.email, vehicle_in(vin="2T1BURHE0JC074532"))


def test_add_vehicle_duplicate_vin_conflicts(db, vendor, other_vendor):
    vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ConflictError, match="VIN already exists"):
        vehicle_service.add_vehicle(db, other_vendor.email, vehicle_in(license_plate="XYZ-999"))


def test_service_errors_share_one_base():
    for error in (NotFoundError, ForbiddenError, ConflictError, InvalidArgumentError):
        assert issubclass(error, VehicleServiceError)
        assert issubclass(error, ValueError)


def test_database_constraint_reports_conflict(db, vendor):
    class BlindVehicleRepository(VehicleRepository):
        """Never sees existing plates or VINs, as when two writers race."""

        def get_by_license_plate(self, db, *, license_plate):
            return None

        def get_by_vin(self, db, *, vin):
            return None

    racing_service = VehicleService(vehicles=BlindVehicleRepository(Vehicle))
    racing_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ConflictError):
        racing_service.add_vehicle(db, vendor.email, vehicle_in(vin="2T1BURHE0JC074532"))

    assert db.query(Vehicle).count() == 1


def test_update_vehicle_overwrites_fields_and_keeps_status(db, vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())
    vehicle_service.update_vehicle_status(db, vendor.email, created.id, "maintenance")

    updated = vehicle_service.update_vehicle(
        db, vendor.email, created.id, vehicle_in(price_per_day=80.0, color="Black", description=None)
    )

    assert updated.price_per_day == 80.0
    assert updated.color == "Black"
    assert updated.description is None
    assert updated.license_plate == "ABC-123"
    assert updated.vin == "1HGCM82633A004352"
    assert updated.status == VehicleStatus.MAINTENANCE


def test_update_vehicle_with_own_plate_and_vin_does_not_conflict(db, vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    updated = vehicle_service.update_vehicle(db, vendor.email, created.id, vehicle_in(model="Civic"))

    assert updated.model == "Civic"


def test_update_vehicle_to_another_vehicles_plate_conflicts(db, vendor):
    vehicle_service.add_vehicle(db, vendor.email, vehicle_in())
    second = vehicle_service.add_vehicle(
        db, vendor.email, vehicle_in(license_plate="XYZ-999", vin="2T1BURHE0JC074532")
    )

    with pytest.raises(ConflictError, match="License plate already exists"):
        vehicle_service.update_vehicle(
            db, vendor.email, second.id, vehicle_in(vin="2T1BURHE0JC074532")
        )

    with pytest.raises(ConflictError, match="VIN already exists"):
        vehicle_service.update_vehicle(db, vendor.email, second.id, vehicle_in(license_plate="XYZ-999"))


def test_update_vehicle_of_other_vendor_is_forbidden(db, vendor, other_vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ForbiddenError, match="You can only update your own vehicles"):
        vehicle_service.update_vehicle(db, other_vendor.email, created.id, vehicle_in(price_per_day=1.0))


def test_update_missing_vehicle_is_not_found(db, vendor):
    with pytest.raises(NotFoundError, match="Vehicle not found"):
        vehicle_service.update_vehicle(db, vendor.email, 999, vehicle_in())


def test_update_vehicle_by_renter_is_forbidden(db, vendor, renter):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ForbiddenError, match="Only vendors can update vehicles"):
        vehicle_service.update_vehicle(db, renter.email, created.id, vehicle_in())


@pytest.mark.parametrize("operation, message", [
    (lambda db, email, vehicle_id: vehicle_service.update_vehicle(db, email, vehicle_id, vehicle_in(color="Red")),
     "Only vendors can update vehicles"),
    (lambda db, email, vehicle_id: vehicle_service.update_vehicle_status(db, email, vehicle_id, "RENTED"),
     "Only vendors can update vehicle status"),
], ids=["update_vehicle", "update_vehicle_status"])
def test_admin_cannot_update_vehicles(db, vendor, admin, operation, message):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ForbiddenError, match=message):
        operation(db, admin.email, created.id)

    unchanged = vehicle_service.get_vehicle_by_id(db, created.id)
    assert unchanged.color == "Silver"
    assert unchanged.status == VehicleStatus.AVAILABLE


@pytest.mark.parametrize("operation", [
    lambda db, email: vehicle_service.update_vehicle(db, email, 1, vehicle_in()),
    lambda db, email: vehicle_service.update_vehicle_status(db, email, 1, "RENTED"),
    lambda db, email: vehicle_service.get_vendor_vehicles(db, email),
], ids=["update_vehicle", "update_vehicle_status", "get_vendor_vehicles"])
def test_unknown_vendor_is_not_found(db, operation):
    with pytest.raises(NotFoundError, match="Vendor not found"):
        operation(db, "ghost@example.com")


@pytest.mark.parametrize("operation", [
    lambda db, email: vehicle_service.delete_vehicle(db, email, 999),
    lambda db, email: vehicle_service.update_vehicle_status(db, email, 999, "RENTED"),
], ids=["delete_vehicle", "update_vehicle_status"])
def test_missing_vehicle_is_not_found(db, vendor, operation):
    with pytest.raises(NotFoundError, match="Vehicle not found"):
        operation(db, vendor.email)


def test_delete_own_vehicle(db, vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    assert vehicle_service.delete_vehicle(db, vendor.email, created.id) is True

    with pytest.raises(NotFoundError):
        vehicle_service.get_vehicle_by_id(db, created.id)


def test_delete_vehicle_of_other_vendor_is_forbidden(db, vendor, other_vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ForbiddenError, match="You can only delete your own vehicles"):
        vehicle_service.delete_vehicle(db, other_vendor.email, created.id)

    assert vehicle_service.get_vehicle_by_id(db, created.id).id == created.id


def test_admin_deletes_any_vehicle(db, vendor, admin):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    assert vehicle_service.delete_vehicle(db, admin.email, created.id) is True
    assert db.query(Vehicle).count() == 0


def test_renter_cannot_delete(db, vendor, renter):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ForbiddenError, match="Only vendors or admins can delete vehicles"):
        vehicle_service.delete_vehicle(db, renter.email, created.id)


def test_delete_by_unknown_user_is_not_found(db):
    with pytest.raises(NotFoundError, match="User not found"):
        vehicle_service.delete_vehicle(db, "ghost@example.com", 1)


def test_available_vehicles_exclude_other_statuses(db, vendor):
    first = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())
    second = vehicle_service.add_vehicle(
        db, vendor.email, vehicle_in(license_plate="XYZ-999", vin="2T1BURHE0JC074532")
    )
    vehicle_service.update_vehicle_status(db, vendor.email, second.id, "RENTED")

    available = vehicle_service.get_all_available_vehicles(db)

    assert [vehicle.id for vehicle in available] == [first.id]
    assert all(vehicle.status == VehicleStatus.AVAILABLE for vehicle in available)


def test_get_vehicle_by_id_missing_is_not_found(db):
    with pytest.raises(NotFoundError, match="Vehicle not found"):
        vehicle_service.get_vehicle_by_id(db, 42)


def test_vendor_vehicles_lists_only_own_vehicles_in_any_status(db, vendor, other_vendor):
    mine = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())
    vehicle_service.update_vehicle_status(db, vendor.email, mine.id, "BOOKED")
    vehicle_service.add_vehicle(
        db, other_vendor.email, vehicle_in(license_plate="XYZ-999", vin="2T1BURHE0JC074532")
    )

    vehicles = vehicle_service.get_vendor_vehicles(db, vendor.email)

    assert [vehicle.id for vehicle in vehicles] == [mine.id]
    assert vehicles[0].status == VehicleStatus.BOOKED


def test_vendor_vehicles_requires_vendor(db, renter):
    with pytest.raises(ForbiddenError, match="Only vendors can view their vehicles"):
        vehicle_service.get_vendor_vehicles(db, renter.email)


def test_status_parse_is_case_insensitive(db, vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())
    vehicle_service.update_vehicle_status(db, vendor.email, created.id, "rented")

    lower = vehicle_service.update_vehicle_status(db, vendor.email, created.id, "available")
    upper = vehicle_service.update_vehicle_status(db, vendor.email, created.id, "AVAILABLE")

    assert lower.status == upper.status == VehicleStatus.AVAILABLE
    assert lower.model_dump(exclude={"updated_at"}) == upper.model_dump(exclude={"updated_at"})


def test_unknown_status_is_invalid_argument(db, vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(InvalidArgumentError, match="Invalid vehicle status: zzz"):
        vehicle_service.update_vehicle_status(db, vendor.email, created.id, "zzz")

    assert vehicle_service.get_vehicle_by_id(db, created.id).status == VehicleStatus.AVAILABLE


def test_status_change_by_other_vendor_is_forbidden(db, vendor, other_vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    with pytest.raises(ForbiddenError, match="You can only update status of your own vehicles"):
        vehicle_service.update_vehicle_status(db, other_vendor.email, created.id, "MAINTENANCE")


def test_any_status_transition_is_allowed(db, vendor):
    created = vehicle_service.add_vehicle(db, vendor.email, vehicle_in())

    for status in ("RENTED", "AVAILABLE", "MAINTENANCE", "RENTED", "BOOKED"):
        updated = vehicle_service.update_vehicle_status(db, vendor.email, created.id, status)
        assert updated.status == VehicleStatus[status]


@pytest.mark.parametrize("text, expected", [
    ("available", VehicleStatus.AVAILABLE),
    ("Maintenance", VehicleStatus.MAINTENANCE),
    ("BOOKED", VehicleStatus.BOOKED),
])
def test_parse_vehicle_status(text, expected):
    assert parse_vehicle_status(text) == expected


def test_parse_vehicle_status_rejects_values_it_does_not_know():
    with pytest.raises(InvalidArgumentError):
        parse_vehicle_status("")


@pytest.mark.parametrize("text", [" available ", "available\n", "AVAIL ABLE"])
def test_parse_vehicle_status_does_not_trim(text):
    with pytest.raises(InvalidArgumentError, match="Invalid vehicle status"):
        parse_vehicle_status(text)
