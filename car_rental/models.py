from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    DateTime,
    Text,
    Enum as SAEnum,
    Numeric,
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func
import enum

Base = declarative_base()

class UserRole(str, enum.Enum):
    RENTER = "RENTER"
    VENDOR = "VENDOR"
    ADMIN = "ADMIN"

class VehicleStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    BOOKED = "BOOKED"
    RENTED = "RENTED"
    MAINTENANCE = "MAINTENANCE"

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(100), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    role = Column(SAEnum(UserRole), nullable=False, default=UserRole.RENTER)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    vehicles = relationship("Vehicle", back_populates="vendor")

class Vehicle(Base):
    __tablename__ = "vehicles"
    id = Column(Integer, primary_key=True, autoincrement=True)
    make = Column(String(50), nullable=False)
    model = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    color = Column(String(30))
    license_plate = Column(String(20), unique=True, nullable=False, index=True)
    vin = Column(String(17), unique=True, nullable=False, index=True)
    price_per_day = Column(Numeric(10, 2), nullable=False)
    fuel_type = Column(String(30))
    transmission = Column(String(30))
    seating_capacity = Column(Integer)
    description = Column(Text)
    image_url = Column(String(512))
    status = Column(SAEnum(VehicleStatus), nullable=False, default=VehicleStatus.AVAILABLE, index=True)
    vendor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    vendor = relationship("User", back_populates="vehicles")
