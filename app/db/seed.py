"""
Seed data for a freshly provisioned database.

Inserts, in this order, one super_admin user, one agency owned by that
user, and two vehicles belonging to that agency. Each step needs the id
generated by the previous one, so any failure aborts the rest.
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from pymongo.database import Database

from app.core.config import Settings
from app.core.security import hash_password
from app.db.validation import check_document
from app.schemas.agency import Address, AgencyCreate
from app.schemas.common import Coordinates, GeoLocation
from app.schemas.enums import (
    AgencyStatus,
    FuelType,
    Transmission,
    UserRole,
    VehicleCategory,
    VehicleStatus,
)
from app.schemas.user import UserCreate
from app.schemas.vehicle import VehicleCreate

logger = logging.getLogger(__name__)

SEED_AGENCY_NAME = "Premium Car Rentals"

# Agency street address, New York
SEED_LONGITUDE = -74.0060
SEED_LATITUDE = 40.7128
SEED_ADDRESS = "123 Main Street, New York, NY"

def build_admin_user(settings: Settings) -> Dict[str, Any]:
    return UserCreate(
        email=settings.SEED_ADMIN_EMAIL,
        password=hash_password(settings.SEED_ADMIN_PASSWORD),
        firstName="System",
        lastName="Administrator",
        role=UserRole.SUPER_ADMIN,
        isActive=True,
        emailVerified=True,
    ).to_document()

def build_agency(owner_id: ObjectId) -> Dict[str, Any]:
    return AgencyCreate(
        name=SEED_AGENCY_NAME,
        email="info@premiumcars.com",
        phoneNumber="+1-555-0123",
        address=Address(
            street="123 Main Street",
            city="New York",
            state="NY",
            country="USA",
            zipCode="10001",
            coordinates=Coordinates(longitude=SEED_LONGITUDE, latitude=SEED_LATITUDE),
        ),
        ownerId=owner_id,
        status=AgencyStatus.APPROVED,
        businessLicense="BL123456789",
        description="Premium car rental service with luxury vehicles",
        website="https://premiumcars.com",
        rating=4.5,
        totalReviews=0,
    ).to_document()

def build_vehicles(agency_id: ObjectId) -> List[Dict[str, Any]]:
    location = GeoLocation(coordinates=[SEED_LONGITUDE, SEED_LATITUDE], address=SEED_ADDRESS)
    vehicles = [
        VehicleCreate(
            agencyId=agency_id,
            make="Toyota",
            model="Camry",
            year=2023,
            category=VehicleCategory.MIDSIZE,
            pricePerDay=45.00,
            status=VehicleStatus.AVAILABLE,
            licensePlate="ABC-123",
            vin="1HGBH41JXMN109186",
            color="Silver",
            fuelType=FuelType.GASOLINE,
            transmission=Transmission.AUTOMATIC,
            seats=5,
            mileage=15000,
            features=["Air Conditioning", "Bluetooth", "Backup Camera"],
            location=location,
            rating=4.2,
        ),
        VehicleCreate(
            agencyId=agency_id,
            make="BMW",
            model="X5",
            year=2023,
            category=VehicleCategory.LUXURY,
            pricePerDay=95.00,
            status=VehicleStatus.AVAILABLE,
            licensePlate="XYZ-789",
            vin="5UXCR6C0XL9B12345",
            color="Black",
            fuelType=FuelType.GASOLINE,
            transmission=Transmission.AUTOMATIC,
            seats=7,
            mileage=8000,
            features=["Leather Seats", "Sunroof", "Navigation", "Premium Sound"],
            location=location,
            rating=4.8,
        ),
    ]
    return [vehicle.to_document() for vehicle in vehicles]

def seed_database(db: Database, settings: Settings) -> Dict[str, Any]:
    """
    Insert the seed documents in dependency order.

    Args:
        db: Target database, with validators and indexes already in place
        settings: Provides the admin credentials

    Returns:
        dict: Generated ids (admin_user_id, agency_id, vehicle_ids)
    """
    admin_user = build_admin_user(settings)
    check_document("users", admin_user)
    admin_id = db["users"].insert_one(admin_user).inserted_id
    logger.info(f"Created admin user with ID: {admin_id}")

    agency = build_agency(admin_id)
    check_document("agencies", agency)
    agency_id = db["agencies"].insert_one(agency).inserted_id
    logger.info(f"Created sample agency with ID: {agency_id}")

    vehicles = build_vehicles(agency_id)
    for vehicle in vehicles:
        check_document("vehicles", vehicle)
    vehicle_ids = db["vehicles"].insert_many(vehicles).inserted_ids
    logger.info(f"Created {len(vehicle_ids)} sample vehicles")

    return {
        "admin_user_id": admin_id,
        "agency_id": agency_id,
        "vehicle_ids": list(vehicle_ids),
    }
