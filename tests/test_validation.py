from datetime import datetime

import pytest
from bson import ObjectId
from bson.int64 import Int64

from app.core.exceptions import DocumentValidationError
from app.db.seed import build_admin_user, build_agency, build_vehicles
from app.db.validation import check_document, validate_document


def vehicle_document(**overrides):
    document = {
        "agencyId": ObjectId(),
        "make": "Toyota",
        "model": "Corolla",
        "year": 2022,
        "category": "compact",
        "pricePerDay": 39.0,
        "status": "available",
    }
    document.update(overrides)
    return document


def review_document(**overrides):
    document = {
        "userId": ObjectId(),
        "targetType": "vehicle",
        "targetId": ObjectId(),
        "rating": 4,
        "status": "pending",
    }
    document.update(overrides)
    return document


def test_seed_documents_are_valid(settings):
    check_document("users", build_admin_user(settings))
    check_document("agencies", build_agency(ObjectId()))
    for vehicle in build_vehicles(ObjectId()):
        check_document("vehicles", vehicle)


def test_vehicle_missing_price_is_rejected():
    document = vehicle_document()
    del document["pricePerDay"]

    with pytest.raises(DocumentValidationError) as excinfo:
        check_document("vehicles", document)

    assert excinfo.value.collection == "vehicles"
    assert any("pricePerDay" in error and "required" in error for error in excinfo.value.errors)


@pytest.mark.parametrize("year", [1989, 2031])
def test_vehicle_year_out_of_range_is_rejected(year):
    errors = validate_document("vehicles", vehicle_document(year=year))
    assert len(errors) == 1
    assert errors[0].startswith("year:")


@pytest.mark.parametrize("year", [1990, 2030])
def test_vehicle_year_bounds_are_inclusive(year):
    assert validate_document("vehicles", vehicle_document(year=year)) == []


def test_vehicle_negative_price_is_rejected():
    errors = validate_document("vehicles", vehicle_document(pricePerDay=-1.0))
    assert errors == ["pricePerDay: -1.0 is less than minimum 0"]


def test_vehicle_free_price_is_accepted():
    assert validate_document("vehicles", vehicle_document(pricePerDay=0.0)) == []


def test_vehicle_integer_price_is_not_a_double():
    errors = validate_document("vehicles", vehicle_document(pricePerDay=45))
    assert errors == ["pricePerDay: expected double, got int"]


def test_vehicle_unknown_category_is_rejected():
    errors = validate_document("vehicles", vehicle_document(category="spaceship"))
    assert len(errors) == 1
    assert "category" in errors[0]


def test_vehicle_features_are_checked_per_element():
    errors = validate_document("vehicles", vehicle_document(features=["GPS", 7]))
    assert errors == ["features[1]: expected string, got int"]


@pytest.mark.parametrize("rating", [0, 6, 4.5])
def test_review_rating_outside_integer_range_is_rejected(rating):
    errors = validate_document("reviews", review_document(rating=rating))
    assert len(errors) == 1
    assert errors[0].startswith("rating:")


@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
def test_review_rating_in_range_is_accepted(rating):
    assert validate_document("reviews", review_document(rating=rating)) == []


def test_review_bool_is_not_an_int():
    errors = validate_document("reviews", review_document(helpfulVotes=True))
    assert errors == ["helpfulVotes: expected int, got bool"]


@pytest.mark.parametrize("email", ["not-an-email", "admin@localhost", "@example.com"])
def test_user_email_must_match_pattern(settings, email):
    document = build_admin_user(settings)
    document["email"] = email
    errors = validate_document("users", document)
    assert len(errors) == 1
    assert errors[0].startswith("email:")


def test_user_password_min_length(settings):
    document = build_admin_user(settings)
    document["password"] = "abc"
    assert validate_document("users", document) == ["password: length 3 is shorter than 6"]


def test_user_unknown_role_is_rejected(settings):
    document = build_admin_user(settings)
    document["role"] = "root"
    assert len(validate_document("users", document)) == 1


def test_user_optional_fields_are_unchecked_when_absent():
    document = {
        "email": "jane@example.com",
        "password": "x" * 20,
        "firstName": "Jane",
        "lastName": "Doe",
        "role": "customer",
    }
    assert validate_document("users", document) == []


def test_agency_nested_address_requirements():
    document = build_agency(ObjectId())
    del document["address"]["city"]
    assert validate_document("agencies", document) == ["address.city: required field is missing"]


def test_agency_rating_range():
    document = build_agency(ObjectId())
    document["rating"] = 5.5
    assert validate_document("agencies", document) == ["rating: 5.5 is greater than maximum 5"]


def test_agency_owner_must_be_object_id():
    document = build_agency(ObjectId())
    document["ownerId"] = str(document["ownerId"])
    assert validate_document("agencies", document) == ["ownerId: expected objectId, got str"]


def test_support_ticket_messages_are_validated_element_wise():
    document = {
        "userId": ObjectId(),
        "subject": "Car not ready",
        "status": "open",
        "priority": "high",
        "messages": [
            {"fromUserId": ObjectId(), "message": "Hello", "timestamp": datetime.utcnow()},
            {"fromUserId": "someone", "message": "Still waiting"},
        ],
    }
    assert validate_document("supportTickets", document) == [
        "messages[1].fromUserId: expected objectId, got str"
    ]


def test_reservation_requires_dates():
    document = {
        "userId": ObjectId(),
        "vehicleId": ObjectId(),
        "agencyId": ObjectId(),
        "startDate": datetime(2024, 6, 1),
        "status": "pending",
        "totalAmount": 90.0,
    }
    assert validate_document("reservations", document) == ["endDate: required field is missing"]


def test_payment_currency_enum():
    document = {
        "reservationId": ObjectId(),
        "userId": ObjectId(),
        "amount": 90.0,
        "currency": "JPY",
        "status": "pending",
        "paymentMethod": "cash",
    }
    errors = validate_document("payments", document)
    assert len(errors) == 1
    assert errors[0].startswith("currency:")


def test_unknown_collection():
    with pytest.raises(KeyError):
        validate_document("cars", {})


def test_int_fields_reject_values_stored_as_64_bit():
    errors = validate_document("vehicles", vehicle_document(mileage=3_000_000_000))
    assert errors == ["mileage: expected int, got long"]


def test_int_fields_reject_int64_instances():
    errors = validate_document("vehicles", vehicle_document(seats=Int64(5)))
    assert errors == ["seats: expected int, got long"]


def test_int32_upper_bound_is_accepted():
    assert validate_document("vehicles", vehicle_document(mileage=2 ** 31 - 1)) == []
