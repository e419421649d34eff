"""
Import all collection definitions from their respective modules.
"""

from typing import Dict

from app.db.base_model import CollectionDefinition

from app.models.user import users
from app.models.agency import agencies
from app.models.vehicle import vehicles
from app.models.reservation import reservations
from app.models.payment import payments
from app.models.review import reviews
from app.models.support_ticket import support_tickets

# Dependency order: later collections reference ids from earlier ones
COLLECTIONS = [
    users,
    agencies,
    vehicles,
    reservations,
    payments,
    reviews,
    support_tickets,
]

COLLECTIONS_BY_NAME: Dict[str, CollectionDefinition] = {c.name: c for c in COLLECTIONS}


def get_collection_definition(name: str) -> CollectionDefinition:
    try:
        return COLLECTIONS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown collection: {name}") from None


# Export all definitions
__all__ = [
    "COLLECTIONS",
    "COLLECTIONS_BY_NAME",
    "get_collection_definition",
    "users",
    "agencies",
    "vehicles",
    "reservations",
    "payments",
    "reviews",
    "support_tickets",
]
