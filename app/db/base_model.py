from typing import Any, Dict, List, Tuple, Union
from pydantic import BaseModel, Field
from pymongo import ASCENDING, DESCENDING, GEOSPHERE, TEXT

# Direction values a planned index key may carry
IndexDirection = Union[int, str]

BTREE_DIRECTIONS = (ASCENDING, DESCENDING)

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

class IndexSpec(BaseModel):
    """A single planned index: ordered keys plus options."""
    keys: List[Tuple[str, IndexDirection]] = Field(..., description="Ordered (field, direction) pairs")
    unique: bool = Field(False, description="Reject duplicate key values")

    @property
    def fields(self) -> List[str]:
        return [field for field, _ in self.keys]

    @property
    def is_btree(self) -> bool:
        """True for plain ascending/descending indexes (no geo or text keys)."""
        return all(direction in BTREE_DIRECTIONS for _, direction in self.keys)

    @property
    def kind(self) -> str:
        directions = {direction for _, direction in self.keys}
        if GEOSPHERE in directions:
            return "2dsphere"
        if TEXT in directions:
            return "text"
        if len(self.keys) > 1:
            return "compound"
        return "unique" if self.unique else "single"

    def create_kwargs(self) -> Dict[str, Any]:
        return {"unique": True} if self.unique else {}


class CollectionDefinition(BaseModel):
    """
    Storage contract for one MongoDB collection.

    Holds the $jsonSchema validator attached at creation time and the
    indexes describing the collection's access patterns.
    """
    name: str = Field(..., description="Collection name")
    json_schema: Dict[str, Any] = Field(..., description="$jsonSchema document")
    indexes: List[IndexSpec] = Field(default_factory=list)

    @property
    def validator(self) -> Dict[str, Any]:
        return {"$jsonSchema": self.json_schema}

    def __repr__(self):
        return f"<CollectionDefinition {self.name}>"


def timestamp_properties() -> Dict[str, Dict[str, str]]:
    """createdAt/updatedAt properties shared by every collection."""
    return {
        "createdAt": {"bsonType": "date"},
        "updatedAt": {"bsonType": "date"},
    }


def index(*keys: Tuple[str, IndexDirection], unique: bool = False) -> IndexSpec:
    return IndexSpec(keys=list(keys), unique=unique)
