import logging
from typing import Dict, Iterable, List, Optional, Sequence

from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.db.base_model import IndexSpec
from app.models import COLLECTIONS, get_collection_definition

logger = logging.getLogger(__name__)

def create_indexes(db: Database, collections: Optional[Iterable[str]] = None) -> Dict[str, List[str]]:
    """
    Create the planned indexes.

    Args:
        db: Target database
        collections: Restrict to these collection names (default: all)

    Returns:
        dict: Created index names per collection
    """
    selected = set(collections) if collections is not None else None
    created: Dict[str, List[str]] = {}
    try:
        for definition in COLLECTIONS:
            if selected is not None and definition.name not in selected:
                continue
            names = []
            for spec in definition.indexes:
                names.append(db[definition.name].create_index(spec.keys, **spec.create_kwargs()))
            created[definition.name] = names
            logger.info(f"Created {len(names)} indexes on {definition.name}")
    except PyMongoError as e:
        logger.error(f"Error creating indexes: {e}")
        raise
    return created

def find_supporting_index(
    collection: str,
    equality_fields: Sequence[str],
    range_fields: Sequence[str] = (),
) -> Optional[IndexSpec]:
    """
    Find the planned index able to serve a query without a collection scan.

    The equality fields must form the leading keys of the index, immediately
    followed by the range fields (order within each group is free). Geo and text indexes
    are never chosen. When several indexes qualify the one with the fewest
    keys wins.

    Args:
        collection: Collection name
        equality_fields: Fields filtered by equality
        range_fields: Fields filtered by range

    Returns:
        IndexSpec or None when no planned index serves the query
    """
    definition = get_collection_definition(collection)
    equality = set(equality_fields)
    width = len(equality) + len(range_fields)
    if width == 0:
        return None

    candidates = []
    for spec in definition.indexes:
        if not spec.is_btree or len(spec.keys) < width:
            continue
        prefix = spec.fields[:width]
        if set(prefix[:len(equality)]) != equality:
            continue
        if set(prefix[len(equality):]) != set(range_fields):
            continue
        candidates.append(spec)

    if not candidates:
        return None
    return min(candidates, key=lambda spec: len(spec.keys))
