"""
Application-side evaluation of collection validators.

MongoDB enforces the $jsonSchema validators on every write. This module
evaluates the same subset of keywords in-process so documents can be
rejected before they are sent to the server, with messages that name the
offending field path.

Supported keywords: bsonType, required, properties, items, enum, minimum,
maximum, minLength, pattern.
"""

import re
from datetime import datetime
from typing import Any, Dict, List, Mapping

from bson import ObjectId
from bson.int64 import Int64

from app.core.exceptions import DocumentValidationError
from app.models import get_collection_definition


INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

def _is_long(value: Any) -> bool:
    return isinstance(value, (int, Int64)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    # pymongo encodes Python ints outside the int32 range as int64
    if isinstance(value, (bool, Int64)) or not isinstance(value, int):
        return False
    return INT32_MIN <= value <= INT32_MAX


def _type_name(value: Any) -> str:
    if isinstance(value, Int64) or (_is_long(value) and not _is_int(value)):
        return "long"
    return type(value).__name__


BSON_TYPE_CHECKS = {
    "string": lambda v: isinstance(v, str),
    "int": _is_int,
    "long": _is_long,
    "double": lambda v: isinstance(v, float),
    "bool": lambda v: isinstance(v, bool),
    "date": lambda v: isinstance(v, datetime),
    "objectId": lambda v: isinstance(v, ObjectId),
    "object": lambda v: isinstance(v, Mapping),
    "array": lambda v: isinstance(v, (list, tuple)),
}


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _check(schema: Dict[str, Any], value: Any, path: str, errors: List[str]) -> None:
    bson_type = schema.get("bsonType")
    if bson_type is not None:
        check = BSON_TYPE_CHECKS.get(bson_type)
        if check is None:
            raise ValueError(f"Unsupported bsonType '{bson_type}' at {path or '<root>'}")
        if not check(value):
            errors.append(f"{path or '<root>'}: expected {bson_type}, got {_type_name(value)}")
            # Range and shape keywords are meaningless on the wrong type
            return

    if "enum" in schema and value not in schema["enum"]:
        errors.append(f"{path}: {value!r} is not one of {schema['enum']}")

    if "minimum" in schema and value < schema["minimum"]:
        errors.append(f"{path}: {value!r} is less than minimum {schema['minimum']}")
    if "maximum" in schema and value > schema["maximum"]:
        errors.append(f"{path}: {value!r} is greater than maximum {schema['maximum']}")

    if "minLength" in schema and len(value) < schema["minLength"]:
        errors.append(f"{path}: length {len(value)} is shorter than {schema['minLength']}")
    if "pattern" in schema and not re.search(schema["pattern"], value):
        errors.append(f"{path}: {value!r} does not match pattern {schema['pattern']}")

    if isinstance(value, Mapping):
        for field in schema.get("required", []):
            if field not in value:
                errors.append(f"{_join(path, field)}: required field is missing")
        for field, sub_schema in schema.get("properties", {}).items():
            # Optional fields are only checked when present
            if field in value:
                _check(sub_schema, value[field], _join(path, field), errors)

    if isinstance(value, (list, tuple)) and "items" in schema:
        for position, item in enumerate(value):
            _check(schema["items"], item, f"{path}[{position}]", errors)


def validate_document(collection: str, document: Mapping[str, Any]) -> List[str]:
    """
    Evaluate a document against a collection's validator.

    Args:
        collection: Collection name, e.g. 'vehicles'
        document: The document about to be written

    Returns:
        list: Violations found, empty when the document is valid
    """
    definition = get_collection_definition(collection)
    errors: List[str] = []
    _check(definition.json_schema, document, "", errors)
    return errors


def check_document(collection: str, document: Mapping[str, Any]) -> None:
    """Raise DocumentValidationError if the document violates its collection's validator."""
    errors = validate_document(collection, document)
    if errors:
        raise DocumentValidationError(collection, errors)
