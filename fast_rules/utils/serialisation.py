import re
from datetime import datetime
from typing import Any

from bson import ObjectId


def serialise(val):
    if isinstance(val, ObjectId):
        return str(val)
    if isinstance(val, datetime):
        return val.isoformat()
    elif isinstance(val, (list, tuple)):
        return [serialise(item) for item in val]
    elif isinstance(val, dict):
        return {key: serialise(value) for key, value in val.items()}

    return val


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def to_identity(value: Any) -> Any:
    """
    Normalise a record identity for comparison.

    ObjectIds and strings compare by their string form; other values are left alone
    so that a missing identity never equals an existing one.
    """
    if isinstance(value, (ObjectId, str)):
        return str(value)
    return value
