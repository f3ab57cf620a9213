from __future__ import annotations

from typing import Any, Callable, Optional

from bson import ObjectId

from fast_rules import config
from fast_rules.contracts.record_finder import RecordFinder
from fast_rules.database.mongo import get_db
from fast_rules.exceptions import DatabaseNotInitializedException, EnvInvalidException
from fast_rules.utils.serialisation import pascal_case_to_snake_case

_COLLECTION_CASES: dict[str, Callable[[str], str]] = {
    "lower": str.lower,
    "snake": pascal_case_to_snake_case,
    "exact": lambda table: table,
}


def default_collection_name(table: str, case: Optional[str] = None) -> str:
    """
    Model name to collection name following `VALIDATION_COLLECTION_CASE`.

    `lower`: `EmailOTP` -> `emailotp`, `snake`: `EmailOTP` -> `email_otp`, `exact`: unchanged.
    """
    case = case or config.VALIDATION_COLLECTION_CASE
    if case not in _COLLECTION_CASES:
        raise EnvInvalidException("VALIDATION_COLLECTION_CASE", case, list(_COLLECTION_CASES))
    return _COLLECTION_CASES[case](table)


class MongoRecordFinder(RecordFinder):
    """
    `RecordFinder` over the shared Motor database.

    Lookups on `_id` accept the string form of an ObjectId.
    """

    def __init__(self, *, collection_name: Callable[[str], str] = default_collection_name) -> None:
        self.collection_name = collection_name

    async def find_one(self, collection: str, field: str, value: Any) -> Optional[dict[str, Any]]:
        db = await get_db()
        if db is None:
            raise DatabaseNotInitializedException()

        if field == "_id" and isinstance(value, str) and ObjectId.is_valid(value):
            value = ObjectId(value)

        return await db[self.collection_name(collection)].find_one({field: value})
