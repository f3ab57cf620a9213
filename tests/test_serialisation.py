from datetime import datetime, timezone

from bson import ObjectId

from fast_rules.utils.serialisation import pascal_case_to_snake_case, serialise, to_identity


def test_serialise_nested_values():
    oid = ObjectId()
    created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert serialise({"_id": oid, "items": [{"at": created}], "pair": (1, oid)}) == {
        "_id": str(oid),
        "items": [{"at": "2024-01-02T03:04:05+00:00"}],
        "pair": [1, str(oid)],
    }


def test_pascal_case_to_snake_case():
    assert pascal_case_to_snake_case("User") == "user"
    assert pascal_case_to_snake_case("EmailOTP") == "email_otp"
    assert pascal_case_to_snake_case(ObjectId) == "object_id"


def test_to_identity():
    oid = ObjectId()
    assert to_identity(oid) == to_identity(str(oid))
    assert to_identity(None) is None
