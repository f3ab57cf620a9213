"""Helpers shared by the validator core: path resolution, format checks and environment setup."""

from .format_checks import is_email, is_numeric, is_url
from .path_resolver import MISSING, field_to_key, get_path, tokenize_path
from .serialisation import pascal_case_to_snake_case, serialise, to_identity

__all__ = [
    "MISSING",
    "field_to_key",
    "get_path",
    "tokenize_path",
    "is_email",
    "is_numeric",
    "is_url",
    "pascal_case_to_snake_case",
    "serialise",
    "to_identity",
]
