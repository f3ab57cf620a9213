"""Contract classes and abstract interfaces.

Exported so they can be imported directly from :mod:`fast_rules`.
"""

from .field_spec import FieldSpec
from .localizer import Localizer
from .record_finder import RecordFinder

__all__ = [
    "FieldSpec",
    "Localizer",
    "RecordFinder",
]
