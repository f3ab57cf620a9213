"""
fast_rules - declarative field validation with localized messages.

    from fast_rules import Validator

    validator = Validator(payload, "en", actor=current_user)
    await validator.validate([
        {"field": "email", "rules": ["required", "isEmail", "unique:User,email,_id"]},
        {"field": "profile.website", "rules": ["link"]},
    ])
    if validator.has_errors():
        return validator.errors

Rules: required, optional, isNumeric, isEmail, only, unique, link.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .core import *  # noqa: F401,F403
from .contracts import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
from .app_provider import boot  # noqa: F401
