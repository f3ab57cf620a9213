from __future__ import annotations

from abc import ABC, abstractmethod


class Localizer(ABC):
    """Contract for message and field name lookup used when building error messages."""

    @abstractmethod
    def message(self, phrase: str, locale: str) -> str:
        """Localized text for a rule phrase such as `is_required`."""
        raise NotImplementedError

    @abstractmethod
    def field_name(self, field: str, locale: str) -> str:
        """Localized display name for a field identifier. Should fall back to `field`."""
        raise NotImplementedError
