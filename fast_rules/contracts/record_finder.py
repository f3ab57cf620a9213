from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class RecordFinder(ABC):
    """
    Contract for the record lookup behind the `unique` rule.

    Errors raised by implementations are not caught by the validator.
    """

    @abstractmethod
    async def find_one(self, collection: str, field: str, value: Any) -> Optional[dict[str, Any]]:
        """
        Return one record where `field == value`, or None.

        Args:
            collection: Table/model name as written in the rule, e.g. `User`.
            field: Column to match on.
            value: Value under validation.
        """
        raise NotImplementedError
