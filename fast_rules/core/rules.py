from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

FIELD_TOKEN = ":field"


class RuleName(str, Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    IS_NUMERIC = "isNumeric"
    IS_EMAIL = "isEmail"
    ONLY = "only"
    UNIQUE = "unique"
    LINK = "link"

    @classmethod
    def lookup(cls, name: str) -> Optional["RuleName"]:
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class RuleDescriptor:
    raw: str
    name: str
    params: str = ""

    @property
    def rule(self) -> Optional[RuleName]:
        """The known rule, or None when the name is outside the vocabulary."""
        return RuleName.lookup(self.name)

    def param_list(self) -> List[str]:
        return self.params.split(",")


def parse_rule(descriptor: str) -> RuleDescriptor:
    """Split `name:param1,param2` on the first colon."""
    name, _, params = descriptor.partition(":")
    return RuleDescriptor(raw=descriptor, name=name, params=params)


@dataclass(frozen=True)
class RuleOutcome:
    """
    Result of a single rule check.

    `template` starts with FIELD_TOKEN followed by the localized message,
    e.g. `:field is required`. Only that leading token is substituted by
    `render`, so message text that happens to contain `:field` is left alone.
    """

    failed: bool = False
    template: str = ""
    phrase: Optional[str] = None

    @classmethod
    def passed(cls) -> "RuleOutcome":
        return cls()

    @classmethod
    def failure(cls, phrase: str, text: str) -> "RuleOutcome":
        return cls(failed=True, template=f"{FIELD_TOKEN} {text}", phrase=phrase)

    def render(self, display_name: str) -> str:
        if self.template.startswith(FIELD_TOKEN):
            return display_name + self.template[len(FIELD_TOKEN):]
        return self.template
