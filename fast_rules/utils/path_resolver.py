from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, List


class _Missing:
    """Sentinel for a path that does not resolve to any value."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_TOKEN_RE = re.compile(
    r"""\[(?P<index>-?\d+)\]"""
    r"""|\[(?P<quote>["'])(?P<quoted>.*?)(?P=quote)\]"""
    r"""|(?P<name>[^.\[\]]+)"""
)


def tokenize_path(path: str) -> List[str]:
    """
    Split a field path into its components.

    Supported syntax:
      - a.b.c
      - a[0].b
      - a['key'] / a["key"]
      - a.0.b
    """
    tokens: List[str] = []
    for match in _TOKEN_RE.finditer(path):
        if match.group("index") is not None:
            tokens.append(match.group("index"))
        elif match.group("quote") is not None:
            tokens.append(match.group("quoted"))
        else:
            tokens.append(match.group("name"))
    return tokens


def _step(current: Any, token: str) -> Any:
    if isinstance(current, Mapping):
        if token in current:
            return current[token]
        if token.lstrip("-").isdigit() and int(token) in current:
            return current[int(token)]
        return MISSING
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if not token.isdigit():
            return MISSING
        idx = int(token)
        return current[idx] if idx < len(current) else MISSING
    if current is None or current is MISSING or isinstance(current, (str, bytes)):
        return MISSING
    return getattr(current, token, MISSING)


def get_path(data: Any, path: str, default: Any = MISSING) -> Any:
    """
    Resolve a dotted/bracketed path against nested mappings, sequences or objects.

    A key matching the whole path wins over traversal, so `{"a.b": 1}` resolves
    `a.b` to 1. `None` stored at the path is returned as-is; only unresolvable
    paths yield `default`.
    """
    if isinstance(data, Mapping) and path in data:
        return data[path]

    tokens = tokenize_path(path)
    if not tokens:
        return default

    current = data
    for token in tokens:
        current = _step(current, token)
        if current is MISSING:
            return default
    return current


def field_to_key(path: str) -> str:
    """Flatten a field path into a display key, e.g. `items[0].name` -> `items_0_name`."""
    return "_".join(tokenize_path(path)) or path
