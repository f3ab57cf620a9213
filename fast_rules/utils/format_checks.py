import ipaddress
import re
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter, ValidationError

# validator.js `isNumeric`: optional sign, optional integer part, ASCII digits after an optional dot.
_NUMERIC_RE = re.compile(r"[+-]?([0-9]*\.)?[0-9]+")

_URL_ADAPTER = TypeAdapter(AnyUrl)
_URL_PROTOCOLS = ("http", "https", "ftp")
_URL_MAX_LENGTH = 2083


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == value and value not in (float("inf"), float("-inf"))
    if not isinstance(value, str):
        return False
    return _NUMERIC_RE.fullmatch(value) is not None


def is_email(value: Any) -> bool:
    """Syntax-only email check; no DNS lookups."""
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_ip(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def _has_tld(host: str) -> bool:
    labels = host.rstrip(".").split(".")
    if len(labels) < 2 or not all(labels):
        return False
    tld = labels[-1]
    return (tld.isalpha() and len(tld) >= 2) or tld.startswith("xn--")


def is_url(value: Any) -> bool:
    """
    URL check with validator.js `isURL` defaults.

    The protocol is optional but must be http, https or ftp when given. The host
    must be a domain with a TLD, an IPv4 address or `[ipv6]`. Whitespace is never allowed.
    """
    if not isinstance(value, str) or not value or len(value) >= _URL_MAX_LENGTH:
        return False
    if any(ch.isspace() for ch in value) or value.startswith(("mailto:", "//")):
        return False

    candidate = value if "://" in value else f"http://{value}"
    try:
        url = _URL_ADAPTER.validate_python(candidate)
    except ValidationError:
        return False

    if url.scheme not in _URL_PROTOCOLS or not url.host:
        return False

    host = url.host
    if host.startswith("[") and host.endswith("]"):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            return False
        return True

    return _is_ip(host) or _has_tld(host)
