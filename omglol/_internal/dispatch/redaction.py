"""Redaction of sensitive values before they reach debug output."""

from collections.abc import Mapping

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "cookie",
    "proxy-authorization",
    "set-cookie",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` with credential-bearing values replaced.

    Header names are matched case-insensitively. The input is never mutated.
    """
    result = {}
    for key, value in headers.items():
        if key.lower() in REDACT_HEADERS:
            result[key] = REDACTED_VALUE
        else:
            result[key] = value
    return result


def redact_token(token: str | None) -> str | None:
    """Mask all but the last four characters of an API key."""
    if token is None:
        return None
    if len(token) <= 4:
        return REDACTED_VALUE
    return f"{REDACTED_VALUE}...{token[-4:]}"
