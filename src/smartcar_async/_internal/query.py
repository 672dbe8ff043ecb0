"""Query-string helpers shared by the auth and compatibility endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import quote, urlencode


def format_flag_query(flags: Mapping[str, str]) -> str:
    """Render feature flags as ``key:value`` pairs joined by spaces.

    ``{"country": "DE", "flag": "on"}`` → ``"country:DE flag:on"``
    """
    return " ".join(f"{key}:{value}" for key, value in flags.items())


def encode_query(params: Sequence[tuple[str, str]]) -> str:
    """Percent-encode *params* in order (spaces become ``%20``, never ``+``)."""
    return urlencode(params, quote_via=quote)
