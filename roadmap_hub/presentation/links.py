from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlencode


def query_with(preserved: Mapping[str, str] | None, key: str, value: str | None) -> str:
    """Query string carrying ``preserved`` params with ``key`` replaced.

    ``value=None`` drops ``key``; the result is ``""`` when nothing is left.
    """
    params = {name: item for name, item in (preserved or {}).items() if name != key}
    if value is not None:
        params[key] = value
    if not params:
        return ""
    return f"?{urlencode(params)}"
