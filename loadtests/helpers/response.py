"""Response error extraction for load test observability.

Parses Storefront API error responses into human-readable messages.
Every error body has the shape {"message": "...", "error": ...} where
`error` is optional and may be a string, a dict, or a list of
request-validation entries ({"loc": [...], "msg": "...", "type": "..."}).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON, return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    message = str(body.get("message", ""))
    error = body.get("error")

    if isinstance(error, list):
        parts = []
        for err in error:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        detail = " | ".join(parts)
    elif isinstance(error, dict):
        detail = " | ".join(f"{k}: {v}" for k, v in error.items())
    elif error is not None:
        detail = str(error)
    else:
        detail = ""

    if message and detail:
        return f"{message} ({detail})"
    return message or detail or str(body)[:300]
