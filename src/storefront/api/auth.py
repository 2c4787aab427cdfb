"""Request-scoped customer identity.

Authentication happens upstream; the gateway forwards the resolved customer id
in the X-User-Id header and this service trusts it.
"""

import structlog
from fastapi import Header, HTTPException


def current_customer_id(x_user_id: str | None = Header(default=None)) -> str:
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Authentication required")

    customer_id = x_user_id.strip()
    structlog.contextvars.bind_contextvars(customer_id=customer_id)
    return customer_id
