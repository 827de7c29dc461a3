from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from fastapi import Header, HTTPException

from booking_engine.core.config import settings


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaffContext:
    name: str


def verify_admin_token(provided: str | None, expected: str | None, env: str) -> bool:
    """Binary admin check; the token itself is issued by the external auth provider."""
    if not expected:
        if env.lower() in {"dev", "local"}:
            logger.warning("ADMIN_API_TOKEN not set; accepting staff requests in dev mode")
            return True
        logger.error("ADMIN_API_TOKEN not configured")
        return False
    if not provided:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def require_staff(
    x_admin_token: str | None = Header(None),
    x_staff_name: str | None = Header(None),
) -> StaffContext:
    if not verify_admin_token(x_admin_token, settings.ADMIN_API_TOKEN, settings.ENV):
        raise HTTPException(status_code=403, detail="Staff access required")
    name = (x_staff_name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="X-Staff-Name header is required")
    return StaffContext(name=name)
