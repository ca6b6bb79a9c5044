"""Shared-secret check for the admin endpoints."""

import hmac
import logging
from typing import Optional

from fastapi import Depends, Header

from ai_band_registry.config.settings import Settings, get_settings
from ai_band_registry.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def is_authorized(authorization: Optional[str], admin_token: Optional[str]) -> bool:
    """
    Check an ``Authorization`` header against the configured admin token.

    The comparison is constant-time. An unset or empty token never authorizes.
    """
    if not admin_token or not authorization:
        return False
    expected = f"{BEARER_PREFIX}{admin_token}"
    return hmac.compare_digest(authorization.encode("utf-8"), expected.encode("utf-8"))


async def require_admin(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency that rejects the request unless it carries the admin bearer token."""
    if not is_authorized(authorization, settings.ADMIN_TOKEN):
        logger.warning("Rejected admin request with missing or invalid credentials")
        raise UnauthorizedError("Unauthorized")
