"""
Security helpers for the admin portal.

The admin portal is protected by HTTP Basic authentication against a
single static credential: the fixed username ``admin`` and the
server-side secret loaded from ``ADMIN_PASSWORD`` at startup.  There
is no user database and no role model; a request is either the
administrator or it is not.

Credentials are compared with ``hmac.compare_digest`` so that the
comparison time does not depend on how much of the secret matched.
"""

import hmac
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from .config import Settings

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"

security = HTTPBasic(auto_error=False)


def _matches(supplied: str, expected: str) -> bool:
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def check_credentials(
    credentials: Optional[HTTPBasicCredentials], settings: Settings
) -> bool:
    """Return True if ``credentials`` match the configured admin account.

    Missing credentials and an unset server secret never match.
    """
    if credentials is None or not settings.admin_password:
        return False
    # Evaluate both comparisons so that a wrong username costs the same
    # as a wrong password.
    user_ok = _matches(credentials.username, ADMIN_USERNAME)
    pass_ok = _matches(credentials.password, settings.admin_password)
    return user_ok and pass_ok


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was built with."""
    return request.app.state.settings


def require_admin(
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> str:
    """Dependency that admits only the administrator.

    Raises HTTP 401 with a ``WWW-Authenticate: Basic`` challenge when
    the credentials are missing or wrong.  On success returns the
    authenticated username.
    """
    if not check_credentials(credentials, settings):
        logger.warning(
            "Denied admin access for user %r",
            credentials.username if credentials else None,
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You do not have the right permission",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
