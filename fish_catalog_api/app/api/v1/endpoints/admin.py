"""
Admin portal endpoint.

A single page guarded by HTTP Basic authentication (see
``core.security.require_admin``).  It has no access to the fish store.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from fish_catalog_api.app.core.security import require_admin

router = APIRouter()

ADMIN_PAGE = "<html><h1>Super secret admin portal </h1></html>"


@router.get("", response_class=HTMLResponse)
def admin_portal(username: str = Depends(require_admin)) -> str:
    return ADMIN_PAGE
