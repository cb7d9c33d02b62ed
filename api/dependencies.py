import hmac
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from api.config import Settings
from database.repository import LeagueRepository


def get_repository(request: Request) -> LeagueRepository:
    """FastAPI dependency that provides the active LeagueRepository."""
    return request.app.state.repository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_admin_key(
    x_admin_key: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Guard for score edits: 503 when editing is unconfigured, 401 on a bad key."""
    if not settings.admin_editing_enabled:
        raise HTTPException(
            503, "Admin editing is disabled. Configure ADMIN_EDIT_KEY to enable it."
        )
    if not x_admin_key or not hmac.compare_digest(
        x_admin_key.encode(), settings.admin_edit_key.encode()
    ):
        raise HTTPException(401, "Unauthorized")
