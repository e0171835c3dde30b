# hookah_backend/app/utils/admin.py
from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, Query, status

from hookah_backend.app.config.manifest import get_admin_key

# What it does:
# Single shared-secret gate for admin routes. With ADMIN_KEY unset every
# caller is treated as admin (dev mode).

def is_admin(header_key: Optional[str], query_key: Optional[str]) -> bool:
    expected = get_admin_key()
    if not expected:
        return True
    return (header_key or query_key or "") == expected

def require_admin(
    x_admin_key: Optional[str] = Header(default=None),
    admin_key: Optional[str] = Query(default=None, alias="adminKey"),
) -> None:
    """FastAPI dependency: 403 unless the caller presents the admin key."""
    if not is_admin(x_admin_key, admin_key):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden")
