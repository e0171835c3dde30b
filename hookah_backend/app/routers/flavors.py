# hookah_backend/app/routers/flavors.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from hookah_backend.app.schemas import FlavorIn, FlavorPatch
from hookah_backend.app.services.data_stores import (
    FlavorExistsError,
    create_flavor,
    delete_flavor,
    get_flavor,
    list_flavors,
    update_flavor,
)
from hookah_backend.app.utils.admin import require_admin

router = APIRouter(prefix="/flavors", tags=["flavors"])

# What it does:
# List the catalog, optionally filtered by ?q= (brand/name/tags substring).
@router.get("")
def get_flavors(q: Optional[str] = None) -> List[Dict[str, Any]]:
    return list_flavors(q)

@router.get("/{flavor_id}")
def get_one_flavor(flavor_id: str) -> Dict[str, Any]:
    try:
        return get_flavor(flavor_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not_found")

# What it does:
# Add a flavor to the catalog (admin).
@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
def post_flavor(payload: FlavorIn) -> Dict[str, Any]:
    try:
        flavor = create_flavor(payload.model_dump(exclude_none=True))
    except FlavorExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"ok": True, "flavor": flavor}

# What it does:
# Patch brand/name/description/tags/strength10 of one flavor (admin).
@router.put("/{flavor_id}", dependencies=[Depends(require_admin)])
def put_flavor(flavor_id: str, patch: FlavorPatch) -> Dict[str, Any]:
    try:
        flavor = update_flavor(flavor_id, patch.model_dump(exclude_unset=True))
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not_found")
    return {"ok": True, "flavor": flavor}

# What it does:
# Remove a flavor by id (admin). Missing ids are reported, not errors.
@router.delete("/{flavor_id}", dependencies=[Depends(require_admin)])
def remove_flavor(flavor_id: str) -> Dict[str, Any]:
    return {"ok": True, "deleted": delete_flavor(flavor_id)}
