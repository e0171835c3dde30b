# hookah_backend/app/routers/guest_mixes.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from hookah_backend.app.rules_loader import load_brand_defaults
from hookah_backend.app.schemas import GuestMix, GuestMixIn, LikeIn, LikeOut
from hookah_backend.app.services.data_stores import (
    append_guest_mix,
    delete_guest_mix,
    like_guest_mix,
    list_flavors,
    list_guest_mixes,
    unlike_guest_mix,
)
from hookah_backend.app.services.mix_builder import InvalidMixError, build_guest_mix
from hookah_backend.app.services.moderation import find_banned_words
from hookah_backend.app.utils.admin import require_admin

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/guest-mixes", tags=["guest-mixes"])

@router.get("")
def get_guest_mixes() -> List[Dict[str, Any]]:
    return list_guest_mixes()

# What it does:
# Moderate, validate and store a guest mix. Taste + strength are derived
# server-side from the current catalog.
@router.post("", status_code=status.HTTP_201_CREATED, response_model=GuestMix)
def post_guest_mix(payload: GuestMixIn) -> Dict[str, Any]:
    hits = find_banned_words(payload.title, payload.notes)
    if hits:
        logger.info("guest mix rejected by moderation (%d hit(s))", len(hits))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="banned_words")

    draft = payload.model_dump()
    try:
        record = build_guest_mix(
            draft,
            list_flavors(),
            author=payload.author or payload.userName,
            brand_defaults=load_brand_defaults(),
        )
    except InvalidMixError as e:
        logger.info("guest mix rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return append_guest_mix(record)

@router.delete("/{mix_id}", dependencies=[Depends(require_admin)])
def remove_guest_mix(mix_id: str) -> Dict[str, Any]:
    return {"ok": True, "deleted": delete_guest_mix(mix_id.strip())}

# ---------- likes ----------
@router.post("/{mix_id}/like", response_model=LikeOut)
def like(mix_id: str, body: Optional[LikeIn] = Body(default=None)) -> Dict[str, Any]:
    user_id = (body.userId if body else "anon") or "anon"
    liked, likes = like_guest_mix(mix_id.strip(), user_id)
    return {"ok": True, "liked": liked, "likes": likes}

@router.delete("/{mix_id}/like", response_model=LikeOut)
def unlike(mix_id: str, body: Optional[LikeIn] = Body(default=None)) -> Dict[str, Any]:
    user_id = (body.userId if body else "anon") or "anon"
    _, likes = unlike_guest_mix(mix_id.strip(), user_id)
    return {"ok": True, "liked": False, "likes": likes}
