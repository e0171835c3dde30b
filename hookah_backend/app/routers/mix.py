# hookah_backend/app/routers/mix.py
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from hookah_backend.app.mix import add_part, percent_sum, remove_part, update_percent
from hookah_backend.app.rules_loader import load_brand_defaults
from hookah_backend.app.schemas import MixDraft, MixPreview, PartEditIn, PartEditOut, PartOp
from hookah_backend.app.services.data_stores import list_flavors
from hookah_backend.app.services.mix_builder import preview_mix

router = APIRouter(prefix="/mix", tags=["mix"])

# What it does:
# Live builder numbers for a draft: running total, submit gate, strength, taste.
@router.post("/preview", response_model=MixPreview)
def post_preview(draft: MixDraft) -> Dict[str, Any]:
    parts = [p.model_dump() for p in draft.parts]
    return preview_mix(parts, draft.title, list_flavors(), load_brand_defaults())

# What it does:
# Apply one builder edit (add / update percent / remove) with the clamping rules.
@router.post("/parts", response_model=PartEditOut)
def post_part_edit(edit: PartEditIn) -> Dict[str, Any]:
    parts = [p.model_dump() for p in edit.parts]
    if edit.op is PartOp.ADD:
        parts = add_part(parts, edit.flavorId)
    elif edit.op is PartOp.UPDATE:
        parts = update_percent(parts, edit.flavorId, edit.value)
    else:
        parts = remove_part(parts, edit.flavorId)
    return {"parts": parts, "total": percent_sum(parts)}
